# SPDX-License-Identifier: MIT

"""
Per-run switches set from config and the global CLI options.

Entry listings hand out short numbered ids that a later `entry modify` or
`entry delete` refers to. Renumbering starts them from 1 on every listing;
without it the numbers from earlier listings keep working.
"""

from contextvars import ContextVar

_renumber_entry_ids: ContextVar[bool] = ContextVar(
    "renumber_entry_ids", default=True
)


def set_renumber_entry_ids(renumber: bool) -> None:
    _renumber_entry_ids.set(renumber)


def should_renumber_entry_ids() -> bool:
    return _renumber_entry_ids.get()
