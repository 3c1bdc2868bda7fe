# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from hydrate.model.entry import Entry
from hydrate.template.entry import get_entry_template
from hydrate.time import now_utc


class EntryValidationError(Exception):
    """Raised when entry validation fails."""

    pass


def validate_amount(amount: object) -> int:
    """
    Check that an intake amount is a positive whole number.

    Returns the amount if valid, raises EntryValidationError if not.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise EntryValidationError(
            f"Amount must be a whole number. Got: {type(amount).__name__}"
        )
    if amount < 1:
        raise EntryValidationError(f"Amount must be positive. Got: {amount}")
    return amount


def parse_amount(amount_str: str) -> int:
    try:
        amount = int(amount_str)
    except ValueError:
        raise EntryValidationError(f"Cannot parse '{amount_str}' as a whole number.")
    return validate_amount(amount)


def create_entry(amount: int, timestamp: Optional[pendulum.DateTime] = None) -> Entry:
    entry = get_entry_template()
    entry["amount"] = validate_amount(amount)
    entry["timestamp"] = timestamp.in_tz("UTC") if timestamp is not None else now_utc()
    return entry
