# SPDX-License-Identifier: MIT

from hydrate.model.entity_type import EntityType
from hydrate.model.entry import Entry
from hydrate.time import now_utc


def get_entry_template() -> Entry:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.ENTRY,
        "amount": 0,  # Must be set
        "timestamp": now,
        "created": now,
        "updated": now,
    }
