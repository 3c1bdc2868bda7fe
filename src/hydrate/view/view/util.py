# SPDX-License-Identifier: MIT

from typing import cast

from hydrate.model.entity_id import EntityId
from hydrate.model.entry import Entry
from hydrate.repository.id_map import ID_MAP_REPO


def format_amount(amount: int, unit: str) -> str:
    return f"{amount} {unit}"


def entry_synthetic_id(entry: Entry) -> str:
    return str(ID_MAP_REPO.associate_id("entries", cast(EntityId, entry["id"])))


def render_bar(amount: int, goal: int, width: int = 20) -> str:
    """Text bar scaled so that `goal` fills the whole width."""
    if goal <= 0:
        return ""
    filled = min(round(amount / goal * width), width)
    return "█" * filled + "·" * (width - filled)
