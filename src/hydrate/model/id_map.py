# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias, TypedDict

from hydrate.model.entity_id import EntityId

EntityType = Literal["entries"]


IdMapDict: TypeAlias = "dict[EntityType, IdMapMapping]"


class IdMap(TypedDict):
    """
    All dictionaries are mapped in the following way:

    Synthetic id : real entity id.

    Entries are stored under uuids, which are awkward to type on the command
    line. Every list view hands out short synthetic ids instead, and commands
    translate them back through this map.

    real_entry_id = id_map["entries"]["synthetic_to_real"][7]
    """

    entries: "IdMapMapping"


class IdMapMapping(TypedDict):
    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]
