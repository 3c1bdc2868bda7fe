# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from hydrate.model.entity_id import EntityId


class Entry(TypedDict):
    id: Optional[EntityId]
    entity_type: str  # "entry"
    amount: int  # Volume in the configured unit
    timestamp: pendulum.DateTime  # When the water was drunk
    created: pendulum.DateTime
    updated: pendulum.DateTime
