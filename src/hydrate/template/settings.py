# SPDX-License-Identifier: MIT

from hydrate.model.entity_type import EntityType
from hydrate.model.settings import CURRENT_UNIT_VERSION, Settings
from hydrate.time import now_utc

DEFAULT_DAILY_GOAL = 100


def get_settings_template() -> Settings:
    now = now_utc()
    return {
        "entity_type": EntityType.SETTINGS,
        "daily_goal": DEFAULT_DAILY_GOAL,
        "notifications_enabled": False,
        "notification_start_time": "08:00",
        "notification_end_time": "22:00",
        "notification_interval": 2,
        "unit_version": CURRENT_UNIT_VERSION,
        "created": now,
        "updated": now,
    }
