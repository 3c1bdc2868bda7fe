# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

# 1: goals recorded in millilitres, 2: goals recorded in ounces
CURRENT_UNIT_VERSION = 2


class Settings(TypedDict):
    entity_type: str  # "settings"
    daily_goal: int
    notifications_enabled: bool
    notification_start_time: str  # "HH:mm"
    notification_end_time: str  # "HH:mm"
    notification_interval: int  # hours
    unit_version: int
    created: pendulum.DateTime
    updated: pendulum.DateTime
