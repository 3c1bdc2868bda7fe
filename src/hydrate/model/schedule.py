# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class ScheduleState(TypedDict):
    last_rescheduled: Optional[pendulum.DateTime]
