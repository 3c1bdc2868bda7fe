# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class DailyBucket(TypedDict):
    date: pendulum.Date
    amount: int
