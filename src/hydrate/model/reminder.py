# SPDX-License-Identifier: MIT

from typing import TypedDict


class Reminder(TypedDict):
    identifier: str  # e.g., "water-reminder-8"
    hour: int
    minute: int
    title: str
    body: str
    repeats_daily: bool
