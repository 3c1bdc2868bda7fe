# SPDX-License-Identifier: MIT

from hydrate.errors import InvariantViolation
from hydrate.time import time_of_day_from_str, time_of_day_to_str


def validate_daily_goal(daily_goal: int) -> int:
    if daily_goal <= 0:
        raise InvariantViolation(f"daily goal must be positive, got {daily_goal}")
    return daily_goal


def validate_interval(interval: int) -> int:
    if interval <= 0:
        raise InvariantViolation(f"interval must be positive, got {interval}")
    return interval


def normalize_time_of_day(time_of_day: str) -> str:
    """Validate a time of day and return it in canonical 'HH:mm' form."""
    try:
        hour, minute = time_of_day_from_str(time_of_day)
    except ValueError:
        raise InvariantViolation(
            f"time must be in HH:mm format (e.g., 8:00 or 22:00), got '{time_of_day}'"
        )
    if not 0 <= hour <= 23:
        raise InvariantViolation(f"hour must be between 0 and 23, got {hour}")
    if not 0 <= minute <= 59:
        raise InvariantViolation(f"minute must be between 0 and 59, got {minute}")
    return time_of_day_to_str(hour, minute)
