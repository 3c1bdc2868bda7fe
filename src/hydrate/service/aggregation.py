# SPDX-License-Identifier: MIT

from typing import Literal

import pendulum

from hydrate.errors import InvariantViolation, NonPositiveGoalError
from hydrate.model.daily_bucket import DailyBucket
from hydrate.model.entry import Entry

StatsPeriod = Literal["week", "month"]

PERIOD_WINDOW_DAYS: dict[str, int] = {
    "week": 7,
    "month": 30,
}


def window_days_for_period(period: StatsPeriod) -> int:
    return PERIOD_WINDOW_DAYS[period]


def get_day_boundaries(
    reference: pendulum.DateTime,
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """
    Get the start and end of the calendar day containing `reference`.

    The day is taken in `reference`'s own timezone, so callers pass a local
    "now" to bucket by the user's calendar. The end is exclusive.
    """
    start = reference.start_of("day")
    end = reference.end_of("day").add(microseconds=1)
    return start.in_tz("UTC"), end.in_tz("UTC")


def day_total(entries: list[Entry], reference: pendulum.DateTime) -> int:
    start, end = get_day_boundaries(reference)
    return sum(
        entry["amount"] for entry in entries if start <= entry["timestamp"] < end
    )


def today_total(entries: list[Entry], now: pendulum.DateTime) -> int:
    return day_total(entries, now)


def progress_fraction(total: int, goal: int) -> float:
    if goal <= 0:
        raise NonPositiveGoalError(f"daily goal must be positive, got {goal}")
    return min(total / goal, 1.0)


def remaining(total: int, goal: int) -> int:
    return max(goal - total, 0)


def is_goal_reached(total: int, goal: int) -> bool:
    return remaining(total, goal) == 0


def daily_series(
    entries: list[Entry],
    window_days: int,
    now: pendulum.DateTime,
) -> list[DailyBucket]:
    """
    Per-day totals for the trailing window ending on `now`'s day.

    Returns exactly `window_days` buckets ordered oldest to newest. Days
    without entries are present with an amount of 0.
    """
    if window_days < 0:
        raise InvariantViolation(f"window must not be negative, got {window_days}")

    series: list[DailyBucket] = []
    for i in range(window_days - 1, -1, -1):
        reference = now.subtract(days=i)
        series.append(
            {
                "date": reference.date(),
                "amount": day_total(entries, reference),
            }
        )
    return series


def average(series: list[DailyBucket]) -> float:
    if len(series) == 0:
        return 0.0
    return sum(bucket["amount"] for bucket in series) / len(series)


def best(series: list[DailyBucket]) -> int:
    return max((bucket["amount"] for bucket in series), default=0)


def goal_achievement_rate(series: list[DailyBucket], goal: int) -> float:
    if len(series) == 0:
        return 0.0
    goal_days = len([bucket for bucket in series if bucket["amount"] >= goal])
    return goal_days / len(series) * 100


def progress_text(total: int, goal: int, unit: str) -> str:
    return f"{total} / {goal} {unit}"


def progress_percentage_text(total: int, goal: int) -> str:
    return f"{int(progress_fraction(total, goal) * 100)}%"


def remaining_text(total: int, goal: int, unit: str) -> str:
    remaining_amount = remaining(total, goal)
    if remaining_amount > 0:
        return f"{remaining_amount} {unit} left"
    return "Goal reached! 🎉"


def period_text(window_days: int) -> str:
    return f"Past {window_days} Days"
