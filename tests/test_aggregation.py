import pendulum
import pytest

from hydrate.errors import InvariantViolation, NonPositiveGoalError
from hydrate.model.entry import Entry
from hydrate.service import aggregation
from hydrate.service.entry import create_entry


def _entry(amount: int, timestamp: pendulum.DateTime) -> Entry:
    entry = create_entry(amount, timestamp)
    entry["id"] = f"entry-{amount}-{timestamp.isoformat()}"
    return entry


NOW = pendulum.datetime(2024, 6, 10, 15, 30, tz="UTC")


def test_today_total_sums_only_entries_within_the_day():
    entries = [
        _entry(8, pendulum.datetime(2024, 6, 9, 23, 59, 59, tz="UTC")),
        _entry(12, pendulum.datetime(2024, 6, 10, 0, 0, tz="UTC")),
        _entry(16, pendulum.datetime(2024, 6, 10, 23, 59, 59, tz="UTC")),
        _entry(4, pendulum.datetime(2024, 6, 11, 0, 0, tz="UTC")),
    ]

    assert aggregation.today_total(entries, NOW) == 28
    assert aggregation.today_total(list(reversed(entries)), NOW) == 28


def test_today_total_uses_the_calendar_of_now():
    now = pendulum.datetime(2024, 6, 10, 20, 0, tz="America/Los_Angeles")
    # 19:00 on June 10th in Los Angeles
    evening = _entry(10, pendulum.datetime(2024, 6, 11, 2, 0, tz="UTC"))
    # 00:30 on June 10th in Los Angeles, still the same local day
    early = _entry(5, pendulum.datetime(2024, 6, 10, 7, 30, tz="UTC"))
    # 23:30 on June 9th in Los Angeles
    previous_day = _entry(7, pendulum.datetime(2024, 6, 10, 6, 30, tz="UTC"))

    assert aggregation.today_total([evening, early, previous_day], now) == 15


def test_today_total_of_no_entries_is_zero():
    assert aggregation.today_total([], NOW) == 0


def test_progress_fraction_is_clamped_and_monotonic():
    fractions = [aggregation.progress_fraction(total, 100) for total in range(0, 400, 7)]

    assert fractions == sorted(fractions)
    assert max(fractions) == 1.0
    assert aggregation.progress_fraction(50, 100) == 0.5
    assert aggregation.progress_fraction(10_000, 100) == 1.0


@pytest.mark.parametrize("goal", [0, -5])
def test_progress_fraction_rejects_non_positive_goal(goal):
    with pytest.raises(NonPositiveGoalError):
        aggregation.progress_fraction(10, goal)

    with pytest.raises(ZeroDivisionError):
        aggregation.progress_fraction(10, goal)


def test_remaining_and_goal_reached():
    assert aggregation.remaining(30, 100) == 70
    assert aggregation.remaining(130, 100) == 0
    assert not aggregation.is_goal_reached(99, 100)
    assert aggregation.is_goal_reached(100, 100)


def test_daily_series_is_oldest_first_and_zero_filled():
    entries = [
        _entry(20, pendulum.datetime(2024, 6, 10, 9, 0, tz="UTC")),
        _entry(30, pendulum.datetime(2024, 6, 10, 12, 0, tz="UTC")),
        _entry(40, pendulum.datetime(2024, 6, 8, 12, 0, tz="UTC")),
        _entry(99, pendulum.datetime(2024, 6, 1, 12, 0, tz="UTC")),
    ]

    series = aggregation.daily_series(entries, 7, NOW)

    assert len(series) == 7
    assert [bucket["date"] for bucket in series] == [
        pendulum.date(2024, 6, day) for day in range(4, 11)
    ]
    assert series[-1]["date"] == NOW.date()
    assert [bucket["amount"] for bucket in series] == [0, 0, 0, 0, 40, 0, 50]


def test_daily_series_month_window():
    series = aggregation.daily_series([], aggregation.window_days_for_period("month"), NOW)

    assert len(series) == 30
    assert series[0]["date"] == pendulum.date(2024, 5, 12)
    assert all(bucket["amount"] == 0 for bucket in series)


def test_daily_series_window_bounds():
    assert aggregation.daily_series([], 0, NOW) == []

    with pytest.raises(InvariantViolation):
        aggregation.daily_series([], -1, NOW)


def test_series_summaries():
    series = [
        {"date": pendulum.date(2024, 6, 8), "amount": 50},
        {"date": pendulum.date(2024, 6, 9), "amount": 100},
        {"date": pendulum.date(2024, 6, 10), "amount": 150},
        {"date": pendulum.date(2024, 6, 11), "amount": 0},
    ]

    assert aggregation.average(series) == 75.0
    assert aggregation.best(series) == 150
    assert aggregation.goal_achievement_rate(series, 100) == 50.0


def test_series_summaries_of_empty_series():
    assert aggregation.average([]) == 0.0
    assert aggregation.best([]) == 0
    assert aggregation.goal_achievement_rate([], 100) == 0.0


def test_display_text():
    assert aggregation.progress_text(12, 100, "oz") == "12 / 100 oz"
    assert aggregation.progress_percentage_text(12, 100) == "12%"
    assert aggregation.progress_percentage_text(250, 100) == "100%"
    assert aggregation.remaining_text(12, 100, "oz") == "88 oz left"
    assert aggregation.remaining_text(100, 100, "oz") == "Goal reached! 🎉"
    assert aggregation.period_text(7) == "Past 7 Days"
