# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Optional

import pendulum

from hydrate.configuration import ElapsedHourPolicy
from hydrate.errors import InvariantViolation, PersistenceError, SchedulingError
from hydrate.model.reminder import Reminder
from hydrate.model.settings import Settings
from hydrate.notification import NotificationCenter
from hydrate.service.aggregation import remaining
from hydrate.time import now_utc, time_of_day_from_str

logger = logging.getLogger(__name__)

REMINDER_TITLE = "Time to Hydrate! 💧"
DEFAULT_DEBOUNCE = pendulum.duration(minutes=5)


def hour_of(time_of_day: str) -> int:
    hour, _ = time_of_day_from_str(time_of_day)
    if not 0 <= hour <= 23:
        raise InvariantViolation(f"hour must be between 0 and 23, got {hour}")
    return hour


def candidate_hours(start_hour: int, end_hour: int, interval: int) -> list[int]:
    """
    Every `interval` hours from `start_hour` up to and including `end_hour`.

    An interval that does not divide the window evenly stops at the last hour
    that still fits; a start after the end yields no hours.
    """
    if interval <= 0:
        raise InvariantViolation(f"interval must be positive, got {interval}")
    return list(range(start_hour, end_hour + 1, interval))


def filter_elapsed_hours(
    hours: list[int],
    now: pendulum.DateTime,
    policy: ElapsedHourPolicy = "skip_elapsed",
) -> list[int]:
    """
    Drop hours whose top has already passed today.

    Under "skip_elapsed" an hour `h` is dropped when `h <= now.hour` and the
    current minute is past zero. Exactly on the hour nothing is dropped.
    "keep_all" leaves the candidates untouched.
    """
    if policy == "keep_all":
        return list(hours)
    if now.minute == 0:
        return list(hours)
    return [hour for hour in hours if hour > now.hour]


def reminder_body(remaining_amount: int, goal: int, unit: str) -> str:
    if remaining_amount > 0:
        return (
            f"You need {remaining_amount} more {unit} to reach your daily goal "
            f"of {goal} {unit}!"
        )
    return f"Great job! You've reached your daily goal of {goal} {unit}! Keep it up! 🎉"


def reminder_identifier(hour: int) -> str:
    return f"water-reminder-{hour}"


def build_reminders(
    settings: Settings,
    today_total: int,
    now: pendulum.DateTime,
    policy: ElapsedHourPolicy = "skip_elapsed",
    unit: str = "oz",
) -> list[Reminder]:
    """
    Derive the daily reminders for the configured window.

    `now` must be local time; its hour and minute drive the elapsed-hour
    policy. Body text reflects the remaining amount at build time.
    """
    hours = candidate_hours(
        hour_of(settings["notification_start_time"]),
        hour_of(settings["notification_end_time"]),
        settings["notification_interval"],
    )
    hours = filter_elapsed_hours(hours, now, policy)

    body = reminder_body(
        remaining(today_total, settings["daily_goal"]), settings["daily_goal"], unit
    )
    return [
        {
            "identifier": reminder_identifier(hour),
            "hour": hour,
            "minute": 0,
            "title": REMINDER_TITLE,
            "body": body,
            "repeats_daily": True,
        }
        for hour in hours
    ]


class ReminderScheduler:
    def __init__(
        self,
        center: NotificationCenter,
        policy: ElapsedHourPolicy = "skip_elapsed",
        unit: str = "oz",
        debounce: pendulum.Duration = DEFAULT_DEBOUNCE,
        clock: Callable[[], pendulum.DateTime] = now_utc,
        last_rescheduled: Optional[pendulum.DateTime] = None,
    ) -> None:
        self.center = center
        self.policy = policy
        self.unit = unit
        self.debounce = debounce
        self.clock = clock
        self.last_rescheduled = last_rescheduled

    def cancel(self) -> bool:
        """Drop every pending reminder; False if the center could not be cleared."""
        try:
            self.center.cancel_all_pending()
        except PersistenceError as e:
            logger.error("failed to cancel pending notifications: %s", e)
            return False
        return True

    def reschedule(
        self,
        settings: Settings,
        today_total: int,
        now: pendulum.DateTime,
    ) -> list[Reminder]:
        """
        Rebuild the pending reminders from scratch.

        Returns the reminders the notification center accepted. A reminder
        that fails to submit is logged and skipped.
        """
        self.last_rescheduled = self.clock()

        if not settings["notifications_enabled"]:
            if self.cancel():
                logger.info("notifications disabled, cancelled pending reminders")
            return []

        reminders = build_reminders(settings, today_total, now, self.policy, self.unit)

        # Stale requests from an earlier configuration must not linger
        if not self.cancel():
            return []

        scheduled: list[Reminder] = []
        for reminder in reminders:
            try:
                self.center.submit(reminder)
            except (SchedulingError, PersistenceError) as e:
                logger.error("failed to schedule notification: %s", e)
                continue
            scheduled.append(reminder)

        logger.info(
            "scheduled %d of %d reminders: %s",
            len(scheduled),
            len(reminders),
            ", ".join(f"{r['hour']:02d}:00" for r in scheduled),
        )
        return scheduled

    def is_due(self) -> bool:
        if self.last_rescheduled is None:
            return True
        return self.clock() - self.last_rescheduled >= self.debounce

    def reschedule_if_needed(
        self,
        settings: Settings,
        today_total: int,
        now: pendulum.DateTime,
    ) -> Optional[list[Reminder]]:
        if not self.is_due():
            logger.debug(
                "skipping reschedule, last rebuild at %s", self.last_rescheduled
            )
            return None
        return self.reschedule(settings, today_total, now)

    def update_content_immediately(
        self,
        settings: Settings,
        today_total: int,
        now: pendulum.DateTime,
    ) -> list[Reminder]:
        return self.reschedule(settings, today_total, now)
