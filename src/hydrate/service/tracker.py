# SPDX-License-Identifier: MIT

import logging
from typing import Any, Callable, Optional

import pendulum

from hydrate.errors import PermissionDenied, PersistenceError
from hydrate.model.daily_bucket import DailyBucket
from hydrate.model.entity_id import EntityId
from hydrate.model.entry import Entry
from hydrate.model.reminder import Reminder
from hydrate.model.settings import Settings
from hydrate.notification import NOTIFICATION_CENTER
from hydrate.repository.configuration import CONFIGURATION_REPO
from hydrate.repository.entry import ENTRY_REPO, EntryRepository
from hydrate.repository.schedule import SCHEDULE_REPO, ScheduleRepository
from hydrate.repository.settings import SETTINGS_REPO, SettingsRepository
from hydrate.service import aggregation
from hydrate.service.entry import create_entry, validate_amount
from hydrate.service.reminder import ReminderScheduler
from hydrate.service.settings import (
    normalize_time_of_day,
    validate_daily_goal,
    validate_interval,
)
from hydrate.time import now_local

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class HydrationTracker:
    """
    Ties the record store, the aggregation engine and the reminder scheduler
    together behind the operations the command line exposes.

    Nothing is cached: every read goes back to the repositories, so totals
    always reflect the last committed change. Listeners registered with
    `subscribe` are called after each committed change.
    """

    def __init__(
        self,
        entry_repo: EntryRepository,
        settings_repo: SettingsRepository,
        schedule_repo: ScheduleRepository,
        scheduler: ReminderScheduler,
        unit: str = "oz",
        clock: Callable[[], pendulum.DateTime] = now_local,
    ) -> None:
        self.entry_repo = entry_repo
        self.settings_repo = settings_repo
        self.schedule_repo = schedule_repo
        self.scheduler = scheduler
        self.unit = unit
        self.clock = clock
        self._listeners: list[Listener] = []

        if self.scheduler.last_rescheduled is None:
            try:
                self.scheduler.last_rescheduled = (
                    self.schedule_repo.get_last_rescheduled()
                )
            except PersistenceError as e:
                logger.warning("could not read reminder schedule state: %s", e)

    # ─────────────────────────────────────────────────────────────
    # Change notification
    # ─────────────────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    # ─────────────────────────────────────────────────────────────
    # Reads
    # ─────────────────────────────────────────────────────────────

    def entries(self) -> list[Entry]:
        try:
            return self.entry_repo.fetch_entries(newest_first=True)
        except PersistenceError as e:
            logger.error("failed to fetch water entries: %s", e)
            return []

    def get_entry(self, entry_id: EntityId) -> Entry:
        return self.entry_repo.get_entry(entry_id)

    def settings(self) -> Settings:
        return self.settings_repo.get_or_initialize()

    def today_total(self, now: Optional[pendulum.DateTime] = None) -> int:
        now = now if now is not None else self.clock()
        return aggregation.today_total(self.entries(), now)

    def snapshot(self, now: Optional[pendulum.DateTime] = None) -> dict[str, Any]:
        """
        Today's progress toward the daily goal.
        Returns: {
            "total": int,
            "goal": int,
            "fraction": float,
            "remaining": int,
            "goal_reached": bool,
            "progress_text": str,  # "12 / 100 oz"
            "percentage_text": str,  # "12%"
            "remaining_text": str,  # "88 oz left"
        }
        """
        now = now if now is not None else self.clock()
        total = self.today_total(now)
        goal = self.settings()["daily_goal"]
        return {
            "total": total,
            "goal": goal,
            "fraction": aggregation.progress_fraction(total, goal),
            "remaining": aggregation.remaining(total, goal),
            "goal_reached": aggregation.is_goal_reached(total, goal),
            "progress_text": aggregation.progress_text(total, goal, self.unit),
            "percentage_text": aggregation.progress_percentage_text(total, goal),
            "remaining_text": aggregation.remaining_text(total, goal, self.unit),
        }

    def series(
        self,
        period: aggregation.StatsPeriod,
        now: Optional[pendulum.DateTime] = None,
    ) -> list[DailyBucket]:
        now = now if now is not None else self.clock()
        return aggregation.daily_series(
            self.entries(), aggregation.window_days_for_period(period), now
        )

    def stats(
        self,
        period: aggregation.StatsPeriod,
        now: Optional[pendulum.DateTime] = None,
    ) -> dict[str, Any]:
        series = self.series(period, now)
        goal = self.settings()["daily_goal"]
        return {
            "period_text": aggregation.period_text(len(series)),
            "series": series,
            "goal": goal,
            "average": aggregation.average(series),
            "best": aggregation.best(series),
            "goal_achievement_rate": aggregation.goal_achievement_rate(series, goal),
        }

    # ─────────────────────────────────────────────────────────────
    # Entry mutations
    # ─────────────────────────────────────────────────────────────

    def __commit_entries(self, action: str, change: Callable[[], None]) -> bool:
        try:
            change()
            self.entry_repo.flush()
        except PersistenceError as e:
            logger.error("failed to %s: %s", action, e)
            self.entry_repo.reload()
            return False
        self.__notify()
        return True

    def add_water(
        self, amount: int, timestamp: Optional[pendulum.DateTime] = None
    ) -> Optional[Entry]:
        if timestamp is None:
            timestamp = self.clock()
        entry = create_entry(amount, timestamp)
        entry_ids: list[EntityId] = []

        if not self.__commit_entries(
            "save water entry",
            lambda: entry_ids.append(self.entry_repo.save_new_entry(entry)),
        ):
            return None
        logger.info("saved water entry: %d %s", amount, self.unit)

        # Reminder text quotes the remaining amount, so refresh it right away
        self.update_notification_content_immediately()
        return self.entry_repo.get_entry(entry_ids[0])

    def edit_amount(self, entry_id: EntityId, amount: int) -> Optional[Entry]:
        amount = validate_amount(amount)

        if not self.__commit_entries(
            "save water entry changes",
            lambda: self.entry_repo.modify_entry_amount(entry_id, amount),
        ):
            return None
        logger.info("updated water entry %s: %d %s", entry_id, amount, self.unit)

        self.update_notification_content_immediately()
        return self.entry_repo.get_entry(entry_id)

    def delete_entries(self, entry_ids: list[EntityId]) -> bool:
        def delete_all() -> None:
            for entry_id in entry_ids:
                self.entry_repo.delete_entry(entry_id)

        if not self.__commit_entries("delete entries", delete_all):
            return False
        logger.info("deleted %d water entries", len(entry_ids))

        self.update_notification_content_immediately()
        return True


    # ─────────────────────────────────────────────────────────────
    # Settings mutations
    # ─────────────────────────────────────────────────────────────

    def __commit_settings(self) -> bool:
        try:
            self.settings_repo.flush()
        except PersistenceError as e:
            logger.error("failed to save settings: %s", e)
            self.settings_repo.reload()
            return False
        self.__notify()
        return True

    def __reschedule_if_enabled(self) -> None:
        if self.settings()["notifications_enabled"]:
            self.update_notification_content_immediately()

    def update_daily_goal(self, daily_goal: int) -> bool:
        self.settings_repo.update_settings(daily_goal=validate_daily_goal(daily_goal))
        if not self.__commit_settings():
            return False
        self.__reschedule_if_enabled()
        return True

    def set_notifications_enabled(self, enabled: bool) -> bool:
        """
        Turn reminders on or off.

        Enabling asks the notification center for permission once the setting
        is saved and raises PermissionDenied if it is refused.
        """
        self.settings_repo.update_settings(notifications_enabled=enabled)
        if not self.__commit_settings():
            return False

        if not enabled:
            self.scheduler.cancel()
            return True

        try:
            granted = self.scheduler.center.request_permission()
        except PersistenceError as e:
            logger.error("failed to request notification permission: %s", e)
            return True
        if not granted:
            raise PermissionDenied(
                "Notifications are not allowed. Grant permission with "
                "'hydrate reminder permission grant' and try again."
            )
        self.update_notification_content_immediately()
        return True

    def update_notification_window(
        self,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
    ) -> bool:
        self.settings_repo.update_settings(
            notification_start_time=(
                normalize_time_of_day(start_time) if start_time is not None else None
            ),
            notification_end_time=(
                normalize_time_of_day(end_time) if end_time is not None else None
            ),
        )
        if not self.__commit_settings():
            return False
        self.__reschedule_if_enabled()
        return True

    def update_notification_interval(self, interval: int) -> bool:
        self.settings_repo.update_settings(
            notification_interval=validate_interval(interval)
        )
        if not self.__commit_settings():
            return False
        self.__reschedule_if_enabled()
        return True

    # ─────────────────────────────────────────────────────────────
    # Reminders
    # ─────────────────────────────────────────────────────────────

    def __record_reschedule(self) -> None:
        try:
            self.schedule_repo.set_last_rescheduled(self.scheduler.last_rescheduled)
            self.schedule_repo.flush()
        except PersistenceError as e:
            logger.warning("could not save reminder schedule state: %s", e)

    def reschedule_if_needed(self) -> Optional[list[Reminder]]:
        now = self.clock()
        try:
            reminders = self.scheduler.reschedule_if_needed(
                self.settings(), self.today_total(now), now
            )
        except PersistenceError as e:
            logger.error("failed to reschedule reminders: %s", e)
            return None
        if reminders is not None:
            self.__record_reschedule()
        return reminders

    def update_notification_content_immediately(self) -> list[Reminder]:
        now = self.clock()
        try:
            reminders = self.scheduler.update_content_immediately(
                self.settings(), self.today_total(now), now
            )
        except PersistenceError as e:
            logger.error("failed to update reminder content: %s", e)
            return []
        self.__record_reschedule()
        return reminders


def get_hydration_tracker() -> HydrationTracker:
    """Build a tracker over the shared repositories using the current config."""
    config = CONFIGURATION_REPO.get_config()
    scheduler = ReminderScheduler(
        NOTIFICATION_CENTER,
        policy=config["elapsed_hour_policy"],
        unit=config["unit"],
        debounce=pendulum.duration(minutes=config["reschedule_debounce_minutes"]),
    )
    return HydrationTracker(
        ENTRY_REPO,
        SETTINGS_REPO,
        SCHEDULE_REPO,
        scheduler,
        unit=config["unit"],
    )
