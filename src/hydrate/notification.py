# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Literal, Optional, Protocol

import pendulum
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper  # noqa: F401
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from hydrate import configuration
from hydrate.errors import PersistenceError, SchedulingError
from hydrate.model.reminder import Reminder

logger = logging.getLogger(__name__)

PermissionStatus = Literal["not_determined", "authorized", "denied"]


class NotificationCenter(Protocol):
    """The platform's local-notification delivery subsystem."""

    def request_permission(self) -> bool: ...

    def get_permission_status(self) -> bool: ...

    def cancel_all_pending(self) -> None: ...

    def submit(self, reminder: Reminder) -> None: ...

    def pending(self) -> list[Reminder]: ...


class LocalNotificationCenter:
    """
    File-backed notification center for running outside a mobile platform.

    Holds the permission status and the pending reminder requests in
    notifications.yaml. Delivery is left to whatever polls `due`.
    """

    def __init__(self) -> None:
        self._data: Optional[dict[str, Any]] = None

    @property
    def data(self) -> dict[str, Any]:
        if self._data is None:
            self.__load_data()
        if self._data is None:
            raise ValueError()
        return self._data

    def __load_data(self) -> None:
        raw_data = None
        try:
            if configuration.DATA_NOTIFICATIONS_PATH.is_file():
                raw_data = load(
                    configuration.DATA_NOTIFICATIONS_PATH.read_text(), Loader=Loader
                )
        except (OSError, YAMLError) as e:
            raise PersistenceError(f"could not load notifications: {e}") from e
        if raw_data is None:
            raw_data = {"permission": "not_determined", "pending": []}
        self._data = raw_data

    def __save_data(self) -> None:
        try:
            configuration.DATA_NOTIFICATIONS_PATH.write_text(
                dump(self.data, Dumper=Dumper, allow_unicode=True)
            )
        except (OSError, YAMLError) as e:
            raise PersistenceError(f"could not save notifications: {e}") from e

    def reload(self) -> None:
        self._data = None

    def permission(self) -> PermissionStatus:
        return self.data["permission"]

    def set_permission(self, status: PermissionStatus) -> None:
        self.data["permission"] = status
        self.__save_data()

    def request_permission(self) -> bool:
        if self.permission() == "denied":
            return False
        if self.permission() == "not_determined":
            self.set_permission("authorized")
        return True

    def get_permission_status(self) -> bool:
        return self.permission() == "authorized"

    def cancel_all_pending(self) -> None:
        self.data["pending"] = []
        self.__save_data()

    def submit(self, reminder: Reminder) -> None:
        if not self.get_permission_status():
            raise SchedulingError(
                f"{reminder['identifier']}: notifications are not authorized"
            )
        if not 0 <= reminder["hour"] <= 23:
            raise SchedulingError(
                f"{reminder['identifier']}: hour must be between 0 and 23, got {reminder['hour']}"
            )

        pending = [
            request
            for request in self.data["pending"]
            if request["identifier"] != reminder["identifier"]
        ]
        pending.append(dict(reminder))
        self.data["pending"] = sorted(pending, key=lambda request: request["hour"])
        try:
            self.__save_data()
        except PersistenceError as e:
            raise SchedulingError(f"{reminder['identifier']}: {e}") from e
        logger.debug("submitted %s at %02d:00", reminder["identifier"], reminder["hour"])

    def pending(self) -> list[Reminder]:
        return deepcopy(self.data["pending"])

    def due(self, now: pendulum.DateTime) -> list[Reminder]:
        """Pending reminders whose trigger hour is the current local hour."""
        return [reminder for reminder in self.pending() if reminder["hour"] == now.hour]


NOTIFICATION_CENTER = LocalNotificationCenter()
