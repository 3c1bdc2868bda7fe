import logging
from pathlib import Path
from typing import Iterator

import pendulum
import pytest

from hydrate import configuration
from hydrate import state as app_state
from hydrate.errors import PersistenceError, SchedulingError
from hydrate.model.reminder import Reminder
from hydrate.notification import NOTIFICATION_CENTER
from hydrate.repository.configuration import CONFIGURATION_REPO
from hydrate.repository.entry import ENTRY_REPO
from hydrate.repository.id_map import ID_MAP_REPO
from hydrate.repository.migrate import MIGRATE_REPO
from hydrate.repository.schedule import SCHEDULE_REPO
from hydrate.repository.settings import SETTINGS_REPO
from hydrate.view import state as view_state

SHARED_STORES = (
    CONFIGURATION_REPO,
    ENTRY_REPO,
    ID_MAP_REPO,
    MIGRATE_REPO,
    SCHEDULE_REPO,
    SETTINGS_REPO,
    NOTIFICATION_CENTER,
)


class FakeNotificationCenter:
    """In-memory notification center that records every call."""

    def __init__(
        self,
        granted: bool = True,
        failing_hours: set[int] | None = None,
        unreadable: bool = False,
    ):
        self.granted = granted
        self.unreadable = unreadable
        self.failing_hours = failing_hours or set()
        self.requests: dict[str, Reminder] = {}
        self.submitted: list[Reminder] = []
        self.cancel_count = 0
        self.permission_requests = 0

    def __check_readable(self) -> None:
        if self.unreadable:
            raise PersistenceError("could not load notifications: broken store")

    def request_permission(self) -> bool:
        self.__check_readable()
        self.permission_requests += 1
        return self.granted

    def get_permission_status(self) -> bool:
        return self.granted

    def cancel_all_pending(self) -> None:
        self.__check_readable()
        self.cancel_count += 1
        self.requests = {}

    def submit(self, reminder: Reminder) -> None:
        self.__check_readable()
        if reminder["hour"] in self.failing_hours:
            raise SchedulingError(f"{reminder['identifier']}: rejected")
        self.submitted.append(reminder)
        self.requests[reminder["identifier"]] = reminder

    def pending(self) -> list[Reminder]:
        return sorted(self.requests.values(), key=lambda r: r["hour"])


class FakeClock:
    def __init__(self, now: pendulum.DateTime):
        self.now = now

    def __call__(self) -> pendulum.DateTime:
        return self.now

    def advance(self, **kwargs: int) -> None:
        self.now = self.now.add(**kwargs)


def _point_paths_at(monkeypatch: pytest.MonkeyPatch, config_dir: Path, data_dir: Path) -> None:
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_dir)
    monkeypatch.setattr(configuration, "DATA_MIGRATE_PATH", data_dir / "migrate.yaml")
    monkeypatch.setattr(configuration, "DATA_SETTINGS_PATH", data_dir / "settings.yaml")
    monkeypatch.setattr(configuration, "DATA_SCHEDULE_PATH", data_dir / "schedule.yaml")
    monkeypatch.setattr(
        configuration, "DATA_NOTIFICATIONS_PATH", data_dir / "notifications.yaml"
    )
    monkeypatch.setattr(configuration, "DATA_ID_MAP_PATH", data_dir / "id_map.yaml")
    monkeypatch.setattr(configuration, "DATA_ENTRIES_DIR", data_dir / "entries")


def _reset_logging() -> None:
    logger = logging.getLogger("hydrate")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    config_dir.mkdir()
    (data_dir / "entries").mkdir(parents=True)
    _point_paths_at(monkeypatch, config_dir, data_dir)

    for store in SHARED_STORES:
        store.reload()
    view_state.set_show_header(True)
    app_state.set_renumber_entry_ids(True)
    _reset_logging()

    yield data_dir

    for store in SHARED_STORES:
        store.reload()


@pytest.fixture
def fake_center() -> FakeNotificationCenter:
    return FakeNotificationCenter()
