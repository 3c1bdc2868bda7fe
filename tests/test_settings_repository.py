from yaml import safe_load

from hydrate import configuration
from hydrate.model.settings import CURRENT_UNIT_VERSION
from hydrate.repository.settings import SettingsRepository
from hydrate.template.settings import DEFAULT_DAILY_GOAL


def test_get_or_initialize_creates_defaults_once():
    repo = SettingsRepository()

    settings = repo.get_or_initialize()

    assert settings["daily_goal"] == DEFAULT_DAILY_GOAL == 100
    assert settings["notifications_enabled"] is False
    assert settings["notification_start_time"] == "08:00"
    assert settings["notification_end_time"] == "22:00"
    assert settings["notification_interval"] == 2
    assert settings["unit_version"] == CURRENT_UNIT_VERSION

    assert repo.flush() is True
    assert repo.flush() is False
    assert configuration.DATA_SETTINGS_PATH.is_file()


def test_updates_round_trip_through_the_file():
    repo = SettingsRepository()
    repo.update_settings(
        daily_goal=64,
        notifications_enabled=True,
        notification_start_time="09:00",
        notification_end_time="21:00",
        notification_interval=3,
    )
    repo.flush()

    raw = safe_load(configuration.DATA_SETTINGS_PATH.read_text())
    assert raw["notification_start_time"] == "09:00"

    settings = SettingsRepository().get_or_initialize()
    assert settings["daily_goal"] == 64
    assert settings["notifications_enabled"] is True
    assert settings["notification_start_time"] == "09:00"
    assert settings["notification_end_time"] == "21:00"
    assert settings["notification_interval"] == 3
    assert settings["updated"] >= settings["created"]


def test_records_without_unit_version_belong_to_version_one():
    configuration.DATA_SETTINGS_PATH.write_text(
        "entity_type: settings\n"
        "daily_goal: 2000\n"
        "notifications_enabled: false\n"
        "notification_start_time: '08:00'\n"
        "notification_end_time: '22:00'\n"
        "notification_interval: 2\n"
        "created: '2023-01-01T00:00:00+00:00'\n"
        "updated: '2023-01-01T00:00:00+00:00'\n"
    )

    settings = SettingsRepository().get_or_initialize()

    assert settings["unit_version"] == 1
    assert settings["daily_goal"] == 2000


def test_reload_discards_unsaved_changes():
    repo = SettingsRepository()
    repo.get_or_initialize()
    repo.flush()

    repo.update_settings(daily_goal=10)
    repo.reload()

    assert repo.get_or_initialize()["daily_goal"] == DEFAULT_DAILY_GOAL
