from typer.testing import CliRunner

from hydrate import configuration
from hydrate import state as app_state
from hydrate.id_map import clear_id_map_if_required
from hydrate.notification import NOTIFICATION_CENTER
from hydrate.repository.configuration import CONFIGURATION_REPO
from hydrate.repository.entry import ENTRY_REPO
from hydrate.repository.id_map import ID_MAP_REPO
from hydrate.repository.settings import SETTINGS_REPO
from hydrate.terminal.app import app

runner = CliRunner()


def _invoke(*args: str):
    return runner.invoke(app, list(args))


def test_add_and_today():
    result = _invoke("add", "12")
    assert result.exit_code == 0, result.output
    assert "12 oz" in result.output

    result = _invoke("today")
    assert result.exit_code == 0, result.output
    assert "12 / 100 oz" in result.output
    assert "88 oz left" in result.output


def test_add_uses_default_amount_and_aliases():
    result = _invoke("a")

    assert result.exit_code == 0, result.output
    assert [e["amount"] for e in ENTRY_REPO.get_all_entries()] == [8]

    result = _invoke("t")
    assert "8 / 100 oz" in result.output


def test_add_with_timestamp():
    result = _invoke("add", "10", "--timestamp", "yesterday")

    assert result.exit_code == 0, result.output
    assert "0 / 100 oz" in _invoke("today").output


def test_add_rejects_invalid_amount():
    result = _invoke("add", "0")

    assert result.exit_code == 1
    assert "Error: Amount must be positive" in result.output
    assert ENTRY_REPO.get_all_entries() == []


def test_add_rejects_invalid_timestamp():
    result = _invoke("add", "8", "--timestamp", "soon")

    assert result.exit_code == 2


def test_entry_list_modify_delete():
    _invoke("add", "8", "--timestamp", "-30m")
    _invoke("add", "16")

    result = _invoke("entry", "list")
    assert result.exit_code == 0, result.output
    assert "8 oz" in result.output and "16 oz" in result.output

    # Newest first, so id 1 is the 16 oz entry
    result = _invoke("entry", "modify", "1", "20")
    assert result.exit_code == 0, result.output
    assert sorted(e["amount"] for e in ENTRY_REPO.get_all_entries()) == [8, 20]

    result = _invoke("e", "d", "1-2")
    assert result.exit_code == 0, result.output
    assert "Deleted 2 entries" in result.output
    assert ENTRY_REPO.get_all_entries() == []
    assert "0 / 100 oz" in _invoke("today").output


def test_entry_modify_unknown_id():
    result = _invoke("entry", "modify", "9", "20")

    assert result.exit_code == 1
    assert "no entry with id 9" in result.output


def test_stats():
    _invoke("add", "40")

    result = _invoke("stats")
    assert result.exit_code == 0, result.output
    assert "Past 7 Days" in result.output
    assert "40 oz" in result.output

    result = _invoke("st", "--period", "month")
    assert "Past 30 Days" in result.output

    assert _invoke("stats", "--period", "year").exit_code == 1


def test_settings_goal():
    result = _invoke("settings", "goal", "64")
    assert result.exit_code == 0, result.output
    assert "64 oz" in result.output
    assert SETTINGS_REPO.get_or_initialize()["daily_goal"] == 64

    result = _invoke("settings", "goal", "0")
    assert result.exit_code == 1
    assert SETTINGS_REPO.get_or_initialize()["daily_goal"] == 64


def test_enabling_notifications_schedules_reminders():
    CONFIGURATION_REPO.update_config(elapsed_hour_policy="keep_all")

    result = _invoke("settings", "notifications", "on")
    assert result.exit_code == 0, result.output

    hours = [r["hour"] for r in NOTIFICATION_CENTER.pending()]
    assert hours == [8, 10, 12, 14, 16, 18, 20, 22]

    result = _invoke("reminder", "list")
    assert "water-reminder-8" in result.output

    _invoke("settings", "window", "--start", "9:00", "--end", "13:00")
    assert [r["hour"] for r in NOTIFICATION_CENTER.pending()] == [9, 11, 13]

    _invoke("settings", "notifications", "off")
    assert NOTIFICATION_CENTER.pending() == []


def test_add_succeeds_when_notification_store_is_unreadable():
    CONFIGURATION_REPO.update_config(elapsed_hour_policy="keep_all")
    _invoke("settings", "notifications", "on")
    configuration.DATA_NOTIFICATIONS_PATH.write_text("pending: [unclosed")
    NOTIFICATION_CENTER.reload()

    result = _invoke("add", "8")

    assert result.exit_code == 0, result.output
    assert [e["amount"] for e in ENTRY_REPO.get_all_entries()] == [8]
    assert "8 / 100 oz" in result.output


def test_denied_permission_alerts():
    _invoke("reminder", "permission", "deny")

    result = _invoke("settings", "notifications", "on")

    assert result.exit_code == 1
    assert "Notifications Disabled" in result.output
    assert NOTIFICATION_CENTER.pending() == []


def test_settings_rejects_invalid_window_and_interval():
    assert _invoke("settings", "window", "--start", "25:00").exit_code == 2
    assert _invoke("settings", "interval", "0").exit_code == 1


def test_reminder_refresh_and_reschedule():
    CONFIGURATION_REPO.update_config(elapsed_hour_policy="keep_all")
    _invoke("settings", "notifications", "on")

    result = _invoke("reminder", "refresh")
    assert result.exit_code == 0, result.output
    assert "water-reminder-22" in result.output

    result = _invoke("reminder", "reschedule")
    assert "nothing to do" in result.output


def test_config_set_and_view():
    result = _invoke("config", "set", "--unit", "ml", "--default-amount", "250")
    assert result.exit_code == 0, result.output

    _invoke("add")
    assert "250 / 100 ml" in _invoke("today").output

    assert "ml" in _invoke("config", "view").output
    assert _invoke("config", "set", "--elapsed-hour-policy", "never").exit_code == 1


def test_no_header():
    assert "💧" in _invoke("today").output
    assert "💧" not in _invoke("--no-header", "today").output


def test_listing_renumbers_entry_ids_only_when_enabled():
    ID_MAP_REPO.associate_id("entries", "first-entry")

    app_state.set_renumber_entry_ids(False)
    clear_id_map_if_required()
    assert ID_MAP_REPO.get_real_id("entries", 1) == "first-entry"

    app_state.set_renumber_entry_ids(True)
    clear_id_map_if_required()
    assert ID_MAP_REPO.associate_id("entries", "second-entry") == 1
