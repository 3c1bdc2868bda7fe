# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "hydrate"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_MIGRATE_PATH: Path = DATA_PATH / "migrate.yaml"
DATA_SETTINGS_PATH: Path = DATA_PATH / "settings.yaml"
DATA_SCHEDULE_PATH: Path = DATA_PATH / "schedule.yaml"
DATA_NOTIFICATIONS_PATH: Path = DATA_PATH / "notifications.yaml"
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"
DATA_ENTRIES_DIR: Path = DATA_PATH / "entries"

ElapsedHourPolicy = Literal["skip_elapsed", "keep_all"]


class Configuration(TypedDict):
    data_path: Optional[str]
    log_level: str
    unit: str
    default_amount: int
    elapsed_hour_policy: ElapsedHourPolicy
    reschedule_debounce_minutes: int
    clear_ids_on_view: bool
    show_header: bool


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "log_level": "WARNING",
        "unit": "oz",
        "default_amount": 8,
        "elapsed_hour_policy": "skip_elapsed",
        "reschedule_debounce_minutes": 5,
        "clear_ids_on_view": True,
        "show_header": True,
    }


def set_data_path(data_path: Path) -> None:
    global \
        DATA_PATH, \
        DATA_MIGRATE_PATH, \
        DATA_SETTINGS_PATH, \
        DATA_SCHEDULE_PATH, \
        DATA_NOTIFICATIONS_PATH, \
        DATA_ID_MAP_PATH, \
        DATA_ENTRIES_DIR

    DATA_PATH = data_path
    DATA_MIGRATE_PATH = DATA_PATH / "migrate.yaml"
    DATA_SETTINGS_PATH = DATA_PATH / "settings.yaml"
    DATA_SCHEDULE_PATH = DATA_PATH / "schedule.yaml"
    DATA_NOTIFICATIONS_PATH = DATA_PATH / "notifications.yaml"
    DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"
    DATA_ENTRIES_DIR = DATA_PATH / "entries"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are read.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
