# SPDX-License-Identifier: MIT

from typing import Any

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from hydrate import configuration
from hydrate import state as app_state
from hydrate.logger import configure_logging
from hydrate.migrate import migrate
from hydrate.model.id_map import IdMap
from hydrate.repository.configuration import CONFIGURATION_REPO
from hydrate.template.id_map import get_id_map_template
from hydrate.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"])
    view_state.set_show_header(config["show_header"])
    app_state.set_renumber_entry_ids(config["clear_ids_on_view"])

    __ensure_migrations()


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def __ensure_data_files() -> None:
    if not configuration.DATA_MIGRATE_PATH.is_file():
        migrate_data: dict[str, Any] = {"version": 0}
        configuration.DATA_MIGRATE_PATH.write_text(dump(migrate_data, Dumper=Dumper))
    if not configuration.DATA_ID_MAP_PATH.is_file():
        id_map: IdMap = get_id_map_template()
        configuration.DATA_ID_MAP_PATH.write_text(dump(id_map, Dumper=Dumper))

    # One file per entry
    if not configuration.DATA_ENTRIES_DIR.is_dir():
        configuration.DATA_ENTRIES_DIR.mkdir(parents=True, exist_ok=True)


def __ensure_migrations() -> None:
    migrate.run_required_migrations()
