# SPDX-License-Identifier: MIT

import atexit
import logging

from hydrate.errors import PersistenceError
from hydrate.repository.configuration import CONFIGURATION_REPO
from hydrate.repository.entry import ENTRY_REPO
from hydrate.repository.id_map import ID_MAP_REPO
from hydrate.repository.migrate import MIGRATE_REPO
from hydrate.repository.schedule import SCHEDULE_REPO
from hydrate.repository.settings import SETTINGS_REPO

logger = logging.getLogger(__name__)


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    ID_MAP_REPO.flush()
    MIGRATE_REPO.flush()

    # Flush entity repositories
    for repo in (ENTRY_REPO, SETTINGS_REPO, SCHEDULE_REPO):
        try:
            repo.flush()
        except PersistenceError as e:
            logger.error("failed to save pending changes on exit: %s", e)


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
