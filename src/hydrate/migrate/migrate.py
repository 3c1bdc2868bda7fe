# SPDX-License-Identifier: MIT

import logging

from hydrate.migrate import registry
from hydrate.repository.migrate import MIGRATE_REPO

logger = logging.getLogger(__name__)


def run_required_migrations() -> None:
    registry.register_migrations()
    migrations = registry.get_migrations()
    latest_migration_id = MIGRATE_REPO.get_data_version()

    migrations_to_run = sorted(
        [(key, value) for key, value in migrations.items() if key > latest_migration_id],
        key=lambda kvp: kvp[0],
    )

    for migration_id, migration_callable in migrations_to_run:
        logger.info("running migration %d", migration_id)
        migration_callable()
        MIGRATE_REPO.advance_data_version(migration_id)
        MIGRATE_REPO.flush()
