# SPDX-License-Identifier: MIT

import logging

from hydrate.migrate.registry import migration

logger = logging.getLogger(__name__)


@migration(1)
def migrate() -> None:
    """
    Placeholder so that there's a first version to kickoff the migrations system
    """
    logger.debug("migration 1: nothing to do")
