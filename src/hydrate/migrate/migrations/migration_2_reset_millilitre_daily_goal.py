# SPDX-License-Identifier: MIT

import logging

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]
    from yaml import Loader  # type: ignore[assignment]

from hydrate import configuration
from hydrate.migrate.registry import migration
from hydrate.model.settings import CURRENT_UNIT_VERSION
from hydrate.template.settings import DEFAULT_DAILY_GOAL

logger = logging.getLogger(__name__)


@migration(2)
def migrate() -> None:
    """
    Goals used to be recorded in millilitres (e.g. 2000). Anything saved before
    the switch to ounces is reset to the default goal; entries are left alone.
    """
    if not configuration.DATA_SETTINGS_PATH.is_file():
        return

    data = load(configuration.DATA_SETTINGS_PATH.read_text(), Loader=Loader)
    if data is None:
        return

    if data.get("unit_version", 1) >= CURRENT_UNIT_VERSION:
        return

    logger.warning(
        "resetting daily goal of %s to %d after the switch to ounces",
        data.get("daily_goal"),
        DEFAULT_DAILY_GOAL,
    )
    data["daily_goal"] = DEFAULT_DAILY_GOAL
    data["unit_version"] = CURRENT_UNIT_VERSION
    configuration.DATA_SETTINGS_PATH.write_text(dump(data, Dumper=Dumper))
