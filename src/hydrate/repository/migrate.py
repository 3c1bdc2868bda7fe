# SPDX-License-Identifier: MIT

from typing import Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from hydrate import configuration
from hydrate.errors import InvariantViolation, PersistenceError
from hydrate.model.migrate import Migrate


class MigrateRepository:
    """
    The data version of the store in migrate.yaml.

    A store without the file has never been migrated and is at version 0.
    """

    def __init__(self) -> None:
        self._migrate_data: Optional[Migrate] = None
        self.is_dirty = False

    @property
    def migrate_data(self) -> Migrate:
        if self._migrate_data is None:
            self.__load_data()
        if self._migrate_data is None:
            raise ValueError()
        return self._migrate_data

    def __load_data(self) -> None:
        raw_data = None
        try:
            if configuration.DATA_MIGRATE_PATH.is_file():
                raw_data = load(
                    configuration.DATA_MIGRATE_PATH.read_text(), Loader=Loader
                )
        except (OSError, YAMLError) as e:
            raise PersistenceError(f"could not load data version: {e}") from e
        self._migrate_data = raw_data if raw_data is not None else {"version": 0}

    def __save_data(self, migrate_data: Migrate) -> None:
        try:
            configuration.DATA_MIGRATE_PATH.write_text(
                dump(migrate_data, Dumper=Dumper)
            )
        except (OSError, YAMLError) as e:
            raise PersistenceError(f"could not save data version: {e}") from e

    def flush(self) -> None:
        if self._migrate_data is not None and self.is_dirty:
            self.__save_data(self._migrate_data)
            self.is_dirty = False

    def reload(self) -> None:
        self._migrate_data = None
        self.is_dirty = False

    def get_data_version(self) -> int:
        return self.migrate_data["version"]

    def advance_data_version(self, version: int) -> None:
        """Record that migration `version` ran; versions only move forward."""
        current = self.migrate_data["version"]
        if version <= current:
            raise InvariantViolation(
                f"data version can only move forward: {version} <= {current}"
            )
        self.migrate_data["version"] = version
        self.is_dirty = True


MIGRATE_REPO = MigrateRepository()
