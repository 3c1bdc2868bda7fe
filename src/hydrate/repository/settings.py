# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper  # noqa: F401
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from hydrate import configuration, time
from hydrate.errors import PersistenceError
from hydrate.model.settings import Settings
from hydrate.template.settings import get_settings_template


class SettingsRepository:
    def __init__(self) -> None:
        self._settings: Optional[Settings] = None
        self.is_dirty = False

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self.__load_data()
        if self._settings is None:
            raise ValueError()
        return self._settings

    def __load_data(self) -> None:
        raw_settings: Optional[dict[str, Any]] = None
        try:
            if configuration.DATA_SETTINGS_PATH.is_file():
                raw_settings = load(
                    configuration.DATA_SETTINGS_PATH.read_text(), Loader=Loader
                )
        except (OSError, YAMLError) as e:
            raise PersistenceError(f"could not load settings: {e}") from e

        if raw_settings is None:
            # Lazily create the singleton on first read
            self._settings = get_settings_template()
            self.is_dirty = True
            return

        self._settings = self.__convert_settings_for_deserialization(raw_settings)

    def __save_data(self, settings: Settings) -> None:
        serializable_settings = self.__convert_settings_for_serialization(
            deepcopy(settings)
        )
        try:
            configuration.DATA_SETTINGS_PATH.write_text(
                dump(serializable_settings, Dumper=Dumper)
            )
        except (OSError, YAMLError) as e:
            raise PersistenceError(f"could not save settings: {e}") from e

    def flush(self) -> bool:
        if self._settings is not None and self.is_dirty:
            self.__save_data(self._settings)
            self.is_dirty = False
            return True
        return False

    def reload(self) -> None:
        self._settings = None
        self.is_dirty = False

    def __convert_settings_for_serialization(
        self, settings: Settings
    ) -> dict[str, Any]:
        serializable_settings = cast(dict[str, Any], settings)
        serializable_settings["created"] = time.datetime_to_iso_str(
            serializable_settings["created"]
        )
        serializable_settings["updated"] = time.datetime_to_iso_str(
            serializable_settings["updated"]
        )
        return serializable_settings

    def __convert_settings_for_deserialization(
        self, settings: dict[str, Any]
    ) -> Settings:
        template = get_settings_template()
        # Records written before unit versioning existed belong to version 1
        deserializable_settings = {**template, "unit_version": 1, **settings}
        deserializable_settings["created"] = time.datetime_from_str(
            str(deserializable_settings["created"])
        )
        deserializable_settings["updated"] = time.datetime_from_str(
            str(deserializable_settings["updated"])
        )
        return cast(Settings, deserializable_settings)

    def get_or_initialize(self) -> Settings:
        return deepcopy(self.settings)

    def update_settings(
        self,
        daily_goal: Optional[int] = None,
        notifications_enabled: Optional[bool] = None,
        notification_start_time: Optional[str] = None,
        notification_end_time: Optional[str] = None,
        notification_interval: Optional[int] = None,
        unit_version: Optional[int] = None,
    ) -> None:
        self.is_dirty = True

        settings = self.settings
        # Set updated timestamp to current moment
        settings["updated"] = time.now_utc()
        if daily_goal is not None:
            settings["daily_goal"] = daily_goal
        if notifications_enabled is not None:
            settings["notifications_enabled"] = notifications_enabled
        if notification_start_time is not None:
            settings["notification_start_time"] = notification_start_time
        if notification_end_time is not None:
            settings["notification_end_time"] = notification_end_time
        if notification_interval is not None:
            settings["notification_interval"] = notification_interval
        if unit_version is not None:
            settings["unit_version"] = unit_version


SETTINGS_REPO = SettingsRepository()
