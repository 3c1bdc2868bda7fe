# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper  # noqa: F401
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from hydrate import configuration, time
from hydrate.errors import PersistenceError
from hydrate.model.schedule import ScheduleState


class ScheduleRepository:
    def __init__(self) -> None:
        self._schedule: Optional[ScheduleState] = None
        self.is_dirty = False

    @property
    def schedule(self) -> ScheduleState:
        if self._schedule is None:
            self.__load_data()
        if self._schedule is None:
            raise ValueError()
        return self._schedule

    def __load_data(self) -> None:
        try:
            raw_schedule = None
            if configuration.DATA_SCHEDULE_PATH.is_file():
                raw_schedule = load(
                    configuration.DATA_SCHEDULE_PATH.read_text(), Loader=Loader
                )
        except (OSError, YAMLError) as e:
            raise PersistenceError(f"could not load schedule state: {e}") from e

        if raw_schedule is None:
            raw_schedule = {"last_rescheduled": None}
        self._schedule = {
            "last_rescheduled": time.datetime_from_str_optional(
                raw_schedule.get("last_rescheduled")
            )
        }

    def __save_data(self, schedule: ScheduleState) -> None:
        serializable_schedule = {
            "last_rescheduled": time.datetime_to_iso_str_optional(
                schedule["last_rescheduled"]
            )
        }
        try:
            configuration.DATA_SCHEDULE_PATH.write_text(
                dump(serializable_schedule, Dumper=Dumper)
            )
        except (OSError, YAMLError) as e:
            raise PersistenceError(f"could not save schedule state: {e}") from e

    def flush(self) -> bool:
        if self._schedule is not None and self.is_dirty:
            self.__save_data(self._schedule)
            self.is_dirty = False
            return True
        return False

    def reload(self) -> None:
        self._schedule = None
        self.is_dirty = False

    def get_last_rescheduled(self) -> Optional[pendulum.DateTime]:
        return self.schedule["last_rescheduled"]

    def set_last_rescheduled(self, value: Optional[pendulum.DateTime]) -> None:
        self.is_dirty = True
        self.schedule["last_rescheduled"] = value


SCHEDULE_REPO = ScheduleRepository()
