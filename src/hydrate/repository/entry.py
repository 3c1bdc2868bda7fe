# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Callable, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper  # noqa: F401
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from hydrate import configuration, time
from hydrate.errors import PersistenceError
from hydrate.model.entity_id import EntityId, generate_entity_id
from hydrate.model.entry import Entry


class EntryRepository:
    def __init__(self) -> None:
        self._entries: Optional[list[Entry]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def entries(self) -> list[Entry]:
        if self._entries is None:
            self.__load_data()
        if self._entries is None:
            raise ValueError()
        return self._entries

    def __load_data(self) -> None:
        entries: list[Entry] = []
        try:
            for file_path in configuration.DATA_ENTRIES_DIR.iterdir():
                if file_path.suffix != ".yaml":
                    continue
                raw_entry = load(file_path.read_text(), Loader=Loader)
                if raw_entry is not None:
                    entries.append(self.__convert_entry_for_deserialization(raw_entry))
        except (OSError, YAMLError, KeyError, ValueError) as e:
            raise PersistenceError(f"could not load entries: {e}") from e
        self._entries = entries

    def __save_data(self) -> None:
        try:
            # Write dirty entities
            for entry in self.entries:
                if entry["id"] in self._dirty_ids:
                    serializable_entry = self.__convert_entry_for_serialization(
                        deepcopy(entry)
                    )
                    file_path = configuration.DATA_ENTRIES_DIR / f"{entry['id']}.yaml"
                    file_path.write_text(dump(serializable_entry, Dumper=Dumper))

            # Remove deleted entity files
            for entity_id in self._deleted_ids:
                file_path = configuration.DATA_ENTRIES_DIR / f"{entity_id}.yaml"
                if file_path.exists():
                    file_path.unlink()
        except (OSError, YAMLError) as e:
            raise PersistenceError(f"could not save entries: {e}") from e

        # Clear tracking sets
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._entries is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def reload(self) -> None:
        """Discard unsaved changes; the next read comes from disk."""
        self._entries = None
        self.is_dirty = False
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def __convert_entry_for_serialization(self, entry: Entry) -> dict[str, Any]:
        serializable_entry = cast(dict[str, Any], entry)
        serializable_entry["timestamp"] = time.datetime_to_iso_str(
            serializable_entry["timestamp"]
        )
        serializable_entry["created"] = time.datetime_to_iso_str(
            serializable_entry["created"]
        )
        serializable_entry["updated"] = time.datetime_to_iso_str(
            serializable_entry["updated"]
        )
        return serializable_entry

    def __convert_entry_for_deserialization(self, entry: dict[str, Any]) -> Entry:
        deserializable_entry = entry
        deserializable_entry["timestamp"] = time.datetime_from_str(
            deserializable_entry["timestamp"]
        )
        deserializable_entry["created"] = time.datetime_from_str(
            deserializable_entry["created"]
        )
        deserializable_entry["updated"] = time.datetime_from_str(
            deserializable_entry["updated"]
        )
        return cast(Entry, deserializable_entry)

    def save_new_entry(self, entry: Entry) -> EntityId:
        self.is_dirty = True

        entry["id"] = generate_entity_id()

        self.entries.append(entry)
        self._dirty_ids.add(entry["id"])

        return entry["id"]

    def modify_entry_amount(self, id: EntityId, amount: int) -> None:
        self.is_dirty = True
        self._dirty_ids.add(id)

        entry = [entry for entry in self.entries if entry["id"] == id][0]
        # Set updated timestamp to current moment
        entry["updated"] = time.now_utc()
        entry["amount"] = amount

    def delete_entry(self, id: EntityId) -> None:
        self.is_dirty = True

        self._entries = [entry for entry in self.entries if entry["id"] != id]
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)

    def get_all_entries(self) -> list[Entry]:
        return deepcopy(self.entries)

    def get_entry(self, id: EntityId) -> Entry:
        return deepcopy([entry for entry in self.entries if entry["id"] == id][0])

    def fetch_entries(
        self,
        predicate: Optional[Callable[[Entry], bool]] = None,
        newest_first: bool = True,
    ) -> list[Entry]:
        entries = [
            entry for entry in self.entries if predicate is None or predicate(entry)
        ]
        return deepcopy(
            sorted(entries, key=lambda entry: entry["timestamp"], reverse=newest_first)
        )


ENTRY_REPO = EntryRepository()
