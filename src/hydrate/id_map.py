# SPDX-License-Identifier: MIT

from hydrate import state as app_state
from hydrate.repository.id_map import ID_MAP_REPO


def clear_id_map_if_required() -> None:
    """Reset synthetic entry ids before a listing hands out fresh ones."""
    if app_state.should_renumber_entry_ids():
        ID_MAP_REPO.clear_ids()
