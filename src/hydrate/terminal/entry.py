# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from hydrate.id_map import clear_id_map_if_required
from hydrate.model.entity_id import EntityId
from hydrate.repository.configuration import CONFIGURATION_REPO
from hydrate.repository.id_map import ID_MAP_REPO
from hydrate.service.entry import EntryValidationError
from hydrate.service.tracker import get_hydration_tracker
from hydrate.terminal.custom_typer import AliasedTyperGroup
from hydrate.terminal.parse import parse_id_list
from hydrate.view.view.views import entry as entry_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _real_entry_id(synthetic_id: int) -> EntityId:
    try:
        return ID_MAP_REPO.get_real_id("entries", synthetic_id)
    except KeyError:
        typer.echo(
            f"Error: no entry with id {synthetic_id}, run 'hydrate entry list' first"
        )
        raise typer.Exit(1)


@app.command("list, l")
def list_entries(
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-l", help="Show only the most recent entries"),
    ] = None,
) -> None:
    """List water entries, newest first."""
    clear_id_map_if_required()
    config = CONFIGURATION_REPO.get_config()

    entries = get_hydration_tracker().entries()
    if limit is not None:
        entries = entries[:limit]

    entry_report.entries_view("entries", entries, config["unit"])


@app.command("modify, m", no_args_is_help=True)
def modify(id: int, amount: int) -> None:
    """Change the amount of an entry."""
    config = CONFIGURATION_REPO.get_config()
    tracker = get_hydration_tracker()

    real_id = _real_entry_id(id)
    try:
        entry = tracker.edit_amount(real_id, amount)
    except EntryValidationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)
    except IndexError:
        typer.echo(f"Error: entry {id} no longer exists")
        raise typer.Exit(1)

    if entry is None:
        typer.echo("Error: could not save the entry, see log for details")
        raise typer.Exit(1)

    entry_report.single_entry_view(entry, config["unit"])


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: Annotated[str, typer.Argument(help="ID, list (1,2,3) or range (1-5)")],
) -> None:
    """Delete one or more entries."""
    tracker = get_hydration_tracker()

    ids: list[int] = parse_id_list(id)
    real_ids = [_real_entry_id(entry_id) for entry_id in ids]

    if not tracker.delete_entries(real_ids):
        typer.echo("Error: could not delete entries, see log for details")
        raise typer.Exit(1)

    typer.echo(f"Deleted {len(real_ids)} entr{'y' if len(real_ids) == 1 else 'ies'}")
