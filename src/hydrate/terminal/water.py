# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from hydrate.id_map import clear_id_map_if_required
from hydrate.repository.configuration import CONFIGURATION_REPO
from hydrate.service.aggregation import get_day_boundaries
from hydrate.service.entry import EntryValidationError
from hydrate.service.tracker import get_hydration_tracker
from hydrate.terminal.parse import parse_datetime
from hydrate.time import now_local
from hydrate.view.view.views import entry as entry_report
from hydrate.view.view.views import today as today_report


def add(
    amount: Annotated[
        Optional[int],
        typer.Argument(help="Amount drunk (default: config default_amount)"),
    ] = None,
    timestamp: Annotated[
        Optional[str],
        typer.Option(
            "--timestamp",
            "-ts",
            help="When it was drunk: YYYY-MM-DD[THH:mm], HH:mm, -30m, now, yesterday",
        ),
    ] = None,
) -> None:
    """Log water intake."""
    config = CONFIGURATION_REPO.get_config()
    tracker = get_hydration_tracker()

    if amount is None:
        amount = config["default_amount"]

    try:
        entry = tracker.add_water(amount, parse_datetime(timestamp))
    except EntryValidationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    if entry is None:
        typer.echo("Error: could not save the entry, see log for details")
        raise typer.Exit(1)

    entry_report.single_entry_view(entry, config["unit"])
    today_report.progress_view(tracker.snapshot())


def today() -> None:
    """Show today's progress toward the daily goal."""
    clear_id_map_if_required()
    config = CONFIGURATION_REPO.get_config()
    tracker = get_hydration_tracker()

    now = now_local()
    start, end = get_day_boundaries(now)
    todays_entries = [
        entry for entry in tracker.entries() if start <= entry["timestamp"] < end
    ]

    today_report.today_view(tracker.snapshot(now), todays_entries, config["unit"])
