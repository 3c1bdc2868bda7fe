# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from hydrate.errors import InvariantViolation, PermissionDenied
from hydrate.notification import NOTIFICATION_CENTER
from hydrate.repository.configuration import CONFIGURATION_REPO
from hydrate.service.tracker import HydrationTracker, get_hydration_tracker
from hydrate.terminal.custom_typer import AliasedTyperGroup
from hydrate.terminal.parse import parse_time
from hydrate.time import time_of_day_to_str
from hydrate.view.view.views import settings as settings_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _show_settings(tracker: HydrationTracker) -> None:
    config = CONFIGURATION_REPO.get_config()
    settings_report.settings_view(
        tracker.settings(), config["unit"], NOTIFICATION_CENTER.permission()
    )


def _saved_or_exit(saved: bool) -> None:
    if not saved:
        typer.echo("Error: could not save settings, see log for details")
        raise typer.Exit(1)


@app.command("view, v")
def view() -> None:
    """Display the daily goal and reminder settings."""
    _show_settings(get_hydration_tracker())


@app.command("goal, g", no_args_is_help=True)
def goal(daily_goal: int) -> None:
    """Set the daily goal."""
    tracker = get_hydration_tracker()
    try:
        _saved_or_exit(tracker.update_daily_goal(daily_goal))
    except InvariantViolation as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)
    _show_settings(tracker)


@app.command("notifications, n", no_args_is_help=True)
def notifications(
    state: Annotated[str, typer.Argument(help="on, off")],
) -> None:
    """Turn hourly reminders on or off."""
    if state not in ("on", "off"):
        typer.echo(f"Invalid state: {state}. Valid options: on, off")
        raise typer.Exit(1)

    tracker = get_hydration_tracker()
    try:
        _saved_or_exit(tracker.set_notifications_enabled(state == "on"))
    except PermissionDenied as e:
        console = Console()
        console.print(f"[bold red]Notifications Disabled[/bold red]\n{e}")
        raise typer.Exit(1)
    _show_settings(tracker)


@app.command("window, w")
def window(
    start: Annotated[
        Optional[str],
        typer.Option("--start", "-s", help="First reminder time (HH:mm)"),
    ] = None,
    end: Annotated[
        Optional[str],
        typer.Option("--end", "-e", help="Last reminder time (HH:mm)"),
    ] = None,
) -> None:
    """Set the daily reminder window."""
    start_time = parse_time(start)
    end_time = parse_time(end)

    tracker = get_hydration_tracker()
    try:
        _saved_or_exit(
            tracker.update_notification_window(
                time_of_day_to_str(*start_time) if start_time is not None else None,
                time_of_day_to_str(*end_time) if end_time is not None else None,
            )
        )
    except InvariantViolation as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)
    _show_settings(tracker)


@app.command("interval, i", no_args_is_help=True)
def interval(hours: int) -> None:
    """Set the number of hours between reminders."""
    tracker = get_hydration_tracker()
    try:
        _saved_or_exit(tracker.update_notification_interval(hours))
    except InvariantViolation as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)
    _show_settings(tracker)
