# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from hydrate.notification import NOTIFICATION_CENTER, PermissionStatus
from hydrate.service.tracker import get_hydration_tracker
from hydrate.terminal.custom_typer import AliasedTyperGroup
from hydrate.time import now_local
from hydrate.view.view.views import reminder as reminder_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, l")
def list_reminders() -> None:
    """List pending reminders."""
    reminder_report.reminders_view("pending reminders", NOTIFICATION_CENTER.pending())


@app.command("reschedule, rs")
def reschedule() -> None:
    """Rebuild reminders unless they were rebuilt within the debounce window."""
    reminders = get_hydration_tracker().reschedule_if_needed()
    if reminders is None:
        typer.echo("Reminders were rebuilt recently, nothing to do")
        return
    reminder_report.reminders_view("rescheduled reminders", reminders)


@app.command("refresh, rf")
def refresh() -> None:
    """Rebuild reminders now so their text reflects today's progress."""
    reminders = get_hydration_tracker().update_notification_content_immediately()
    reminder_report.reminders_view("rescheduled reminders", reminders)


@app.command("due, d")
def due() -> None:
    """Show reminders that fire during the current hour."""
    reminder_report.reminders_view("due reminders", NOTIFICATION_CENTER.due(now_local()))


@app.command("permission, p")
def permission(
    action: Annotated[
        str,
        typer.Argument(help="status, grant, deny, reset"),
    ] = "status",
) -> None:
    """Show or change notification permission."""
    statuses: dict[str, PermissionStatus] = {
        "grant": "authorized",
        "deny": "denied",
        "reset": "not_determined",
    }
    if action != "status" and action not in statuses:
        typer.echo(
            f"Invalid action: {action}. Valid options: status, grant, deny, reset"
        )
        raise typer.Exit(1)

    if action in statuses:
        NOTIFICATION_CENTER.set_permission(statuses[action])
        if action == "deny":
            NOTIFICATION_CENTER.cancel_all_pending()

    typer.echo(f"Notification permission: {NOTIFICATION_CENTER.permission()}")
