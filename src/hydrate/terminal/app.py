# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional, cast

import typer

from hydrate import state as app_state
from hydrate.errors import HydrateError
from hydrate.service.tracker import get_hydration_tracker
from hydrate.terminal import configuration, entry, reminder, settings
from hydrate.terminal.custom_typer import AliasedTyperGroup, OrderedAliasedTyperGroup
from hydrate.terminal.stats import stats
from hydrate.terminal.water import add, today
from hydrate.view import state as view_state

logger = logging.getLogger(__name__)

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Hydrate - Daily water intake tracking in the CLI",
    no_args_is_help=True,
)
app.command(name="add, a")(add)
app.command(name="today, t")(today)
app.add_typer(entry.app, name="entry, e", help="List, modify and delete entries")
app.command(name="stats, st")(stats)
app.add_typer(settings.app, name="settings, se", help="Daily goal and reminders")
app.add_typer(reminder.app, name="reminder, r", help="Scheduled reminders")
app.add_typer(configuration.app, name="config, c", help="Application configuration")


@app.callback()
def main_callback(
    ctx: typer.Context,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    clear_ids: Annotated[
        Optional[bool],
        typer.Option(
            "--clear-ids/--no-clear-ids",
            help="Clear ID map before list views",
        ),
    ] = None,
) -> None:
    """
    Hydrate - Daily water intake tracking in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if clear_ids is not None:
        app_state.set_renumber_entry_ids(clear_ids)

    # Each invocation counts as the app coming to the foreground. The reminder
    # group drives rescheduling itself.
    group = cast(AliasedTyperGroup, ctx.command)
    if group.canonical_name(ctx.invoked_subcommand or "") == "reminder, r":
        return
    try:
        get_hydration_tracker().reschedule_if_needed()
    except HydrateError as e:
        logger.warning("could not refresh reminders: %s", e)


def run() -> None:
    app()
