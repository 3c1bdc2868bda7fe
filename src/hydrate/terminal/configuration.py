# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast, get_args

import typer
from rich.console import Console
from rich.table import Table

from hydrate import configuration
from hydrate.repository.configuration import (
    CONFIGURATION_REPO,
)
from hydrate.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _config_table(config: configuration.Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("log_level", config["log_level"])
    table.add_row("unit", config["unit"])
    table.add_row("default_amount", str(config["default_amount"]))
    table.add_row("elapsed_hour_policy", config["elapsed_hour_policy"])
    table.add_row(
        "reschedule_debounce_minutes", str(config["reschedule_debounce_minutes"])
    )
    table.add_row(
        "clear_ids_on_view",
        "✓ Enabled" if config["clear_ids_on_view"] else "✗ Disabled",
    )
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_config_table(config))

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing data files",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=", ".join(LOG_LEVELS)),
    ] = None,
    unit: Annotated[
        Optional[str],
        typer.Option("--unit", help="Unit label shown with amounts"),
    ] = None,
    default_amount: Annotated[
        Optional[int],
        typer.Option("--default-amount", help="Amount logged by 'add' without one"),
    ] = None,
    elapsed_hour_policy: Annotated[
        Optional[str],
        typer.Option(
            "--elapsed-hour-policy",
            help="skip_elapsed, keep_all",
        ),
    ] = None,
    reschedule_debounce_minutes: Annotated[
        Optional[int],
        typer.Option(
            "--reschedule-debounce-minutes",
            help="Minimum minutes between automatic reminder rebuilds",
        ),
    ] = None,
    clear_ids_on_view: Annotated[
        Optional[bool],
        typer.Option(
            "--clear-ids-on-view/--no-clear-ids-on-view",
            help="Enable/disable automatic clearing of ID map before list commands",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above views",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in LOG_LEVELS:
            typer.echo(
                f"Invalid log level: {log_level}. Valid options: {', '.join(LOG_LEVELS)}"
            )
            raise typer.Exit(1)

    valid_policies = get_args(configuration.ElapsedHourPolicy)
    if elapsed_hour_policy is not None and elapsed_hour_policy not in valid_policies:
        typer.echo(
            f"Invalid elapsed hour policy: {elapsed_hour_policy}. Valid options: {', '.join(valid_policies)}"
        )
        raise typer.Exit(1)

    if default_amount is not None and default_amount < 1:
        typer.echo(f"Error: default amount must be positive, got {default_amount}")
        raise typer.Exit(1)

    if reschedule_debounce_minutes is not None and reschedule_debounce_minutes < 0:
        typer.echo(
            f"Error: debounce must not be negative, got {reschedule_debounce_minutes}"
        )
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        log_level=log_level,
        unit=unit,
        default_amount=default_amount,
        elapsed_hour_policy=cast(
            Optional[configuration.ElapsedHourPolicy], elapsed_hour_policy
        ),
        reschedule_debounce_minutes=reschedule_debounce_minutes,
        clear_ids_on_view=clear_ids_on_view,
        show_header=show_header,
    )
    CONFIGURATION_REPO.flush()

    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_config_table(config, title="Updated Configuration"))
