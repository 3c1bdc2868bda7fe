# SPDX-License-Identifier: MIT

from typing import Annotated, cast, get_args

import typer

from hydrate.repository.configuration import CONFIGURATION_REPO
from hydrate.service.aggregation import StatsPeriod
from hydrate.service.tracker import get_hydration_tracker
from hydrate.view.view.views import stats as stats_report


def stats(
    period: Annotated[
        str,
        typer.Option("--period", "-p", help="week, month"),
    ] = "week",
) -> None:
    """Show daily totals and trends for the past week or month."""
    valid_periods = get_args(StatsPeriod)
    if period not in valid_periods:
        typer.echo(
            f"Invalid period: {period}. Valid options: {', '.join(valid_periods)}"
        )
        raise typer.Exit(1)

    config = CONFIGURATION_REPO.get_config()
    tracker = get_hydration_tracker()

    stats_report.stats_view(
        tracker.stats(cast(StatsPeriod, period)), config["unit"]
    )
