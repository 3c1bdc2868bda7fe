# SPDX-License-Identifier: MIT

from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from hydrate.model.daily_bucket import DailyBucket
from hydrate.view.view.util import format_amount, render_bar
from hydrate.view.view.views.header import header


def stats_view(stats: dict[str, Any], unit: str) -> None:
    """
    Per-day totals for the period plus the summary figures.

    `stats` is the mapping returned by HydrationTracker.stats.
    """
    header(stats["period_text"])

    goal: int = stats["goal"]
    series: list[DailyBucket] = stats["series"]

    days_table = Table(box=box.SIMPLE)
    days_table.add_column("day")
    days_table.add_column("amount", justify="right")
    days_table.add_column("")

    for bucket in series:
        style = "green" if bucket["amount"] >= goal else "deep_sky_blue1"
        days_table.add_row(
            bucket["date"].format("ddd MMM-DD"),
            format_amount(bucket["amount"], unit),
            f"[{style}]{render_bar(bucket['amount'], goal)}[/{style}]",
        )

    summary_table = Table(box=box.SIMPLE)
    summary_table.add_column("summary")
    summary_table.add_column("value", justify="right")
    summary_table.add_row("daily average", f"{stats['average']:.1f} {unit}")
    summary_table.add_row("best day", format_amount(stats["best"], unit))
    summary_table.add_row("goal achieved", f"{stats['goal_achievement_rate']:.0f}%")
    summary_table.add_row("daily goal", format_amount(goal, unit))

    console = Console()
    console.print(days_table)
    console.print(summary_table)
