# SPDX-License-Identifier: MIT

from typing import Any

from rich.console import Console
from rich.padding import Padding
from rich.progress_bar import ProgressBar

from hydrate.model.entry import Entry
from hydrate.view.view.views.entry import entries_view
from hydrate.view.view.views.header import header


def progress_view(snapshot: dict[str, Any]) -> None:
    """Progress bar and totals for today."""
    console = Console()

    color = "green" if snapshot["goal_reached"] else "deep_sky_blue1"
    console.print(
        Padding(
            f"[bold {color}]{snapshot['percentage_text']}[/bold {color}]"
            f"  {snapshot['progress_text']}",
            (1, 1, 0, 1),
        )
    )
    console.print(
        Padding(
            ProgressBar(
                total=100,
                completed=snapshot["fraction"] * 100,
                width=40,
                complete_style=color,
                finished_style="green",
            ),
            (0, 1),
        )
    )
    console.print(Padding(snapshot["remaining_text"], (0, 1, 1, 1)))


def today_view(snapshot: dict[str, Any], entries: list[Entry], unit: str) -> None:
    header("today")
    progress_view(snapshot)
    entries_view("today's entries", entries, unit)
