# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from hydrate.model.reminder import Reminder
from hydrate.time import time_of_day_to_str
from hydrate.view.view.views.header import header


def reminders_view(report_name: str, reminders: list[Reminder]) -> None:
    """Display reminder requests ordered by trigger time."""
    header(report_name)

    reminders_table = Table(box=box.SIMPLE)
    reminders_table.add_column("time")
    reminders_table.add_column("identifier")
    reminders_table.add_column("message")

    for reminder in sorted(reminders, key=lambda r: (r["hour"], r["minute"])):
        reminders_table.add_row(
            time_of_day_to_str(reminder["hour"], reminder["minute"]),
            reminder["identifier"],
            f"[bold]{reminder['title']}[/bold]\n{reminder['body']}",
        )

    if len(reminders) == 0:
        reminders_table.add_row("-", "", "no reminders")

    console = Console()
    console.print(reminders_table)
