# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from hydrate.model.entry import Entry
from hydrate.time import datetime_to_display_local_datetime_str
from hydrate.view.view.util import entry_synthetic_id, format_amount
from hydrate.view.view.views.header import header


def entries_view(
    report_name: str,
    entries: list[Entry],
    unit: str,
    columns: list[str] = ["id", "timestamp", "amount"],
) -> None:
    """Display list of water entries."""
    header(report_name)

    entries_table = Table(box=box.SIMPLE)
    for column in columns:
        entries_table.add_column(column)

    for entry in entries:
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = entry_synthetic_id(entry)
            elif column == "timestamp":
                column_value = datetime_to_display_local_datetime_str(
                    entry["timestamp"]
                )
            elif column == "amount":
                column_value = format_amount(entry["amount"], unit)
            elif entry.get(column) is not None:
                column_value = str(entry[column])  # type: ignore[literal-required]
            row.append(column_value)
        entries_table.add_row(*row)

    if len(entries) == 0:
        entries_table.add_row(*(["-"] + [""] * (len(columns) - 1)))

    console = Console()
    console.print(entries_table)


def single_entry_view(entry: Entry, unit: str) -> None:
    """Display detailed view of a single entry."""
    header("entry")

    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    entry_table.add_row("id", entry_synthetic_id(entry))
    entry_table.add_row("amount", format_amount(entry["amount"], unit))
    entry_table.add_row(
        "timestamp", datetime_to_display_local_datetime_str(entry["timestamp"])
    )
    entry_table.add_row("created", datetime_to_display_local_datetime_str(entry["created"]))
    entry_table.add_row("updated", datetime_to_display_local_datetime_str(entry["updated"]))

    console = Console()
    console.print(entry_table)
