# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from hydrate.model.settings import Settings
from hydrate.time import datetime_to_display_local_datetime_str
from hydrate.view.view.util import format_amount
from hydrate.view.view.views.header import header


def settings_view(settings: Settings, unit: str, permission: str) -> None:
    header("settings")

    settings_table = Table(box=box.SIMPLE)
    settings_table.add_column("property")
    settings_table.add_column("value")

    settings_table.add_row("daily_goal", format_amount(settings["daily_goal"], unit))
    settings_table.add_row(
        "notifications",
        "✓ Enabled" if settings["notifications_enabled"] else "✗ Disabled",
    )
    settings_table.add_row("permission", permission)
    settings_table.add_row(
        "window",
        f"{settings['notification_start_time']} - {settings['notification_end_time']}",
    )
    settings_table.add_row("interval", f"every {settings['notification_interval']}h")
    settings_table.add_row(
        "updated", datetime_to_display_local_datetime_str(settings["updated"])
    )

    console = Console()
    console.print(settings_table)
