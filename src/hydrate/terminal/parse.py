# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

import pendulum
import typer

from hydrate.time import datetime_from_str_utc


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param)

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str_utc(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid datetime '{datetime}': {e}")

    # Match (H)H:mm format (time only, use today's date)
    if re.match(r"^\d{1,2}:\d{2}$", datetime):
        hour, minute = cast(tuple[int, int], parse_time(datetime))
        pendulum_date_time = pendulum.today("local").set(
            hour=hour, minute=minute, second=0, microsecond=0
        )
        return pendulum_date_time.in_tz("UTC")

    # Match minutes ago (e.g., "-30m")
    minutes_match = re.match(r"^-(\d+)m$", datetime)
    if minutes_match:
        pendulum_date_time = pendulum.now().subtract(minutes=int(minutes_match.group(1)))
        return pendulum_date_time.in_tz("UTC")

    if datetime == "now" or datetime == "n":
        return pendulum.now().in_tz("UTC")
    if datetime == "yesterday" or datetime == "y":
        # Same time of day, one day back
        return pendulum.now().subtract(days=1).in_tz("UTC")
    raise typer.BadParameter(
        "Incorrect datetime format (use YYYY-MM-DD[THH:mm], HH:mm, -30m, now, or yesterday)"
    )


def parse_time(time_str: Optional[str]) -> Optional[tuple[int, int]]:
    """
    Parse a time string in (H)H:mm format and return a tuple of (hour, minute).

    Args:
        time_str: Time string in format like "8:00", "22:00", etc.

    Returns:
        Tuple of (hour, minute) or None if time_str is None

    Raises:
        typer.BadParameter: If the time format is invalid or values are out of range
    """
    if time_str is None:
        return None

    time_match = re.match(r"^(\d{1,2}):(\d{2})$", time_str)
    if not time_match:
        raise typer.BadParameter(
            f"Time must be in HH:mm format (e.g., 8:00 or 22:00), got '{time_str}'"
        )

    hour = int(time_match.group(1))
    minute = int(time_match.group(2))

    if hour < 0 or hour > 23:
        raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
    if minute < 0 or minute > 59:
        raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

    return (hour, minute)


def parse_id_list(id_param: str) -> list[int]:
    """
    Parse a single ID, comma-separated list of IDs, or ranges of IDs.

    Args:
        id_param: A single ID (e.g., "1"), comma-separated list (e.g., "1,2,3"),
                  range (e.g., "1-5"), or mixed (e.g., "1,3-5,8")

    Returns:
        List of integer IDs (sorted and deduplicated)

    Raises:
        typer.BadParameter: If any ID is not a valid integer or range format is invalid
    """
    ids: list[int] = []
    for id_str in (s.strip() for s in id_param.split(",")):
        if not id_str:
            continue

        if "-" in id_str:
            range_parts = id_str.split("-")
            if len(range_parts) != 2:
                raise typer.BadParameter(
                    f"Invalid range format: '{id_str}' (expected format: 'start-end')"
                )
            try:
                start = int(range_parts[0].strip())
                end = int(range_parts[1].strip())
            except ValueError:
                raise typer.BadParameter(
                    f"Invalid range: '{id_str}' contains non-integer values"
                )
            if start > end:
                raise typer.BadParameter(
                    f"Invalid range: '{id_str}' (start must be <= end)"
                )
            ids.extend(range(start, end + 1))
        else:
            try:
                ids.append(int(id_str))
            except ValueError:
                raise typer.BadParameter(f"Invalid ID: '{id_str}' is not an integer")

    if not ids:
        raise typer.BadParameter("No valid IDs provided")

    return sorted(set(ids))
