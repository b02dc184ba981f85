# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

import pendulum
import typer

from ganttgrid.color import is_hex_color, normalize_hex_color
from ganttgrid.model.granularity_type import GRANULARITIES, Granularity
from ganttgrid.time import date_from_str, today_local


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    """
    Parse a calendar date given on the command line.

    Accepts YYYY-MM-DD, today/t, yesterday/y, tomorrow/o, or a day offset
    from today like 1 or -1.
    """
    if date_param is None:
        return None

    date = str(date_param)

    if re.match(r"\d{4}-\d{2}-\d{2}", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    if re.match(r"^-?\d+$", date):
        return today_local().add(days=int(date))

    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return today_local().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today_local().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_granularity(granularity_param: Optional[str]) -> Optional[Granularity]:
    if granularity_param is None:
        return None

    granularity = granularity_param.strip().lower()
    if granularity not in GRANULARITIES:
        raise typer.BadParameter(
            f"Granularity must be one of: {', '.join(GRANULARITIES)}"
        )
    return cast(Granularity, granularity)


def parse_hex_color(color_param: Optional[str]) -> Optional[str]:
    if color_param is None:
        return None

    if not is_hex_color(color_param):
        raise typer.BadParameter("Color must be a hex value like #3b82f6")
    return normalize_hex_color(color_param)
