# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, Union

import pendulum


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def date_to_iso_str(date: pendulum.Date) -> str:
    return date.isoformat()


def date_to_iso_str_optional(date: Optional[pendulum.Date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_iso_str(date)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def date_from_str(date: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string (a trailing time component is dropped)."""
    parsed = pendulum.parse(date, exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    if isinstance(parsed, pendulum.Date):
        return parsed
    raise ValueError(f"Not a calendar date: {date!r}")


def date_from_value(value: Union[str, datetime.date]) -> pendulum.Date:
    """Convert a string or a stdlib date/datetime (as produced by YAML) to a pendulum.Date."""
    if isinstance(value, str):
        return date_from_str(value)
    if isinstance(value, (datetime.date, datetime.datetime)):
        return pendulum.date(value.year, value.month, value.day)
    raise ValueError(f"Not a calendar date: {value!r}")


def date_from_value_optional(
    value: Optional[Union[str, datetime.date]],
) -> Optional[pendulum.Date]:
    if value is None:
        return None
    return date_from_value(value)
