# SPDX-License-Identifier: MIT

import pendulum
import pytest
import typer

from ganttgrid.terminal.parse import parse_date, parse_granularity, parse_hex_color
from ganttgrid.time import today_local


def test_parse_date_formats():
    assert parse_date("2024-01-05") == pendulum.date(2024, 1, 5)
    assert parse_date(None) is None
    assert parse_date("t") == today_local()
    assert parse_date("yesterday") == today_local().subtract(days=1)
    assert parse_date("o") == today_local().add(days=1)
    assert parse_date("-3") == today_local().subtract(days=3)
    assert parse_date(2) == today_local().add(days=2)


@pytest.mark.parametrize("value", ["2024-13-40", "someday"])
def test_parse_date_rejects_invalid(value):
    with pytest.raises(typer.BadParameter):
        parse_date(value)


def test_parse_granularity():
    assert parse_granularity("Months") == "months"
    assert parse_granularity(" weeks ") == "weeks"
    assert parse_granularity(None) is None
    with pytest.raises(typer.BadParameter):
        parse_granularity("days")


def test_parse_hex_color():
    assert parse_hex_color("#ABCDEF") == "#abcdef"
    assert parse_hex_color("123456") == "#123456"
    with pytest.raises(typer.BadParameter):
        parse_hex_color("red")
