# SPDX-License-Identifier: MIT

import pendulum
import pytest

from ganttgrid.service.coordinate import (
    date_to_percent,
    day_index,
    find_day_index,
    span_to_percent,
)


def test_date_to_percent_bounds(january_days):
    assert date_to_percent(january_days, pendulum.date(2024, 1, 1)) == 0.0
    assert date_to_percent(january_days, pendulum.date(2024, 1, 31)) == pytest.approx(
        30 / 31 * 100
    )


def test_date_to_percent_is_monotonic(january_days):
    percents = [date_to_percent(january_days, day) for day in january_days]

    assert percents == sorted(percents)
    assert all(0.0 <= percent < 100.0 for percent in percents)


def test_date_to_percent_clamps_outside_dates(january_days):
    assert date_to_percent(january_days, pendulum.date(2023, 12, 1)) == 0.0
    assert date_to_percent(january_days, pendulum.date(2024, 3, 1)) == pytest.approx(
        30 / 31 * 100
    )


def test_date_to_percent_without_days():
    assert date_to_percent([], pendulum.date(2024, 1, 1)) == 0.0


def test_find_day_index(january_days):
    assert find_day_index(january_days, pendulum.date(2024, 1, 5)) == 4
    assert find_day_index(january_days, pendulum.date(2023, 12, 25)) == 0
    assert find_day_index(january_days, pendulum.date(2024, 2, 1)) is None
    assert day_index(january_days, pendulum.date(2024, 2, 1)) == 30


def test_span_to_percent_includes_end_day(january_days):
    left, width = span_to_percent(
        january_days, pendulum.date(2024, 1, 1), pendulum.date(2024, 1, 31)
    )
    assert left == 0.0
    assert width == pytest.approx(100.0)

    left, width = span_to_percent(
        january_days, pendulum.date(2024, 1, 10), pendulum.date(2024, 1, 10)
    )
    assert left == pytest.approx(9 / 31 * 100)
    assert width == pytest.approx(1 / 31 * 100)
