# SPDX-License-Identifier: MIT

import pendulum

from ganttgrid.model.geometry import HeaderBucket
from ganttgrid.model.granularity_type import Granularity
from ganttgrid.model.interval import Interval
from ganttgrid.service.calendar import (
    clamp_range,
    enumerate_months,
    enumerate_weeks,
    group_months_by_year,
)
from ganttgrid.service.coordinate import date_to_percent, span_to_percent


def boundary_dates(
    intervals: list[Interval], start: pendulum.Date, end: pendulum.Date
) -> list[pendulum.Date]:
    """
    Collect the interval start and end dates that fall inside the range.

    Args:
        intervals: Intervals of the snapshot
        start: First day of the project
        end: Last day of the project

    Returns:
        Sorted list of unique dates
    """
    start, end = clamp_range(start, end)
    dates: set[pendulum.Date] = set()
    for interval in intervals:
        for date in (interval["start_date"], interval["end_date"]):
            if start <= date <= end:
                dates.add(date)
    return sorted(dates)


def _span_bucket(
    label: str,
    days: list[pendulum.Date],
    clipped_start: pendulum.Date,
    clipped_end: pendulum.Date,
) -> HeaderBucket:
    left, width = span_to_percent(days, clipped_start, clipped_end)
    return {"label": label, "left": left, "width": width}


def _month_groups(
    days: list[pendulum.Date], start: pendulum.Date, end: pendulum.Date
) -> list[HeaderBucket]:
    return [
        _span_bucket(month["label"], days, month["clipped_start"], month["clipped_end"])
        for month in enumerate_months(start, end)
    ]


def build_header(
    granularity: Granularity,
    start: pendulum.Date,
    end: pendulum.Date,
    days: list[pendulum.Date],
    intervals: list[Interval],
) -> tuple[list[HeaderBucket], list[HeaderBucket]]:
    """
    Build the two header rows for a granularity.

    - weeks: months on top, ISO weeks ("W1") below
    - months: years on top, months ("Jan") below
    - intervals: months on top, interval boundary ticks (day of month) below

    Every bucket is positioned through the day axis using its range clipped
    to the project, so header cells line up with interval shapes. Boundary
    ticks have zero width.

    Args:
        granularity: "weeks", "intervals" or "months"
        start: First day of the project
        end: Last day of the project
        days: Ordered day buckets of the axis
        intervals: Intervals of the snapshot (only used for boundary ticks)

    Returns:
        Tuple of (groups, buckets) for the top and bottom header rows
    """
    start, end = clamp_range(start, end)

    if granularity == "weeks":
        groups = _month_groups(days, start, end)
        buckets = [
            _span_bucket(week["label"], days, week["clipped_start"], week["clipped_end"])
            for week in enumerate_weeks(start, end)
        ]
    elif granularity == "months":
        months = enumerate_months(start, end)
        groups = [
            _span_bucket(
                group["label"],
                days,
                months[group["start_index"]]["clipped_start"],
                months[group["end_index"]]["clipped_end"],
            )
            for group in group_months_by_year(months)
        ]
        buckets = [
            _span_bucket(
                month["short_label"], days, month["clipped_start"], month["clipped_end"]
            )
            for month in months
        ]
    else:  # granularity == "intervals"
        groups = _month_groups(days, start, end)
        buckets = [
            {
                "label": date.format("DD"),
                "left": date_to_percent(days, date),
                "width": 0.0,
            }
            for date in boundary_dates(intervals, start, end)
        ]

    return groups, buckets
