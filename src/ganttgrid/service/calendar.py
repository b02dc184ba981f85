# SPDX-License-Identifier: MIT

import logging

import pendulum

from ganttgrid.model.bucket import MonthBucket, WeekBucket, YearGroup

logger = logging.getLogger(__name__)


def clamp_range(
    start: pendulum.Date, end: pendulum.Date
) -> tuple[pendulum.Date, pendulum.Date]:
    """
    Clamp a date range so that end is never before start.

    A reversed range collapses to the single day at start.

    Args:
        start: First day of the range
        end: Last day of the range

    Returns:
        Tuple of (start, end) with end >= start
    """
    if end < start:
        logger.debug("Reversed range %s..%s clamped to one day", start, end)
        return start, start
    return start, end


def enumerate_days(start: pendulum.Date, end: pendulum.Date) -> list[pendulum.Date]:
    """
    List every calendar day from start to end, both inclusive.

    Args:
        start: First day
        end: Last day (a value before start yields [start])

    Returns:
        Ordered list with at least one date
    """
    start, end = clamp_range(start, end)

    days = []
    current = start
    while current <= end:
        days.append(current)
        current = current.add(days=1)

    return days


def enumerate_weeks(start: pendulum.Date, end: pendulum.Date) -> list[WeekBucket]:
    """
    List the Monday-anchored weeks that overlap the range.

    A week belongs to the range when week_start <= end and week_end >= start,
    so the first and last buckets can reach outside [start, end]. Their
    clipped_start/clipped_end fields hold the part inside the range.

    Args:
        start: First day of the range
        end: Last day of the range

    Returns:
        Week buckets ordered by start date, labelled "W<ISO week number>"
    """
    start, end = clamp_range(start, end)

    weeks: list[WeekBucket] = []
    current = start.start_of("week")
    while current <= end:
        week_end = current.add(days=6)
        if current <= end and week_end >= start:
            week_number = current.week_of_year
            weeks.append(
                {
                    "label": f"W{week_number}",
                    "week_number": week_number,
                    "start": current,
                    "end": week_end,
                    "clipped_start": max(current, start),
                    "clipped_end": min(week_end, end),
                }
            )
        current = current.add(weeks=1)

    return weeks


def enumerate_months(start: pendulum.Date, end: pendulum.Date) -> list[MonthBucket]:
    """
    List the calendar months that overlap the range.

    Membership uses the full calendar extent of each month (first to last
    day); clipped_start/clipped_end restrict it to [start, end] for
    proportional header sizing.

    Args:
        start: First day of the range
        end: Last day of the range

    Returns:
        Month buckets labelled like "January 2024", with short labels like "Jan"
    """
    start, end = clamp_range(start, end)

    months: list[MonthBucket] = []
    current = start.start_of("month")
    while current <= end:
        month_end = current.end_of("month")
        if current <= end and month_end >= start:
            months.append(
                {
                    "label": current.format("MMMM YYYY"),
                    "short_label": current.format("MMM"),
                    "start": current,
                    "end": month_end,
                    "clipped_start": max(current, start),
                    "clipped_end": min(month_end, end),
                }
            )
        current = current.add(months=1)

    return months


def count_months(start: pendulum.Date, end: pendulum.Date) -> int:
    """Number of calendar months touched by the range, both ends inclusive."""
    start, end = clamp_range(start, end)
    return (end.year - start.year) * 12 + end.month - start.month + 1


def group_months_by_year(months: list[MonthBucket]) -> list[YearGroup]:
    """
    Group consecutive month buckets by calendar year.

    Args:
        months: Month buckets as returned by enumerate_months

    Returns:
        One group per year with the inclusive index range of its months
    """
    groups: list[YearGroup] = []
    for index, month in enumerate(months):
        year = month["start"].year
        if groups and groups[-1]["year"] == year:
            groups[-1]["end_index"] = index
            continue
        groups.append(
            {
                "label": str(year),
                "year": year,
                "start_index": index,
                "end_index": index,
            }
        )
    return groups
