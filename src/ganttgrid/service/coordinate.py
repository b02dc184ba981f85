# SPDX-License-Identifier: MIT

from bisect import bisect_left
from typing import Optional

import pendulum


def find_day_index(days: list[pendulum.Date], date: pendulum.Date) -> Optional[int]:
    """
    Find the index of the first day bucket on or after date.

    Args:
        days: Ordered day buckets of the axis
        date: The date to look up

    Returns:
        The index, or None when date is after the last day
    """
    index = bisect_left(days, date)
    if index >= len(days):
        return None
    return index


def day_index(days: list[pendulum.Date], date: pendulum.Date) -> int:
    """Like find_day_index, but dates past the end clamp to the last index."""
    index = find_day_index(days, date)
    if index is None:
        return max(0, len(days) - 1)
    return index


def date_to_percent(days: list[pendulum.Date], date: pendulum.Date) -> float:
    """
    Map a date to its horizontal offset on the day axis.

    Every visual layer (headers, intervals, milestones, current-day marker)
    goes through this function so that they share one coordinate system.

    Args:
        days: Ordered day buckets of the axis
        date: The date to place

    Returns:
        Offset in percent of the axis width, in [0, 100)
    """
    if not days:
        return 0.0
    return day_index(days, date) / len(days) * 100


def span_to_percent(
    days: list[pendulum.Date], start: pendulum.Date, end: pendulum.Date
) -> tuple[float, float]:
    """
    Map an inclusive day span to (left, width) percentages.

    The end day is included, so a span is never narrower than one day.
    """
    if not days:
        return 0.0, 0.0
    start_index = day_index(days, start)
    end_index = max(start_index, day_index(days, end))
    total = len(days)
    return start_index / total * 100, (end_index - start_index + 1) / total * 100
