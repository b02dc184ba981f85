# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class WeekBucket(TypedDict):
    label: str
    week_number: int
    start: pendulum.Date
    end: pendulum.Date
    clipped_start: pendulum.Date
    clipped_end: pendulum.Date


class MonthBucket(TypedDict):
    label: str
    short_label: str
    start: pendulum.Date
    end: pendulum.Date
    clipped_start: pendulum.Date
    clipped_end: pendulum.Date


class YearGroup(TypedDict):
    label: str
    year: int
    start_index: int
    end_index: int
