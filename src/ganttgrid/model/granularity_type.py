# SPDX-License-Identifier: MIT

from typing import Literal

Granularity = Literal["weeks", "intervals", "months"]

GRANULARITIES: tuple[Granularity, ...] = ("weeks", "intervals", "months")
