# SPDX-License-Identifier: MIT

import logging
import math
import re
from typing import Optional

logger = logging.getLogger(__name__)

# Neutral background used for tasks without a color
DEFAULT_ROW_COLOR = "#e5e7eb"

# Interval fills are the row color darkened by this percentage
INTERVAL_SHADE_PERCENT = -30

# Marker colors for the terminal view (Rich color names)
CURRENT_DAY_COLOR = "red"
MILESTONE_COLOR = "yellow"

_HEX_COLOR_P = re.compile(r"^#?[0-9a-fA-F]{6}$")


def is_hex_color(value: Optional[str]) -> bool:
    return isinstance(value, str) and _HEX_COLOR_P.match(value.strip()) is not None


def normalize_hex_color(value: Optional[str], default: str = DEFAULT_ROW_COLOR) -> str:
    """Return value as a lowercase '#rrggbb' string, or default if value is not a 24-bit hex color."""
    if not is_hex_color(value):
        if value is not None:
            logger.debug("Invalid color %r replaced by %s", value, default)
        return default
    assert value is not None
    return "#" + value.strip().lstrip("#").lower()


def shade(hex_color: str, percent: float) -> str:
    """Shift every RGB channel of hex_color by percent of the full 0-255 range.

    Negative percentages darken, positive ones lighten. Each channel is clamped
    to [0, 255]. A malformed color is shaded from DEFAULT_ROW_COLOR instead.
    """
    value = int(normalize_hex_color(hex_color)[1:], 16)
    amount = math.floor(percent * 2.55 + 0.5)

    red = min(255, max(0, (value >> 16) + amount))
    green = min(255, max(0, ((value >> 8) & 0xFF) + amount))
    blue = min(255, max(0, (value & 0xFF) + amount))

    return f"#{red:02x}{green:02x}{blue:02x}"
