# SPDX-License-Identifier: MIT

from ganttgrid.color import DEFAULT_ROW_COLOR, INTERVAL_SHADE_PERCENT
from ganttgrid.configuration import Configuration
from ganttgrid.service.geometry import AUTO_MONTHS_THRESHOLD
from ganttgrid.service.milestone import DEFAULT_ROW_HEIGHT


def get_configuration_template() -> Configuration:
    return {
        "show_header": True,
        "default_granularity": "weeks",
        "show_current_day": False,
        "row_height": DEFAULT_ROW_HEIGHT,
        "default_row_color": DEFAULT_ROW_COLOR,
        "interval_shade_percent": INTERVAL_SHADE_PERCENT,
        "auto_months_threshold": AUTO_MONTHS_THRESHOLD,
        "left_column_width": 30,
    }
