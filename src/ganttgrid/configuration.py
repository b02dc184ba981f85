# SPDX-License-Identifier: MIT

from typing import TypedDict

import platformdirs

from ganttgrid.model.granularity_type import Granularity

APP_NAME = "ganttgrid"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    show_header: bool
    default_granularity: Granularity
    show_current_day: bool
    row_height: int
    default_row_color: str
    interval_shade_percent: int
    auto_months_threshold: int
    left_column_width: int
