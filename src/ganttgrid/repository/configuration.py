# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from ganttgrid import configuration
from ganttgrid.model.granularity_type import Granularity
from ganttgrid.template.configuration import get_configuration_template


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Migration: add settings introduced after the file was written
        for key, value in get_configuration_template().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reload(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        default_granularity: Optional[Granularity] = None,
        show_current_day: Optional[bool] = None,
        row_height: Optional[int] = None,
        default_row_color: Optional[str] = None,
        interval_shade_percent: Optional[int] = None,
        auto_months_threshold: Optional[int] = None,
        left_column_width: Optional[int] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if default_granularity is not None:
            self.config["default_granularity"] = default_granularity
        if show_current_day is not None:
            self.config["show_current_day"] = show_current_day
        if row_height is not None:
            self.config["row_height"] = row_height
        if default_row_color is not None:
            self.config["default_row_color"] = default_row_color
        if interval_shade_percent is not None:
            self.config["interval_shade_percent"] = interval_shade_percent
        if auto_months_threshold is not None:
            self.config["auto_months_threshold"] = auto_months_threshold
        if left_column_width is not None:
            self.config["left_column_width"] = left_column_width


CONFIGURATION_REPO = ConfigurationRepository()
