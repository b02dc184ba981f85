# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.padding import Padding
from rich.text import Text

from ganttgrid.model.geometry import CategoryLegendEntry


def category_legend_view(categories: list[CategoryLegendEntry]) -> None:
    if not categories:
        return

    legend = Text("Categories: ", style="bold")
    for index, category in enumerate(categories):
        if index > 0:
            legend.append("  ")
        legend.append("■ ", style=category["color"])
        legend.append(category["label"])

    Console().print(Padding(legend, (0, 0, 1, 0)))
