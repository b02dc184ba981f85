# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from ganttgrid.view.state import get_show_header


def header(project_title: str, date_range: Optional[str] = None) -> None:
    """Print the ganttgrid banner followed by the project title and date range.

    Nothing is printed when the banner is switched off in the view state.
    """
    if not get_show_header():
        return

    print(Padding("[dark_orange]ganttgrid[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(f"[plum1]{project_title}[/plum1]", (0, 1)))
    if date_range is not None:
        print(Padding(f"[sandy_brown]{date_range}[/sandy_brown]", (0, 1)))
