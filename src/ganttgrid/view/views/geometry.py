# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional

import pendulum
from rich.console import Console
from rich.syntax import Syntax
from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from ganttgrid import time
from ganttgrid.model.geometry import Geometry


def geometry_to_serializable(value: Any) -> Any:
    """Recursively convert geometry values to plain YAML/JSON types (dates become ISO strings)."""
    if isinstance(value, pendulum.Date):
        return time.date_to_iso_str(value)
    if isinstance(value, dict):
        return {key: geometry_to_serializable(item) for key, item in value.items()}
    if isinstance(value, list):
        return [geometry_to_serializable(item) for item in value]
    return value


def geometry_to_yaml(geometry: Geometry) -> str:
    return dump(
        geometry_to_serializable(geometry),
        Dumper=Dumper,
        sort_keys=False,
        allow_unicode=True,
    )


def geometry_view(geometry: Geometry, output: Optional[Path] = None) -> None:
    """Print the geometry as YAML, or write it to output when given."""
    document = geometry_to_yaml(geometry)

    if output is not None:
        output.write_text(document)
        Console().print(f"[dim]Geometry written to {output}[/dim]")
        return

    Console().print(Syntax(document, "yaml"))
