"""Per-invocation view settings held in context variables."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Set from config by initialize() and cleared by --no-header
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    """Toggle the ganttgrid banner printed above charts and tables.

    Args:
        value: False to print views without the banner
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()
