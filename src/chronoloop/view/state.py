"""Global view state using context variables."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Context variable for controlling header visibility in reports
# Default is True (show headers)
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Context variable for controlling colored output in reports
# Default is True (use item colors)
_use_color_var: ContextVar[bool] = ContextVar("use_color", default=True)


def set_show_header(value: bool) -> None:
    """Set whether headers should be displayed in reports.

    Args:
        value: True to show headers, False to hide them
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    """Get whether headers should be displayed in reports.

    Returns:
        True if headers should be shown, False otherwise
    """
    return _show_header_var.get()


def set_use_color(value: bool) -> None:
    _use_color_var.set(value)


def get_use_color() -> bool:
    return _use_color_var.get()
