# SPDX-License-Identifier: MIT

"""Rendering state held in context variables."""

from contextvars import ContextVar

# Context variable for controlling header visibility
# Default is True (show headers)
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Context variable for controlling text wrapping in table columns
_no_wrap_var: ContextVar[bool] = ContextVar("no_wrap", default=False)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_no_wrap(value: bool) -> None:
    """Set whether text wrapping should be disabled in table columns.

    Args:
        value: True to disable wrapping, False to allow wrapping
    """
    _no_wrap_var.set(value)


def get_no_wrap() -> bool:
    return _no_wrap_var.get()
