"""Output settings held in context variables for the duration of one command."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Whether reports start with the tabnote header
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Whether reports print raw tab-separated records instead of rich tables
_plain_output_var: ContextVar[bool] = ContextVar("plain_output", default=False)


def set_show_header(value: bool) -> None:
    """Turn the report header on or off.

    Args:
        value: False to print reports without the header
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    """True unless the header was turned off by config or --no-header."""
    return _show_header_var.get()


def set_plain_output(value: bool) -> None:
    """Switch reports between rich tables and raw records.

    Args:
        value: True for raw records, False for tables
    """
    _plain_output_var.set(value)


def get_plain_output() -> bool:
    return _plain_output_var.get()
