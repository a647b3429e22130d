# SPDX-License-Identifier: MIT

import functools
import logging
from typing import Callable, ParamSpec, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from tabnote.errors import TabnoteError

logger = logging.getLogger(__name__)

error_console = Console(stderr=True)

P = ParamSpec("P")
R = TypeVar("R")


def report_error(message: str) -> None:
    error_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)


def handle_errors(command: Callable[P, R]) -> Callable[P, R]:
    """
    Turn a TabnoteError raised by a command into a message on stderr and the
    exit code that belongs to the error.
    """

    @functools.wraps(command)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return command(*args, **kwargs)
        except TabnoteError as e:
            logger.debug("%s failed", command.__name__, exc_info=True)
            report_error(str(e))
            raise typer.Exit(int(e.exit_code)) from e

    return wrapper
