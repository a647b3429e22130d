# SPDX-License-Identifier: MIT

import sys
from typing import Optional

from tabnote.service.date import is_valid_date

STDIN_MARKER = "-"


def read_stdin_line() -> str:
    """First line of standard input without its line ending."""
    return sys.stdin.readline().rstrip("\r\n")


def read_stdin_lines() -> list[str]:
    """Every non-blank line of standard input."""
    return [line.rstrip("\r\n") for line in sys.stdin if line.strip() != ""]


def split_trailing_date(words: list[str]) -> tuple[list[str], Optional[str]]:
    """
    Split off a final word that reads as a date. A single word is always
    content, so "tabnote add 2024-01-01" stores the date as a note.
    """
    if len(words) > 1 and is_valid_date(words[-1], silent=True):
        return words[:-1], words[-1]
    return words, None
