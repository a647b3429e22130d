# SPDX-License-Identifier: MIT

import logging
import re
from typing import Optional

from tabnote.errors import MalformedInputError

logger = logging.getLogger(__name__)

DATE_FORMAT = "yyyy-MM-dd"

_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)

# days in each month from january to december
_DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 400 == 0 or (year % 100 != 0 and year % 4 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_PER_MONTH[month - 1]


def split_date(text: str) -> Optional[tuple[int, int, int]]:
    """
    Split a yyyy-MM-dd string into (year, month, day).

    Only the shape is checked here; None means the text is not three digit
    groups of widths 4, 2 and 2.
    """
    match = _DATE_PATTERN.fullmatch(text)
    if match is None:
        return None
    year, month, day = (int(group) for group in match.groups())
    return year, month, day


def __date_problem(text: str) -> Optional[str]:
    parts = split_date(text)
    if parts is None:
        return "invalid date format"
    year, month, day = parts
    if not 1 <= month <= 12:
        return "invalid month"
    if not 1 <= day <= days_in_month(year, month):
        return "invalid day"
    return None


def is_valid_date(text: str, silent: bool = False) -> bool:
    """
    Check that text is a real calendar date written as yyyy-MM-dd.

    With silent set nothing is reported, which is what callers want when they
    are only probing whether an argument might be a date.
    """
    problem = __date_problem(text)
    if problem is None:
        return True
    if not silent:
        logger.warning("%s: %r (expected %s)", problem, text, DATE_FORMAT)
    return False


def canonical_date(text: str) -> str:
    problem = __date_problem(text)
    if problem is not None:
        raise MalformedInputError(f"{problem}: '{text}' (expected {DATE_FORMAT})")
    year, month, day = split_date(text)  # type: ignore[misc]
    return f"{year:04d}-{month:02d}-{day:02d}"
