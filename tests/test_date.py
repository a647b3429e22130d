# SPDX-License-Identifier: MIT

import pytest

from tabnote.errors import MalformedInputError
from tabnote.service.date import (
    canonical_date,
    days_in_month,
    is_leap_year,
    is_valid_date,
)


@pytest.mark.parametrize(
    "year, leap",
    [(2000, True), (1900, False), (2024, True), (2023, False), (2100, False)],
)
def test_leap_years(year: int, leap: bool) -> None:
    assert is_leap_year(year) is leap


def test_february_length() -> None:
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(2023, 12) == 31


@pytest.mark.parametrize("text", ["2024-02-29", "2000-02-29", "2014-11-01", "0000-01-01"])
def test_valid_dates(text: str) -> None:
    assert is_valid_date(text)


@pytest.mark.parametrize(
    "text",
    [
        "2023-02-29",
        "1900-02-29",
        "2014-13-01",
        "2014-00-10",
        "2014-04-31",
        "2014-11-00",
        "14-11-01",
        "2014-1-01",
        "2014-11-1",
        "2014/11/01",
        "2014-11-01x",
        "",
    ],
)
def test_invalid_dates(text: str) -> None:
    assert not is_valid_date(text, silent=True)


def test_invalid_date_is_logged_unless_silent(caplog: pytest.LogCaptureFixture) -> None:
    is_valid_date("2014-13-01", silent=True)
    assert caplog.records == []

    is_valid_date("2014-13-01")
    assert "invalid month" in caplog.text


def test_canonical_date() -> None:
    assert canonical_date("2014-11-01") == "2014-11-01"
    with pytest.raises(MalformedInputError, match="invalid day"):
        canonical_date("2014-02-30")
