# SPDX-License-Identifier: MIT

import pendulum


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def today_local_date_str() -> str:
    """Today's date in the local timezone in 'YYYY-MM-DD' format."""
    return today_local().to_date_string()


def date_to_display_str(year: int, month: int, day: int) -> str:
    """Render a calendar date as 'YYYY-MM-DD ddd' for headings."""
    return pendulum.date(year, month, day).format("YYYY-MM-DD ddd")
