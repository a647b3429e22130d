# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from tabnote.service.date import DATE_FORMAT, canonical_date, is_valid_date


def validate_date(date: Optional[str]) -> Optional[str]:
    if date is None:
        return None
    if not is_valid_date(date, silent=True):
        raise typer.BadParameter(f"'{date}' is not a valid {DATE_FORMAT} date")
    return canonical_date(date)


def validate_note_id(note_id: int) -> int:
    if note_id < 1:
        raise typer.BadParameter("Note ids start at 1")
    return note_id
