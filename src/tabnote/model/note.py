# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Optional, TypedDict


class NoteStatus(Enum):
    """Lifecycle flag of a memo note. Values are the on-disk markers."""

    UNDONE = "U"
    DONE = "D"
    POSTPONED = "P"


class Note(TypedDict):
    id: int
    # None for notes kept in a category store
    status: Optional[NoteStatus]
    date: str
    content: str
