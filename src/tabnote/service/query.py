# SPDX-License-Identifier: MIT

import re
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Sequence, TypedDict

from tabnote.errors import MalformedInputError, StoreIOError
from tabnote.model.note import Note, NoteStatus
from tabnote.repository.reader import count_records, open_store
from tabnote.repository.store import is_category_name


class ListView(Enum):
    # everything except postponed notes
    DEFAULT = "default"
    UNDONE = "undone"
    POSTPONED = "postponed"
    ALL = "all"


class SearchResult(TypedDict):
    notes: list[Note]
    count: int


class DateGroup(TypedDict):
    date: str
    notes: list[Note]


class CategorySummary(TypedDict):
    name: str
    # None when the category file is empty
    count: Optional[int]


# POSIX bracket classes and their equivalents inside a Python character set
_POSIX_CLASSES = {
    "[:alpha:]": "a-zA-Z",
    "[:digit:]": "0-9",
    "[:alnum:]": "a-zA-Z0-9",
    "[:upper:]": "A-Z",
    "[:lower:]": "a-z",
    "[:space:]": r"\s",
    "[:blank:]": r" \t",
    "[:punct:]": r"!-/:-@\[-`{-~",
    "[:xdigit:]": "0-9A-Fa-f",
    "[:cntrl:]": r"\x00-\x1f\x7f",
    "[:print:]": r"\x20-\x7e",
    "[:graph:]": r"\x21-\x7e",
}


def __in_view(note: Note, view: ListView) -> bool:
    status = note["status"]
    match view:
        case ListView.ALL:
            return True
        case ListView.DEFAULT:
            return status is not NoteStatus.POSTPONED
        case ListView.UNDONE:
            return status is NoteStatus.UNDONE
        case ListView.POSTPONED:
            return status is NoteStatus.POSTPONED


def list_notes(notes: Iterable[Note], view: ListView = ListView.DEFAULT) -> list[Note]:
    return [note for note in notes if __in_view(note, view)]


def latest_notes(notes: Sequence[Note], n: int) -> list[Note]:
    """
    The last n notes, oldest first. A negative n, or one larger than the
    number of notes, selects every note.
    """
    total = len(notes)
    if n < 0 or n > total:
        return list(notes)
    start = total - n
    return [note for position, note in enumerate(notes) if position >= start]


def search_notes(notes: Iterable[Note], term: str) -> SearchResult:
    """Case-sensitive substring search over note content."""
    matches = [note for note in notes if term in note["content"]]
    return {"notes": matches, "count": len(matches)}


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """
    Compile a case-insensitive pattern. POSIX bracket classes such as
    [[:digit:]] are accepted alongside regular Python syntax.
    """
    translated = pattern
    for posix_class, replacement in _POSIX_CLASSES.items():
        translated = translated.replace(posix_class, replacement)
    try:
        return re.compile(translated, re.IGNORECASE)
    except re.error as e:
        raise MalformedInputError(f"invalid regular expression '{pattern}': {e}") from e


def search_notes_regex(notes: Iterable[Note], pattern: str) -> SearchResult:
    """
    Search note content with a regular expression.

    The pattern is compiled before the first note is read, so a bad pattern
    fails without scanning anything.
    """
    compiled = compile_pattern(pattern)
    matches: list[Note] = []
    for note in notes:
        if compiled.search(note["content"]) is not None:
            matches.append(note)
    return {"notes": matches, "count": len(matches)}


def group_by_date(notes: Iterable[Note]) -> list[DateGroup]:
    """
    Group notes under their dates. Dates appear in the order they are first
    seen and notes keep their file order within each date.
    """
    groups: dict[str, DateGroup] = {}
    for note in notes:
        group = groups.get(note["date"])
        if group is None:
            group = {"date": note["date"], "notes": []}
            groups[note["date"]] = group
        group["notes"].append(note)
    return list(groups.values())


def list_categories(directory: Path) -> list[CategorySummary]:
    """
    Summarise every category file in directory. Subdirectories, hidden files
    and rewrite leftovers are not categories.
    """
    if not directory.is_dir():
        return []

    summaries: list[CategorySummary] = []
    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise StoreIOError(f"failed to list {directory}: {e.strerror}") from e

    for entry in entries:
        if not entry.is_file() or not is_category_name(entry.name):
            continue
        handle = open_store(entry)
        count: Optional[int] = None
        if handle is not None:
            with handle:
                count = count_records(handle)
        summaries.append({"name": entry.name, "count": count})
    return summaries
