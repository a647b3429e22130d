# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Iterator, Optional, TextIO

from tabnote.errors import StoreIOError
from tabnote.model.note import Note
from tabnote.model.store import Schema
from tabnote.repository.record import decode_line

logger = logging.getLogger(__name__)

STORE_ENCODING = "utf-8"
# Undecodable bytes become lone surrogates so they can be written back unchanged
STORE_ERRORS = "surrogateescape"


def open_store(path: Path) -> Optional[TextIO]:
    """
    Open a store for reading. A missing store is not an error: None is
    returned and callers treat it as empty.
    """
    try:
        return path.open(
            "r", encoding=STORE_ENCODING, errors=STORE_ERRORS, newline="\n"
        )
    except FileNotFoundError:
        return None
    except OSError as e:
        raise StoreIOError(f"failed to open {path}: {e.strerror}") from e


def is_blank(line: str) -> bool:
    return line.strip() == ""


def count_records(handle: TextIO) -> Optional[int]:
    """
    Count the records in an open store and rewind it.

    Returns None when the store holds no newline at all (empty). Otherwise
    returns the number of non-blank lines, so a store holding a single
    trailing blank line has zero notes.
    """
    newlines = 0
    records = 0
    for raw_line in handle:
        if raw_line.endswith("\n"):
            newlines += 1
        if not is_blank(raw_line):
            records += 1
    handle.seek(0)

    if newlines == 0:
        return None
    return records


def read_next(handle: TextIO) -> Optional[str]:
    """Return the next raw line without its newline, or None at end of stream."""
    raw_line = handle.readline()
    if raw_line == "":
        return None
    return raw_line.removesuffix("\n")


def iter_lines(handle: TextIO) -> Iterator[str]:
    while True:
        line = read_next(handle)
        if line is None:
            return
        yield line


def iter_notes(path: Path, schema: Schema) -> Iterator[Note]:
    """
    Stream the decoded notes of a store in file order.

    Blank lines are ignored. Lines that do not decode are reported and
    skipped so a partly corrupt store can still be read.
    """
    handle = open_store(path)
    if handle is None:
        return
    try:
        with handle:
            for line_number, line in enumerate(iter_lines(handle), start=1):
                if is_blank(line):
                    continue
                note = decode_line(line, schema)
                if note is None:
                    logger.warning(
                        "skipping malformed record on line %d of %s", line_number, path
                    )
                    continue
                yield note
    except OSError as e:
        raise StoreIOError(f"failed to read {path}: {e.strerror}") from e


def read_notes(path: Path, schema: Schema) -> list[Note]:
    return list(iter_notes(path, schema))
