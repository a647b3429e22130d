# SPDX-License-Identifier: MIT

import logging
import os
from typing import Iterator, Optional

from tabnote.errors import MalformedInputError, StoreIOError
from tabnote.model.note import Note
from tabnote.model.store import StoreRef
from tabnote.repository.reader import (
    STORE_ENCODING,
    STORE_ERRORS,
    count_records,
    iter_notes,
    open_store,
)
from tabnote.repository.record import encode_note, sanitize_content
from tabnote.repository.rewrite import NoteTransform, RewriteResult, rewrite_store
from tabnote.template.note import get_note_template

logger = logging.getLogger(__name__)

STORE_FILE_MODE = 0o600


class NoteRepository:
    def __init__(self, store: StoreRef) -> None:
        self.store = store

    def iter_notes(self) -> Iterator[Note]:
        return iter_notes(self.store.path, self.store.schema)

    def get_all_notes(self) -> list[Note]:
        return list(self.iter_notes())

    def count_notes(self) -> Optional[int]:
        """Number of notes, or None when the store is empty or missing."""
        handle = open_store(self.store.path)
        if handle is None:
            return None
        with handle:
            return count_records(handle)

    def next_id(self) -> int:
        """
        Id for the next note: one past the id of the last readable note in
        file order, or 1 for an empty store.
        """
        last_id = 0
        for note in self.iter_notes():
            last_id = note["id"]
        logger.debug("next id for %s is %d", self.store.path, last_id + 1)
        return last_id + 1

    def save_new_note(self, content: str, date: Optional[str] = None) -> Note:
        """
        Append a note. content is flattened to one line first; date must
        already be validated and defaults to today.
        """
        clean_content = sanitize_content(content)
        if clean_content == "":
            raise MalformedInputError("refusing to add an empty note")

        note = get_note_template(self.store)
        note["id"] = self.next_id()
        note["content"] = clean_content
        if date is not None:
            note["date"] = date

        self.__append_line(encode_note(note))
        return note

    def rewrite(
        self, transform: NoteTransform, require_match: bool = False
    ) -> RewriteResult:
        return rewrite_store(
            self.store.path, self.store.schema, transform, require_match=require_match
        )

    def delete_store(self) -> bool:
        """Remove the whole store file. Returns False if there was nothing to remove."""
        try:
            self.store.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StoreIOError(
                f"failed to remove {self.store.path}: {e.strerror}"
            ) from e
        return True

    def __needs_leading_newline(self) -> bool:
        path = self.store.path
        if not path.is_file() or path.stat().st_size == 0:
            return False
        with path.open("rb") as handle:
            handle.seek(-1, os.SEEK_END)
            return handle.read(1) != b"\n"

    def __append_line(self, line: str) -> None:
        path = self.store.path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            prefix = "\n" if self.__needs_leading_newline() else ""
            fd = os.open(path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, STORE_FILE_MODE)
            with os.fdopen(
                fd, "a", encoding=STORE_ENCODING, errors=STORE_ERRORS, newline="\n"
            ) as handle:
                handle.write(prefix + line + "\n")
        except OSError as e:
            raise StoreIOError(f"failed to append to {path}: {e.strerror}") from e
