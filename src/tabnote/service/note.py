# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Optional

from tabnote.errors import MalformedInputError, NoteNotFoundError
from tabnote.model.note import Note, NoteStatus
from tabnote.model.store import StoreRef
from tabnote.repository.note import NoteRepository
from tabnote.repository.record import sanitize_content
from tabnote.repository.rewrite import NoteTransform, RewriteResult
from tabnote.service.date import canonical_date, is_valid_date
from tabnote.service.status import Transition, mark_all_done

logger = logging.getLogger(__name__)


def has_id(note_id: int) -> Callable[[Note], bool]:
    def matches(note: Note) -> bool:
        return note["id"] == note_id

    return matches


def has_status(status: NoteStatus) -> Callable[[Note], bool]:
    def matches(note: Note) -> bool:
        return note["status"] is status

    return matches


def status_transform(note_id: int, transition: Transition) -> NoteTransform:
    def apply(note: Note) -> Note:
        if note["status"] is not None:
            note["status"] = transition(note["status"])
        return note

    return NoteTransform(
        apply=apply,
        matches=has_id(note_id),
        description=f"{transition.__name__} {note_id}",
    )


def all_done_transform() -> NoteTransform:
    def apply(note: Note) -> Note:
        if note["status"] is not None:
            note["status"] = mark_all_done(note["status"])
        return note

    return NoteTransform(apply=apply, description="mark all done")


def delete_transform(note_id: int) -> NoteTransform:
    return NoteTransform(
        apply=lambda note: None,
        matches=has_id(note_id),
        description=f"delete {note_id}",
    )


def delete_done_transform() -> NoteTransform:
    return NoteTransform(
        apply=lambda note: None,
        matches=has_status(NoteStatus.DONE),
        description="delete done",
    )


def replace_transform(note_id: int, data: str) -> NoteTransform:
    """
    Replace the date of a note when data reads as a date, otherwise its
    content. The decision is made once, before any note is touched.
    """
    if is_valid_date(data, silent=True):
        new_date = canonical_date(data)

        def apply(note: Note) -> Note:
            note["date"] = new_date
            return note

        return NoteTransform(
            apply=apply, matches=has_id(note_id), description=f"replace date {note_id}"
        )

    new_content = sanitize_content(data)
    if new_content == "":
        raise MalformedInputError("replacement content is empty")

    def apply_content(note: Note) -> Note:
        note["content"] = new_content
        return note

    return NoteTransform(
        apply=apply_content,
        matches=has_id(note_id),
        description=f"replace content {note_id}",
    )


def __require_status(store: StoreRef) -> None:
    if not store.tracks_status:
        raise MalformedInputError(
            f"category '{store.label}' does not track note status"
        )


def add_note(store: StoreRef, content: str, date: Optional[str] = None) -> Note:
    """
    Add a note to a store.

    Args:
        store: Store to append to
        content: Note text, flattened to a single line before storing
        date: Optional yyyy-MM-dd date; today when omitted

    Returns:
        The stored note with its new id
    """
    note_date = canonical_date(date) if date is not None else None
    note = NoteRepository(store).save_new_note(content, note_date)
    logger.debug("added note %d to %s", note["id"], store.path)
    return note


def mark_note(store: StoreRef, note_id: int, transition: Transition) -> Optional[Note]:
    """
    Apply a status transition to one note.

    An unknown id is not an error: the store is rewritten unchanged and None
    is returned.
    """
    __require_status(store)
    result = NoteRepository(store).rewrite(status_transform(note_id, transition))
    if result.matched == 0:
        logger.info("no note with id %d in %s, nothing changed", note_id, store.path)
        return None
    return result.applied[0]


def mark_all_notes_done(store: StoreRef) -> RewriteResult:
    __require_status(store)
    return NoteRepository(store).rewrite(all_done_transform())


def delete_done_notes(store: StoreRef) -> RewriteResult:
    __require_status(store)
    return NoteRepository(store).rewrite(delete_done_transform())


def delete_note(store: StoreRef, note_id: int) -> None:
    try:
        NoteRepository(store).rewrite(delete_transform(note_id), require_match=True)
    except NoteNotFoundError:
        raise NoteNotFoundError(
            f"note with id {note_id} not found in {store.label}"
        ) from None


def replace_note(store: StoreRef, note_id: int, data: str) -> Note:
    transform = replace_transform(note_id, data)
    try:
        result = NoteRepository(store).rewrite(transform, require_match=True)
    except NoteNotFoundError:
        raise NoteNotFoundError(
            f"note with id {note_id} not found in {store.label}"
        ) from None
    return result.applied[0]


def delete_all_notes(store: StoreRef) -> bool:
    return NoteRepository(store).delete_store()
