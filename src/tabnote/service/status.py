# SPDX-License-Identifier: MIT

from typing import Callable, TypeAlias

from tabnote.model.note import NoteStatus

Transition: TypeAlias = Callable[[NoteStatus], NoteStatus]


def mark_done(status: NoteStatus) -> NoteStatus:
    return NoteStatus.DONE


def mark_undone(status: NoteStatus) -> NoteStatus:
    return NoteStatus.UNDONE


def mark_postponed(status: NoteStatus) -> NoteStatus:
    """Only undone notes can be postponed; anything else stays as it is."""
    if status is NoteStatus.UNDONE:
        return NoteStatus.POSTPONED
    return status


def mark_all_done(status: NoteStatus) -> NoteStatus:
    """
    Bulk completion flips undone notes only. Postponed notes keep waiting
    and must be marked done one by one.
    """
    if status is NoteStatus.UNDONE:
        return NoteStatus.DONE
    return status
