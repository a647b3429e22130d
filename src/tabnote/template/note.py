# SPDX-License-Identifier: MIT

from tabnote.model.note import Note, NoteStatus
from tabnote.model.store import StoreRef
from tabnote.time import today_local_date_str


def get_note_template(store: StoreRef) -> Note:
    return {
        "id": 0,
        "status": NoteStatus.UNDONE if store.tracks_status else None,
        "date": today_local_date_str(),
        "content": "",
    }
