# SPDX-License-Identifier: MIT

from typing import Optional

from tabnote.model.note import Note, NoteStatus
from tabnote.model.store import Schema

FIELD_DELIMITER = "\t"

_STATUS_MARKERS = {status.value: status for status in NoteStatus}


def next_field(line: str, position: int) -> tuple[Optional[str], int]:
    """
    Read the field that starts at position.

    Returns the field and the position just past its delimiter. Once position
    has moved past the end of the line, (None, position) is returned.
    """
    if position > len(line):
        return None, position
    end = line.find(FIELD_DELIMITER, position)
    if end == -1:
        return line[position:], len(line) + 1
    return line[position:end], end + 1


def rest_of_line(line: str, position: int) -> Optional[str]:
    """Everything from position to the end of the line, delimiters included."""
    if position > len(line):
        return None
    return line[position:]


def __parse_id(field: Optional[str]) -> Optional[int]:
    if field is None or not field.isascii() or not field.isdigit():
        return None
    note_id = int(field)
    if note_id < 1:
        return None
    return note_id


def __has_undecodable_bytes(line: str) -> bool:
    try:
        line.encode("utf-8")
    except UnicodeEncodeError:
        return True
    return False


def decode_line(line: str, schema: Schema) -> Optional[Note]:
    """
    Decode one record. Returns None when the line is not a usable record so
    callers can skip it and carry on.
    """
    if __has_undecodable_bytes(line):
        return None

    id_field, position = next_field(line, 0)
    note_id = __parse_id(id_field)
    if note_id is None:
        return None

    status: Optional[NoteStatus] = None
    if schema is Schema.MEMO:
        marker, position = next_field(line, position)
        if marker is None or marker not in _STATUS_MARKERS:
            return None
        status = _STATUS_MARKERS[marker]

    date, position = next_field(line, position)
    if not date:
        return None

    content = rest_of_line(line, position)
    if not content:
        return None

    return {
        "id": note_id,
        "status": status,
        "date": date,
        "content": content,
    }


def encode_note(note: Note) -> str:
    fields = [str(note["id"])]
    if note["status"] is not None:
        fields.append(note["status"].value)
    fields.append(note["date"])
    fields.append(note["content"])
    return FIELD_DELIMITER.join(fields)


def sanitize_content(text: str) -> str:
    """Flatten text to a single line that is safe to store as content."""
    flattened = text.replace("\r", "").replace("\n", "")
    return flattened.replace(FIELD_DELIMITER, " ").strip()
