# SPDX-License-Identifier: MIT

import html
from typing import Iterable

from tabnote.model.note import Note


def render_html(notes: Iterable[Note], title: str) -> str:
    """
    Render notes as a standalone HTML page with one table row per note.

    A status column is included when the notes carry a status.
    """
    note_list = list(notes)
    with_status = any(note["status"] is not None for note in note_list)
    escaped_title = html.escape(title)

    header_cells = ["id"]
    if with_status:
        header_cells.append("status")
    header_cells += ["date", "content"]

    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '<meta charset="UTF-8">',
        f"<title>{escaped_title}</title>",
        "<style>td{font-family: monospace; white-space: pre;}</style>",
        "</head>",
        "<body>",
        f"<h1>{escaped_title}</h1>",
        "<table>",
        "<tr>" + "".join(f"<th>{cell}</th>" for cell in header_cells) + "</tr>",
    ]

    for note in note_list:
        cells = [str(note["id"])]
        if with_status:
            cells.append(note["status"].name.lower() if note["status"] else "")
        cells += [note["date"], note["content"]]
        lines.append(
            "<tr>" + "".join(f"<td>{html.escape(cell)}</td>" for cell in cells) + "</tr>"
        )

    lines += ["</table>", "</body>", "</html>"]
    return "\n".join(lines) + "\n"
