# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated

import typer

from tabnote.errors import NoteNotFoundError, StoreIOError
from tabnote.repository.note import NoteRepository
from tabnote.service.html import render_html
from tabnote.terminal.error import handle_errors
from tabnote.terminal.store import current_store


@handle_errors
def export_html(
    path: Annotated[Path, typer.Argument(help="File to write the HTML page to")],
) -> None:
    """Write every note of the store to an HTML table."""
    store = current_store()
    notes = NoteRepository(store).get_all_notes()
    if len(notes) == 0:
        raise NoteNotFoundError("Nothing to export.")

    try:
        path.write_text(render_html(notes, f"tabnote: {store.label}"), encoding="utf-8")
    except OSError as e:
        raise StoreIOError(f"failed to write {path}: {e.strerror}") from e

    typer.echo(f"exported {len(notes)} notes to {path}", err=True)
