# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from tabnote.repository.configuration import CONFIGURATION_REPO
from tabnote.service.note import (
    add_note,
    delete_all_notes,
    delete_done_notes,
    delete_note,
    mark_all_notes_done,
    mark_note,
    replace_note,
)
from tabnote.service.status import Transition, mark_done, mark_postponed, mark_undone
from tabnote.terminal.error import handle_errors
from tabnote.terminal.parse import (
    STDIN_MARKER,
    read_stdin_line,
    read_stdin_lines,
    split_trailing_date,
)
from tabnote.terminal.store import current_store
from tabnote.terminal.validate import validate_date, validate_note_id
from tabnote.view.note import single_note_report

NoteId = Annotated[
    int, typer.Argument(help="Id of the note", callback=validate_note_id)
]


@handle_errors
def add(
    content: Annotated[
        list[str],
        typer.Argument(
            help="Note text. A final YYYY-MM-DD word sets the date; '-' reads one line from stdin"
        ),
    ],
    date: Annotated[
        Optional[str],
        typer.Option(
            "--date",
            "-d",
            callback=validate_date,
            help="valid input: YYYY-MM-DD (default: today)",
        ),
    ] = None,
) -> None:
    """Add a note."""
    store = current_store()

    words = content
    if date is None:
        words, date = split_trailing_date(words)

    if words == [STDIN_MARKER]:
        text = read_stdin_line()
    else:
        text = " ".join(words)

    note = add_note(store, text, date)
    single_note_report(store.label, note)


@handle_errors
def import_notes(
    date: Annotated[
        Optional[str],
        typer.Option(
            "--date",
            "-d",
            callback=validate_date,
            help="valid input: YYYY-MM-DD (default: today)",
        ),
    ] = None,
) -> None:
    """Add one note for every non-blank line read from stdin."""
    store = current_store()

    lines = read_stdin_lines()
    for line in lines:
        add_note(store, line, date)

    typer.echo(f"imported {len(lines)} notes into {store.label}", err=True)


def __mark(note_id: int, transition: Transition) -> None:
    store = current_store()
    note = mark_note(store, note_id, transition)
    if note is None:
        typer.echo(
            f"note with id {note_id} not found in {store.label}, nothing changed",
            err=True,
        )
        return
    single_note_report(store.label, note)


@handle_errors
def done(note_id: NoteId) -> None:
    """Mark a note done."""
    __mark(note_id, mark_done)


@handle_errors
def undone(note_id: NoteId) -> None:
    """Mark a note undone."""
    __mark(note_id, mark_undone)


@handle_errors
def postpone(note_id: NoteId) -> None:
    """Postpone an undone note. Done notes stay done."""
    __mark(note_id, mark_postponed)


@handle_errors
def all_done() -> None:
    """Mark every undone note done. Postponed notes are left alone."""
    store = current_store()
    result = mark_all_notes_done(store)
    typer.echo(f"{result.changed} notes marked done", err=True)


@handle_errors
def purge_done() -> None:
    """Delete every done note."""
    store = current_store()
    result = delete_done_notes(store)
    typer.echo(f"{result.omitted} done notes removed from {store.label}", err=True)


@handle_errors
def delete(note_id: NoteId) -> None:
    """Delete a note."""
    store = current_store()
    delete_note(store, note_id)
    typer.echo(f"note {note_id} removed from {store.label}", err=True)


@handle_errors
def replace(
    note_id: NoteId,
    data: Annotated[
        list[str],
        typer.Argument(help="A YYYY-MM-DD date replaces the date, anything else the text"),
    ],
) -> None:
    """Replace the date or the text of a note."""
    store = current_store()
    note = replace_note(store, note_id, " ".join(data))
    single_note_report(store.label, note)


@handle_errors
def delete_all(
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")
    ] = False,
) -> None:
    """Delete the whole store."""
    store = current_store()
    if not store.path.is_file():
        typer.echo(f"Nothing to delete in {store.label}.", err=True)
        return

    config = CONFIGURATION_REPO.get_config()
    if config["confirm_delete"] and not yes:
        if not typer.confirm(f"Really delete every note in {store.label}?"):
            typer.echo("Nothing deleted.", err=True)
            return

    delete_all_notes(store)
    typer.echo(f"deleted {store.path}", err=True)
