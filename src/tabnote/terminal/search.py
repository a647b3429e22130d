# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from tabnote.errors import NoteNotFoundError
from tabnote.repository.note import NoteRepository
from tabnote.service.query import SearchResult, search_notes, search_notes_regex
from tabnote.terminal.error import handle_errors
from tabnote.terminal.store import current_store
from tabnote.view.note import notes_view


def __show_results(label: str, query: str, result: SearchResult) -> None:
    if result["count"] == 0:
        raise NoteNotFoundError(f"no notes in {label} match '{query}'")
    notes_view(label, f"{result['count']} matches for '{query}'", result["notes"])


@handle_errors
def search(
    term: Annotated[str, typer.Argument(help="Text to look for (case-sensitive)")],
) -> None:
    """Find notes whose text contains a term."""
    store = current_store()
    result = search_notes(NoteRepository(store).iter_notes(), term)
    __show_results(store.label, term, result)


@handle_errors
def regex(
    pattern: Annotated[
        str,
        typer.Argument(help="Case-insensitive regular expression; [[:alpha:]] style classes work"),
    ],
) -> None:
    """Find notes whose text matches a regular expression."""
    store = current_store()
    result = search_notes_regex(NoteRepository(store).iter_notes(), pattern)
    __show_results(store.label, pattern, result)
