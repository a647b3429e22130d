# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from tabnote.configuration import resolve_category_path
from tabnote.errors import MalformedInputError, NoteNotFoundError
from tabnote.repository.configuration import CONFIGURATION_REPO
from tabnote.repository.note import NoteRepository
from tabnote.service.query import (
    ListView,
    group_by_date,
    latest_notes,
    list_categories,
    list_notes,
)
from tabnote.terminal.error import handle_errors
from tabnote.terminal.store import current_store
from tabnote.view.note import categories_view, notes_tree_view, notes_view


@handle_errors
def list_(
    undone: Annotated[
        bool, typer.Option("--undone", "-u", help="Only undone notes")
    ] = False,
    postponed: Annotated[
        bool, typer.Option("--postponed", "-p", help="Only postponed notes")
    ] = False,
    show_all: Annotated[
        bool, typer.Option("--all", "-a", help="Include postponed notes")
    ] = False,
) -> None:
    """List notes. Postponed notes are hidden unless asked for."""
    if sum([undone, postponed, show_all]) > 1:
        raise typer.BadParameter("use only one of --undone, --postponed and --all")

    view = ListView.DEFAULT
    if undone:
        view = ListView.UNDONE
    elif postponed:
        view = ListView.POSTPONED
    elif show_all:
        view = ListView.ALL

    store = current_store()
    if not store.tracks_status and view in (ListView.UNDONE, ListView.POSTPONED):
        raise MalformedInputError(
            f"category '{store.label}' does not track note status"
        )

    notes = list_notes(NoteRepository(store).iter_notes(), view)
    notes_view(store.label, view.value, notes)


@handle_errors
def latest(
    count: Annotated[
        int, typer.Argument(help="Number of notes to show; a negative number shows all")
    ],
) -> None:
    """Show the most recently added notes."""
    store = current_store()
    notes = latest_notes(NoteRepository(store).get_all_notes(), count)
    notes_view(store.label, f"latest {count}", notes)


@handle_errors
def tree() -> None:
    """Show notes grouped by date."""
    store = current_store()
    groups = group_by_date(NoteRepository(store).iter_notes())
    notes_tree_view(store.label, groups)


@handle_errors
def categories() -> None:
    """List categories and how many notes each one holds."""
    config = CONFIGURATION_REPO.get_config()
    summaries = list_categories(resolve_category_path(config))
    if len(summaries) == 0:
        raise NoteNotFoundError("no categories found")
    categories_view(summaries)


@handle_errors
def path(
    show_categories: Annotated[
        bool,
        typer.Option("--categories", help="Show the category directory instead"),
    ] = False,
) -> None:
    """Print the path of the selected store."""
    if show_categories:
        config = CONFIGURATION_REPO.get_config()
        typer.echo(str(resolve_category_path(config)))
        return
    typer.echo(str(current_store().path))
