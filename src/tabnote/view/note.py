# SPDX-License-Identifier: MIT

from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from tabnote.model.note import Note, NoteStatus
from tabnote.repository.record import encode_note
from tabnote.service.date import split_date
from tabnote.service.query import CategorySummary, DateGroup
from tabnote.time import date_to_display_str
from tabnote.view.header import header
from tabnote.view.state import get_plain_output

STATUS_STYLES = {
    NoteStatus.UNDONE: "white",
    NoteStatus.DONE: "green",
    NoteStatus.POSTPONED: "yellow",
}


def status_label(status: Optional[NoteStatus]) -> str:
    if status is None:
        return ""
    style = STATUS_STYLES[status]
    return f"[{style}]{status.name.lower()}[/{style}]"


def display_date(date: str) -> str:
    parts = split_date(date)
    # Stored dates are not validated on read, so fall back to the raw text
    if parts is None or parts[0] < 1:
        return date
    try:
        return date_to_display_str(*parts)
    except ValueError:
        return date


def notes_view(store_label: str, report_name: str, notes: list[Note]) -> None:
    if get_plain_output():
        for note in notes:
            typer.echo(encode_note(note))
        return

    header(store_label, report_name)

    with_status = any(note["status"] is not None for note in notes)

    notes_table = Table(box=box.SIMPLE)
    notes_table.add_column("id", justify="right")
    if with_status:
        notes_table.add_column("status")
    notes_table.add_column("date")
    notes_table.add_column("content")

    for note in notes:
        row = [str(note["id"])]
        if with_status:
            row.append(status_label(note["status"]))
        row.append(note["date"])
        row.append(escape(note["content"]))
        notes_table.add_row(*row)

    console = Console()
    console.print(notes_table)


def single_note_report(store_label: str, note: Note) -> None:
    if get_plain_output():
        typer.echo(encode_note(note))
        return

    header(store_label, "note")

    note_table = Table(box=box.SIMPLE)
    note_table.add_column("property")
    note_table.add_column("value")

    note_table.add_row("id", str(note["id"]))
    if note["status"] is not None:
        note_table.add_row("status", status_label(note["status"]))
    note_table.add_row("date", display_date(note["date"]))
    note_table.add_row("content", escape(note["content"]))

    console = Console()
    console.print(note_table)


def notes_tree_view(store_label: str, groups: list[DateGroup]) -> None:
    """
    Show notes under one heading per date. Dates keep the order in which they
    first appear in the store.
    """
    if get_plain_output():
        for group in groups:
            typer.echo(group["date"])
            for note in group["notes"]:
                fields = [str(note["id"])]
                if note["status"] is not None:
                    fields.append(note["status"].value)
                fields.append(note["content"])
                typer.echo("\t" + "\t".join(fields))
        return

    header(store_label, "tree")

    tree = Tree(f"[plum1]{escape(store_label)}[/plum1]", guide_style="grey50")
    for group in groups:
        branch = tree.add(f"[bold]{escape(display_date(group['date']))}[/bold]")
        for note in group["notes"]:
            label = f"[cyan]{note['id']}[/cyan] "
            if note["status"] is not None:
                label += f"{status_label(note['status'])} "
            branch.add(label + escape(note["content"]))

    console = Console()
    console.print(tree)


def __count_label(count: Optional[int]) -> str:
    if count is None:
        return "empty"
    return f"{count} note" if count == 1 else f"{count} notes"


def categories_view(categories: list[CategorySummary]) -> None:
    if get_plain_output():
        for category in categories:
            typer.echo(f"{category['name']} ({__count_label(category['count'])})")
        return

    header("categories")

    categories_table = Table(box=box.SIMPLE)
    categories_table.add_column("category")
    categories_table.add_column("notes", justify="right")

    for category in categories:
        count = category["count"]
        categories_table.add_row(
            escape(category["name"]),
            "[grey50]empty[/grey50]" if count is None else str(count),
        )

    console = Console()
    console.print(categories_table)
