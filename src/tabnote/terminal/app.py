# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from tabnote import state as app_state
from tabnote.initialize import initialize
from tabnote.terminal import configuration, export, note, search, view
from tabnote.terminal.custom_typer import OrderedTyperGroup
from tabnote.terminal.error import handle_errors
from tabnote.terminal.version import version
from tabnote.view import state as view_state

app = typer.Typer(
    cls=OrderedTyperGroup,
    help="tabnote - Notes in a tab-separated file",
    no_args_is_help=True,
)
app.command(name="add, a")(note.add)
app.command(name="import, im")(note.import_notes)
app.command(name="list, l")(view.list_)
# negative counts such as -1 must reach the argument instead of the option parser
app.command(
    name="latest, la", context_settings={"ignore_unknown_options": True}
)(view.latest)
app.command(name="tree, t")(view.tree)
app.command(name="search, s")(search.search)
app.command(name="regex, r")(search.regex)
app.command(name="done, d")(note.done)
app.command(name="undone, u")(note.undone)
app.command(name="postpone, p")(note.postpone)
app.command(name="all-done, ad")(note.all_done)
app.command(name="purge-done, pd")(note.purge_done)
app.command(name="replace, re")(note.replace)
app.command(name="delete, del")(note.delete)
app.command(name="delete-all")(note.delete_all)
app.command(name="categories, cat")(view.categories)
app.command(name="export-html, x")(export.export_html)
app.command(name="path")(view.path)
app.add_typer(configuration.app, name="config, c")
app.command(name="version, ve")(version)


@app.callback()
@handle_errors
def main_callback(
    category: Annotated[
        Optional[str],
        typer.Option(
            "--category",
            "-c",
            help="Work on a category store instead of the memo store",
        ),
    ] = None,
    plain: Annotated[
        bool,
        typer.Option("--plain", help="Print raw tab-separated records"),
    ] = False,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """
    tabnote - Notes in a tab-separated file

    Global options that apply to all commands.
    """
    initialize(verbose)

    app_state.set_category(category)
    if plain:
        view_state.set_plain_output(True)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
