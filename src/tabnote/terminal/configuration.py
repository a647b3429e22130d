# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from tabnote import configuration
from tabnote.repository.configuration import CONFIGURATION_REPO, yaml_library_type
from tabnote.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    if log_level.upper() not in configuration.LOG_LEVELS:
        raise typer.BadParameter(
            f"Log level must be one of {', '.join(configuration.LOG_LEVELS)}"
        )
    return log_level.upper()


def __enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("store_path", config["store_path"] or "None")
    table.add_row("category_path", config["category_path"] or "None")
    table.add_row("confirm_delete", __enabled(config["confirm_delete"]))
    table.add_row("show_header", __enabled(config["show_header"]))
    table.add_row("plain_output", __enabled(config["plain_output"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("config_file", str(configuration.APP_CONFIG_PATH))

    console.print(table)

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type()}")


@app.command("set, s")
def set(
    store_path: Annotated[
        Optional[str],
        typer.Option("--store-path", help="File holding the memo notes"),
    ] = None,
    remove_store_path: Annotated[
        bool,
        typer.Option(
            "--remove-store-path",
            help="Reset store path to None (use the per-user data directory)",
        ),
    ] = False,
    category_path: Annotated[
        Optional[str],
        typer.Option("--category-path", help="Directory holding category files"),
    ] = None,
    remove_category_path: Annotated[
        bool,
        typer.Option(
            "--remove-category-path",
            help="Reset category path to None (use the per-user data directory)",
        ),
    ] = False,
    confirm_delete: Annotated[
        Optional[bool],
        typer.Option(
            "--confirm-delete/--no-confirm-delete",
            help="Ask before deleting a whole store",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show the header above reports",
        ),
    ] = None,
    plain_output: Annotated[
        Optional[bool],
        typer.Option(
            "--plain-output/--no-plain-output",
            help="Print raw tab-separated records instead of tables",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            callback=validate_log_level,
            help="valid inputs: DEBUG, INFO, WARNING, ERROR, CRITICAL",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    CONFIGURATION_REPO.update_config(
        store_path=store_path,
        remove_store_path=remove_store_path,
        category_path=category_path,
        remove_category_path=remove_category_path,
        confirm_delete=confirm_delete,
        show_header=show_header,
        plain_output=plain_output,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    typer.echo("Configuration updated")
