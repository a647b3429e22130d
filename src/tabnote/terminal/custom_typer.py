# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose command names may list aliases, as in "add, a"."""

    _ALIAS_SEPARATOR = re.compile(r"\s*,\s*")

    def resolve_alias(self, name: str) -> str:
        """Registered name of the command that name is an alias of, or name itself"""
        for registered_name in self.commands:
            if name in self._ALIAS_SEPARATOR.split(registered_name):
                return registered_name
        return name

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_alias(cmd_name))

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        name = name or cmd.name or ""
        registered_name = self.resolve_alias(name)
        # name only repeats an alias of a command already in the group
        if registered_name != name and registered_name in self.commands:
            return
        super().add_command(cmd, name)


class OrderedTyperGroup(AliasedTyperGroup):
    """Lists commands by workflow instead of registration order in --help"""

    COMMAND_ORDER = (
        "add, a",
        "import, im",
        "list, l",
        "latest, la",
        "tree, t",
        "search, s",
        "regex, r",
        "done, d",
        "undone, u",
        "postpone, p",
        "all-done, ad",
        "purge-done, pd",
        "replace, re",
        "delete, del",
        "delete-all",
        "categories, cat",
        "export-html, x",
        "path",
        "config, c",
        "version, ve",
    )

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in self.COMMAND_ORDER if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
