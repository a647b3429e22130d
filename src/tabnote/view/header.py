# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.markup import escape
from rich.padding import Padding

from tabnote.view.state import get_show_header


def header(store_label: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the store being shown.

    Args:
        store_label: The category name, or "notes" for the memo store
        sub_header: Optional sub-header text to display
    """
    # Check if headers should be shown
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{escape(sub_header)}[/sandy_brown]"
    store_label = f"[plum1]{escape(store_label)}[/plum1]"

    print(Padding("[dark_orange]tabnote[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(store_label, (0, 1)))
