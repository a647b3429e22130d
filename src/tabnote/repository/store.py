# SPDX-License-Identifier: MIT

import os
from pathlib import Path

from tabnote.errors import MalformedInputError, StoreIOError
from tabnote.model.store import Schema, StoreRef
from tabnote.repository.rewrite import TEMP_SUFFIX

CATEGORY_DIRECTORY_MODE = 0o700


def is_category_name(name: str) -> bool:
    """
    Category names double as file names, so they must be plain, visible and
    distinguishable from rewrite leftovers.
    """
    if name == "" or name.startswith("."):
        return False
    if os.sep in name or (os.altsep is not None and os.altsep in name):
        return False
    return not name.endswith(TEMP_SUFFIX)


def validate_category_name(name: str) -> str:
    if not is_category_name(name):
        raise MalformedInputError(
            f"invalid category name '{name}': use a plain file name that does "
            f"not start with '.' or end with '{TEMP_SUFFIX}'"
        )
    return name


def ensure_category_directory(directory: Path) -> Path:
    """Create the category directory if needed and keep it private to the owner."""
    try:
        directory.mkdir(mode=CATEGORY_DIRECTORY_MODE, parents=True, exist_ok=True)
        directory.chmod(CATEGORY_DIRECTORY_MODE)
    except OSError as e:
        raise StoreIOError(
            f"failed to prepare category directory {directory}: {e.strerror}"
        ) from e
    return directory


def category_store(directory: Path, name: str) -> StoreRef:
    validate_category_name(name)
    return StoreRef(path=directory / name, schema=Schema.CATEGORY, category=name)


def memo_store(path: Path) -> StoreRef:
    return StoreRef(path=path, schema=Schema.MEMO)
