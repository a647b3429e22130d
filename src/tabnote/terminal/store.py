# SPDX-License-Identifier: MIT

from tabnote import state as app_state
from tabnote.configuration import resolve_category_path, resolve_store_path
from tabnote.model.store import StoreRef
from tabnote.repository.configuration import CONFIGURATION_REPO
from tabnote.repository.store import (
    category_store,
    ensure_category_directory,
    memo_store,
    validate_category_name,
)


def current_store() -> StoreRef:
    """The store selected by --category, or the memo store without it."""
    config = CONFIGURATION_REPO.get_config()
    category = app_state.get_category()
    if category is None:
        return memo_store(resolve_store_path(config))

    validate_category_name(category)
    directory = ensure_category_directory(resolve_category_path(config))
    return category_store(directory, category)
