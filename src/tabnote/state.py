# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

# None selects the memo store
_category: ContextVar[Optional[str]] = ContextVar("category", default=None)


def set_category(value: Optional[str]) -> None:
    _category.set(value)


def get_category() -> Optional[str]:
    return _category.get()
