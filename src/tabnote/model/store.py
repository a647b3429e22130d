# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class Schema(Enum):
    # id, status, date, content
    MEMO = "memo"
    # id, date, content
    CATEGORY = "category"


@dataclass(frozen=True)
class StoreRef:
    """
    Selects one store on disk.

    The memo store is a single file whose notes carry a status. Category
    stores are the files of one directory, one per category, without status.
    """

    path: Path
    schema: Schema
    category: Optional[str] = None

    @property
    def tracks_status(self) -> bool:
        return self.schema is Schema.MEMO

    @property
    def label(self) -> str:
        return self.category if self.category is not None else "notes"
