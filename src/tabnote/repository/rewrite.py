# SPDX-License-Identifier: MIT

import logging
import os
import shutil
from copy import deepcopy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from tabnote.errors import NoteNotFoundError, StoreIOError
from tabnote.model.note import Note
from tabnote.model.store import Schema
from tabnote.repository.reader import (
    STORE_ENCODING,
    STORE_ERRORS,
    is_blank,
    iter_lines,
    open_store,
)
from tabnote.repository.record import decode_line, encode_note

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".tmp"


def _match_all(note: Note) -> bool:
    return True


@dataclass(frozen=True)
class NoteTransform:
    """
    One rewrite step.

    apply receives a copy of every note that matches and returns the note to
    write in its place, or None to omit it. Notes that do not match are
    written back unchanged.
    """

    apply: Callable[[Note], Optional[Note]]
    matches: Callable[[Note], bool] = _match_all
    description: str = "rewrite"


@dataclass
class RewriteResult:
    scanned: int = 0
    matched: int = 0
    changed: int = 0
    omitted: int = 0
    # notes as written after the transform, in file order
    applied: list[Note] = field(default_factory=list)


def temp_path_for(path: Path) -> Path:
    return path.with_name(path.name + TEMP_SUFFIX)


def __discard(temp_path: Path) -> None:
    try:
        temp_path.unlink(missing_ok=True)
    except OSError as e:
        logger.error("could not remove temporary file %s: %s", temp_path, e.strerror)


def rewrite_store(
    path: Path,
    schema: Schema,
    transform: NoteTransform,
    require_match: bool = False,
) -> RewriteResult:
    """
    Rewrite a store through a transform, all or nothing.

    Every line is streamed into a temporary file beside the store, which
    then replaces the store in a single rename. If anything fails before the
    rename the temporary file is removed and the store is left as it was.

    Lines that do not decode are carried over verbatim. With require_match,
    a transform that matched no note raises NoteNotFoundError and nothing is
    written.
    """
    result = RewriteResult()

    source = open_store(path)
    if source is None:
        if require_match:
            raise NoteNotFoundError(f"no notes in {path}")
        logger.debug("%s: %s does not exist, nothing to rewrite", transform.description, path)
        return result

    temp_path = temp_path_for(path)
    try:
        with source, temp_path.open(
            "w", encoding=STORE_ENCODING, errors=STORE_ERRORS, newline="\n"
        ) as target:
            for line in iter_lines(source):
                if is_blank(line):
                    continue

                note = decode_line(line, schema)
                if note is None:
                    logger.warning("keeping malformed record as-is: %r", line)
                    target.write(line + "\n")
                    continue

                result.scanned += 1
                if not transform.matches(note):
                    target.write(line + "\n")
                    continue

                result.matched += 1
                updated = transform.apply(deepcopy(note))
                if updated is None:
                    result.omitted += 1
                    continue
                if updated != note:
                    result.changed += 1
                result.applied.append(updated)
                target.write(encode_note(updated) + "\n")

            target.flush()
            os.fsync(target.fileno())

        if require_match and result.matched == 0:
            raise NoteNotFoundError(f"no matching note in {path}")

        shutil.copymode(path, temp_path)
        os.replace(temp_path, path)
    except OSError as e:
        __discard(temp_path)
        logger.error("%s of %s rolled back: %s", transform.description, path, e)
        raise StoreIOError(f"failed to rewrite {path}: {e.strerror or e}") from e
    except BaseException:
        __discard(temp_path)
        raise

    logger.debug(
        "%s of %s committed: scanned=%d matched=%d changed=%d omitted=%d",
        transform.description,
        path,
        result.scanned,
        result.matched,
        result.changed,
        result.omitted,
    )
    return result
