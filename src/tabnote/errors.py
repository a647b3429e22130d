# SPDX-License-Identifier: MIT

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    NOT_FOUND = 1
    # matches the exit code click uses for usage errors
    MALFORMED_INPUT = 2
    IO_FAILURE = 3


class TabnoteError(Exception):
    exit_code: ExitCode = ExitCode.IO_FAILURE


class NoteNotFoundError(TabnoteError):
    """A referenced note, match or store has nothing to act on."""

    exit_code = ExitCode.NOT_FOUND


class MalformedInputError(TabnoteError):
    """Bad date, bad pattern, bad id or otherwise unusable input."""

    exit_code = ExitCode.MALFORMED_INPUT


class StoreIOError(TabnoteError):
    """Opening, reading, writing or renaming a store failed."""

    exit_code = ExitCode.IO_FAILURE
