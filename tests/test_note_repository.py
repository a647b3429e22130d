# SPDX-License-Identifier: MIT

import stat

import pytest

from tabnote.errors import MalformedInputError
from tabnote.model.note import NoteStatus
from tabnote.model.store import StoreRef
from tabnote.repository.note import NoteRepository
from tabnote.time import today_local_date_str

from conftest import write_lines


def test_first_note_in_empty_store(memo: StoreRef) -> None:
    repository = NoteRepository(memo)

    note = repository.save_new_note("buy milk")

    assert note["id"] == 1
    assert note["status"] is NoteStatus.UNDONE
    assert memo.path.read_text() == f"1\tU\t{today_local_date_str()}\tbuy milk\n"
    assert repository.next_id() == 2


def test_ids_increase_with_every_add(memo: StoreRef) -> None:
    repository = NoteRepository(memo)

    ids = [repository.save_new_note(f"note {n}")["id"] for n in range(5)]

    assert ids == [1, 2, 3, 4, 5]


def test_store_is_created_private(memo: StoreRef) -> None:
    NoteRepository(memo).save_new_note("secret")
    assert stat.S_IMODE(memo.path.stat().st_mode) == 0o600


def test_category_notes_have_no_status(category: StoreRef) -> None:
    note = NoteRepository(category).save_new_note("read book", "2014-11-02")

    assert note["status"] is None
    assert category.path.read_text() == "1\t2014-11-02\tread book\n"


def test_next_id_follows_last_note_in_file_order(memo: StoreRef) -> None:
    write_lines(memo.path, "4\tU\t2014-11-01\ta", "2\tU\t2014-11-01\tb")
    assert NoteRepository(memo).next_id() == 3


def test_next_id_ignores_corrupt_tail(memo: StoreRef) -> None:
    write_lines(memo.path, "1\tU\t2014-11-01\ta", "2\tU\t2014-11-01\tb", "junk")
    assert NoteRepository(memo).next_id() == 3


def test_append_repairs_missing_trailing_newline(memo: StoreRef) -> None:
    memo.path.write_text("1\tU\t2014-11-01\ta")

    NoteRepository(memo).save_new_note("b", "2014-11-01")

    assert memo.path.read_text() == "1\tU\t2014-11-01\ta\n2\tU\t2014-11-01\tb\n"


def test_content_is_flattened(memo: StoreRef) -> None:
    note = NoteRepository(memo).save_new_note("one\ttwo\nthree")
    assert note["content"] == "one twothree"


def test_empty_content_is_rejected(memo: StoreRef) -> None:
    with pytest.raises(MalformedInputError):
        NoteRepository(memo).save_new_note(" \n ")
    assert not memo.path.exists()


def test_count_notes(memo: StoreRef) -> None:
    repository = NoteRepository(memo)
    assert repository.count_notes() is None

    repository.save_new_note("a")
    repository.save_new_note("b")
    assert repository.count_notes() == 2


def test_delete_store(memo: StoreRef) -> None:
    repository = NoteRepository(memo)
    assert repository.delete_store() is False

    repository.save_new_note("a")
    assert repository.delete_store() is True
    assert not memo.path.exists()


def test_append_after_undecodable_tail(memo: StoreRef) -> None:
    memo.path.write_bytes(b"1\tU\t2014-11-01\ta\n2\tU\t2014-11-01\tcaf\xe9\n")

    note = NoteRepository(memo).save_new_note("b", "2014-11-01")

    assert note["id"] == 2
    assert memo.path.read_bytes().endswith(b"caf\xe9\n2\tU\t2014-11-01\tb\n")
