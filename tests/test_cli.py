# SPDX-License-Identifier: MIT

from pathlib import Path

from typer.testing import CliRunner

from tabnote.terminal.app import app
from tabnote.time import today_local_date_str

from conftest import write_lines

TREE_LINES = (
    "1\tU\t2014-11-01\ta",
    "2\tU\t2014-11-01\tb",
    "3\tU\t2014-11-02\tc",
)


def test_add_writes_first_record(tabnote_env: Path, runner: CliRunner) -> None:
    result = runner.invoke(app, ["--plain", "add", "buy", "milk"])

    assert result.exit_code == 0
    line = f"1\tU\t{today_local_date_str()}\tbuy milk"
    assert line in result.output
    assert (tabnote_env / "notes").read_text() == line + "\n"


def test_add_takes_trailing_date(tabnote_env: Path, runner: CliRunner) -> None:
    result = runner.invoke(app, ["--plain", "add", "meet", "bob", "2014-11-01"])

    assert result.exit_code == 0
    assert (tabnote_env / "notes").read_text() == "1\tU\t2014-11-01\tmeet bob\n"


def test_single_date_word_is_content(tabnote_env: Path, runner: CliRunner) -> None:
    runner.invoke(app, ["--plain", "add", "2014-11-01"])

    content = (tabnote_env / "notes").read_text().rstrip("\n").split("\t")[3]
    assert content == "2014-11-01"


def test_add_rejects_bad_date_option(tabnote_env: Path, runner: CliRunner) -> None:
    result = runner.invoke(app, ["add", "--date", "2014-02-30", "x"])

    assert result.exit_code == 2
    assert not (tabnote_env / "notes").exists()


def test_add_reads_stdin(tabnote_env: Path, runner: CliRunner) -> None:
    result = runner.invoke(app, ["--plain", "add", "-"], input="from stdin\n")

    assert result.exit_code == 0
    assert (tabnote_env / "notes").read_text().endswith("\tfrom stdin\n")


def test_import_adds_one_note_per_line(tabnote_env: Path, runner: CliRunner) -> None:
    result = runner.invoke(app, ["import"], input="first\n\nsecond\n")

    assert result.exit_code == 0
    lines = (tabnote_env / "notes").read_text().splitlines()
    assert [line.split("\t")[0] for line in lines] == ["1", "2"]


def test_tree_plain_output(tabnote_env: Path, runner: CliRunner) -> None:
    write_lines(tabnote_env / "notes", *TREE_LINES)

    result = runner.invoke(app, ["--plain", "tree"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "2014-11-01",
        "\t1\tU\ta",
        "\t2\tU\tb",
        "2014-11-02",
        "\t3\tU\tc",
    ]


def test_latest(tabnote_env: Path, runner: CliRunner) -> None:
    write_lines(
        tabnote_env / "notes",
        *(f"{n}\tU\t2014-11-01\tnote {n}" for n in range(1, 6)),
    )

    result = runner.invoke(app, ["--plain", "latest", "2"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "4\tU\t2014-11-01\tnote 4",
        "5\tU\t2014-11-01\tnote 5",
    ]


def test_list_hides_postponed_by_default(tabnote_env: Path, runner: CliRunner) -> None:
    write_lines(tabnote_env / "notes", "1\tU\t2014-11-01\ta", "2\tP\t2014-11-01\tb")

    default = runner.invoke(app, ["--plain", "list"])
    everything = runner.invoke(app, ["--plain", "list", "--all"])

    assert default.output.splitlines() == ["1\tU\t2014-11-01\ta"]
    assert len(everything.output.splitlines()) == 2


def test_list_renders_table(tabnote_env: Path, runner: CliRunner) -> None:
    write_lines(tabnote_env / "notes", "1\tU\t2014-11-01\tbuy milk")

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "tabnote" in result.output
    assert "buy milk" in result.output


def test_delete_then_not_found(tabnote_env: Path, runner: CliRunner) -> None:
    store = tabnote_env / "notes"
    write_lines(store, *TREE_LINES)

    first = runner.invoke(app, ["delete", "2"])
    assert first.exit_code == 0
    after_delete = store.read_bytes()
    assert after_delete == f"{TREE_LINES[0]}\n{TREE_LINES[2]}\n".encode()

    second = runner.invoke(app, ["delete", "2"])
    assert second.exit_code == 1
    assert "not found" in second.output
    assert store.read_bytes() == after_delete


def test_replace_content_and_date(tabnote_env: Path, runner: CliRunner) -> None:
    store = tabnote_env / "notes"
    write_lines(store, "1\tU\t2014-11-01\told")

    assert runner.invoke(app, ["replace", "1", "new", "text"]).exit_code == 0
    assert runner.invoke(app, ["replace", "1", "2015-01-02"]).exit_code == 0
    assert store.read_text() == "1\tU\t2015-01-02\tnew text\n"

    assert runner.invoke(app, ["replace", "7", "x"]).exit_code == 1


def test_status_commands(tabnote_env: Path, runner: CliRunner) -> None:
    store = tabnote_env / "notes"
    write_lines(store, "1\tU\t2014-11-01\ta", "2\tU\t2014-11-01\tb")

    assert runner.invoke(app, ["done", "1"]).exit_code == 0
    assert runner.invoke(app, ["postpone", "2"]).exit_code == 0
    assert store.read_text() == "1\tD\t2014-11-01\ta\n2\tP\t2014-11-01\tb\n"

    unknown = runner.invoke(app, ["done", "9"])
    assert unknown.exit_code == 0
    assert store.read_text() == "1\tD\t2014-11-01\ta\n2\tP\t2014-11-01\tb\n"


def test_invalid_id_is_a_usage_error(tabnote_env: Path, runner: CliRunner) -> None:
    assert runner.invoke(app, ["done", "abc"]).exit_code == 2
    assert runner.invoke(app, ["done", "0"]).exit_code == 2


def test_all_done_and_purge(tabnote_env: Path, runner: CliRunner) -> None:
    store = tabnote_env / "notes"
    write_lines(store, "1\tU\t2014-11-01\ta", "2\tP\t2014-11-01\tb")

    assert runner.invoke(app, ["all-done"]).exit_code == 0
    assert runner.invoke(app, ["purge-done"]).exit_code == 0
    assert store.read_text() == "2\tP\t2014-11-01\tb\n"


def test_search_exit_codes(tabnote_env: Path, runner: CliRunner) -> None:
    write_lines(tabnote_env / "notes", "1\tU\t2014-11-01\tBuy milk")

    found = runner.invoke(app, ["--plain", "search", "milk"])
    assert found.exit_code == 0
    assert "1\tU\t2014-11-01\tBuy milk" in found.output

    assert runner.invoke(app, ["search", "buy"]).exit_code == 1
    assert runner.invoke(app, ["regex", "^buy"]).exit_code == 0
    assert runner.invoke(app, ["regex", "(unclosed"]).exit_code == 2


def test_categories(tabnote_env: Path, runner: CliRunner) -> None:
    assert runner.invoke(app, ["categories"]).exit_code == 1

    added = runner.invoke(app, ["--plain", "-c", "work", "add", "read", "book"])
    assert added.exit_code == 0
    assert (tabnote_env / "categories" / "work").read_text() == (
        f"1\t{today_local_date_str()}\tread book\n"
    )
    (tabnote_env / "categories" / "later").write_text("")

    result = runner.invoke(app, ["--plain", "categories"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["later (empty)", "work (1 note)"]


def test_status_command_on_category_is_rejected(
    tabnote_env: Path, runner: CliRunner
) -> None:
    runner.invoke(app, ["-c", "work", "add", "read", "book"])

    assert runner.invoke(app, ["-c", "work", "done", "1"]).exit_code == 2


def test_invalid_category_name(tabnote_env: Path, runner: CliRunner) -> None:
    result = runner.invoke(app, ["-c", ".hidden", "add", "x"])

    assert result.exit_code == 2
    assert not (tabnote_env / "categories" / ".hidden").exists()


def test_delete_all_asks_first(tabnote_env: Path, runner: CliRunner) -> None:
    store = tabnote_env / "notes"
    write_lines(store, "1\tU\t2014-11-01\ta")

    declined = runner.invoke(app, ["delete-all"], input="n\n")
    assert declined.exit_code == 0
    assert store.exists()

    confirmed = runner.invoke(app, ["delete-all"], input="y\n")
    assert confirmed.exit_code == 0
    assert not store.exists()

    assert runner.invoke(app, ["delete-all"]).exit_code == 0


def test_delete_all_without_confirmation(tabnote_env: Path, runner: CliRunner) -> None:
    store = tabnote_env / "notes"
    write_lines(store, "1\tU\t2014-11-01\ta")
    assert runner.invoke(app, ["config", "set", "--no-confirm-delete"]).exit_code == 0

    assert runner.invoke(app, ["delete-all"]).exit_code == 0
    assert not store.exists()


def test_export_html(tabnote_env: Path, runner: CliRunner) -> None:
    page = tabnote_env / "notes.html"

    empty = runner.invoke(app, ["export-html", str(page)])
    assert empty.exit_code == 1
    assert "Nothing to export." in empty.output
    assert not page.exists()

    write_lines(tabnote_env / "notes", "1\tU\t2014-11-01\t<b>bold</b>")
    assert runner.invoke(app, ["export-html", str(page)]).exit_code == 0
    assert "&lt;b&gt;bold&lt;/b&gt;" in page.read_text()


def test_path(tabnote_env: Path, runner: CliRunner) -> None:
    memo_path = runner.invoke(app, ["path"])
    category_path = runner.invoke(app, ["-c", "work", "path"])
    directory = runner.invoke(app, ["path", "--categories"])

    assert memo_path.output.strip() == str(tabnote_env / "notes")
    assert category_path.output.strip() == str(tabnote_env / "categories" / "work")
    assert directory.output.strip() == str(tabnote_env / "categories")


def test_config_set_persists(tabnote_env: Path, runner: CliRunner) -> None:
    result = runner.invoke(app, ["config", "set", "--log-level", "info"])

    assert result.exit_code == 0
    assert "log_level: INFO" in (tabnote_env / "config" / "config.yaml").read_text()
    assert runner.invoke(app, ["config", "set", "--log-level", "loud"]).exit_code == 2


def test_aliases(tabnote_env: Path, runner: CliRunner) -> None:
    runner.invoke(app, ["a", "buy", "milk"])

    result = runner.invoke(app, ["--plain", "l"])

    assert result.exit_code == 0
    assert "buy milk" in result.output


def test_undecodable_line_does_not_abort_commands(
    tabnote_env: Path, runner: CliRunner
) -> None:
    store = tabnote_env / "notes"
    store.write_bytes(
        b"1\tU\t2014-11-01\ta\n2\tU\t2014-11-01\tcaf\xe9\n3\tU\t2014-11-02\tc\n"
    )

    listed = runner.invoke(app, ["--plain", "list"])
    assert listed.exit_code == 0
    assert "1\tU\t2014-11-01\ta" in listed.output
    assert "3\tU\t2014-11-02\tc" in listed.output

    assert runner.invoke(app, ["done", "1"]).exit_code == 0
    assert store.read_bytes() == (
        b"1\tD\t2014-11-01\ta\n2\tU\t2014-11-01\tcaf\xe9\n3\tU\t2014-11-02\tc\n"
    )


def test_latest_accepts_negative_count(tabnote_env: Path, runner: CliRunner) -> None:
    write_lines(tabnote_env / "notes", *TREE_LINES)

    result = runner.invoke(app, ["--plain", "latest", "-1"])

    assert result.exit_code == 0
    assert result.output.splitlines() == list(TREE_LINES)
