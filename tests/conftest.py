# SPDX-License-Identifier: MIT

from pathlib import Path

import pytest
from typer.testing import CliRunner

from tabnote.model.store import Schema, StoreRef


@pytest.fixture
def tabnote_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config file and both stores into tmp_path."""
    monkeypatch.setenv("TABNOTE_CONFIG", str(tmp_path / "config" / "config.yaml"))
    monkeypatch.setenv("TABNOTE_PATH", str(tmp_path / "notes"))
    monkeypatch.setenv("TABNOTE_CATEGORY_PATH", str(tmp_path / "categories"))
    return tmp_path


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def memo_path(tmp_path: Path) -> Path:
    return tmp_path / "notes"


@pytest.fixture
def memo(memo_path: Path) -> StoreRef:
    return StoreRef(path=memo_path, schema=Schema.MEMO)


@pytest.fixture
def category(tmp_path: Path) -> StoreRef:
    directory = tmp_path / "categories"
    directory.mkdir()
    return StoreRef(path=directory / "work", schema=Schema.CATEGORY, category="work")


def write_lines(path: Path, *lines: str) -> None:
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
