# SPDX-License-Identifier: MIT

from pathlib import Path

import pytest

from tabnote import configuration
from tabnote.errors import MalformedInputError
from tabnote.initialize import initialize
from tabnote.repository.configuration import CONFIGURATION_REPO


def test_first_run_writes_defaults(tabnote_env: Path) -> None:
    initialize()

    assert configuration.APP_CONFIG_PATH == tabnote_env / "config" / "config.yaml"
    assert configuration.APP_CONFIG_PATH.is_file()
    assert CONFIGURATION_REPO.get_config() == configuration.get_default_configuration()


def test_missing_keys_are_backfilled(tabnote_env: Path) -> None:
    config_file = tabnote_env / "config" / "config.yaml"
    config_file.parent.mkdir()
    config_file.write_text("confirm_delete: false\n")

    initialize()
    config = CONFIGURATION_REPO.get_config()

    assert config["confirm_delete"] is False
    assert config["log_level"] == "WARNING"


def test_invalid_yaml_is_malformed_input(tabnote_env: Path) -> None:
    config_file = tabnote_env / "config" / "config.yaml"
    config_file.parent.mkdir()
    config_file.write_text("confirm_delete: [unclosed\n")

    with pytest.raises(MalformedInputError):
        initialize()


def test_update_and_flush(tabnote_env: Path) -> None:
    initialize()

    CONFIGURATION_REPO.update_config(store_path="~/memo", log_level="INFO")
    CONFIGURATION_REPO.flush()
    CONFIGURATION_REPO.reset()

    assert CONFIGURATION_REPO.get_config()["store_path"] == "~/memo"
    CONFIGURATION_REPO.update_config(remove_store_path=True)
    assert CONFIGURATION_REPO.get_config()["store_path"] is None


def test_store_path_precedence(
    tabnote_env: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    config = configuration.get_default_configuration()
    config["store_path"] = str(tabnote_env / "configured")

    assert configuration.resolve_store_path(config) == tabnote_env / "notes"

    monkeypatch.delenv("TABNOTE_PATH")
    assert configuration.resolve_store_path(config) == tabnote_env / "configured"

    config["store_path"] = None
    assert configuration.resolve_store_path(config) == configuration.DEFAULT_STORE_PATH


def test_empty_env_var_counts_as_unset(
    tabnote_env: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TABNOTE_CATEGORY_PATH", "")
    config = configuration.get_default_configuration()

    assert (
        configuration.resolve_category_path(config)
        == configuration.DEFAULT_CATEGORY_PATH
    )
