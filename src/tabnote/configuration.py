# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

APP_NAME = "tabnote"

CONFIG_ENV_VAR = "TABNOTE_CONFIG"
STORE_PATH_ENV_VAR = "TABNOTE_PATH"
CATEGORY_PATH_ENV_VAR = "TABNOTE_CATEGORY_PATH"

# These will be set dynamically by load_config_path_configuration()
CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"

DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DEFAULT_STORE_PATH: Path = DATA_PATH / "notes"
DEFAULT_CATEGORY_PATH: Path = DATA_PATH / "categories"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Configuration(TypedDict):
    store_path: Optional[str]
    category_path: Optional[str]
    confirm_delete: bool
    show_header: bool
    plain_output: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "store_path": None,
        "category_path": None,
        "confirm_delete": True,
        "show_header": True,
        "plain_output": False,
        "log_level": "WARNING",
    }


def load_config_path_configuration() -> None:
    """
    Set the config file location, honouring the TABNOTE_CONFIG override.

    This must be called before the configuration repository loads anything.
    """
    global CONFIG_PATH, APP_CONFIG_PATH

    override = __env_path(CONFIG_ENV_VAR)
    if override is not None:
        APP_CONFIG_PATH = override
        CONFIG_PATH = override.parent
    else:
        CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
        APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


def __env_path(name: str) -> Optional[Path]:
    value = os.environ.get(name)
    if not value:
        return None
    return Path(value).expanduser()


def resolve_store_path(config: Configuration) -> Path:
    """
    Path of the memo store: TABNOTE_PATH, then store_path from the config
    file, then the per-user data directory.
    """
    env_path = __env_path(STORE_PATH_ENV_VAR)
    if env_path is not None:
        return env_path
    if config["store_path"]:
        return Path(config["store_path"]).expanduser()
    return DEFAULT_STORE_PATH


def resolve_category_path(config: Configuration) -> Path:
    """
    Directory holding one store per category: TABNOTE_CATEGORY_PATH, then
    category_path from the config file, then the per-user data directory.
    """
    env_path = __env_path(CATEGORY_PATH_ENV_VAR)
    if env_path is not None:
        return env_path
    if config["category_path"]:
        return Path(config["category_path"]).expanduser()
    return DEFAULT_CATEGORY_PATH
