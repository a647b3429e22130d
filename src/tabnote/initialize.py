# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from tabnote import configuration
from tabnote.errors import MalformedInputError
from tabnote.log import configure_logging
from tabnote.repository.configuration import CONFIGURATION_REPO
from tabnote.view import state as view_state


def initialize(verbose: bool = False) -> None:
    configuration.load_config_path_configuration()
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()

    CONFIGURATION_REPO.reset()
    config = CONFIGURATION_REPO.get_config()

    log_level = str(config["log_level"]).upper()
    if log_level not in configuration.LOG_LEVELS:
        raise MalformedInputError(
            f"unknown log_level '{config['log_level']}' in {configuration.APP_CONFIG_PATH}"
        )
    configure_logging("DEBUG" if verbose else log_level)
    view_state.set_show_header(config["show_header"])
    view_state.set_plain_output(config["plain_output"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))
