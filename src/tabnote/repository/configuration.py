# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tabnote import configuration
from tabnote.errors import MalformedInputError


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        try:
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        except YAMLError as e:
            raise MalformedInputError(
                f"{configuration.APP_CONFIG_PATH} is not valid YAML: {e}"
            ) from e
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise MalformedInputError(
                f"{configuration.APP_CONFIG_PATH} does not contain a mapping"
            )

        # Fill in settings missing from older config files
        self._config = configuration.get_default_configuration()
        for key in self._config:
            if key in loaded:
                self._config[key] = loaded[key]  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        """Forget the loaded settings so the next access reads the file again."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        store_path: Optional[str] = None,
        remove_store_path: bool = False,
        category_path: Optional[str] = None,
        remove_category_path: bool = False,
        confirm_delete: Optional[bool] = None,
        show_header: Optional[bool] = None,
        plain_output: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if store_path is not None:
            self.config["store_path"] = store_path
        if remove_store_path:
            self.config["store_path"] = None
        if category_path is not None:
            self.config["category_path"] = category_path
        if remove_category_path:
            self.config["category_path"] = None
        if confirm_delete is not None:
            self.config["confirm_delete"] = confirm_delete
        if show_header is not None:
            self.config["show_header"] = show_header
        if plain_output is not None:
            self.config["plain_output"] = plain_output
        if log_level is not None:
            self.config["log_level"] = log_level


def yaml_library_type() -> str:
    """Whether PyYAML runs on the libyaml-backed C loader or in pure Python."""
    return "C" if Loader.__name__ == "CLoader" else "Python"


CONFIGURATION_REPO = ConfigurationRepository()
