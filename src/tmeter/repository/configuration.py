# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tmeter import configuration
from tmeter.errors import (
    ConfigLoadError,
    ConfigSaveError,
    InvalidThemeMode,
    TimeValidationError,
)
from tmeter.model.progress_bar_style import ProgressBarStyle
from tmeter.model.theme import ThemeMode
from tmeter.service.validate import validate_time

logger = logging.getLogger(__name__)


class ConfigurationRepository:
    def __init__(self, paths: Optional[list[Path]] = None) -> None:
        self._paths = paths
        self._config: Optional[configuration.Configuration] = None
        self.loaded_from: Optional[Path] = None
        self.is_dirty = False

    @property
    def paths(self) -> list[Path]:
        if self._paths is not None:
            return self._paths
        return configuration.get_config_paths()

    @property
    def save_path(self) -> Path:
        return self.paths[0]

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        for path in self.paths:
            if not path.is_file():
                continue
            try:
                raw = self.load_from_file(path)
            except ConfigLoadError as error:
                logger.warning("%s", error)
                logger.warning("Using default configuration.")
                continue
            logger.info("Loaded config from: %s", path)
            self.loaded_from = path
            self._config = self.__sanitize(raw)
            return

        self._config = deepcopy(configuration.DEFAULT_CONFIGURATION)

    @staticmethod
    def load_from_file(path: Path) -> dict[str, Any]:
        try:
            raw = load(path.read_text(), Loader=Loader)
        except (OSError, UnicodeDecodeError) as error:
            raise ConfigLoadError(
                f"Failed to read config file {path}: {error}"
            ) from error
        except YAMLError as error:
            raise ConfigLoadError(
                f"Failed to parse config file {path}: {error}"
            ) from error

        # An empty file loads as None
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ConfigLoadError(
                f"Failed to parse config file {path}: expected a mapping"
            )
        return raw

    def __sanitize(self, raw: dict[str, Any]) -> configuration.Configuration:
        config = deepcopy(configuration.DEFAULT_CONFIGURATION)

        if isinstance(raw.get("theme_name"), str):
            config["theme_name"] = raw["theme_name"]

        theme_mode = raw.get("theme_mode")
        if theme_mode is not None:
            try:
                config["theme_mode"] = ThemeMode.parse(str(theme_mode)).value
            except InvalidThemeMode as error:
                logger.warning("%s, using light mode", error)

        progress_bar_style = raw.get("progress_bar_style")
        if progress_bar_style is not None:
            try:
                config["progress_bar_style"] = ProgressBarStyle(
                    str(progress_bar_style)
                ).value
            except ValueError:
                logger.warning(
                    "Invalid progress bar style '%s', using %s",
                    progress_bar_style,
                    config["progress_bar_style"],
                )

        for key in ("wake_up_time", "bed_time"):
            value = raw.get(key)
            if value is None:
                continue
            try:
                config[key] = validate_time(_time_text(value)).format()  # type: ignore[literal-required]
            except TimeValidationError as error:
                logger.warning(
                    "Invalid %s '%s' (%s), using %s",
                    key,
                    value,
                    error.message,
                    config[key],  # type: ignore[literal-required]
                )

        markers = raw.get("markers") or []
        if not isinstance(markers, list):
            logger.warning("Ignoring markers, expected a list")
            markers = []
        for marker in markers:
            if (
                not isinstance(marker, dict)
                or not isinstance(marker.get("label"), str)
                or marker.get("time") is None
            ):
                logger.warning("Ignoring malformed marker %r", marker)
                continue
            try:
                time_of_day = validate_time(_time_text(marker["time"]))
            except TimeValidationError as error:
                logger.warning(
                    "Ignoring marker '%s': %s", marker["label"], error.message
                )
                continue
            config["markers"].append(
                {"label": marker["label"], "time": time_of_day.format()}
            )

        if isinstance(raw.get("docs_url"), str):
            config["docs_url"] = raw["docs_url"]

        return config

    def __save_data(self, config: configuration.Configuration) -> None:
        path = self.save_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                configuration.CONFIG_HEADER
                + dump(dict(config), Dumper=Dumper, sort_keys=False)
            )
        except (OSError, YAMLError) as error:
            raise ConfigSaveError(
                f"Failed to write config file {path}: {error}"
            ) from error

    def save(self) -> None:
        self.__save_data(self.config)
        self.is_dirty = False

    def reset(self) -> None:
        """Drop the cached config so the next access reads the files again."""
        self._config = None
        self.loaded_from = None
        self.is_dirty = False

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.save()

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        theme_name: Optional[str] = None,
        theme_mode: Optional[str] = None,
        progress_bar_style: Optional[str] = None,
        wake_up_time: Optional[str] = None,
        bed_time: Optional[str] = None,
        markers: Optional[list[configuration.MarkerConfig]] = None,
        docs_url: Optional[str] = None,
        remove_docs_url: bool = False,
    ) -> None:
        self.is_dirty = True

        if theme_name is not None:
            self.config["theme_name"] = theme_name
        if theme_mode is not None:
            self.config["theme_mode"] = theme_mode
        if progress_bar_style is not None:
            self.config["progress_bar_style"] = progress_bar_style
        if wake_up_time is not None:
            self.config["wake_up_time"] = wake_up_time
        if bed_time is not None:
            self.config["bed_time"] = bed_time
        if markers is not None:
            self.config["markers"] = deepcopy(markers)
        if docs_url is not None:
            self.config["docs_url"] = docs_url
        if remove_docs_url:
            self.config["docs_url"] = None


CONFIGURATION_REPO = ConfigurationRepository()


def _time_text(value: Any) -> str:
    # YAML 1.1 reads an unquoted 07:30 as the base 60 integer 450
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{value // 60:02}:{value % 60:02}"
    return str(value)
