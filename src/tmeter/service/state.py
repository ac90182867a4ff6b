# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Optional

from tmeter import configuration
from tmeter.data.themes import get_all_themes, lookup_theme
from tmeter.errors import ConfigSaveError, InvalidThemeMode
from tmeter.model.app_state import AppState
from tmeter.model.input_mode import InputMode
from tmeter.model.progress_bar_style import ProgressBarStyle
from tmeter.model.schedule import CustomMarker
from tmeter.model.theme import ColorScheme, Theme, ThemeMode, get_colors
from tmeter.repository.configuration import (
    CONFIGURATION_REPO,
    ConfigurationRepository,
)
from tmeter.service.validate import validate_time

logger = logging.getLogger(__name__)

SaveCallback = Callable[[AppState], None]


def build_app_state(
    config: configuration.Configuration, themes: Optional[list[Theme]] = None
) -> AppState:
    """
    Build the runtime state from a loaded configuration.

    The configuration is expected to be sanitized already; unknown theme names
    and modes still fall back to the defaults here.
    """
    if themes is None:
        themes = get_all_themes()

    theme = lookup_theme(config["theme_name"])
    theme_index = next(
        (i for i, t in enumerate(themes) if t["name"] == theme["name"]), 0
    )

    try:
        theme_mode = ThemeMode.parse(config["theme_mode"])
    except InvalidThemeMode as error:
        logger.warning("%s, using light mode", error)
        theme_mode = ThemeMode.LIGHT

    custom_markers: list[CustomMarker] = [
        {"label": marker["label"], "time": validate_time(marker["time"])}
        for marker in config["markers"]
    ]

    return {
        "themes": themes,
        "theme_index": theme_index,
        "theme_mode": theme_mode,
        "progress_bar_style": ProgressBarStyle(config["progress_bar_style"]),
        "schedule": {
            "wake_up": validate_time(config["wake_up_time"]),
            "bed_time": validate_time(config["bed_time"]),
        },
        "custom_markers": custom_markers,
        "input_mode": InputMode.NORMAL,
        "input_buffer": "",
        "input_seeded": False,
        "error": None,
    }


def current_theme(state: AppState) -> Theme:
    return state["themes"][state["theme_index"]]


def current_colors(state: AppState) -> ColorScheme:
    return get_colors(current_theme(state), state["theme_mode"])


def cycle_theme(state: AppState) -> None:
    state["theme_index"] = (state["theme_index"] + 1) % len(state["themes"])


def toggle_mode(state: AppState) -> None:
    state["theme_mode"] = state["theme_mode"].toggle()


def cycle_progress_bar_style(state: AppState) -> None:
    state["progress_bar_style"] = state["progress_bar_style"].cycle()


def make_save_callback(
    repository: ConfigurationRepository = CONFIGURATION_REPO,
) -> SaveCallback:
    def save(state: AppState) -> None:
        save_app_state(state, repository)

    return save


def save_app_state(
    state: AppState, repository: ConfigurationRepository = CONFIGURATION_REPO
) -> None:
    """
    Write the user-editable parts of the state back to the config file.

    A failed save is logged and otherwise ignored; the in-memory state always
    reflects the latest choice.
    """
    repository.update_config(
        theme_name=current_theme(state)["name"],
        theme_mode=state["theme_mode"].value,
        progress_bar_style=state["progress_bar_style"].value,
        wake_up_time=state["schedule"]["wake_up"].format(),
        bed_time=state["schedule"]["bed_time"].format(),
    )
    try:
        repository.save()
    except ConfigSaveError as error:
        logger.warning("Failed to save config: %s", error)
