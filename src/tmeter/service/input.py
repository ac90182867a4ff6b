# SPDX-License-Identifier: MIT

import logging

from tmeter.errors import TimeValidationError
from tmeter.model.app_state import AppState
from tmeter.model.input_mode import InputMode, KeyOutcome
from tmeter.service.state import (
    SaveCallback,
    cycle_progress_bar_style,
    cycle_theme,
    toggle_mode,
)
from tmeter.service.validate import validate_time

logger = logging.getLogger(__name__)

KEY_QUIT = "q"
KEY_CTRL_C = "ctrl+c"
KEY_THEME = "t"
KEY_MODE = "d"
KEY_STYLE = "s"
KEY_HELP = "h"
KEY_EDIT_WAKE_UP = "w"
KEY_EDIT_BED_TIME = "b"
KEY_DOCS = "?"
KEY_ESCAPE = "esc"
KEY_ENTER = "enter"
KEY_BACKSPACE = "backspace"

EDIT_ALLOWED_CHARACTERS = frozenset("0123456789:")
MAX_BUFFER_LENGTH = 5

EDITING_MODES = (InputMode.EDITING_WAKE_UP, InputMode.EDITING_BED_TIME)


def handle_key(state: AppState, key: str, save: SaveCallback) -> KeyOutcome:
    """
    Apply a single key press to the state.

    Args:
        state: The application state, mutated in place
        key: Normalized key name ("q", "enter", "backspace", "esc", "ctrl+c", ...)
        save: Called with the state whenever a setting changed and should be
            persisted

    Returns:
        What the frame driver should do next
    """
    mode = state["input_mode"]
    if mode is InputMode.HELP:
        return _handle_help_key(state, key)
    if mode in EDITING_MODES:
        return _handle_editing_key(state, key, save)
    return _handle_normal_key(state, key, save)


def _handle_normal_key(state: AppState, key: str, save: SaveCallback) -> KeyOutcome:
    if key in (KEY_QUIT, KEY_CTRL_C):
        return KeyOutcome.QUIT
    if key == KEY_DOCS:
        return KeyOutcome.OPEN_DOCS

    if key == KEY_HELP:
        state["input_mode"] = InputMode.HELP
    elif key == KEY_EDIT_WAKE_UP:
        start_editing(state, InputMode.EDITING_WAKE_UP)
    elif key == KEY_EDIT_BED_TIME:
        start_editing(state, InputMode.EDITING_BED_TIME)
    elif key == KEY_THEME:
        cycle_theme(state)
        save(state)
    elif key == KEY_MODE:
        toggle_mode(state)
        save(state)
    elif key == KEY_STYLE:
        cycle_progress_bar_style(state)
        save(state)
    return KeyOutcome.CONTINUE


def _handle_help_key(state: AppState, key: str) -> KeyOutcome:
    if key in (KEY_HELP, KEY_QUIT, KEY_ESCAPE):
        state["input_mode"] = InputMode.NORMAL
    return KeyOutcome.CONTINUE


def _handle_editing_key(state: AppState, key: str, save: SaveCallback) -> KeyOutcome:
    if key == KEY_ESCAPE:
        cancel_editing(state)
    elif key == KEY_ENTER:
        commit_editing(state, save)
    elif key == KEY_BACKSPACE:
        state["input_buffer"] = state["input_buffer"][:-1]
        state["input_seeded"] = False
    elif len(key) == 1 and key in EDIT_ALLOWED_CHARACTERS:
        append_to_buffer(state, key)
    return KeyOutcome.CONTINUE


def start_editing(state: AppState, mode: InputMode) -> None:
    schedule = state["schedule"]
    current = (
        schedule["wake_up"]
        if mode is InputMode.EDITING_WAKE_UP
        else schedule["bed_time"]
    )
    state["input_mode"] = mode
    state["input_buffer"] = current.format()
    state["input_seeded"] = True
    state["error"] = None


def append_to_buffer(state: AppState, character: str) -> None:
    if state["input_seeded"]:
        state["input_buffer"] = ""
        state["input_seeded"] = False
    if len(state["input_buffer"]) < MAX_BUFFER_LENGTH:
        state["input_buffer"] += character


def cancel_editing(state: AppState) -> None:
    state["input_mode"] = InputMode.NORMAL
    state["input_buffer"] = ""
    state["input_seeded"] = False
    state["error"] = None


def commit_editing(state: AppState, save: SaveCallback) -> None:
    """
    Validate the edit buffer and store it in the schedule.

    On a validation error the mode and buffer are left alone and the error is
    shown to the user; the schedule is not touched.
    """
    try:
        time_of_day = validate_time(state["input_buffer"])
    except TimeValidationError as error:
        state["error"] = error.message
        return

    if state["input_mode"] is InputMode.EDITING_WAKE_UP:
        state["schedule"]["wake_up"] = time_of_day
        logger.info("Wake-up time set to %s", time_of_day.format())
    else:
        state["schedule"]["bed_time"] = time_of_day
        logger.info("Bed time set to %s", time_of_day.format())

    state["input_mode"] = InputMode.NORMAL
    state["input_buffer"] = ""
    state["input_seeded"] = False
    state["error"] = None
    save(state)
