# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from tmeter.model.input_mode import InputMode
from tmeter.model.progress_bar_style import ProgressBarStyle
from tmeter.model.schedule import CustomMarker, DaySchedule
from tmeter.model.theme import Theme, ThemeMode


class AppState(TypedDict):
    themes: list[Theme]
    theme_index: int
    theme_mode: ThemeMode
    progress_bar_style: ProgressBarStyle
    schedule: DaySchedule
    custom_markers: list[CustomMarker]
    input_mode: InputMode
    input_buffer: str
    # True while the buffer still holds the seeded value; typing replaces it
    input_seeded: bool
    error: Optional[str]
