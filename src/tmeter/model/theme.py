# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

from tmeter.errors import InvalidThemeMode


class ColorScheme(TypedDict):
    background: Optional[str]
    foreground: str
    title: str
    progress_start: str
    progress_end: str
    progress_empty: str
    progress_indicator: str
    marker: str
    marker_label: str
    quote: str
    legend_elapsed: str
    legend_remaining: str


class Theme(TypedDict):
    name: str
    light: ColorScheme
    dark: ColorScheme


class ThemeMode(StrEnum):
    LIGHT = "light"
    DARK = "dark"

    def toggle(self) -> "ThemeMode":
        if self is ThemeMode.LIGHT:
            return ThemeMode.DARK
        return ThemeMode.LIGHT

    @classmethod
    def parse(cls, value: str) -> "ThemeMode":
        try:
            return cls(value.lower())
        except ValueError:
            raise InvalidThemeMode(value) from None


def get_colors(theme: Theme, mode: ThemeMode) -> ColorScheme:
    if mode is ThemeMode.DARK:
        return theme["dark"]
    return theme["light"]
