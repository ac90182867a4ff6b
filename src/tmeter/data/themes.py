# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from tmeter.errors import ThemeNotFound
from tmeter.model.theme import ColorScheme, Theme

logger = logging.getLogger(__name__)

DEFAULT_THEME_NAME = "default"


def _scheme(
    foreground: str,
    title: str,
    progress_start: str,
    progress_end: str,
    progress_empty: str,
    progress_indicator: str,
    marker: str,
    marker_label: str,
    quote: str,
    legend_elapsed: str,
    legend_remaining: str,
    background: Optional[str] = None,
) -> ColorScheme:
    return {
        "background": background,
        "foreground": foreground,
        "title": title,
        "progress_start": progress_start,
        "progress_end": progress_end,
        "progress_empty": progress_empty,
        "progress_indicator": progress_indicator,
        "marker": marker,
        "marker_label": marker_label,
        "quote": quote,
        "legend_elapsed": legend_elapsed,
        "legend_remaining": legend_remaining,
    }


THEMES: tuple[Theme, ...] = (
    {
        "name": "default",
        "light": _scheme(
            foreground="bright_white",
            title="bright_white",
            progress_start="bright_white",
            progress_end="bright_white",
            progress_empty="bright_black",
            progress_indicator="yellow",
            marker="bright_white",
            marker_label="bright_white",
            quote="white",
            legend_elapsed="bright_white",
            legend_remaining="bright_black",
        ),
        "dark": _scheme(
            foreground="bright_white",
            title="cyan",
            progress_start="cyan",
            progress_end="blue",
            progress_empty="rgb(40,40,40)",
            progress_indicator="yellow",
            marker="white",
            marker_label="bright_black",
            quote="rgb(100,100,100)",
            legend_elapsed="cyan",
            legend_remaining="rgb(60,60,60)",
        ),
    },
    {
        "name": "ocean",
        "light": _scheme(
            foreground="rgb(0,102,153)",
            title="rgb(0,102,153)",
            progress_start="rgb(0,153,204)",
            progress_end="rgb(0,204,255)",
            progress_empty="rgb(204,229,255)",
            progress_indicator="rgb(255,153,0)",
            marker="rgb(0,102,153)",
            marker_label="rgb(0,77,128)",
            quote="rgb(102,153,179)",
            legend_elapsed="rgb(0,153,204)",
            legend_remaining="rgb(153,204,229)",
        ),
        "dark": _scheme(
            foreground="rgb(102,204,255)",
            title="rgb(102,204,255)",
            progress_start="rgb(51,153,255)",
            progress_end="rgb(0,255,255)",
            progress_empty="rgb(0,51,102)",
            progress_indicator="rgb(255,204,0)",
            marker="rgb(153,204,255)",
            marker_label="rgb(102,153,204)",
            quote="rgb(77,128,153)",
            legend_elapsed="rgb(51,153,255)",
            legend_remaining="rgb(51,102,153)",
        ),
    },
    {
        "name": "forest",
        "light": _scheme(
            foreground="rgb(34,139,34)",
            title="rgb(34,139,34)",
            progress_start="rgb(50,205,50)",
            progress_end="rgb(154,205,50)",
            progress_empty="rgb(193,225,193)",
            progress_indicator="rgb(255,215,0)",
            marker="rgb(34,139,34)",
            marker_label="rgb(0,100,0)",
            quote="rgb(107,142,35)",
            legend_elapsed="rgb(50,205,50)",
            legend_remaining="rgb(144,238,144)",
        ),
        "dark": _scheme(
            foreground="rgb(144,238,144)",
            title="rgb(144,238,144)",
            progress_start="rgb(34,139,34)",
            progress_end="rgb(0,255,127)",
            progress_empty="rgb(25,51,25)",
            progress_indicator="rgb(255,255,102)",
            marker="rgb(107,142,35)",
            marker_label="rgb(85,107,47)",
            quote="rgb(85,107,47)",
            legend_elapsed="rgb(34,139,34)",
            legend_remaining="rgb(60,90,60)",
        ),
    },
    {
        "name": "sunset",
        "light": _scheme(
            foreground="rgb(255,99,71)",
            title="rgb(255,99,71)",
            progress_start="rgb(255,140,0)",
            progress_end="rgb(255,69,0)",
            progress_empty="rgb(255,228,196)",
            progress_indicator="rgb(255,215,0)",
            marker="rgb(255,99,71)",
            marker_label="rgb(205,92,92)",
            quote="rgb(188,143,143)",
            legend_elapsed="rgb(255,140,0)",
            legend_remaining="rgb(255,182,193)",
        ),
        "dark": _scheme(
            foreground="rgb(255,182,193)",
            title="rgb(255,182,193)",
            progress_start="rgb(255,99,71)",
            progress_end="rgb(255,20,147)",
            progress_empty="rgb(102,51,51)",
            progress_indicator="rgb(255,255,102)",
            marker="rgb(255,140,0)",
            marker_label="rgb(205,92,92)",
            quote="rgb(139,69,19)",
            legend_elapsed="rgb(255,99,71)",
            legend_remaining="rgb(128,64,64)",
        ),
    },
    {
        "name": "monochrome",
        "light": _scheme(
            foreground="black",
            title="black",
            progress_start="rgb(20,20,20)",
            progress_end="rgb(100,100,100)",
            progress_empty="rgb(220,220,220)",
            progress_indicator="rgb(0,0,0)",
            marker="rgb(40,40,40)",
            marker_label="rgb(20,20,20)",
            quote="rgb(80,80,80)",
            legend_elapsed="rgb(40,40,40)",
            legend_remaining="rgb(160,160,160)",
        ),
        "dark": _scheme(
            foreground="bright_white",
            title="bright_white",
            progress_start="rgb(220,220,220)",
            progress_end="rgb(160,160,160)",
            progress_empty="rgb(50,50,50)",
            progress_indicator="rgb(255,255,255)",
            marker="rgb(220,220,220)",
            marker_label="rgb(240,240,240)",
            quote="rgb(180,180,180)",
            legend_elapsed="rgb(220,220,220)",
            legend_remaining="rgb(100,100,100)",
        ),
    },
    {
        "name": "contrast",
        "light": _scheme(
            background="bright_white",
            foreground="black",
            title="black",
            progress_start="blue",
            progress_end="blue",
            progress_empty="white",
            progress_indicator="red",
            marker="black",
            marker_label="black",
            quote="black",
            legend_elapsed="blue",
            legend_remaining="white",
        ),
        "dark": _scheme(
            background="black",
            foreground="bright_white",
            title="bright_white",
            progress_start="cyan",
            progress_end="cyan",
            progress_empty="bright_black",
            progress_indicator="yellow",
            marker="bright_white",
            marker_label="bright_white",
            quote="bright_white",
            legend_elapsed="cyan",
            legend_remaining="bright_black",
        ),
    },
)


def get_all_themes() -> list[Theme]:
    return list(THEMES)


def get_theme_names() -> list[str]:
    return [theme["name"] for theme in THEMES]


def get_theme_by_name(name: str) -> Theme:
    for theme in THEMES:
        if theme["name"] == name:
            return theme
    raise ThemeNotFound(name)


def get_default_theme() -> Theme:
    return get_theme_by_name(DEFAULT_THEME_NAME)


def lookup_theme(name: str) -> Theme:
    """Return the theme called `name`, or the default theme if there is none."""
    try:
        return get_theme_by_name(name)
    except ThemeNotFound:
        logger.warning("Theme '%s' not found, using default theme", name)
        return get_default_theme()
