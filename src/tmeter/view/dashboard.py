# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich.align import Align
from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.style import Style
from rich.text import Text

from tmeter.data.quotes import quote_for_hour
from tmeter.model.app_state import AppState
from tmeter.model.input_mode import InputMode
from tmeter.model.theme import ColorScheme
from tmeter.service.compositor import BAR_HEIGHT, compose_grid
from tmeter.service.marker import MIN_WIDTH, build_markers
from tmeter.service.state import current_colors, current_theme
from tmeter.time import format_seconds, remaining_str, seconds_since_midnight
from tmeter.view.help import help_view
from tmeter.view.util import row_to_text

TITLE = "time is fleeting"
TOP_SPACER_LINES = 3
QUOTE_SPACER_LINES = 2


def dashboard_view(
    state: AppState, now: pendulum.DateTime, width: int
) -> RenderableType:
    """
    Build the whole screen for one frame.

    Rendering only reads the state and the clock reading, so calling it twice
    with the same arguments gives the same output.
    """
    colors = current_colors(state)

    if state["input_mode"] is InputMode.HELP:
        body: RenderableType = help_view(state, colors)
    else:
        body = Group(*__frame_parts(state, colors, now, width))

    background = colors["background"]
    if background is not None:
        return Padding(
            body, style=Style(bgcolor=background, color=colors["foreground"])
        )
    return body


def __frame_parts(
    state: AppState, colors: ColorScheme, now: pendulum.DateTime, width: int
) -> list[RenderableType]:
    parts: list[RenderableType] = [
        Text(TITLE, style=Style(color=colors["title"], bold=True)),
    ]

    if width < MIN_WIDTH:
        return parts

    seconds = seconds_since_midnight(now)
    markers = build_markers(state["schedule"], state["custom_markers"])
    grid = compose_grid(
        seconds, width, colors, state["progress_bar_style"], markers
    )

    parts.extend(Text("") for _ in range(TOP_SPACER_LINES))
    parts.append(row_to_text(grid["time"]))
    parts.append(row_to_text(grid["pointer"]))
    bar = row_to_text(grid["bar"])
    parts.extend(bar.copy() for _ in range(BAR_HEIGHT))
    parts.append(row_to_text(grid["ticks"]))
    parts.append(row_to_text(grid["time_labels"]))
    parts.append(row_to_text(grid["name_labels"]))
    parts.extend(Text("") for _ in range(QUOTE_SPACER_LINES))
    parts.append(quote_view(now.hour, colors))
    parts.append(Text(""))
    parts.append(legend_view(seconds, colors))

    prompt = edit_prompt_view(state, colors)
    if prompt is not None:
        parts.append(Text(""))
        parts.append(prompt)

    parts.append(Text(""))
    parts.append(status_view(state, colors))
    return parts


def quote_view(hour: int, colors: ColorScheme) -> RenderableType:
    quote = quote_for_hour(hour)
    quote_style = Style(color=colors["quote"], italic=True)
    text = Text(f'"{quote["text"]}"', style=quote_style, justify="center")
    return Group(
        Align.center(text),
        Align.center(Text(f"~ {quote['author']}", style=quote_style)),
    )


def legend_view(seconds: int, colors: ColorScheme) -> RenderableType:
    legend = Text.assemble(
        ("█ Elapsed: ", Style(color=colors["legend_elapsed"])),
        f"{format_seconds(seconds)}   ",
        ("▊ Remaining: ", Style(color=colors["legend_remaining"])),
        remaining_str(seconds),
    )
    return Align.center(legend)


def edit_prompt_view(state: AppState, colors: ColorScheme) -> Optional[Text]:
    mode = state["input_mode"]
    if mode is InputMode.EDITING_WAKE_UP:
        label = "Wake-up time"
    elif mode is InputMode.EDITING_BED_TIME:
        label = "Bed time"
    else:
        return None

    prompt = Text.assemble(
        (f"{label} (HH:MM): ", Style(color=colors["title"], bold=True)),
        (state["input_buffer"], Style(color=colors["foreground"])),
        ("_", Style(color=colors["progress_indicator"], blink=True)),
        ("   enter save · esc cancel", Style(color=colors["marker_label"])),
    )
    if state["error"] is not None:
        prompt.append(f"   {state['error']}", style=Style(color="red", bold=True))
    return prompt


def status_view(state: AppState, colors: ColorScheme) -> Text:
    return Text.assemble(
        (
            f"{current_theme(state)['name']} · {state['theme_mode'].value}"
            f" · {state['progress_bar_style'].value}",
            Style(color=colors["marker_label"]),
        ),
        ("   h help · q quit", Style(color=colors["marker_label"], dim=True)),
    )
