# SPDX-License-Identifier: MIT

from typing import Iterable, TypedDict

from rich.color import Color, ColorType
from rich.segment import Segment
from rich.style import Style

from tmeter.model.cell import Cell, blank_row
from tmeter.model.marker import Marker, MarkerKind
from tmeter.model.progress_bar_style import ProgressBarStyle
from tmeter.model.theme import ColorScheme
from tmeter.service.marker import column_for_seconds, filled_columns
from tmeter.service.placement import place_all, place_text
from tmeter.time import format_seconds

BAR_HEIGHT = 4
POINTER_GLYPH = "|"
BAR_MARKER_GLYPH = "┊"
TICK_GLYPH = "|"

# (filled, empty) glyphs per style
BAR_GLYPHS: dict[ProgressBarStyle, tuple[str, str]] = {
    ProgressBarStyle.GRADIENT: ("█", "█"),
    ProgressBarStyle.GRAINY: ("▓", "░"),
    ProgressBarStyle.ANALOG: ("┃", "│"),
}

BAR_OVERLAY_KINDS = (MarkerKind.WAKE_UP, MarkerKind.BED_TIME)


class RenderGrid(TypedDict):
    width: int
    time: list[Cell]
    pointer: list[Cell]
    bar: list[Cell]
    ticks: list[Cell]
    time_labels: list[Cell]
    name_labels: list[Cell]


def interpolate_color(start: str, end: str, t: float) -> Color:
    """
    Linear interpolation between two colors.

    Each channel is c1 + (c2 - c1) * t truncated to a byte. When either color
    is not a truecolor RGB value the start color is returned as is.
    """
    start_color = Color.parse(start)
    end_color = Color.parse(end)
    if (
        start_color.type != ColorType.TRUECOLOR
        or end_color.type != ColorType.TRUECOLOR
        or start_color.triplet is None
        or end_color.triplet is None
    ):
        return start_color

    channels = [
        int(c1 + (c2 - c1) * t)
        for c1, c2 in zip(start_color.triplet, end_color.triplet)
    ]
    return Color.from_rgb(*[max(0, min(channel, 255)) for channel in channels])


def base_cell(
    column: int,
    width: int,
    filled: int,
    colors: ColorScheme,
    bar_style: ProgressBarStyle,
) -> Cell:
    filled_glyph, empty_glyph = BAR_GLYPHS[bar_style]
    if column >= filled:
        return Cell(empty_glyph, Style(color=colors["progress_empty"]))

    if bar_style is ProgressBarStyle.GRADIENT:
        color = interpolate_color(
            colors["progress_start"], colors["progress_end"], column / width
        )
        return Cell(filled_glyph, Style(color=color))
    return Cell(filled_glyph, Style(color=colors["progress_start"]))


def build_bar_row(
    seconds: int,
    width: int,
    colors: ColorScheme,
    bar_style: ProgressBarStyle,
    markers: list[Marker],
) -> list[Cell]:
    """
    Build one line of the progress bar, one cell per column.

    The live pointer column always shows the indicator. Wake-up and bed time
    columns show a marker glyph unless the pointer is on them. Every other
    column gets the filled or empty glyph of the active bar style.
    """
    pointer_column = column_for_seconds(seconds, width)
    filled = filled_columns(seconds, width)
    marker_columns = {
        column_for_seconds(marker["seconds"], width)
        for marker in markers
        if marker["kind"] in BAR_OVERLAY_KINDS
    }
    pointer_style = Style(color=colors["progress_indicator"], bold=True)
    marker_style = Style(color=colors["marker"])

    row: list[Cell] = []
    for column in range(width):
        if column == pointer_column:
            row.append(Cell(POINTER_GLYPH, pointer_style))
        elif column in marker_columns:
            row.append(Cell(BAR_MARKER_GLYPH, marker_style))
        else:
            row.append(base_cell(column, width, filled, colors, bar_style))
    return row


def merge_cells(cells: Iterable[Cell]) -> list[Segment]:
    """
    Collapse adjacent cells with equal styles into a single segment.

    Styles compare exactly (glyph attributes, color and modifiers), so the
    number of segments equals the number of visually distinct runs.
    """
    segments: list[Segment] = []
    for cell in cells:
        if segments and segments[-1].style == cell.style:
            last = segments[-1]
            segments[-1] = Segment(last.text + cell.glyph, last.style)
        else:
            segments.append(Segment(cell.glyph, cell.style))
    return segments


def compose_grid(
    seconds: int,
    width: int,
    colors: ColorScheme,
    bar_style: ProgressBarStyle,
    markers: list[Marker],
) -> RenderGrid:
    pointer_column = column_for_seconds(seconds, width)

    time_row = blank_row(width)
    place_text(
        time_row,
        pointer_column,
        format_seconds(seconds),
        Style(color=colors["foreground"], bold=True),
    )

    pointer_row = blank_row(width)
    pointer_row[pointer_column] = Cell(
        POINTER_GLYPH, Style(color=colors["progress_indicator"])
    )

    marker_style = Style(color=colors["marker"])
    ticks_row = blank_row(width)
    for marker in markers:
        ticks_row[column_for_seconds(marker["seconds"], width)] = Cell(
            TICK_GLYPH, marker_style
        )

    time_labels = place_all(
        width,
        [
            (
                marker["seconds"],
                column_for_seconds(marker["seconds"], width),
                marker["time_label"],
            )
            for marker in markers
        ],
        marker_style,
    )
    name_labels = place_all(
        width,
        [
            (
                marker["seconds"],
                column_for_seconds(marker["seconds"], width),
                marker["name_label"],
            )
            for marker in markers
        ],
        Style(color=colors["marker_label"]),
    )

    return {
        "width": width,
        "time": time_row,
        "pointer": pointer_row,
        "bar": build_bar_row(seconds, width, colors, bar_style, markers),
        "ticks": ticks_row,
        "time_labels": time_labels,
        "name_labels": name_labels,
    }
