# SPDX-License-Identifier: MIT

from typing import Iterable

from rich.style import Style

from tmeter.model.cell import Cell, blank_row


def text_start(position: int, length: int, width: int) -> int:
    """
    Compute the start column of a text centered on `position`.

    The start is shifted right to stay on the row and then left so the text
    does not run past the right edge. A text longer than the row starts at 0
    and is cut off at the row end.
    """
    start = max(0, position - length // 2)
    return min(start, max(0, width - length))


def place_text(row: list[Cell], position: int, text: str, style: Style) -> None:
    """Write `text` into `row` centered on `position`, dropping what overflows."""
    width = len(row)
    start = text_start(position, len(text), width)
    for offset, glyph in enumerate(text[: width - start]):
        row[start + offset] = Cell(glyph, style)


def place_all(
    width: int, items: Iterable[tuple[int, int, str]], style: Style
) -> list[Cell]:
    """
    Lay out several texts on one row.

    Args:
        width: Row width in cells
        items: (seconds, position, text) triples
        style: Style applied to every placed glyph

    Returns:
        The row. Items are placed in chronological order of their seconds so
        a later item overwrites an earlier one where the two overlap.
    """
    row = blank_row(width)
    for _, position, text in sorted(items, key=lambda item: item[0]):
        place_text(row, position, text, style)
    return row
