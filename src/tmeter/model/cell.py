# SPDX-License-Identifier: MIT

from typing import NamedTuple

from rich.style import Style

BLANK_STYLE = Style.null()


class Cell(NamedTuple):
    glyph: str
    style: Style


def blank_row(width: int) -> list[Cell]:
    return [Cell(" ", BLANK_STYLE) for _ in range(width)]
