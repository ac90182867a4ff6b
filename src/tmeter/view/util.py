# SPDX-License-Identifier: MIT

from rich.style import Style
from rich.text import Text

from tmeter.model.cell import Cell
from tmeter.service.compositor import merge_cells


def row_to_text(row: list[Cell], end: str = "\n") -> Text:
    """Turn a cell row into a single line of rich Text, one span per style run."""
    parts = [
        (segment.text, segment.style or Style.null())
        for segment in merge_cells(row)
    ]
    return Text.assemble(*parts, no_wrap=True, overflow="crop", end=end)
