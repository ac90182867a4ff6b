# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.table import Table
from rich.text import Text

from tmeter.data.themes import get_all_themes
from tmeter.model.marker import Marker
from tmeter.model.progress_bar_style import ProgressBarStyle
from tmeter.model.theme import ColorScheme, ThemeMode, get_colors
from tmeter.repository.configuration import CONFIGURATION_REPO
from tmeter.service.compositor import build_bar_row
from tmeter.service.marker import build_markers
from tmeter.service.validate import validate_time
from tmeter.view.util import row_to_text

SWATCH_WIDTH = 24
# 16:00, two thirds of the way through the day
SWATCH_SECONDS = 16 * 3600


def _swatch(colors: ColorScheme, markers: list[Marker]) -> Text:
    row = build_bar_row(
        SWATCH_SECONDS,
        SWATCH_WIDTH,
        colors,
        ProgressBarStyle.GRADIENT,
        markers,
    )
    return row_to_text(row, end="")


def themes() -> None:
    """List the available themes with a preview of each mode."""
    config = CONFIGURATION_REPO.get_config()
    markers = build_markers(
        {
            "wake_up": validate_time(config["wake_up_time"]),
            "bed_time": validate_time(config["bed_time"]),
        },
        [],
    )

    console = Console()
    table = Table()
    table.add_column("Theme", style="cyan")
    table.add_column("Light")
    table.add_column("Dark")

    for theme in get_all_themes():
        name = theme["name"]
        if name == config["theme_name"]:
            name = f"{name} (current, {config['theme_mode']})"
        table.add_row(
            name,
            _swatch(get_colors(theme, ThemeMode.LIGHT), markers),
            _swatch(get_colors(theme, ThemeMode.DARK), markers),
        )

    console.print(table)
