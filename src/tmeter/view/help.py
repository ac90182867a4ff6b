# SPDX-License-Identifier: MIT

from rich.console import RenderableType
from rich.panel import Panel
from rich.style import Style
from rich.table import Table

from tmeter.model.app_state import AppState
from tmeter.model.theme import ColorScheme

KEY_BINDINGS: tuple[tuple[str, str], ...] = (
    ("q / Ctrl+C", "Quit"),
    ("t", "Cycle theme"),
    ("d", "Toggle light / dark mode"),
    ("s", "Cycle progress bar style"),
    ("w", "Edit wake-up time"),
    ("b", "Edit bed time"),
    ("h", "Show / hide this help"),
    ("?", "Open documentation"),
)

EDIT_KEY_BINDINGS: tuple[tuple[str, str], ...] = (
    ("0-9 :", "Type a time as HH:MM"),
    ("Backspace", "Delete last character"),
    ("Enter", "Validate and save"),
    ("Esc", "Cancel without saving"),
)


def help_view(state: AppState, colors: ColorScheme) -> RenderableType:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style=Style(color=colors["progress_indicator"], bold=True))
    table.add_column("Action", style=Style(color=colors["foreground"]))

    for key, action in KEY_BINDINGS:
        table.add_row(key, action)
    table.add_row("", "")
    table.add_row("", "While editing a time", style=Style(color=colors["title"]))
    for key, action in EDIT_KEY_BINDINGS:
        table.add_row(key, action)

    schedule = state["schedule"]
    subtitle = (
        f"wake {schedule['wake_up'].format()} · bed {schedule['bed_time'].format()}"
        " · h / q / esc to close"
    )
    return Panel(
        table,
        title="t-meter help",
        subtitle=subtitle,
        border_style=Style(color=colors["marker"]),
        expand=False,
    )
