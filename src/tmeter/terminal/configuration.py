# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from tmeter import configuration
from tmeter.configuration import MarkerConfig
from tmeter.errors import ConfigSaveError
from tmeter.model.progress_bar_style import ProgressBarStyle
from tmeter.model.theme import ThemeMode
from tmeter.repository.configuration import CONFIGURATION_REPO
from tmeter.terminal.custom_typer import AliasedTyperGroup
from tmeter.terminal.validate import (
    validate_markers,
    validate_theme_name,
    validate_time_option,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("theme_name", config["theme_name"])
    table.add_row("theme_mode", config["theme_mode"])
    table.add_row("progress_bar_style", config["progress_bar_style"])
    table.add_row("wake_up_time", config["wake_up_time"])
    table.add_row("bed_time", config["bed_time"])
    table.add_row("docs_url", configuration.get_docs_url(config))

    console.print(table)

    markers = config["markers"]
    if markers:
        console.print("\n[bold]Markers[/bold]")
        markers_table = Table()
        markers_table.add_column("Label", style="cyan")
        markers_table.add_column("Time", style="magenta")
        for marker in sorted(markers, key=lambda m: m["time"]):
            markers_table.add_row(marker["label"], marker["time"])
        console.print(markers_table)

    loaded_from = CONFIGURATION_REPO.loaded_from
    console.print()
    console.print(
        f"Loaded from: {loaded_from}" if loaded_from else "Using default configuration"
    )


@app.command("set, s")
def set(
    theme_name: Annotated[
        Optional[str],
        typer.Option(
            "--theme",
            help="Theme name (see 't-meter themes')",
            callback=validate_theme_name,
        ),
    ] = None,
    theme_mode: Annotated[
        Optional[ThemeMode],
        typer.Option("--mode", help="Light or dark variant of the theme"),
    ] = None,
    progress_bar_style: Annotated[
        Optional[ProgressBarStyle],
        typer.Option("--style", help="Progress bar style"),
    ] = None,
    wake_up_time: Annotated[
        Optional[str],
        typer.Option(
            "--wake-up",
            help="Wake-up time, HH:MM 24-hour",
            callback=validate_time_option,
        ),
    ] = None,
    bed_time: Annotated[
        Optional[str],
        typer.Option(
            "--bed-time",
            help="Bed time, HH:MM 24-hour",
            callback=validate_time_option,
        ),
    ] = None,
    add_markers: Annotated[
        Optional[list[str]],
        typer.Option(
            "--add-marker",
            help="Add a custom marker as LABEL=HH:MM (accepts multiple)",
            callback=validate_markers,
        ),
    ] = None,
    clear_markers: Annotated[
        bool, typer.Option("--clear-markers", help="Remove all custom markers")
    ] = False,
    docs_url: Annotated[
        Optional[str],
        typer.Option("--docs-url", help="Page opened by the '?' key"),
    ] = None,
    remove_docs_url: Annotated[
        bool,
        typer.Option("--remove-docs-url", help="Open the config file on '?' again"),
    ] = False,
) -> None:
    """Update configuration settings."""
    markers: Optional[list[MarkerConfig]] = None
    if clear_markers:
        markers = []
    if add_markers:
        existing = [] if clear_markers else CONFIGURATION_REPO.get_config()["markers"]
        markers = existing + add_markers  # type: ignore[operator]

    CONFIGURATION_REPO.update_config(
        theme_name=theme_name,
        theme_mode=theme_mode.value if theme_mode is not None else None,
        progress_bar_style=(
            progress_bar_style.value if progress_bar_style is not None else None
        ),
        wake_up_time=wake_up_time,
        bed_time=bed_time,
        markers=markers,
        docs_url=docs_url,
        remove_docs_url=remove_docs_url,
    )

    try:
        CONFIGURATION_REPO.save()
    except ConfigSaveError as error:
        Console(stderr=True).print(f"[red]{error}[/red]")
        raise typer.Exit(code=1)

    view()


@app.command("path, p")
def path() -> None:
    """Show where the config and log files live."""
    console = Console()
    table = Table()
    table.add_column("File", style="cyan")
    table.add_column("Path", style="magenta")
    table.add_column("Exists")

    for index, config_path in enumerate(configuration.get_config_paths()):
        label = "config (saved here)" if index == 0 else "config (fallback)"
        table.add_row(label, str(config_path), "✓" if config_path.is_file() else "✗")
    table.add_row(
        "log",
        str(configuration.APP_LOG_PATH),
        "✓" if configuration.APP_LOG_PATH.is_file() else "✗",
    )
    console.print(table)
