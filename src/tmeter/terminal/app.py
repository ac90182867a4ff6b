# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from tmeter import configuration as config_paths
from tmeter.errors import TerminalError
from tmeter.initialize import initialize
from tmeter.repository.configuration import CONFIGURATION_REPO
from tmeter.service.state import build_app_state, make_save_callback
from tmeter.terminal import configuration
from tmeter.terminal.custom_typer import AliasedTyperGroup
from tmeter.terminal.doc import doc
from tmeter.terminal.driver import FrameDriver
from tmeter.terminal.theme import themes

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="t-meter - time is fleeting",
    invoke_without_command=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="themes, th")(themes)
app.command(name="doc, d")(doc)


def validate_log_level(level: str) -> str:
    if level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"Choose from: {', '.join(LOG_LEVELS)}")
    return level.upper()


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Config file to use instead of the default location",
            dir_okay=False,
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Log file verbosity (DEBUG, INFO, WARNING, ERROR)",
            callback=validate_log_level,
        ),
    ] = "INFO",
) -> None:
    """
    t-meter - time is fleeting

    Without a command, shows the live view of the day.
    """
    initialize(config, log_level)
    if ctx.invoked_subcommand is None:
        run_dashboard()


@app.command(name="run, r")
def run_dashboard() -> None:
    """Show the live view of the day."""
    config = CONFIGURATION_REPO.get_config()
    state = build_app_state(config)
    driver = FrameDriver(
        state,
        save=make_save_callback(CONFIGURATION_REPO),
        docs_url=config_paths.get_docs_url(config),
    )
    try:
        driver.run()
    except (TerminalError, OSError) as error:
        Console(stderr=True).print(f"[red]Terminal error: {error}[/red]")
        raise typer.Exit(code=1)


def run() -> None:
    app()
