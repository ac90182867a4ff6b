# SPDX-License-Identifier: MIT

import logging
import webbrowser
from typing import Callable, Optional

import pendulum
from rich.console import Console, RenderableType
from rich.live import Live

from tmeter import time
from tmeter.model.app_state import AppState
from tmeter.model.input_mode import KeyOutcome
from tmeter.service.input import handle_key
from tmeter.service.state import SaveCallback
from tmeter.terminal.keyboard import KeyReader
from tmeter.view.dashboard import dashboard_view

logger = logging.getLogger(__name__)

POLL_TIMEOUT_SECONDS = 0.25


class FrameDriver:
    """
    Single-threaded render and poll loop.

    Each step renders a frame from the current state and clock, then waits up
    to POLL_TIMEOUT_SECONDS for one key press and hands it to the state
    machine. The loop ends when the state machine asks to quit.
    """

    def __init__(
        self,
        state: AppState,
        save: SaveCallback,
        docs_url: str,
        console: Optional[Console] = None,
        clock: Callable[[], pendulum.DateTime] = time.now_local,
    ) -> None:
        self.state = state
        self.save = save
        self.docs_url = docs_url
        self.console = console if console is not None else Console()
        self.clock = clock

    def render(self) -> RenderableType:
        return dashboard_view(self.state, self.clock(), self.console.size.width)

    def dispatch(self, key: str) -> bool:
        """Handle one key; returns False once the loop should stop."""
        outcome = handle_key(self.state, key, self.save)
        if outcome is KeyOutcome.QUIT:
            return False
        if outcome is KeyOutcome.OPEN_DOCS:
            self.open_docs()
        return True

    def open_docs(self) -> None:
        try:
            opened = webbrowser.open(self.docs_url)
        except webbrowser.Error as error:
            logger.warning("Failed to open %s: %s", self.docs_url, error)
            return
        if not opened:
            logger.warning("No browser available to open %s", self.docs_url)

    def run(self) -> None:
        with KeyReader() as key_reader, Live(
            self.render(),
            console=self.console,
            screen=True,
            auto_refresh=False,
            transient=True,
        ) as live:
            running = True
            while running:
                live.update(self.render(), refresh=True)
                try:
                    key = key_reader.read_key(POLL_TIMEOUT_SECONDS)
                except KeyboardInterrupt:
                    break
                if key is not None:
                    running = self.dispatch(key)
