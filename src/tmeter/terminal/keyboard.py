# SPDX-License-Identifier: MIT

import logging
import os
import select
import sys
import time
from typing import Any, Optional

from tmeter.errors import TerminalError

logger = logging.getLogger(__name__)

IS_WINDOWS = os.name == "nt"

if IS_WINDOWS:
    import msvcrt
else:
    import termios
    import tty

CONTROL_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x03": "ctrl+c",
    "\x1b": "esc",
}


class KeyReader:
    """
    Read single key presses from the terminal without echo.

    Used as a context manager: cbreak mode is set on enter and the previous
    terminal settings are restored on exit, also when the body raises.
    """

    def __init__(self) -> None:
        self._fd: Optional[int] = None
        self._old_settings: Optional[list[Any]] = None

    def __enter__(self) -> "KeyReader":
        if IS_WINDOWS:
            return self
        try:
            self._fd = sys.stdin.fileno()
            self._old_settings = termios.tcgetattr(self._fd)
            # Without ISIG ctrl+c arrives as a key instead of SIGINT
            tty.setcbreak(self._fd)
            attributes = termios.tcgetattr(self._fd)
            attributes[3] &= ~termios.ISIG
            termios.tcsetattr(self._fd, termios.TCSADRAIN, attributes)
        except (termios.error, OSError, ValueError) as error:
            self.restore()
            raise TerminalError(
                f"Cannot read keys from the terminal: {error}"
            ) from error
        return self

    def __exit__(self, exc_type: Optional[type], *_: object) -> None:
        if exc_type is None:
            self.restore()
            return
        # Keep the exception already in flight
        try:
            self.restore()
        except TerminalError as error:
            logger.warning("%s", error)

    def restore(self) -> None:
        if self._fd is None or self._old_settings is None:
            return
        old_settings, self._old_settings = self._old_settings, None
        try:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, old_settings)
        except (termios.error, OSError) as error:
            raise TerminalError(
                f"Cannot restore terminal settings: {error}"
            ) from error

    def read_key(self, timeout: float) -> Optional[str]:
        """Wait up to `timeout` seconds for a key and return its name, or None."""
        if IS_WINDOWS:
            return self._read_key_windows(timeout)
        return self._read_key_posix(timeout)

    def _read_key_posix(self, timeout: float) -> Optional[str]:
        assert self._fd is not None
        ready, _, _ = select.select([self._fd], [], [], timeout)
        if not ready:
            return None

        data = os.read(self._fd, 1)
        if not data:
            return None
        if data == b"\x1b":
            # Swallow the rest of an escape sequence (arrow keys and the like)
            sequence = b""
            while select.select([self._fd], [], [], 0.01)[0]:
                chunk = os.read(self._fd, 8)
                if not chunk:
                    break
                sequence += chunk
            return "esc" if not sequence else None
        if data[0] >= 0x80:
            # Multi-byte UTF-8, read the continuation bytes
            length = 2 if data[0] < 0xE0 else 3 if data[0] < 0xF0 else 4
            missing = length - 1
            while missing and select.select([self._fd], [], [], 0.05)[0]:
                chunk = os.read(self._fd, missing)
                if not chunk:
                    break
                data += chunk
                missing -= len(chunk)
        return normalize_key(data.decode("utf-8", errors="ignore"))

    def _read_key_windows(self, timeout: float) -> Optional[str]:
        deadline = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= deadline:
                return None
            time.sleep(0.01)

        character = msvcrt.getwch()
        if character in ("\x00", "\xe0"):
            # Function and arrow keys come as two characters
            msvcrt.getwch()
            return None
        return normalize_key(character)


def normalize_key(character: str) -> Optional[str]:
    if not character:
        return None
    if character in CONTROL_KEYS:
        return CONTROL_KEYS[character]
    if character.isprintable():
        return character
    return None
