# SPDX-License-Identifier: MIT

from enum import StrEnum


class TMeterError(Exception):
    pass


class ConfigLoadError(TMeterError):
    """Raised when a config file cannot be read or parsed."""


class ConfigSaveError(TMeterError):
    """Raised when the config cannot be written back to disk."""


class ThemeNotFound(TMeterError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Theme '{name}' not found")
        self.name = name


class InvalidThemeMode(TMeterError):
    def __init__(self, mode: str) -> None:
        super().__init__(f"Invalid theme mode: {mode}")
        self.mode = mode


class ValidationErrorKind(StrEnum):
    BAD_FORMAT = "bad_format"
    BAD_HOUR = "bad_hour"
    BAD_MINUTE = "bad_minute"


VALIDATION_MESSAGES = {
    ValidationErrorKind.BAD_FORMAT: "Invalid format, use HH:MM",
    ValidationErrorKind.BAD_HOUR: "Invalid hour, hour must be 0-23",
    ValidationErrorKind.BAD_MINUTE: "Invalid minute, minute must be 0-59",
}


class TimeValidationError(TMeterError):
    def __init__(self, kind: ValidationErrorKind) -> None:
        super().__init__(VALIDATION_MESSAGES[kind])
        self.kind = kind

    @property
    def message(self) -> str:
        return VALIDATION_MESSAGES[self.kind]


class TerminalError(TMeterError):
    """Raised when the terminal cannot be put into or out of raw input mode."""
