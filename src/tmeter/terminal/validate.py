# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from tmeter.configuration import MarkerConfig
from tmeter.data.themes import get_theme_names
from tmeter.errors import TimeValidationError
from tmeter.service.validate import validate_time


def validate_time_option(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        return validate_time(value).format()
    except TimeValidationError as error:
        raise typer.BadParameter(error.message)


def validate_theme_name(name: Optional[str]) -> Optional[str]:
    if name is None:
        return None
    names = get_theme_names()
    if name not in names:
        raise typer.BadParameter(
            f"Unknown theme '{name}', choose from: {', '.join(names)}"
        )
    return name


def validate_markers(values: Optional[list[str]]) -> Optional[list[MarkerConfig]]:
    """
    Parse LABEL=HH:MM marker options.

    Raises:
        typer.BadParameter: If a value has no "=", an empty label or a bad time
    """
    if not values:
        return None

    markers: list[MarkerConfig] = []
    for value in values:
        label, separator, time_text = value.rpartition("=")
        label = label.strip()
        if not separator or not label:
            raise typer.BadParameter(f"Expected LABEL=HH:MM, got '{value}'")
        try:
            time_of_day = validate_time(time_text.strip())
        except TimeValidationError as error:
            raise typer.BadParameter(f"{label}: {error.message}")
        markers.append({"label": label, "time": time_of_day.format()})
    return markers
