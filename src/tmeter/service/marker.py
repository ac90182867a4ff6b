# SPDX-License-Identifier: MIT

from tmeter.model.marker import Marker, MarkerKind
from tmeter.model.schedule import CustomMarker, DaySchedule
from tmeter.time import NOON_SECONDS, SECONDS_PER_DAY, format_seconds

MIN_WIDTH = 2


def day_ratio(seconds: int) -> float:
    return seconds / SECONDS_PER_DAY


def column_for_seconds(seconds: int, width: int) -> int:
    """
    Map a time of day onto a column of a bar that is `width` cells wide.

    The live pointer and every marker go through this function, so equal
    seconds always land on the same column. The divisor is the full width and
    the result is clamped to the last column.

    Args:
        seconds: Seconds since midnight, 0 to 86400 inclusive
        width: Width of the bar in cells

    Returns:
        A column in [0, width - 1]
    """
    position = round(day_ratio(seconds) * width)
    return max(0, min(position, width - 1))


def filled_columns(seconds: int, width: int) -> int:
    """Number of elapsed cells; columns below this index count as filled."""
    return max(0, min(round(day_ratio(seconds) * width), width))


def build_markers(
    schedule: DaySchedule, custom_markers: list[CustomMarker]
) -> list[Marker]:
    """
    Build the markers for one frame, in chronological order.

    Markers at the same time keep the order wake-up, noon, bed time, custom.
    """
    markers: list[Marker] = [
        _marker(schedule["wake_up"].seconds, "Wake Up", MarkerKind.WAKE_UP),
        _marker(NOON_SECONDS, "Noon", MarkerKind.NOON),
        _marker(schedule["bed_time"].seconds, "Bed Time", MarkerKind.BED_TIME),
    ]
    for custom_marker in custom_markers:
        markers.append(
            _marker(
                custom_marker["time"].seconds,
                custom_marker["label"],
                MarkerKind.CUSTOM,
            )
        )
    return sorted(markers, key=lambda marker: marker["seconds"])


def _marker(seconds: int, name_label: str, kind: MarkerKind) -> Marker:
    return {
        "seconds": seconds,
        "time_label": format_seconds(seconds),
        "name_label": name_label,
        "kind": kind,
    }
