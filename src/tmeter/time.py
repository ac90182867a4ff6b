# SPDX-License-Identifier: MIT

import pendulum

SECONDS_PER_DAY = 24 * 60 * 60
NOON_SECONDS = 12 * 60 * 60


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def seconds_since_midnight(datetime: pendulum.DateTime) -> int:
    return datetime.hour * 3600 + datetime.minute * 60 + datetime.second


def format_seconds(seconds: int) -> str:
    """Format seconds since midnight as a zero-padded HH:MM string.

    86400 formats as "24:00" so the end of the day keeps its own label.
    """
    return f"{seconds // 3600:02}:{(seconds % 3600) // 60:02}"


def remaining_str(seconds: int) -> str:
    return format_seconds(SECONDS_PER_DAY - seconds)


def clock_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("HH:mm")
