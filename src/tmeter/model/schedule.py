# SPDX-License-Identifier: MIT

from typing import TypedDict

from tmeter.model.time_of_day import TimeOfDay


class DaySchedule(TypedDict):
    wake_up: TimeOfDay
    bed_time: TimeOfDay


class CustomMarker(TypedDict):
    label: str
    time: TimeOfDay
