# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypedDict


class MarkerKind(StrEnum):
    WAKE_UP = "wake_up"
    NOON = "noon"
    BED_TIME = "bed_time"
    CUSTOM = "custom"


class Marker(TypedDict):
    seconds: int
    time_label: str
    name_label: str
    kind: MarkerKind
