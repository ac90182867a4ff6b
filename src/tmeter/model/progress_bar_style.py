# SPDX-License-Identifier: MIT

from enum import StrEnum


class ProgressBarStyle(StrEnum):
    GRADIENT = "Gradient"
    GRAINY = "Grainy"
    ANALOG = "Analog"

    def cycle(self) -> "ProgressBarStyle":
        members = list(ProgressBarStyle)
        return members[(members.index(self) + 1) % len(members)]
