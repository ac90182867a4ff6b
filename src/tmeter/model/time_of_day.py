# SPDX-License-Identifier: MIT

from typing import NamedTuple


class TimeOfDay(NamedTuple):
    hour: int
    minute: int

    @property
    def seconds(self) -> int:
        return self.hour * 3600 + self.minute * 60

    def format(self) -> str:
        return f"{self.hour:02}:{self.minute:02}"
