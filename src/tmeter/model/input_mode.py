# SPDX-License-Identifier: MIT

from enum import Enum


class InputMode(Enum):
    NORMAL = "normal"
    HELP = "help"
    EDITING_WAKE_UP = "editing_wake_up"
    EDITING_BED_TIME = "editing_bed_time"


class KeyOutcome(Enum):
    CONTINUE = "continue"
    QUIT = "quit"
    OPEN_DOCS = "open_docs"
