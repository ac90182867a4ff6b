# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

import platformdirs

APP_NAME = "t-meter"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"
LOCAL_CONFIG_PATH = Path("./t-meter.yaml")

LOG_PATH = platformdirs.user_log_path(APP_NAME)
APP_LOG_PATH = LOG_PATH / "t-meter.log"

# Written at the top of every saved config file; "?" opens this file by default
CONFIG_HEADER = """\
# t-meter configuration file
# Customize your t-meter experience by editing the values below.

# =============================================================================
# KEYBOARD SHORTCUTS
# =============================================================================
#   q or Ctrl+C  - Quit the application
#   t            - Cycle through available themes
#   d            - Toggle between light and dark mode
#   s            - Cycle through progress bar styles
#   w            - Edit the wake-up time
#   b            - Edit the bed time
#   h            - Show or hide the help overlay
#   ?            - Open the documentation (this file unless docs_url is set)
#
# While editing a time, type HH:MM (24-hour clock), Enter saves and Esc cancels.

"""

# Set by set_config_path() when --config is given on the command line
CONFIG_OVERRIDE_PATH: Optional[Path] = None


class MarkerConfig(TypedDict):
    label: str
    time: str


class Configuration(TypedDict):
    theme_name: str
    theme_mode: str
    progress_bar_style: str
    wake_up_time: str
    bed_time: str
    markers: list[MarkerConfig]
    docs_url: NotRequired[Optional[str]]


DEFAULT_CONFIGURATION: Configuration = {
    "theme_name": "default",
    "theme_mode": "light",
    "progress_bar_style": "Analog",
    "wake_up_time": "07:00",
    "bed_time": "23:00",
    "markers": [],
    "docs_url": None,
}


def set_config_path(path: Optional[Path]) -> None:
    global CONFIG_OVERRIDE_PATH
    CONFIG_OVERRIDE_PATH = path


def get_config_paths() -> list[Path]:
    """
    Config file locations in priority order.

    The first entry is where the config is saved and where the default file
    is generated on first run.
    """
    paths: list[Path] = []
    if CONFIG_OVERRIDE_PATH is not None:
        paths.append(CONFIG_OVERRIDE_PATH)
    paths.append(APP_CONFIG_PATH)
    paths.append(LOCAL_CONFIG_PATH)
    return paths


def get_primary_config_path() -> Path:
    return get_config_paths()[0]


def get_docs_url(config: Configuration) -> str:
    """Documentation opened by the docs key; the commented config file by default."""
    docs_url = config.get("docs_url")
    if docs_url:
        return docs_url
    return get_primary_config_path().resolve().as_uri()
