# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Optional

from tmeter import configuration
from tmeter.log import setup_logging
from tmeter.repository.configuration import CONFIGURATION_REPO

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_TEMPLATE = configuration.CONFIG_HEADER + """\
# =============================================================================
# THEME
# =============================================================================
# Theme name, one of:
#   "default"    - Clean monochrome theme with subtle colors
#   "ocean"      - Calming blue ocean-inspired theme
#   "forest"     - Natural green forest theme
#   "sunset"     - Warm orange and red sunset theme
#   "monochrome" - Pure black and white theme
#   "contrast"   - High contrast theme with a solid background
theme_name: "default"

# Theme mode, "light" or "dark"
theme_mode: "light"

# =============================================================================
# PROGRESS BAR
# =============================================================================
#   "Gradient" - Smooth color gradient across the elapsed part of the day
#   "Grainy"   - Coarse two-tone shading
#   "Analog"   - Vertical bars simulating an analog meter
progress_bar_style: "Analog"

# =============================================================================
# SLEEP SCHEDULE (24-hour format HH:MM, keep the quotes)
# =============================================================================
wake_up_time: "07:00"
bed_time: "23:00"

# =============================================================================
# CUSTOM MARKERS
# =============================================================================
# Extra labelled ticks under the bar, for example:
# markers:
#   - label: "Lunch"
#     time: "12:30"
markers: []

# Page opened by the "?" key
# docs_url: "https://example.org/my-notes"
"""


def initialize(config_path: Optional[Path] = None, log_level: str = "INFO") -> None:
    configuration.set_config_path(config_path)
    setup_logging(log_level)
    __ensure_config_files()
    CONFIGURATION_REPO.reset()


def __ensure_config_files() -> None:
    if any(path.is_file() for path in configuration.get_config_paths()):
        return

    path = configuration.get_primary_config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(DEFAULT_CONFIG_TEMPLATE)
    except OSError as error:
        logger.warning("Failed to generate default config at %s: %s", path, error)
        return
    logger.info("Generated config file at: %s", path)
