from __future__ import annotations

from tmeter import configuration
from tmeter.model.app_state import AppState
from tmeter.service.state import build_app_state


def make_config(**overrides) -> configuration.Configuration:
    config: configuration.Configuration = {
        "theme_name": "default",
        "theme_mode": "light",
        "progress_bar_style": "Analog",
        "wake_up_time": "07:00",
        "bed_time": "23:00",
        "markers": [],
        "docs_url": None,
    }
    config.update(overrides)  # type: ignore[typeddict-item]
    return config


def make_state(**overrides) -> AppState:
    return build_app_state(make_config(**overrides))


class SaveRecorder:
    def __init__(self) -> None:
        self.calls: list[dict] = []

    def __call__(self, state: AppState) -> None:
        self.calls.append(
            {
                "wake_up": state["schedule"]["wake_up"].format(),
                "bed_time": state["schedule"]["bed_time"].format(),
                "theme_index": state["theme_index"],
                "theme_mode": state["theme_mode"],
                "progress_bar_style": state["progress_bar_style"],
            }
        )
