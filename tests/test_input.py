from __future__ import annotations

import unittest

from tests.helpers import SaveRecorder, make_state
from tmeter.model.input_mode import InputMode, KeyOutcome
from tmeter.model.progress_bar_style import ProgressBarStyle
from tmeter.model.theme import ThemeMode
from tmeter.model.time_of_day import TimeOfDay
from tmeter.service.input import handle_key


def press(state, save, *keys: str) -> list[KeyOutcome]:
    return [handle_key(state, key, save) for key in keys]


class TestEditing(unittest.TestCase):
    def test_invalid_hour_keeps_editing_and_schedule(self) -> None:
        state = make_state()
        save = SaveRecorder()
        press(state, save, "w", "9", "9", ":", "0", "0", "enter")

        self.assertIs(state["input_mode"], InputMode.EDITING_WAKE_UP)
        self.assertEqual(state["input_buffer"], "99:00")
        self.assertIn("hour must be 0-23", state["error"])
        self.assertEqual(state["schedule"]["wake_up"], TimeOfDay(7, 0))
        self.assertEqual(save.calls, [])

    def test_valid_time_is_committed_and_saved(self) -> None:
        state = make_state()
        save = SaveRecorder()
        press(state, save, "w", "0", "6", ":", "3", "0", "enter")

        self.assertIs(state["input_mode"], InputMode.NORMAL)
        self.assertEqual(state["schedule"]["wake_up"].format(), "06:30")
        self.assertEqual(state["input_buffer"], "")
        self.assertIsNone(state["error"])
        self.assertEqual(len(save.calls), 1)
        self.assertEqual(save.calls[0]["wake_up"], "06:30")

    def test_entering_edit_mode_seeds_buffer_and_clears_error(self) -> None:
        state = make_state(bed_time="22:15")
        state["error"] = "stale"
        handle_key(state, "b", SaveRecorder())
        self.assertIs(state["input_mode"], InputMode.EDITING_BED_TIME)
        self.assertEqual(state["input_buffer"], "22:15")
        self.assertIsNone(state["error"])

    def test_enter_on_seeded_buffer_keeps_value(self) -> None:
        state = make_state(bed_time="22:15")
        save = SaveRecorder()
        press(state, save, "b", "enter")
        self.assertIs(state["input_mode"], InputMode.NORMAL)
        self.assertEqual(state["schedule"]["bed_time"], TimeOfDay(22, 15))
        self.assertEqual(len(save.calls), 1)

    def test_backspace_edits_seeded_value(self) -> None:
        state = make_state()
        save = SaveRecorder()
        press(state, save, "w", "backspace")
        self.assertEqual(state["input_buffer"], "07:0")
        press(state, save, "5", "enter")
        self.assertEqual(state["schedule"]["wake_up"], TimeOfDay(7, 5))

    def test_backspace_on_empty_buffer(self) -> None:
        state = make_state()
        save = SaveRecorder()
        press(state, save, "w", "1", "backspace", "backspace")
        self.assertEqual(state["input_buffer"], "")

    def test_escape_discards_without_saving(self) -> None:
        state = make_state()
        save = SaveRecorder()
        press(state, save, "b", "0", "1", ":", "0", "0", "enter")
        self.assertEqual(state["schedule"]["bed_time"], TimeOfDay(1, 0))
        press(state, save, "b", "2", "esc")

        self.assertIs(state["input_mode"], InputMode.NORMAL)
        self.assertEqual(state["input_buffer"], "")
        self.assertEqual(state["schedule"]["bed_time"], TimeOfDay(1, 0))
        self.assertEqual(len(save.calls), 1)

    def test_escape_after_error_clears_it(self) -> None:
        state = make_state()
        save = SaveRecorder()
        press(state, save, "w", "1", "enter")
        self.assertIn("HH:MM", state["error"])
        press(state, save, "esc")
        self.assertIsNone(state["error"])
        self.assertEqual(state["schedule"]["wake_up"], TimeOfDay(7, 0))

    def test_other_keys_are_ignored_while_editing(self) -> None:
        state = make_state()
        save = SaveRecorder()
        outcomes = press(state, save, "w", "1", "q", "t", "x", "2", ":", "4", "5")
        self.assertEqual(state["input_buffer"], "12:45")
        self.assertTrue(all(o is KeyOutcome.CONTINUE for o in outcomes))
        self.assertEqual(state["theme_index"], 0)

    def test_buffer_is_capped(self) -> None:
        state = make_state()
        press(state, SaveRecorder(), "w", "1", "2", ":", "3", "0", "9", "9")
        self.assertEqual(state["input_buffer"], "12:30")

    def test_invalid_minute_then_fix(self) -> None:
        state = make_state()
        save = SaveRecorder()
        press(state, save, "w", "0", "6", ":", "7", "5", "enter")
        self.assertIn("minute must be 0-59", state["error"])
        press(state, save, "backspace", "backspace", "1", "5", "enter")
        self.assertEqual(state["schedule"]["wake_up"], TimeOfDay(6, 15))
        self.assertIsNone(state["error"])


class TestHelp(unittest.TestCase):
    def test_help_swallows_other_keys(self) -> None:
        state = make_state()
        save = SaveRecorder()
        outcomes = press(state, save, "h", "t", "s", "w", "ctrl+c")
        self.assertIs(state["input_mode"], InputMode.HELP)
        self.assertEqual(state["theme_index"], 0)
        self.assertIs(state["progress_bar_style"], ProgressBarStyle.ANALOG)
        self.assertTrue(all(o is KeyOutcome.CONTINUE for o in outcomes))
        self.assertEqual(save.calls, [])

    def test_help_closes_on_help_quit_or_escape(self) -> None:
        for key in ("h", "q", "esc"):
            with self.subTest(key=key):
                state = make_state()
                press(state, SaveRecorder(), "h")
                outcome = handle_key(state, key, SaveRecorder())
                self.assertIs(outcome, KeyOutcome.CONTINUE)
                self.assertIs(state["input_mode"], InputMode.NORMAL)


class TestNormal(unittest.TestCase):
    def test_quit_keys(self) -> None:
        for key in ("q", "ctrl+c"):
            with self.subTest(key=key):
                self.assertIs(
                    handle_key(make_state(), key, SaveRecorder()), KeyOutcome.QUIT
                )

    def test_docs_key(self) -> None:
        self.assertIs(
            handle_key(make_state(), "?", SaveRecorder()), KeyOutcome.OPEN_DOCS
        )

    def test_theme_cycle_wraps_around(self) -> None:
        state = make_state()
        save = SaveRecorder()
        count = len(state["themes"])
        for _ in range(count):
            handle_key(state, "t", save)
        self.assertEqual(state["theme_index"], 0)
        self.assertEqual(len(save.calls), count)
        self.assertEqual(save.calls[0]["theme_index"], 1)

    def test_theme_cycle_multiples(self) -> None:
        state = make_state(theme_name="forest")
        start = state["theme_index"]
        count = len(state["themes"])
        for _ in range(count * 3):
            handle_key(state, "t", SaveRecorder())
        self.assertEqual(state["theme_index"], start)

    def test_mode_toggle_and_style_cycle_save(self) -> None:
        state = make_state()
        save = SaveRecorder()
        press(state, save, "d", "s")
        self.assertIs(state["theme_mode"], ThemeMode.DARK)
        self.assertIs(state["progress_bar_style"], ProgressBarStyle.GRADIENT)
        self.assertEqual(len(save.calls), 2)
        press(state, save, "s", "s", "d")
        self.assertIs(state["progress_bar_style"], ProgressBarStyle.ANALOG)
        self.assertIs(state["theme_mode"], ThemeMode.LIGHT)

    def test_unknown_keys_do_nothing(self) -> None:
        state = make_state()
        save = SaveRecorder()
        outcomes = press(state, save, "x", "1", "enter", "esc", "backspace")
        self.assertTrue(all(o is KeyOutcome.CONTINUE for o in outcomes))
        self.assertIs(state["input_mode"], InputMode.NORMAL)
        self.assertEqual(save.calls, [])


if __name__ == "__main__":
    unittest.main(verbosity=2)
