from __future__ import annotations

import unittest

from rich.style import Style

from tmeter.model.cell import blank_row
from tmeter.service.placement import place_all, place_text, text_start

STYLE = Style(color="cyan")


def row_text(row) -> str:
    return "".join(cell.glyph for cell in row)


class TestTextStart(unittest.TestCase):
    def test_centered_on_position(self) -> None:
        self.assertEqual(text_start(10, 5, 20), 8)

    def test_clamped_at_left_edge(self) -> None:
        self.assertEqual(text_start(0, 5, 20), 0)
        self.assertEqual(text_start(1, 5, 20), 0)

    def test_shifted_left_at_right_edge(self) -> None:
        self.assertEqual(text_start(19, 5, 20), 15)

    def test_text_longer_than_row_starts_at_zero(self) -> None:
        self.assertEqual(text_start(3, 10, 4), 0)

    def test_never_overflows(self) -> None:
        for width in range(1, 30):
            for length in range(0, 35):
                for position in range(width):
                    start = text_start(position, length, width)
                    self.assertGreaterEqual(start, 0)
                    self.assertLessEqual(start + min(length, width), width)


class TestPlaceText(unittest.TestCase):
    def test_place_in_middle(self) -> None:
        row = blank_row(11)
        place_text(row, 5, "12:00", STYLE)
        self.assertEqual(row_text(row), "   12:00   ")
        self.assertEqual(row[3].style, STYLE)
        self.assertEqual(len(row), 11)

    def test_long_text_is_truncated(self) -> None:
        row = blank_row(4)
        place_text(row, 2, "Bed Time", STYLE)
        self.assertEqual(row_text(row), "Bed ")
        self.assertEqual(len(row), 4)


class TestPlaceAll(unittest.TestCase):
    def test_later_time_overwrites_earlier_regardless_of_input_order(self) -> None:
        early = (7 * 3600, 3, "AAAAA")
        late = (9 * 3600, 5, "BBBBB")
        forward = place_all(12, [early, late], STYLE)
        backward = place_all(12, [late, early], STYLE)
        self.assertEqual(row_text(forward), " AABBBBB    ")
        self.assertEqual(row_text(backward), row_text(forward))

    def test_row_is_padded_to_width(self) -> None:
        row = place_all(30, [(0, 0, "Wake Up")], STYLE)
        self.assertEqual(len(row), 30)
        self.assertEqual(row_text(row).rstrip(), "Wake Up")


if __name__ == "__main__":
    unittest.main(verbosity=2)
