from __future__ import annotations

import unittest

import pendulum

from tmeter.model.marker import MarkerKind
from tmeter.model.time_of_day import TimeOfDay
from tmeter.service.marker import (
    build_markers,
    column_for_seconds,
    day_ratio,
    filled_columns,
)
from tmeter.time import SECONDS_PER_DAY, format_seconds, seconds_since_midnight


class TestColumnMapping(unittest.TestCase):
    def test_pointer_column_stays_on_the_bar(self) -> None:
        for width in (2, 3, 7, 20, 80, 211):
            for seconds in range(0, SECONDS_PER_DAY, 97):
                column = column_for_seconds(seconds, width)
                self.assertGreaterEqual(column, 0)
                self.assertLess(column, width)

    def test_end_of_day_clamps_to_last_column(self) -> None:
        self.assertEqual(column_for_seconds(SECONDS_PER_DAY, 20), 19)
        self.assertEqual(column_for_seconds(SECONDS_PER_DAY - 1, 20), 19)

    def test_noon_on_width_twenty(self) -> None:
        self.assertEqual(day_ratio(12 * 3600), 0.5)
        self.assertEqual(column_for_seconds(12 * 3600, 20), 10)

    def test_filled_columns_is_not_clamped_below_width(self) -> None:
        self.assertEqual(filled_columns(0, 20), 0)
        self.assertEqual(filled_columns(12 * 3600, 20), 10)
        self.assertEqual(filled_columns(SECONDS_PER_DAY, 20), 20)


class TestBuildMarkers(unittest.TestCase):
    def test_markers_are_chronological(self) -> None:
        markers = build_markers(
            {"wake_up": TimeOfDay(7, 0), "bed_time": TimeOfDay(23, 0)},
            [{"label": "Lunch", "time": TimeOfDay(12, 30)}],
        )
        self.assertEqual(
            [marker["name_label"] for marker in markers],
            ["Wake Up", "Noon", "Lunch", "Bed Time"],
        )
        self.assertEqual(
            [marker["time_label"] for marker in markers],
            ["07:00", "12:00", "12:30", "23:00"],
        )

    def test_bed_time_before_noon_sorts_first(self) -> None:
        markers = build_markers(
            {"wake_up": TimeOfDay(13, 0), "bed_time": TimeOfDay(5, 0)}, []
        )
        self.assertEqual(
            [marker["kind"] for marker in markers],
            [MarkerKind.BED_TIME, MarkerKind.NOON, MarkerKind.WAKE_UP],
        )

    def test_equal_times_keep_insertion_order(self) -> None:
        markers = build_markers(
            {"wake_up": TimeOfDay(12, 0), "bed_time": TimeOfDay(12, 0)}, []
        )
        self.assertEqual(
            [marker["kind"] for marker in markers],
            [MarkerKind.WAKE_UP, MarkerKind.NOON, MarkerKind.BED_TIME],
        )


class TestTimeHelpers(unittest.TestCase):
    def test_seconds_since_midnight(self) -> None:
        now = pendulum.datetime(2024, 3, 1, 13, 45, 30, tz="local")
        self.assertEqual(seconds_since_midnight(now), 13 * 3600 + 45 * 60 + 30)

    def test_format_seconds(self) -> None:
        self.assertEqual(format_seconds(0), "00:00")
        self.assertEqual(format_seconds(7 * 3600 + 5 * 60 + 59), "07:05")
        self.assertEqual(format_seconds(SECONDS_PER_DAY), "24:00")


if __name__ == "__main__":
    unittest.main(verbosity=2)
