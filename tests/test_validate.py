from __future__ import annotations

import unittest

from tmeter.errors import TimeValidationError, ValidationErrorKind
from tmeter.model.time_of_day import TimeOfDay
from tmeter.service.validate import validate_time


class TestValidateTime(unittest.TestCase):
    def test_every_valid_time_parses_and_formats_back(self) -> None:
        for hour in range(24):
            for minute in range(60):
                text = f"{hour:02}:{minute:02}"
                parsed = validate_time(text)
                self.assertEqual(parsed, TimeOfDay(hour, minute))
                self.assertEqual(parsed.format(), text)

    def test_single_digit_fields_are_accepted(self) -> None:
        self.assertEqual(validate_time("7:5"), TimeOfDay(7, 5))
        self.assertEqual(validate_time("7:05").format(), "07:05")

    def test_bad_format(self) -> None:
        for text in (
            "",
            "7",
            "0700",
            ":",
            "7:",
            ":30",
            "07:00:00",
            "ab:cd",
            "-1:00",
            " 7:00",
            "7:00 ",
            "+7:00",
            "٣:00",
        ):
            with self.subTest(text=text):
                with self.assertRaises(TimeValidationError) as ctx:
                    validate_time(text)
                self.assertEqual(ctx.exception.kind, ValidationErrorKind.BAD_FORMAT)

    def test_bad_hour(self) -> None:
        for text in ("24:00", "99:00", "100:00"):
            with self.subTest(text=text):
                with self.assertRaises(TimeValidationError) as ctx:
                    validate_time(text)
                self.assertEqual(ctx.exception.kind, ValidationErrorKind.BAD_HOUR)
                self.assertIn("hour must be 0-23", ctx.exception.message)

    def test_bad_minute(self) -> None:
        for text in ("23:60", "00:99", "12:100"):
            with self.subTest(text=text):
                with self.assertRaises(TimeValidationError) as ctx:
                    validate_time(text)
                self.assertEqual(ctx.exception.kind, ValidationErrorKind.BAD_MINUTE)
                self.assertIn("minute must be 0-59", ctx.exception.message)

    def test_hour_is_checked_before_minute(self) -> None:
        with self.assertRaises(TimeValidationError) as ctx:
            validate_time("25:75")
        self.assertEqual(ctx.exception.kind, ValidationErrorKind.BAD_HOUR)


if __name__ == "__main__":
    unittest.main(verbosity=2)
