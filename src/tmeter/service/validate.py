# SPDX-License-Identifier: MIT

from tmeter.errors import TimeValidationError, ValidationErrorKind
from tmeter.model.time_of_day import TimeOfDay


def validate_time(text: str) -> TimeOfDay:
    """
    Parse a 24-hour "HH:MM" string into a TimeOfDay.

    Args:
        text: The raw text, typically the edit buffer

    Raises:
        TimeValidationError: With kind BAD_FORMAT when the text is not exactly
            two non-empty numeric fields separated by ":", BAD_HOUR when the
            hour is outside 0-23 and BAD_MINUTE when the minute is outside 0-59

    Returns:
        The parsed time of day
    """
    parts = text.split(":")
    if len(parts) != 2:
        raise TimeValidationError(ValidationErrorKind.BAD_FORMAT)

    hour_part, minute_part = parts
    if not _is_number(hour_part) or not _is_number(minute_part):
        raise TimeValidationError(ValidationErrorKind.BAD_FORMAT)

    hour = int(hour_part)
    minute = int(minute_part)
    if hour > 23:
        raise TimeValidationError(ValidationErrorKind.BAD_HOUR)
    if minute > 59:
        raise TimeValidationError(ValidationErrorKind.BAD_MINUTE)

    return TimeOfDay(hour, minute)


def _is_number(part: str) -> bool:
    # str.isdigit accepts superscripts and other unicode digits
    return part != "" and all("0" <= ch <= "9" for ch in part)
