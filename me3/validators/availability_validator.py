"""Availability Validator — timezone plus weekly time windows for native booking.

Windows are keyed by weekday name. An unknown day is reported once and its
value is left alone, so a typo in a key does not also flood the report with
window-format errors.
"""

from typing import Any

from me3.validators.base import BaseValidator
from me3.validators.constraints import TIME_WINDOW_PATTERN, VALID_DAYS
from me3.validators.fields import join_path, require_string
from me3.validators.models import ErrorCode, Violation

TIME_WINDOW_MESSAGE = "Invalid time window format. Use HH:MM-HH:MM"


class AvailabilityValidator(BaseValidator):
    """Validates ``intents.book.availability``."""

    @property
    def name(self) -> str:
        return "AvailabilityValidator"

    def validate(self, value: Any, path: str) -> list[Violation]:
        shape = self._expect_object(value, path, "Book availability must be an object")
        if shape:
            return [shape]

        errors = []
        self._collect(
            errors,
            require_string(value.get("timezone"), join_path(path, "timezone"), "Availability timezone"),
        )

        if "windows" in value:
            errors.extend(self._validate_windows(value["windows"], join_path(path, "windows")))

        return errors

    def _validate_windows(self, windows: Any, path: str) -> list[Violation]:
        """Check each day key, then each window token of a known day."""
        shape = self._expect_object(windows, path, "Availability windows must be an object")
        if shape:
            return [shape]

        errors = []
        for day, slots in windows.items():
            day_path = join_path(path, day)

            if day not in VALID_DAYS:
                errors.append(self._error(day_path, f"Invalid day: {day}", ErrorCode.INVARIANT_VIOLATION))
                continue

            if not isinstance(slots, list):
                errors.append(self._error(
                    day_path,
                    f"Windows for {day} must be an array",
                    ErrorCode.TYPE_MISMATCH,
                ))
                continue

            # One violation per bad token, all on the day's path
            for slot in slots:
                if not isinstance(slot, str) or not TIME_WINDOW_PATTERN.fullmatch(slot):
                    errors.append(self._error(day_path, TIME_WINDOW_MESSAGE, ErrorCode.SHAPE_VIOLATION))

        return errors
