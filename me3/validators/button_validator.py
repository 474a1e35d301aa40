"""Button Validator — call-to-action buttons and the buttons list."""

from typing import Any

from me3.validators.base import BaseValidator
from me3.validators.constraints import MAX_BUTTONS, MAX_BUTTON_TEXT_LENGTH, VALID_BUTTON_STYLES
from me3.validators.fields import (
    check_enum,
    check_max_length,
    check_type,
    check_url,
    first,
    join_path,
    require_string,
)
from me3.validators.models import ErrorCode, Violation


class ButtonValidator(BaseValidator):
    """Validates a single button: text, url, style, icon."""

    @property
    def name(self) -> str:
        return "ButtonValidator"

    def validate(self, value: Any, path: str) -> list[Violation]:
        shape = self._expect_object(value, path, "Button must be an object")
        if shape:
            return [shape]

        errors = []
        text_path = join_path(path, "text")
        url_path = join_path(path, "url")

        self._collect(
            errors,
            first(
                require_string(value.get("text"), text_path, "Button text"),
                check_max_length(value.get("text"), text_path, MAX_BUTTON_TEXT_LENGTH, "Button text"),
            ),
            first(
                require_string(value.get("url"), url_path, "Button URL"),
                check_url(value.get("url"), url_path, "Button URL"),
            ),
        )

        if "style" in value:
            self._collect(
                errors,
                check_enum(value["style"], join_path(path, "style"), VALID_BUTTON_STYLES, "Button style"),
            )

        if "icon" in value:
            self._collect(
                errors,
                check_type(value["icon"], join_path(path, "icon"), "string", "Button icon must be a string"),
            )

        return errors


class ButtonListValidator(BaseValidator):
    """Validates the ``buttons`` array: shape, maximum count, then every button."""

    def __init__(self):
        self.button_validator = ButtonValidator()

    @property
    def name(self) -> str:
        return "ButtonListValidator"

    def validate(self, value: Any, path: str) -> list[Violation]:
        if not isinstance(value, list):
            return [self._error(path, "Buttons must be an array", ErrorCode.TYPE_MISMATCH)]

        errors = []
        if len(value) > MAX_BUTTONS:
            errors.append(self._error(
                path,
                f"Maximum {MAX_BUTTONS} buttons allowed",
                ErrorCode.CARDINALITY_VIOLATION,
            ))

        errors.extend(self._validate_items(value, path, self.button_validator))
        return errors
