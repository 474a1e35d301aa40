"""Intent Validators — subscribe and book, the machine-actionable part of a profile.

Each intent is independently optional; an absent intent means the action is
not offered and produces no findings.
"""

from typing import Any

from me3.validators.availability_validator import AvailabilityValidator
from me3.validators.base import BaseValidator
from me3.validators.constraints import (
    MAX_INTENT_DESCRIPTION_LENGTH,
    MAX_INTENT_TITLE_LENGTH,
    VALID_FREQUENCIES,
)
from me3.validators.fields import (
    check_enum,
    check_optional_string,
    check_type,
    check_url,
    first,
    is_blank,
    join_path,
)
from me3.validators.models import ErrorCode, Violation
from me3.validators.pricing_validator import PricingValidator

BOOK_TARGET_MESSAGE = (
    "Book intent requires either a URL (for external booking) "
    "or availability (for native booking)"
)


class _IntentValidator(BaseValidator):
    """Fields every intent shares: enabled, title, description."""

    label = ""

    @property
    def name(self) -> str:
        return f"{self.label}IntentValidator"

    def _validate_common(self, intent: dict, path: str) -> list[Violation]:
        errors = []
        self._collect(
            errors,
            check_type(
                intent.get("enabled"),
                join_path(path, "enabled"),
                "boolean",
                f"{self.label} enabled must be a boolean",
            ),
        )
        if "title" in intent:
            self._collect(errors, check_optional_string(
                intent["title"], join_path(path, "title"), f"{self.label} title", MAX_INTENT_TITLE_LENGTH,
            ))
        if "description" in intent:
            self._collect(errors, check_optional_string(
                intent["description"],
                join_path(path, "description"),
                f"{self.label} description",
                MAX_INTENT_DESCRIPTION_LENGTH,
            ))
        return errors


class SubscribeIntentValidator(_IntentValidator):
    """Validates ``intents.subscribe`` (newsletter signups)."""

    label = "Subscribe"

    def validate(self, value: Any, path: str) -> list[Violation]:
        shape = self._expect_object(value, path, "Subscribe intent must be an object")
        if shape:
            return [shape]

        errors = self._validate_common(value, path)
        if "frequency" in value:
            self._collect(errors, check_enum(
                value["frequency"], join_path(path, "frequency"), VALID_FREQUENCIES, "Subscribe frequency",
            ))
        return errors


class BookIntentValidator(_IntentValidator):
    """Validates ``intents.book`` (meeting booking).

    A booking is reachable either through an external ``url`` or through
    native ``availability``; with neither, the intent is invalid whatever
    ``enabled`` says.
    """

    label = "Book"

    def __init__(self):
        self.availability_validator = AvailabilityValidator()
        self.pricing_validator = PricingValidator()

    def validate(self, value: Any, path: str) -> list[Violation]:
        shape = self._expect_object(value, path, "Book intent must be an object")
        if shape:
            return [shape]

        errors = self._validate_common(value, path)

        if "duration" in value:
            self._collect(errors, check_type(
                value["duration"], join_path(path, "duration"), "number", "Book duration must be a number (minutes)",
            ))
        if "provider" in value:
            self._collect(errors, check_type(
                value["provider"], join_path(path, "provider"), "string", "Book provider must be a string",
            ))
        if "url" in value:
            url_path = join_path(path, "url")
            self._collect(errors, first(
                check_type(value["url"], url_path, "string", "Book URL must be a string"),
                check_url(value["url"], url_path, "Book URL"),
            ))
        if "availability" in value:
            errors.extend(self.availability_validator.validate(
                value["availability"], join_path(path, "availability"),
            ))

        if is_blank(value.get("url")) and is_blank(value.get("availability")):
            errors.append(self._error(path, BOOK_TARGET_MESSAGE, ErrorCode.INVARIANT_VIOLATION))

        if "pricing" in value:
            errors.extend(self.pricing_validator.validate(value["pricing"], join_path(path, "pricing")))

        return errors


class IntentsValidator(BaseValidator):
    """Validates the ``intents`` object and each intent it declares."""

    def __init__(self):
        self.intent_validators: dict[str, BaseValidator] = {
            "subscribe": SubscribeIntentValidator(),
            "book": BookIntentValidator(),
        }

    @property
    def name(self) -> str:
        return "IntentsValidator"

    def validate(self, value: Any, path: str) -> list[Violation]:
        shape = self._expect_object(value, path, "Intents must be an object")
        if shape:
            return [shape]

        errors = []
        for key, validator in self.intent_validators.items():
            if key in value:
                errors.extend(validator.validate(value[key], join_path(path, key)))
        return errors
