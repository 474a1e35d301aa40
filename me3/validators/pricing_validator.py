"""Pricing Validator — sliding-scale, pay-what-you-want meeting pricing."""

from typing import Any

from me3.validators.base import BaseValidator
from me3.validators.constraints import MINIMUM_AMOUNT, VALID_CURRENCIES
from me3.validators.fields import check_enum, check_minimum, check_type, first, is_type, join_path
from me3.validators.models import ErrorCode, Violation


class PricingValidator(BaseValidator):
    """Validates ``intents.book.pricing``.

    Disabled pricing carries no further contract: the amount, currency,
    minimum and allowFree fields are only evaluated when ``enabled`` is
    exactly ``true``.
    """

    @property
    def name(self) -> str:
        return "PricingValidator"

    def validate(self, value: Any, path: str) -> list[Violation]:
        shape = self._expect_object(value, path, "Book pricing must be an object")
        if shape:
            return [shape]

        errors = []
        self._collect(
            errors,
            check_type(value.get("enabled"), join_path(path, "enabled"), "boolean", "Pricing enabled must be a boolean"),
        )

        if value.get("enabled") is True:
            errors.extend(self._validate_paid(value, path))

        return errors

    def _validate_paid(self, pricing: dict, path: str) -> list[Violation]:
        errors = []
        amount_path = join_path(path, "suggestedAmount")
        minimum_path = join_path(path, "minimumAmount")

        self._collect(
            errors,
            first(
                check_type(pricing.get("suggestedAmount"), amount_path, "number", "Suggested amount must be a number"),
                check_minimum(
                    pricing.get("suggestedAmount"),
                    amount_path,
                    MINIMUM_AMOUNT,
                    f"Suggested amount must be at least ${MINIMUM_AMOUNT}",
                ),
            ),
            check_enum(pricing.get("currency"), join_path(path, "currency"), VALID_CURRENCIES, "Currency"),
        )

        minimum = pricing.get("minimumAmount")
        if not (is_type(minimum, "number") and minimum == MINIMUM_AMOUNT):
            code = ErrorCode.MISSING_FIELD if minimum is None else ErrorCode.INVARIANT_VIOLATION
            errors.append(self._error(minimum_path, f"Minimum amount must be {MINIMUM_AMOUNT}", code))

        self._collect(
            errors,
            check_type(pricing.get("allowFree"), join_path(path, "allowFree"), "boolean", "Allow free must be a boolean"),
        )
        return errors
