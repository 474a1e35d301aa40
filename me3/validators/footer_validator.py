"""Footer: a custom object, or ``false`` to hide it."""

from typing import Any

from me3.models.profile import FooterState, classify_footer
from me3.validators.base import BaseValidator
from me3.validators.constraints import MAX_FOOTER_LINK_TEXT_LENGTH, MAX_FOOTER_TEXT_LENGTH
from me3.validators.fields import (
    check_max_length,
    check_optional_string,
    check_url,
    first,
    join_path,
    require_string,
)
from me3.validators.models import ErrorCode, Violation


class FooterLinkValidator(BaseValidator):
    """Validates ``footer.link``: required text and URL."""

    @property
    def name(self) -> str:
        return "FooterLinkValidator"

    def validate(self, value: Any, path: str) -> list[Violation]:
        shape = self._expect_object(value, path, "Footer link must be an object")
        if shape:
            return [shape]

        text_path = join_path(path, "text")
        url_path = join_path(path, "url")
        errors = []
        self._collect(
            errors,
            first(
                require_string(value.get("text"), text_path, "Footer link text"),
                check_max_length(value.get("text"), text_path, MAX_FOOTER_LINK_TEXT_LENGTH, "Footer link text"),
            ),
            first(
                require_string(value.get("url"), url_path, "Footer link URL"),
                check_url(value.get("url"), url_path, "Footer link URL"),
            ),
        )
        return errors


class FooterValidator(BaseValidator):
    """Validates the ``footer`` field by dispatching on its FooterState."""

    def __init__(self):
        self.link_validator = FooterLinkValidator()

    @property
    def name(self) -> str:
        return "FooterValidator"

    def validate(self, value: Any, path: str) -> list[Violation]:
        state = classify_footer(value)

        if state is FooterState.HIDDEN:
            return []
        if state is FooterState.MALFORMED:
            return [self._error(path, "Footer must be an object or false", ErrorCode.TYPE_MISMATCH)]

        errors = []
        if "text" in value:
            self._collect(
                errors,
                check_optional_string(value["text"], join_path(path, "text"), "Footer text", MAX_FOOTER_TEXT_LENGTH),
            )
        if "link" in value:
            errors.extend(self.link_validator.validate(value["link"], join_path(path, "link")))
        return errors
