"""Pages and posts, both backed by markdown files."""

from typing import Any

from me3.validators.base import BaseValidator
from me3.validators.fields import check_type, join_path, require_string
from me3.validators.models import ErrorCode, Violation

# Every content entry points at a markdown file relative to me.json
REQUIRED_CONTENT_FIELDS = ("slug", "title", "file")


class _ContentValidator(BaseValidator):
    """Shared checks for a single page or post."""

    label = ""

    @property
    def name(self) -> str:
        return f"{self.label}Validator"

    def validate(self, value: Any, path: str) -> list[Violation]:
        shape = self._expect_object(value, path, f"{self.label} must be an object")
        if shape:
            return [shape]

        errors = []
        for key in REQUIRED_CONTENT_FIELDS:
            self._collect(
                errors,
                require_string(value.get(key), join_path(path, key), f"{self.label} {key}"),
            )
        errors.extend(self._validate_extra(value, path))
        return errors

    def _validate_extra(self, value: dict, path: str) -> list[Violation]:
        return []


class PageValidator(_ContentValidator):
    """A page additionally declares whether it shows in navigation."""

    label = "Page"

    def _validate_extra(self, value: dict, path: str) -> list[Violation]:
        error = check_type(
            value.get("visible"),
            join_path(path, "visible"),
            "boolean",
            "Page visible must be a boolean",
        )
        return [error] if error else []


class PostValidator(_ContentValidator):
    """A post may carry a publish date and an excerpt."""

    label = "Post"

    def _validate_extra(self, value: dict, path: str) -> list[Violation]:
        errors = []
        for key in ("publishedAt", "excerpt"):
            if key in value:
                self._collect(
                    errors,
                    check_type(value[key], join_path(path, key), "string", f"Post {key} must be a string"),
                )
        return errors


class ContentListValidator(BaseValidator):
    """Validates a ``pages`` or ``posts`` array element by element."""

    def __init__(self, item_validator: _ContentValidator, array_message: str):
        self.item_validator = item_validator
        self.array_message = array_message

    @property
    def name(self) -> str:
        return f"{self.item_validator.label}ListValidator"

    def validate(self, value: Any, path: str) -> list[Violation]:
        if not isinstance(value, list):
            return [self._error(path, self.array_message, ErrorCode.TYPE_MISMATCH)]
        return self._validate_items(value, path, self.item_validator)


def page_list_validator() -> ContentListValidator:
    return ContentListValidator(PageValidator(), "Pages must be an array")


def post_list_validator() -> ContentListValidator:
    return ContentListValidator(PostValidator(), "Posts must be an array")
