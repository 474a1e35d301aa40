"""Profile Validator — walks a whole me.json document and collects every violation."""

from typing import Any

from me3.validators.base import BaseValidator
from me3.validators.button_validator import ButtonListValidator
from me3.validators.constraints import (
    HANDLE_PATTERN,
    MAX_BIO_LENGTH,
    MAX_HANDLE_LENGTH,
    MAX_LOCATION_LENGTH,
    MAX_NAME_LENGTH,
    ME3_VERSION,
)
from me3.validators.content_validator import page_list_validator, post_list_validator
from me3.validators.fields import (
    check_max_length,
    check_optional_string,
    check_pattern,
    check_type,
    first,
    join_path,
    require_string,
)
from me3.validators.footer_validator import FooterValidator
from me3.validators.intent_validator import IntentsValidator
from me3.validators.models import ErrorCode, Violation

ROOT_PATH = "root"


class ProfileValidator(BaseValidator):
    """Validates the root profile object.

    Every top-level check runs regardless of what earlier checks found, so a
    caller gets the complete list in one pass. Violations are ordered by the
    position of their field in the profile schema.
    """

    def __init__(self):
        self.buttons_validator = ButtonListValidator()
        self.pages_validator = page_list_validator()
        self.posts_validator = post_list_validator()
        self.footer_validator = FooterValidator()
        self.intents_validator = IntentsValidator()

    @property
    def name(self) -> str:
        return "ProfileValidator"

    def validate(self, value: Any, path: str = "") -> list[Violation]:
        if not isinstance(value, dict):
            return [self._error(path or ROOT_PATH, "Profile must be an object", ErrorCode.TYPE_MISMATCH)]

        errors = []
        errors.extend(self._validate_identity(value, path))
        errors.extend(self._validate_media(value, path))

        if "links" in value:
            errors.extend(self._validate_links(value["links"], join_path(path, "links")))

        # Nested structures, in schema order
        nested = [
            ("buttons", self.buttons_validator),
            ("pages", self.pages_validator),
            ("posts", self.posts_validator),
            ("footer", self.footer_validator),
            ("intents", self.intents_validator),
        ]
        for key, validator in nested:
            if key in value:
                errors.extend(validator.validate(value[key], join_path(path, key)))

        return errors

    def _validate_identity(self, profile: dict, path: str) -> list[Violation]:
        """version, name, handle, location, bio."""
        errors = []

        version_path = join_path(path, "version")
        version_error = require_string(profile.get("version"), version_path, "Version")
        if version_error is None and profile["version"] != ME3_VERSION:
            version_error = self._error(
                version_path,
                f"Unsupported version. Expected {ME3_VERSION}",
                ErrorCode.INVARIANT_VIOLATION,
            )

        name_path = join_path(path, "name")
        self._collect(
            errors,
            version_error,
            first(
                require_string(profile.get("name"), name_path, "Name"),
                check_max_length(profile.get("name"), name_path, MAX_NAME_LENGTH, "Name"),
            ),
        )

        if "handle" in profile:
            handle_path = join_path(path, "handle")
            self._collect(errors, first(
                check_optional_string(profile["handle"], handle_path, "Handle", MAX_HANDLE_LENGTH),
                check_pattern(
                    profile["handle"],
                    handle_path,
                    HANDLE_PATTERN,
                    "Handle can only contain letters, numbers, underscores, and hyphens",
                ),
            ))

        if "location" in profile:
            self._collect(errors, check_optional_string(
                profile["location"], join_path(path, "location"), "Location", MAX_LOCATION_LENGTH,
            ))

        if "bio" in profile:
            self._collect(errors, check_optional_string(
                profile["bio"], join_path(path, "bio"), "Bio", MAX_BIO_LENGTH,
            ))

        return errors

    def _validate_media(self, profile: dict, path: str) -> list[Violation]:
        """avatar and banner: any string, absolute or relative."""
        errors = []
        for key, label in (("avatar", "Avatar"), ("banner", "Banner")):
            if key in profile:
                self._collect(errors, check_type(
                    profile[key], join_path(path, key), "string", f"{label} must be a string URL",
                ))
        return errors

    def _validate_links(self, links: Any, path: str) -> list[Violation]:
        """Open string → string map; keys are not restricted."""
        shape = self._expect_object(links, path, "Links must be an object")
        if shape:
            return [shape]

        errors = []
        for key, url in links.items():
            self._collect(errors, check_type(
                url, join_path(path, key), "string", f"Link {key} must be a string",
            ))
        return errors
