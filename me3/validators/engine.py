"""Validation Engine — entry point for validating me.json documents.

Wraps the ProfileValidator with the document loader (text and file input)
and logs one event per run. The validators themselves never log.

Usage:
    result = validation_engine.parse(raw_text)
    if not result.valid:
        for violation in result.violations:
            print(violation.field, violation.message)
"""

import json
import time
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from me3.validators.models import ErrorCode, ValidationResult
from me3.validators.profile_validator import ROOT_PATH, ProfileValidator

logger = structlog.get_logger()

INVALID_JSON_MESSAGE = "Invalid JSON"
UNREADABLE_FILE_MESSAGE = "Unable to read file"


def _reject_constant(name: str) -> Any:
    """NaN and Infinity are accepted by Python's decoder but are not JSON."""
    raise ValueError(f"Non-standard JSON constant: {name}")


class ValidationEngine:
    """Runs the profile validator and produces a ValidationResult.

    Design principles:
        - Deterministic: same input → same output
        - Stateless: safe to share across threads and requests
        - Total: malformed input becomes violations, never exceptions
    """

    def __init__(self, profile_validator: Optional[ProfileValidator] = None):
        self.profile_validator = profile_validator or ProfileValidator()

    def validate(self, value: Any) -> ValidationResult:
        """Validate an already-decoded JSON value.

        Args:
            value: Any decoded JSON value (dict, list, str, number, bool, None)

        Returns:
            ValidationResult; ``profile`` is ``value`` itself when valid
        """
        start_time = time.perf_counter()

        violations = self.profile_validator.validate(value)
        result = ValidationResult.build(violations, value)

        logger.debug(
            "validation_complete",
            valid=result.valid,
            total_violations=len(violations),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return result

    def parse(self, text: Union[str, bytes]) -> ValidationResult:
        """Decode ``text`` as JSON, then validate it.

        A decode failure is reported as a single root violation.
        """
        # JSONDecodeError and UnicodeDecodeError are ValueErrors; deep nesting exhausts the stack
        try:
            value = json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            logger.debug("document_decode_failed", error=str(e))
            return ValidationResult.failure(ROOT_PATH, INVALID_JSON_MESSAGE, ErrorCode.DECODE_FAILURE)

        return self.validate(value)

    def load(self, path: Union[str, Path]) -> ValidationResult:
        """Read a me.json file from disk and validate it."""
        path = Path(path)
        try:
            raw = path.read_bytes()
        except OSError as e:
            logger.warning("document_read_failed", path=str(path), error=str(e))
            return ValidationResult.failure(ROOT_PATH, UNREADABLE_FILE_MESSAGE, ErrorCode.UNREADABLE_SOURCE)

        return self.parse(raw)


# Module-level singleton
validation_engine = ValidationEngine()


def validate(value: Any) -> ValidationResult:
    """Validate a decoded me.json value with the shared engine."""
    return validation_engine.validate(value)


def parse(text: Union[str, bytes]) -> ValidationResult:
    """Decode and validate me.json text with the shared engine."""
    return validation_engine.parse(text)


def load(path: Union[str, Path]) -> ValidationResult:
    """Read, decode and validate a me.json file with the shared engine."""
    return validation_engine.load(path)
