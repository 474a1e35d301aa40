"""Error codes, violations, and the validation result.

Validation is deterministic: same input → same output, no hidden state.
"""

from enum import Enum
from typing import Any, Optional, cast

from pydantic import BaseModel, Field, SkipValidation, field_serializer

from me3.models.profile import Me3Profile


class ErrorCode(str, Enum):
    """Machine-readable category of a violation.

    The message is for humans; the code is for programs deciding how to
    correct the document.
    """

    DECODE_FAILURE = "DECODE_FAILURE"            # Text is not valid JSON
    UNREADABLE_SOURCE = "UNREADABLE_SOURCE"      # File could not be read
    TYPE_MISMATCH = "TYPE_MISMATCH"              # Wrong runtime type
    MISSING_FIELD = "MISSING_FIELD"              # Required field absent, null or empty
    BOUND_VIOLATION = "BOUND_VIOLATION"          # Too long, or below a numeric floor
    SHAPE_VIOLATION = "SHAPE_VIOLATION"          # Fails a required pattern
    ENUM_VIOLATION = "ENUM_VIOLATION"            # Not a member of a fixed set
    INVARIANT_VIOLATION = "INVARIANT_VIOLATION"  # Cross-field rule broken
    CARDINALITY_VIOLATION = "CARDINALITY_VIOLATION"  # Array too long


class Violation(BaseModel):
    """A single rule failure, addressed by field path."""

    field: str = Field(description="Dotted/indexed path, e.g. 'buttons[0].url'")
    message: str = Field(description="Stable human-readable reason")
    code: ErrorCode

    model_config = {"use_enum_values": True, "frozen": True}


class ValidationResult(BaseModel):
    """Outcome of validating one document.

    ``profile`` is the validated input itself (not a copy), and is only set
    when ``valid`` is true.
    """

    valid: bool
    violations: list[Violation] = Field(default_factory=list)
    profile: SkipValidation[Optional[Me3Profile]] = None

    @field_serializer("profile")
    def serialize_profile(self, profile: Optional[Me3Profile]) -> Optional[dict[str, Any]]:
        # Dump the document as given; unknown keys are part of it
        return cast(Optional[dict[str, Any]], profile)

    @classmethod
    def build(cls, violations: list[Violation], document: Any = None) -> "ValidationResult":
        """Build a result from the collected violations."""
        if violations:
            return cls(valid=False, violations=violations)
        return cls(valid=True, violations=[], profile=cast(Me3Profile, document))

    @classmethod
    def failure(cls, field: str, message: str, code: ErrorCode) -> "ValidationResult":
        """Shortcut for a result carrying a single violation."""
        return cls(valid=False, violations=[Violation(field=field, message=message, code=code)])

    def fields(self) -> list[str]:
        """Paths of all violations, in report order."""
        return [v.field for v in self.violations]
