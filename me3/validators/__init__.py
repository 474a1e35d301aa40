"""me3 profile validator — deterministic validation of me.json documents.

Usage:
    from me3.validators import validation_engine

    result = validation_engine.parse(text)
    if not result.valid:
        # Surface result.violations to the author or agent
"""

from me3.validators.engine import ValidationEngine, load, parse, validate, validation_engine
from me3.validators.models import ErrorCode, ValidationResult, Violation

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "validate",
    "parse",
    "load",
    "ValidationResult",
    "Violation",
    "ErrorCode",
]
