"""me3: portable personal websites in a single me.json file.

The validation engine lives in ``me3.validators``; the names below are the
public entry points.
"""

from me3.validators import ErrorCode, ValidationResult, Violation, load, parse, validate
from me3.validators.constraints import ME3_FILENAME, ME3_VERSION

__version__ = "0.1.0"

__all__ = [
    "validate",
    "parse",
    "load",
    "ValidationResult",
    "Violation",
    "ErrorCode",
    "ME3_VERSION",
    "ME3_FILENAME",
    "__version__",
]
