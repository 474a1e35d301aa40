"""Small pure checks, one per scalar or shape.

Every check takes the raw value, the field path it lives at, and the
constraint to apply, and returns either ``None`` or exactly one Violation.
Checks that do not apply to the value's type (e.g. a length bound on a
number) return ``None`` so they can be chained with ``first()``.
"""

import re
from typing import Any, Callable, Iterable, Optional

from me3.validators.constraints import URL_PATTERN
from me3.validators.models import ErrorCode, Violation

TYPE_CHECKS: dict[str, Callable[[Any], bool]] = {
    "string": lambda v: isinstance(v, str),
    "boolean": lambda v: isinstance(v, bool),
    "number": lambda v: isinstance(v, (int, float)) and not isinstance(v, bool),
    "object": lambda v: isinstance(v, dict),
    "array": lambda v: isinstance(v, list),
}


# ── Paths ──

def join_path(parent: str, key: str) -> str:
    """Extend a dotted path: ('intents', 'book') → 'intents.book'."""
    return f"{parent}.{key}" if parent else key


def index_path(parent: str, index: int) -> str:
    """Extend a path with an array index: ('buttons', 1) → 'buttons[1]'."""
    return f"{parent}[{index}]"


# ── Predicates ──

def is_type(value: Any, kind: str) -> bool:
    return TYPE_CHECKS[kind](value)


def is_present(value: Any) -> bool:
    """A value counts as present unless it is absent, null, or an empty string."""
    return value is not None and not (isinstance(value, str) and value == "")


def text_length(value: str) -> int:
    """Length in UTF-16 code units, so astral characters such as emoji count as two."""
    return len(value.encode("utf-16-le")) // 2


def is_blank(value: Any) -> bool:
    """Falsy in the JSON-in-JavaScript sense: null, false, 0 or an empty string."""
    if value is None or value is False or value == "":
        return True
    return is_type(value, "number") and value == 0


def first(*results: Optional[Violation]) -> Optional[Violation]:
    """Return the first violation in a chain of checks, if any."""
    for result in results:
        if result is not None:
            return result
    return None


def _violation(path: str, message: str, code: ErrorCode) -> Violation:
    return Violation(field=path, message=message, code=code)


# ── Checks ──

def require_string(value: Any, path: str, label: str) -> Optional[Violation]:
    """Required non-empty string: '<label> is required'."""
    if is_present(value) and isinstance(value, str):
        return None
    code = ErrorCode.TYPE_MISMATCH if is_present(value) else ErrorCode.MISSING_FIELD
    return _violation(path, f"{label} is required", code)


def check_type(value: Any, path: str, kind: str, message: str) -> Optional[Violation]:
    """Type check with a caller-supplied message; null counts as missing."""
    if is_type(value, kind):
        return None
    code = ErrorCode.MISSING_FIELD if value is None else ErrorCode.TYPE_MISMATCH
    return _violation(path, message, code)


def check_max_length(value: Any, path: str, limit: int, label: str) -> Optional[Violation]:
    if not isinstance(value, str) or text_length(value) <= limit:
        return None
    return _violation(path, f"{label} must be {limit} characters or less", ErrorCode.BOUND_VIOLATION)


def check_minimum(value: Any, path: str, floor: float, message: str) -> Optional[Violation]:
    if not is_type(value, "number") or value >= floor:
        return None
    return _violation(path, message, ErrorCode.BOUND_VIOLATION)


def check_enum(value: Any, path: str, allowed: Iterable[str], label: str) -> Optional[Violation]:
    allowed = tuple(allowed)
    if isinstance(value, str) and value in allowed:
        return None
    return _violation(path, f"{label} must be one of: {', '.join(allowed)}", ErrorCode.ENUM_VIOLATION)


def check_pattern(
    value: Any,
    path: str,
    pattern: re.Pattern,
    message: str,
    whole: bool = True,
) -> Optional[Violation]:
    """Regex shape check. ``whole=False`` only anchors at the start."""
    if not isinstance(value, str):
        return None
    matched = pattern.fullmatch(value) if whole else pattern.match(value)
    if matched:
        return None
    return _violation(path, message, ErrorCode.SHAPE_VIOLATION)


def check_url(value: Any, path: str, label: str) -> Optional[Violation]:
    """http(s) URL shape."""
    return check_pattern(
        value,
        path,
        URL_PATTERN,
        f"{label} must be a valid URL starting with http:// or https://",
        whole=False,
    )


def check_optional_string(
    value: Any,
    path: str,
    label: str,
    max_length: Optional[int] = None,
) -> Optional[Violation]:
    """Optional string that is type-checked, then length-bounded when a limit is given."""
    return first(
        check_type(value, path, "string", f"{label} must be a string"),
        check_max_length(value, path, max_length, label) if max_length is not None else None,
    )
