"""Base validator — abstract class implementing the Strategy Pattern.

Each structural validator owns one composite shape of the profile
(a button, a footer, a booking intent, ...) and is independently testable.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from me3.validators.fields import index_path, is_type
from me3.validators.models import ErrorCode, Violation


class BaseValidator(ABC):
    """Abstract base for all structural validators.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() never mutates its input and never raises on bad data
        - validate() returns a list of Violation (empty = no issues)
        - a wrong base shape yields exactly one violation and no descent
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, value: Any, path: str) -> list[Violation]:
        """Check ``value`` as found at ``path``.

        Args:
            value: Raw decoded JSON for this node
            path: Field path of the node, e.g. 'intents.book'

        Returns:
            List of Violation findings (empty if no issues)
        """
        ...

    # ── Helper Methods ──

    def _error(self, path: str, message: str, code: ErrorCode) -> Violation:
        """Convenience method to create a Violation."""
        return Violation(field=path, message=message, code=code)

    def _expect_object(self, value: Any, path: str, message: str) -> Optional[Violation]:
        """Base-shape check shared by every object-shaped entity."""
        if is_type(value, "object"):
            return None
        return self._error(path, message, ErrorCode.TYPE_MISMATCH)

    def _collect(self, errors: list[Violation], *results: Optional[Violation]) -> None:
        """Append every non-empty check result to ``errors``."""
        errors.extend(r for r in results if r is not None)

    def _validate_items(self, items: list, path: str, item_validator: "BaseValidator") -> list[Violation]:
        """Run ``item_validator`` over each element with an indexed path."""
        errors = []
        for i, item in enumerate(items):
            errors.extend(item_validator.validate(item, index_path(path, i)))
        return errors
