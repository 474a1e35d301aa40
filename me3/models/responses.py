"""API response models."""

from typing import Any, Literal, Optional

from pydantic import BaseModel

from me3.validators.models import ValidationResult, Violation


class ValidationResponse(BaseModel):
    """Result of validating one document."""

    valid: bool
    violations: list[Violation] = []
    profile: Optional[dict[str, Any]] = None

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationResponse":
        return cls(valid=result.valid, violations=result.violations, profile=result.profile)


class ProtocolResponse(BaseModel):
    """Protocol version and the constraint table, for clients that pre-check documents."""

    version: str
    filename: str
    limits: dict[str, int]
    enums: dict[str, list[str]]
    patterns: dict[str, str]


class HealthResponse(BaseModel):
    """Service health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str
    protocol_version: str
    uptime_seconds: float
