"""API request models."""

from typing import Any

from pydantic import BaseModel, Field


class ValidateProfileRequest(BaseModel):
    """Request to validate an already-decoded me.json document."""

    profile: Any = Field(
        ...,
        description="The me.json document. Any JSON value is accepted; non-objects are reported as violations.",
        examples=[{"version": "0.1", "name": "Jane Doe"}],
    )
