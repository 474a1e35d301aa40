"""Validate a decoded document or raw me.json text."""

from fastapi import APIRouter, HTTPException, Request

import structlog

from me3.config import get_settings
from me3.models.requests import ValidateProfileRequest
from me3.models.responses import ValidationResponse
from me3.validators import validation_engine

logger = structlog.get_logger()

router = APIRouter()


@router.post("/validate", response_model=ValidationResponse)
async def validate_profile(request: ValidateProfileRequest):
    """Validate a document sent as JSON under ``profile``.

    An invalid document is still a 200 response; the violations are the payload.
    """
    result = validation_engine.validate(request.profile)
    logger.info("profile_validated", valid=result.valid, violations=len(result.violations))
    return ValidationResponse.from_result(result)


@router.post("/validate/raw", response_model=ValidationResponse)
async def validate_raw(request: Request):
    """Validate the raw request body as me.json text (malformed JSON is a violation, not a 400)."""
    body = await request.body()
    settings = get_settings()

    if len(body) > settings.MAX_DOCUMENT_BYTES:
        logger.warning("document_too_large", size=len(body), limit=settings.MAX_DOCUMENT_BYTES)
        raise HTTPException(
            status_code=413,
            detail=f"Document exceeds {settings.MAX_DOCUMENT_BYTES} bytes",
        )

    result = validation_engine.parse(body)
    logger.info("raw_profile_validated", valid=result.valid, violations=len(result.violations))
    return ValidationResponse.from_result(result)
