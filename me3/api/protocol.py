"""Publishes the constraint table so clients can pre-check documents."""

from fastapi import APIRouter

from me3.models.responses import ProtocolResponse
from me3.validators.constraints import describe_constraints

router = APIRouter()


@router.get("/protocol", response_model=ProtocolResponse)
async def get_protocol():
    """Supported protocol version, file name, limits, enums and patterns."""
    return ProtocolResponse(**describe_constraints())
