"""Health check endpoint."""

import time

from fastapi import APIRouter

from me3 import __version__
from me3.models.responses import HealthResponse
from me3.validators.constraints import ME3_VERSION

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness check. The validator has no external dependencies to check."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        protocol_version=ME3_VERSION,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
