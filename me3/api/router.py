"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from me3.api.health import router as health_router
from me3.api.protocol import router as protocol_router
from me3.api.validate import router as validate_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Protocol description
api_router.include_router(protocol_router, tags=["Protocol"])

# Validation
api_router.include_router(validate_router, tags=["Validation"])
