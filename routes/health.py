"""
API endpoints for health checks.
"""

from datetime import datetime
from fastapi import APIRouter

from models.responses import HealthResponse
from services.relay import relay

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat(),
        upstream=relay.endpoint
    )
