"""
API endpoint describing the service.
"""

from fastapi import APIRouter

router = APIRouter()


@router.get("/", response_model=dict)
async def root():
    """Root endpoint with API information."""
    return {
        "message": "TikTok Download Link Relay",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
        "relay": "/api/download",
        "resolve": "/api/resolve"
    }
