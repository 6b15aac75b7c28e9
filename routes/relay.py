"""
API endpoint that relays a video URL to the upstream conversion service.
"""

import logging
from typing import Optional
from fastapi import APIRouter
from fastapi.responses import Response

from models.requests import RelayRequest
from services.relay import relay

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/download")
async def relay_download(request: Optional[RelayRequest] = None):
    """Forward the URL upstream and return the response body untouched."""
    upstream = await relay.forward_async(request.url if request else None)
    logger.info(f"Relaying upstream response (status {upstream.status_code}, {len(upstream.body)} chars)")
    return Response(
        content=upstream.body,
        media_type=upstream.content_type or "text/html; charset=utf-8",
    )
