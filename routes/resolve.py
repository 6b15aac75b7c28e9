"""
API endpoint that relays a video URL and extracts download links from the result.
"""

import logging
from typing import Optional
from fastapi import APIRouter

from models.requests import ResolveRequest
from models.responses import VideoResultResponse
from services.relay import relay, validate_video_url
from services.extractor import extractor

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/resolve", response_model=VideoResultResponse)
async def resolve_links(request: Optional[ResolveRequest] = None):
    """Resolve a TikTok URL into a title, thumbnail and download links."""
    url = validate_video_url(request.url if request else None)
    upstream = await relay.forward_async(url)
    result = extractor.extract(upstream.body, upstream.content_type)
    logger.info(f"Resolved {len(result.links)} link(s) for {url}")
    return VideoResultResponse.from_result(result)
