"""Response models for the link relay API."""

from typing import Optional, List
from pydantic import BaseModel

from .results import VideoResult


class DownloadLinkResponse(BaseModel):
    """One download link with its suggested filename."""

    url: str
    quality: str
    has_watermark: bool
    filename: str


class VideoResultResponse(BaseModel):
    """Extraction result returned to the client."""

    title: str
    thumbnail: Optional[str] = None
    links: List[DownloadLinkResponse]

    @classmethod
    def from_result(cls, result: VideoResult) -> "VideoResultResponse":
        return cls(
            title=result.title,
            thumbnail=result.thumbnail,
            links=[
                DownloadLinkResponse(
                    url=link.url,
                    quality=link.quality,
                    has_watermark=link.has_watermark,
                    filename=link.filename(index),
                )
                for index, link in enumerate(result.links, start=1)
            ],
        )


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str
    upstream: str
