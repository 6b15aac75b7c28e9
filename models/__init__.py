"""Models package for request and response schemas."""

from .requests import RelayRequest, ResolveRequest
from .responses import DownloadLinkResponse, VideoResultResponse, HealthResponse
from .results import DownloadLink, VideoResult, QUALITY_HD, QUALITY_STANDARD

__all__ = [
    'RelayRequest',
    'ResolveRequest',
    'DownloadLinkResponse',
    'VideoResultResponse',
    'HealthResponse',
    'DownloadLink',
    'VideoResult',
    'QUALITY_HD',
    'QUALITY_STANDARD',
]
