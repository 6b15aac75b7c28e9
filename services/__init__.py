"""Services package for business logic."""

from .errors import RelayError, ValidationError, TransportError, ExtractionError
from .relay import UpstreamRelay, UpstreamResponse, validate_video_url
from .extractor import LinkExtractor

__all__ = [
    'RelayError',
    'ValidationError',
    'TransportError',
    'ExtractionError',
    'UpstreamRelay',
    'UpstreamResponse',
    'validate_video_url',
    'LinkExtractor',
]
