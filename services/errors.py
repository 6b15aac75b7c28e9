"""Error types raised by the relay and extractor services."""

from typing import Optional


class RelayError(Exception):
    """Base error carrying a client-safe message and an HTTP status."""

    status_code = 500
    default_message = "An unexpected error occurred. Please try again."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(RelayError):
    """Missing or badly shaped input URL."""

    status_code = 400
    default_message = "URL missing"


class TransportError(RelayError):
    """Outbound call to the upstream service failed."""

    status_code = 500
    default_message = "Failed to fetch video data"


class ExtractionError(RelayError):
    """No download links could be recovered from the upstream response."""

    status_code = 422
    default_message = "no download links found"
