import re
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional
import requests
import config
from services.errors import ValidationError, TransportError
logger = logging.getLogger(__name__)
@dataclass(frozen=True)
class UpstreamResponse:
    body: str
    content_type: Optional[str] = None
    status_code: int = 200
def validate_video_url(url: Optional[str]) -> str:
    if not url or not url.strip():
        raise ValidationError("Please enter a TikTok URL")
    url = url.strip()
    if not re.match(config.VIDEO_URL_PATTERN, url):
        logger.warning(f"Rejected URL with unexpected shape: {url}")
        raise ValidationError("Please enter a valid TikTok URL")
    return url
class UpstreamRelay:
    def __init__(self, endpoint: str = config.UPSTREAM_URL, user_agent: str = config.USER_AGENT):
        self.endpoint = endpoint
        self.user_agent = user_agent
        logger.info(f"Initialized UpstreamRelay for endpoint: {self.endpoint}")
    def _build_form(self, url: str) -> dict:
        # (None, value) tuples make requests encode plain multipart fields
        return {
            'url': (None, url),
            'format': (None, config.UPSTREAM_FORMAT),
        }
    def forward(self, url: Optional[str]) -> UpstreamResponse:
        if not url or not url.strip():
            raise ValidationError()
        logger.info(f"Forwarding URL to upstream: {url}")
        try:
            response = requests.post(
                self.endpoint,
                files=self._build_form(url),
                headers={'User-Agent': self.user_agent},
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Proxy error: {e}")
            raise TransportError() from e
        logger.info(f"Upstream responded with {len(response.text)} chars")
        return UpstreamResponse(
            body=response.text,
            content_type=response.headers.get('Content-Type'),
            status_code=response.status_code,
        )
    async def forward_async(self, url: Optional[str]) -> UpstreamResponse:
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, lambda: self.forward(url))
relay = UpstreamRelay()
