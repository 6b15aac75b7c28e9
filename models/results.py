"""Domain objects produced by the extractor."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

import config

QUALITY_HD = "HD"
QUALITY_STANDARD = "Standard"


@dataclass(frozen=True)
class DownloadLink:
    """A single candidate download found on the upstream page."""

    url: str
    quality: str = QUALITY_STANDARD
    has_watermark: bool = True

    def filename(self, index: int) -> str:
        """Suggested save-as name for the link at 1-based ``index``."""
        return f"{config.PLATFORM_NAME}-video-{index}.mp4"


@dataclass(frozen=True)
class VideoResult:
    """
    Structured outcome of one extraction.

    ``links`` keeps the order in which the links appeared in the document.
    Duplicate targets are kept as separate entries.
    """

    title: str
    thumbnail: Optional[str] = None
    links: Tuple[DownloadLink, ...] = field(default_factory=tuple)
