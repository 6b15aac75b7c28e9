"""
Heuristic parser for the upstream download page.

The upstream page layout is not under our control, so every field is
recovered through an ordered chain of predicates over the parsed tree.
Each chain is tried in priority order and the first node (in document
order) accepted by a predicate wins. Markup that matches nothing simply
produces empty candidates; the only hard failure is a page with no
download links at all.
"""

import json
import logging
from typing import Callable, Iterable, List, Optional, Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

import config
from models.results import DownloadLink, VideoResult, QUALITY_HD, QUALITY_STANDARD
from services.errors import ExtractionError

logger = logging.getLogger(__name__)

Predicate = Callable[[Tag], bool]

DOWNLOAD_TOKEN = "download"
DOWNLOAD_BUTTON_CLASSES = {"download-btn", "btn-download"}
NO_WATERMARK_PHRASES = ("no watermark", "without watermark")
UPSTREAM_ERROR_KEYS = ("error", "message", "detail")


def _classes(node: Tag) -> List[str]:
    value = node.get("class") or []
    if isinstance(value, str):
        return value.split()
    return list(value)


def has_class(name: str) -> Predicate:
    return lambda node: name in _classes(node)


def is_tag(name: str) -> Predicate:
    return lambda node: node.name == name


def _inside_class(node: Tag, name: str, include_self: bool = False) -> bool:
    if include_self and name in _classes(node):
        return True
    return any(name in _classes(parent) for parent in node.parents if isinstance(parent, Tag))


def _visible_text(node: Tag) -> str:
    return node.get_text(" ", strip=True)


# -----------------------------------------------------------------------------
# Predicate chains
# -----------------------------------------------------------------------------

TITLE_CHAIN: Sequence[Predicate] = (
    has_class("video-title"),
    has_class("title"),
    is_tag("h1"),
    is_tag("h2"),
)

THUMBNAIL_CHAIN: Sequence[Predicate] = (
    lambda node: node.name == "img" and config.PLATFORM_NAME in (node.get("src") or ""),
    lambda node: node.name == "img" and node.get("src") is not None and _inside_class(node, "thumbnail"),
    lambda node: (
        node.name == "img"
        and node.get("src") is not None
        and _inside_class(node, "video-thumbnail", include_self=True)
    ),
)


def is_download_candidate(node: Tag) -> bool:
    """Anchors pointing at a download target, or any element styled as a download button."""
    if DOWNLOAD_BUTTON_CLASSES.intersection(_classes(node)):
        return True
    return node.name in ("a", "button") and DOWNLOAD_TOKEN in (node.get("href") or "")


def is_video_source(node: Tag) -> bool:
    """``<source>`` elements of a ``<video>`` or a ``<video>`` with its own src."""
    if node.name == "video":
        return node.get("src") is not None
    if node.name == "source":
        return node.find_parent("video") is not None
    return False


# -----------------------------------------------------------------------------
# Traversal
# -----------------------------------------------------------------------------

def iter_matches(root: Tag, predicate: Predicate) -> Iterable[Tag]:
    """Yield every tag under ``root`` accepted by ``predicate`` in document order."""
    for node in root.find_all(True):
        if predicate(node):
            yield node


def first_match(root: Tag, chain: Sequence[Predicate], accept: Callable[[Tag], Optional[str]]) -> Optional[str]:
    """
    Walk ``chain`` in priority order and return the first accepted value.

    ``accept`` maps a matching node to a value, or to ``None``/empty when the
    node should be skipped.
    """
    for predicate in chain:
        for node in iter_matches(root, predicate):
            value = accept(node)
            if value:
                return value
    return None


# -----------------------------------------------------------------------------
# Field extraction
# -----------------------------------------------------------------------------

def extract_title(soup: BeautifulSoup) -> str:
    return first_match(soup, TITLE_CHAIN, _visible_text) or config.DEFAULT_TITLE


def extract_thumbnail(soup: BeautifulSoup) -> Optional[str]:
    return first_match(soup, THUMBNAIL_CHAIN, lambda node: node.get("src"))


def describe_link(url: str, text: str) -> DownloadLink:
    """Infer quality and watermark flags from the visible text of a link."""
    text = text.lower()
    has_watermark = not any(phrase in text for phrase in NO_WATERMARK_PHRASES)
    quality = QUALITY_HD if "hd" in text else QUALITY_STANDARD
    return DownloadLink(url=url, quality=quality, has_watermark=has_watermark)


def extract_download_links(soup: BeautifulSoup) -> List[DownloadLink]:
    links = []
    for node in iter_matches(soup, is_download_candidate):
        href = node.get("href")
        if not href:
            continue
        links.append(describe_link(href, _visible_text(node)))
    return links


def extract_video_sources(soup: BeautifulSoup) -> List[DownloadLink]:
    links = []
    for node in iter_matches(soup, is_video_source):
        src = node.get("src") or node.get("data-src")
        if not src:
            continue
        links.append(DownloadLink(url=src, quality=QUALITY_STANDARD, has_watermark=True))
    return links


def upstream_error_message(body: str, content_type: Optional[str] = None) -> Optional[str]:
    """
    Return the error text of a JSON error document, if ``body`` is one.

    Returns an empty string for JSON bodies without a usable message and
    ``None`` when the body is not JSON.
    """
    stripped = body.lstrip()
    looks_json = bool(content_type and "json" in content_type.lower()) or stripped.startswith("{")
    if not looks_json:
        return None
    try:
        payload = json.loads(stripped)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return ""
    for key in UPSTREAM_ERROR_KEYS:
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""


class LinkExtractor:
    """Turns a raw upstream response into a :class:`VideoResult`."""

    def __init__(self, parser: str = "html.parser"):
        self.parser = parser

    def extract(self, html: Optional[str], content_type: Optional[str] = None) -> VideoResult:
        html = html or ""

        error_message = upstream_error_message(html, content_type)
        if error_message is not None:
            logger.warning(f"Upstream returned a JSON document instead of HTML: {error_message or 'no message'}")
            if error_message:
                raise ExtractionError(f"upstream error: {error_message}")
            raise ExtractionError()

        try:
            soup = BeautifulSoup(html, self.parser)
            title = extract_title(soup)
            thumbnail = extract_thumbnail(soup)
            links = extract_download_links(soup)
            if not links:
                logger.info("No download anchors found, falling back to video sources")
                links = extract_video_sources(soup)
        except Exception as e:
            logger.error(f"Failed to parse upstream response: {e}")
            raise ExtractionError() from e

        if not links:
            logger.warning("No download links found in upstream response")
            raise ExtractionError()

        logger.info(f"Extracted {len(links)} link(s) for '{title}'")
        return VideoResult(title=title, thumbnail=thumbnail, links=tuple(links))


extractor = LinkExtractor()
