"""
URL detection and media classification for chat messages.

Security: Only http/https URLs that parse cleanly are considered, and
only the first one in a message. Media is recognised by path extension
or by a fixed set of provider URL shapes; everything else stays text.
"""

from urllib.parse import SplitResult, urlsplit

import structlog

from ...domain.rules import (
    ALLOWED_URL_SCHEMES,
    IMAGE_EXTENSION_PATTERN,
    URL_PATTERN,
    VIDEO_EXTENSION_PATTERN,
    VIMEO_EMBED_URL,
    VIMEO_PATTERN,
    YOUTUBE_EMBED_URL,
    YOUTUBE_PATTERNS,
)
from ...domain.value_objects import ImageMedia, MediaRef, VideoMedia, VideoProvider
from .markup_sanitizer import escape_display

logger = structlog.get_logger()


def _parse_http_url(url: str) -> SplitResult | None:
    """Strictly parse an http(s) URL, returning None when it is unusable."""
    try:
        parts = urlsplit(str(url))
        # Accessing port validates it (non-numeric or out of range raises)
        parts.port
    except ValueError:
        return None
    if parts.scheme.lower() not in ALLOWED_URL_SCHEMES or not parts.hostname:
        return None
    return parts


def is_image_url(url: str) -> bool:
    """Check whether an http(s) URL points to an image file."""
    parts = _parse_http_url(url)
    return parts is not None and IMAGE_EXTENSION_PATTERN.search(parts.path) is not None


def is_video_file_url(url: str) -> bool:
    """Check whether an http(s) URL points to a video file."""
    parts = _parse_http_url(url)
    return parts is not None and VIDEO_EXTENSION_PATTERN.search(parts.path) is not None


def detect_video_provider(url: str) -> VideoMedia | None:
    """Recognise YouTube, Vimeo and plain video file URLs."""
    if _parse_http_url(url) is None:
        return None

    for pattern in YOUTUBE_PATTERNS:
        match = pattern.match(url)
        if match:
            return VideoMedia(
                provider=VideoProvider.YOUTUBE,
                url=url,
                embed_url=YOUTUBE_EMBED_URL.format(id=match.group(1)),
            )

    match = VIMEO_PATTERN.match(url)
    if match:
        return VideoMedia(
            provider=VideoProvider.VIMEO,
            url=url,
            embed_url=VIMEO_EMBED_URL.format(id=match.group(1)),
        )

    if is_video_file_url(url):
        return VideoMedia(provider=VideoProvider.FILE, url=url, src=url)

    return None


def classify_url(url: str) -> MediaRef | None:
    """Classify a URL as image or video; images take priority."""
    if is_image_url(url):
        return ImageMedia(src=url, url=url)
    return detect_video_provider(url)


def find_first_http_url(text: str) -> str | None:
    """
    Return the first http(s) URL in the text, exactly as written.

    Only the leftmost candidate is looked at. If it does not parse, the
    message is treated as having no URL.
    """
    match = URL_PATTERN.search(text or "")
    if not match:
        return None
    candidate = match.group(0)
    if _parse_http_url(candidate) is None:
        logger.debug("Discarding unparseable URL candidate", candidate_length=len(candidate))
        return None
    return candidate


def build_caption(text: str, url: str | None, media: MediaRef | None) -> str:
    """Escape the text for display, removing the URL when it became media."""
    if url and media is not None:
        return escape_display(text.replace(url, "").strip())
    return escape_display(text)


# Name used by existing chat clients
is_video_url = is_video_file_url
