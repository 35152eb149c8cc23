"""
Pattern and whitelist tables shared by the sanitizer stages.

Security: all matching is whitelist-based. Anything not described here
is treated as plain text (URLs) or replaced by the fallback (colors).
"""

import re

ANONYMOUS_NAME = "Anonymous"
DEFAULT_COLOR = "#000000"

ALLOWED_URL_SCHEMES = ("http", "https")

# Colors: #RGB / #RRGGBB or a basic CSS name
COLOR_NAMES = frozenset({
    "black",
    "white",
    "red",
    "green",
    "blue",
    "yellow",
    "purple",
    "orange",
    "gray",
    "grey",
    "silver",
    "maroon",
    "olive",
    "lime",
    "aqua",
    "teal",
    "navy",
    "fuchsia",
    "cyan",
    "magenta",
})

# Media file extensions, matched against the URL path
IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "gif", "webp", "avif", "svg")
VIDEO_EXTENSIONS = ("mp4", "webm", "ogg", "ogv", "mov", "m4v")

YOUTUBE_EMBED_URL = "https://www.youtube.com/embed/{id}"
VIMEO_EMBED_URL = "https://player.vimeo.com/video/{id}"


def _extension_pattern(extensions: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile(
        r"\.(?:" + "|".join(extensions) + r")(?:\?.*)?$",
        re.IGNORECASE,
    )


URL_PATTERN = re.compile(r"https?://[^\s<>\"']+", re.IGNORECASE)

COLOR_HEX_PATTERN = re.compile(r"^#(?:[0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)

IMAGE_EXTENSION_PATTERN = _extension_pattern(IMAGE_EXTENSIONS)
VIDEO_EXTENSION_PATTERN = _extension_pattern(VIDEO_EXTENSIONS)

YOUTUBE_PATTERNS = (
    re.compile(r"^https?://(?:www\.)?youtube\.com/watch\?v=([A-Za-z0-9_-]{11})", re.IGNORECASE),
    re.compile(r"^https?://(?:www\.)?youtu\.be/([A-Za-z0-9_-]{11})", re.IGNORECASE),
)
VIMEO_PATTERN = re.compile(r"^https?://(?:www\.)?vimeo\.com/([0-9]{6,12})", re.IGNORECASE)

# Dangerous markup, applied in this order
SCRIPT_BLOCK_PATTERN = re.compile(
    r"<\s*script\b[^>]*>[\s\S]*?<\s*/\s*script\s*>",
    re.IGNORECASE,
)
# on<word>= not glued to a preceding letter or digit; a leading space goes with it
_HANDLER_PREFIX = r"(?:\s|(?<![A-Za-z0-9]))on\w+\s*=\s*"
EVENT_HANDLER_PATTERNS = (
    re.compile(_HANDLER_PREFIX + r'"(.*?)"', re.IGNORECASE),
    re.compile(_HANDLER_PREFIX + r"'(.*?)'", re.IGNORECASE),
    re.compile(_HANDLER_PREFIX + r"[^>\s]+", re.IGNORECASE),
)
JAVASCRIPT_SCHEME_PATTERN = re.compile(r"javascript:", re.IGNORECASE)

# Strip passes before text that still rebuilds tokens is dropped
MAX_STRIP_ROUNDS = 4

# Display escaping; ampersand must stay first
DISPLAY_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

PHONE_PATTERN = re.compile(r"[+()\s\-.0-9]{6,20}")
