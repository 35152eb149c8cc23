"""Sanitization and media classification for user-submitted chat messages."""

from .domain.ports import MessageSanitizer
from .domain.value_objects import (
    EnvelopeKind,
    ImageMedia,
    MediaKind,
    MessageEnvelope,
    SanitizedPayload,
    VideoMedia,
    VideoProvider,
)
from .infrastructure.adapters import (
    MessageSanitizerImpl,
    classify_url,
    detect_video_provider,
    escape_display,
    is_image_url,
    is_valid_phone,
    is_valid_phone_number,
    is_video_file_url,
    is_video_url,
    parse_envelope,
    sanitize_color,
    sanitize_message,
    strip_dangerous,
    validate_message,
)

__all__ = [
    "EnvelopeKind",
    "ImageMedia",
    "MediaKind",
    "MessageEnvelope",
    "MessageSanitizer",
    "MessageSanitizerImpl",
    "SanitizedPayload",
    "VideoMedia",
    "VideoProvider",
    "classify_url",
    "detect_video_provider",
    "escape_display",
    "is_image_url",
    "is_valid_phone",
    "is_valid_phone_number",
    "is_video_file_url",
    "is_video_url",
    "parse_envelope",
    "sanitize_color",
    "sanitize_message",
    "strip_dangerous",
    "validate_message",
]
