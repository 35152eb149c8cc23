from .color_validator import sanitize_color
from .contact_validator import is_valid_phone, is_valid_phone_number
from .envelope_parser import parse_envelope
from .markup_sanitizer import escape_display, sanitize_name, strip_dangerous
from .message_sanitizer_impl import MessageSanitizerImpl, sanitize_message, validate_message
from .url_classifier import (
    build_caption,
    classify_url,
    detect_video_provider,
    find_first_http_url,
    is_image_url,
    is_video_file_url,
    is_video_url,
)

__all__ = [
    "MessageSanitizerImpl",
    "build_caption",
    "classify_url",
    "detect_video_provider",
    "escape_display",
    "find_first_http_url",
    "is_image_url",
    "is_valid_phone",
    "is_valid_phone_number",
    "is_video_file_url",
    "is_video_url",
    "parse_envelope",
    "sanitize_color",
    "sanitize_message",
    "sanitize_name",
    "strip_dangerous",
    "validate_message",
]
