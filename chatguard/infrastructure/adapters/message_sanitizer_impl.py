"""
Message sanitizer implementation.

Security: Runs every chat message through, in order:
- tolerant envelope parsing
- name and color sanitization
- dangerous markup stripping on the text
- first-URL media classification and caption rewrite
Any unexpected failure degrades to a minimal, fully escaped payload.
"""

from typing import Any

import structlog

from ...domain.ports.message_sanitizer import MessageSanitizer
from ...domain.rules import ANONYMOUS_NAME, DEFAULT_COLOR
from ...domain.value_objects import SanitizedPayload
from ..logging import sanitize_for_logging
from .color_validator import sanitize_color
from .envelope_parser import parse_envelope
from .markup_sanitizer import escape_display, sanitize_name, strip_dangerous
from .url_classifier import build_caption, classify_url, find_first_http_url

logger = structlog.get_logger()


class MessageSanitizerImpl(MessageSanitizer):
    """Sanitize-and-classify pipeline for chat messages."""

    def sanitize(self, raw: Any) -> SanitizedPayload:
        try:
            return self._sanitize(raw)
        except Exception as e:
            raw_text = _safe_text(raw)
            logger.error(
                "Message sanitization failed, using fallback payload",
                error=str(e),
                input_preview=sanitize_for_logging(raw_text, visible_chars=40),
                exc_info=True,
            )
            return SanitizedPayload(
                name=ANONYMOUS_NAME,
                color=DEFAULT_COLOR,
                caption=escape_display(raw_text),
            )

    def _sanitize(self, raw: Any) -> SanitizedPayload:
        envelope = parse_envelope(raw)

        name = sanitize_name(envelope.name)
        color = sanitize_color(envelope.color)

        # Strip before looking for URLs so nothing inside a script block is classified
        text = strip_dangerous(envelope.text)
        url = find_first_http_url(text)
        media = classify_url(url) if url else None

        return SanitizedPayload(
            name=name,
            color=color,
            caption=build_caption(text, url, media),
            media=media,
        )


def _safe_text(raw: Any) -> str:
    if raw is None:
        return ""
    try:
        return raw if isinstance(raw, str) else str(raw)
    except Exception:
        return ""


_default_sanitizer = MessageSanitizerImpl()


def sanitize_message(raw: Any) -> str:
    """Sanitize a raw chat message and return the payload as JSON text."""
    return _default_sanitizer.sanitize_to_json(raw)


# Name used by existing chat clients
validate_message = sanitize_message
