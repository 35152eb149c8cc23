"""
Tolerant decoding of raw chat input.

Accepts JSON text, an already-decoded mapping or any scalar, and always
produces a MessageEnvelope. Nothing here validates content; that is the
sanitizer's job.
"""

import json
from collections.abc import Mapping
from typing import Any

import structlog

from ...domain.value_objects import MessageEnvelope

logger = structlog.get_logger()

# First key found wins; the Spanish keys come from the original chat client
NAME_KEYS = ("name", "nombre")
COLOR_KEYS = ("color",)
TEXT_KEYS = ("text", "message", "mensaje")


def parse_envelope(raw: Any) -> MessageEnvelope:
    """Decode raw input into an envelope, falling back to plain text."""
    if isinstance(raw, (bytes, bytearray)):
        raw = bytes(raw).decode("utf-8", errors="replace")
    if isinstance(raw, str):
        return _parse_text(raw)
    if isinstance(raw, Mapping):
        return _from_mapping(raw)
    if raw is None:
        return MessageEnvelope.plain_text("")
    return MessageEnvelope.plain_text(_as_text(raw))


def _parse_text(raw: str) -> MessageEnvelope:
    try:
        decoded = json.loads(raw)
    except (ValueError, RecursionError):
        return MessageEnvelope.plain_text(raw)

    if not isinstance(decoded, dict):
        logger.debug("Message is not a JSON object", decoded_type=type(decoded).__name__)
        return MessageEnvelope.plain_text(raw)
    return _from_mapping(decoded)


def _from_mapping(fields: Mapping) -> MessageEnvelope:
    # Shallow copy so the caller's object is never touched
    fields = dict(fields)
    return MessageEnvelope.from_fields(
        name=_pick(fields, NAME_KEYS),
        color=_pick(fields, COLOR_KEYS),
        text=_pick(fields, TEXT_KEYS),
    )


def _pick(fields: dict, keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = fields.get(key)
        if value is not None:
            return _as_text(value)
    return None


def _as_text(value: Any) -> str:
    # Booleans read as JSON literals, the way chat clients send them
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)
