"""
Markup sanitization for chat names and message text.

Security: Removes the script-injection surface a chat message can carry:
- <script> blocks (with their content)
- on<event>= handler attributes
- the javascript: scheme
Whatever survives is escaped so it renders as text, never as HTML.
"""

from typing import Any

import structlog

from ...domain.rules import (
    ANONYMOUS_NAME,
    DISPLAY_ESCAPES,
    EVENT_HANDLER_PATTERNS,
    JAVASCRIPT_SCHEME_PATTERN,
    MAX_STRIP_ROUNDS,
    SCRIPT_BLOCK_PATTERN,
)

logger = structlog.get_logger()


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def strip_dangerous(text: Any) -> str:
    """
    Remove script blocks, event handler attributes and javascript: tokens.

    Passes repeat until nothing changes, so a removal can never splice
    together a new dangerous token. The number of passes is capped; text
    still carrying a dangerous token after the cap is dropped entirely.
    """
    current = _as_text(text)
    for _ in range(MAX_STRIP_ROUNDS):
        stripped = _strip_once(current)
        if stripped == current:
            return stripped
        current = stripped

    if _strip_once(current) != current:
        logger.warning(
            "Dropping text with deeply nested dangerous markup",
            text_length=len(current),
            rounds=MAX_STRIP_ROUNDS,
        )
        return ""
    return current


def _strip_once(text: str) -> str:
    # Script blocks go first so their content is dropped wholesale
    text = SCRIPT_BLOCK_PATTERN.sub("", text)
    for pattern in EVENT_HANDLER_PATTERNS:
        text = pattern.sub("", text)
    return JAVASCRIPT_SCHEME_PATTERN.sub("", text)


def escape_display(text: Any) -> str:
    """Escape &, <, >, " and ' for display as plain text."""
    escaped = _as_text(text)
    for char, entity in DISPLAY_ESCAPES:
        escaped = escaped.replace(char, entity)
    return escaped


def sanitize_name(name: str | None) -> str:
    """Display name, defaulting to the anonymous name when absent."""
    return escape_display(strip_dangerous(ANONYMOUS_NAME if name is None else name))
