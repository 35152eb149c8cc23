"""Whitelist validation for the message color field."""

from typing import Any

from ...domain.rules import COLOR_HEX_PATTERN, COLOR_NAMES, DEFAULT_COLOR


def sanitize_color(value: Any) -> str:
    """
    Return a safe color token.

    Hex colors (#RGB / #RRGGBB) are kept as given, basic CSS names are
    lowercased, anything else becomes the default color.
    """
    if not value:
        return DEFAULT_COLOR
    color = str(value).strip()
    if COLOR_HEX_PATTERN.fullmatch(color):
        return color
    if color.lower() in COLOR_NAMES:
        return color.lower()
    return DEFAULT_COLOR
