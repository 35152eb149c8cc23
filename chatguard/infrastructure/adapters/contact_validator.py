from typing import Any

from ...domain.rules import PHONE_PATTERN


def is_valid_phone_number(value: Any) -> bool:
    """Loose phone check: 6-20 chars of digits, +, spaces, -, . and parentheses."""
    return PHONE_PATTERN.fullmatch("" if value is None else str(value)) is not None


# Name used by existing chat clients
is_valid_phone = is_valid_phone_number
