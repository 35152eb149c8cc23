"""
Inbound port for chat message sanitization.

Security: Turns an untrusted message envelope into a payload that can be
rendered as text without script execution, with embeddable media split out.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..value_objects import SanitizedPayload


class MessageSanitizer(ABC):
    """
    Port for sanitizing and classifying chat messages.

    Implementations must be total: malformed input, unsupported URLs and
    internal faults all end in a usable payload, never an exception.
    """

    @abstractmethod
    def sanitize(self, raw: Any) -> SanitizedPayload:
        """
        Sanitize a raw message.

        Args:
            raw: JSON text, a mapping with name/color/text, or any scalar

        Returns:
            SanitizedPayload safe for display
        """
        ...

    def sanitize_to_json(self, raw: Any) -> str:
        """Sanitize and serialize in one step."""
        return self.sanitize(raw).to_json()
