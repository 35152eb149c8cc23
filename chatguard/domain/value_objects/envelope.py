from dataclasses import dataclass
from enum import Enum


class EnvelopeKind(str, Enum):
    """How much structure survived decoding of the raw input."""
    STRUCTURED = "structured"
    PARTIAL = "partial"
    PLAIN_TEXT = "plain_text"


@dataclass(frozen=True)
class MessageEnvelope:
    """Untrusted message fields before sanitization."""
    kind: EnvelopeKind
    name: str | None = None
    color: str | None = None
    text: str | None = None

    @classmethod
    def plain_text(cls, text: str) -> "MessageEnvelope":
        return cls(kind=EnvelopeKind.PLAIN_TEXT, text=text)

    @classmethod
    def from_fields(
        cls,
        name: str | None,
        color: str | None,
        text: str | None,
    ) -> "MessageEnvelope":
        """Tag as structured only when every field is present."""
        complete = name is not None and color is not None and text is not None
        return cls(
            kind=EnvelopeKind.STRUCTURED if complete else EnvelopeKind.PARTIAL,
            name=name,
            color=color,
            text=text,
        )
