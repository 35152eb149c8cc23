import json
from dataclasses import dataclass
from typing import Any

from .media import ImageMedia, MediaRef, VideoMedia


@dataclass(frozen=True)
class SanitizedPayload:
    """Display-safe message produced by the sanitizer.

    Security: every string field is already escaped; media URLs are
    http(s) only and were matched against a closed set of shapes.
    """

    name: str
    color: str
    caption: str
    media: MediaRef | None = None

    def to_dict(self) -> dict[str, Any]:
        """Flatten media fields next to the text fields, omitting empty ones."""
        data: dict[str, Any] = {
            "name": self.name,
            "color": self.color,
            "caption": self.caption,
        }
        if isinstance(self.media, ImageMedia):
            data["kind"] = self.media.kind.value
            data["src"] = self.media.src
        elif isinstance(self.media, VideoMedia):
            data["kind"] = self.media.kind.value
            data["provider"] = self.media.provider.value
            if self.media.embed_url:
                data["embedUrl"] = self.media.embed_url
            if self.media.src:
                data["src"] = self.media.src
        return data

    def to_json(self, ensure_ascii: bool = False) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=ensure_ascii)
