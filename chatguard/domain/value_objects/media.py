from dataclasses import dataclass
from enum import Enum


class MediaKind(str, Enum):
    """Embeddable media categories."""
    IMAGE = "image"
    VIDEO = "video"


class VideoProvider(str, Enum):
    """Where a video URL is played from."""
    YOUTUBE = "youtube"
    VIMEO = "vimeo"
    FILE = "file"


@dataclass(frozen=True)
class ImageMedia:
    """Image referenced by a direct http(s) URL."""
    src: str
    url: str

    @property
    def kind(self) -> MediaKind:
        return MediaKind.IMAGE


@dataclass(frozen=True)
class VideoMedia:
    """Video hosted by a known provider or served as a plain file."""
    provider: VideoProvider
    url: str
    embed_url: str | None = None
    src: str | None = None

    @property
    def kind(self) -> MediaKind:
        return MediaKind.VIDEO


MediaRef = ImageMedia | VideoMedia
