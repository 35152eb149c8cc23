from .envelope import EnvelopeKind, MessageEnvelope
from .media import ImageMedia, MediaKind, MediaRef, VideoMedia, VideoProvider
from .payload import SanitizedPayload

__all__ = [
    "EnvelopeKind",
    "ImageMedia",
    "MediaKind",
    "MediaRef",
    "MessageEnvelope",
    "SanitizedPayload",
    "VideoMedia",
    "VideoProvider",
]
