from .message_sanitizer import MessageSanitizer

__all__ = [
    "MessageSanitizer",
]
