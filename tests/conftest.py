import json

import pytest

from chatguard import MessageSanitizerImpl


@pytest.fixture
def sanitizer() -> MessageSanitizerImpl:
    return MessageSanitizerImpl()


@pytest.fixture
def envelope_json():
    """Build a raw JSON envelope the way the chat client sends it."""

    def _build(name: str = "Luis", color: str = "blue", text: str = "hola") -> str:
        return json.dumps({"name": name, "color": color, "text": text})

    return _build
