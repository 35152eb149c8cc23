"""Tests for the full sanitize-and-classify pipeline."""

import json
import re

import pytest
from structlog.testing import capture_logs

import chatguard.infrastructure.adapters.message_sanitizer_impl as impl_module
from chatguard import SanitizedPayload, sanitize_message, validate_message

HANDLER_RE = re.compile(r"on\w+\s*=", re.IGNORECASE)


def _run(raw) -> dict:
    return json.loads(sanitize_message(raw))


class TestMessageScenarios:
    """End-to-end behaviour on realistic chat messages."""

    def test_image_classified_and_caption_kept(self, envelope_json) -> None:
        out = _run(envelope_json(
            name="Ana <script>alert(1)</script>",
            color="#ff0000",
            text="mira esto https://example.com/foto.webp es genial",
        ))

        assert out["kind"] == "image"
        assert out["src"] == "https://example.com/foto.webp"
        assert "Ana" in out["name"]
        assert "<script>" not in out["name"]
        assert out["color"] == "#ff0000"
        assert out["caption"].startswith("mira esto")
        assert "https://example.com/foto.webp" not in out["caption"]

    def test_youtube_video(self, envelope_json) -> None:
        out = _run(envelope_json(text="vean https://youtu.be/dQw4w9WgXcQ porfa"))

        assert out["kind"] == "video"
        assert out["provider"] == "youtube"
        assert out["embedUrl"] == "https://www.youtube.com/embed/dQw4w9WgXcQ"
        assert "src" not in out
        assert out["caption"] == "vean  porfa"

    def test_vimeo_video(self, envelope_json) -> None:
        out = _run(envelope_json(text="https://vimeo.com/76979871"))

        assert out["provider"] == "vimeo"
        assert out["embedUrl"] == "https://player.vimeo.com/video/76979871"
        assert out["caption"] == ""

    def test_video_file(self, envelope_json) -> None:
        out = _run(envelope_json(text="clip: https://files.site.com/clip.mp4"))

        assert out["kind"] == "video"
        assert out["provider"] == "file"
        assert out["src"] == "https://files.site.com/clip.mp4"
        assert "embedUrl" not in out
        assert out["caption"] == "clip:"

    def test_script_injection_prevented(self, envelope_json) -> None:
        out = _run(envelope_json(
            name="pepe",
            color="#00ff00",
            text="<img src=x onerror=alert(1)><script>alert(2)</script>hola",
        ))

        assert "<script>" not in out["caption"]
        assert "onerror" not in out["caption"]
        assert "hola" in out["caption"]
        assert "kind" not in out

    def test_unclassified_url_stays_visible(self, envelope_json) -> None:
        out = _run(envelope_json(text="lee https://example.com/articulo"))

        assert out["caption"] == "lee https://example.com/articulo"
        assert "kind" not in out

    def test_repeated_media_url_not_left_in_caption(self) -> None:
        """Every copy of the classified URL leaves the caption."""
        out = _run({"text": "https://a.com/x.png y https://a.com/x.png"})

        assert out["kind"] == "image"
        assert out["caption"] == "y"

    def test_url_inside_script_not_classified(self, envelope_json) -> None:
        out = _run(envelope_json(text="<script>x https://a.com/x.png</script>hola"))

        assert out["caption"] == "hola"
        assert "kind" not in out

    def test_plain_text_input(self) -> None:
        out = _run("hola <b>mundo</b>")

        assert out == {
            "name": "Anonymous",
            "color": "#000000",
            "caption": "hola &lt;b&gt;mundo&lt;/b&gt;",
        }

    def test_mapping_input(self) -> None:
        out = _run({"name": "Luis", "color": "BLUE", "text": "https://example.com/a.png"})

        assert out == {
            "name": "Luis",
            "color": "blue",
            "caption": "",
            "kind": "image",
            "src": "https://example.com/a.png",
        }

    def test_scalar_input(self) -> None:
        assert _run(None)["caption"] == ""
        assert _run(42)["caption"] == "42"

    def test_non_ascii_kept(self) -> None:
        assert "ñandú" in sanitize_message('{"text": "ñandú"}')

    def test_validate_message_alias(self, envelope_json) -> None:
        raw = envelope_json(text="hola")
        assert validate_message(raw) == sanitize_message(raw)


class TestSecurityProperties:
    """Properties that must hold for any hostile input."""

    HOSTILE = [
        "<svg onload=alert(1)>",
        '<a href="javascript:alert(1)">x</a>',
        "<IMG SRC=x OnErRoR='alert(1)'>",
        '<script src="https://evil.com/x.png"></script>',
        "<scr<script>x</script>ipt>alert(1)</script>",
        "javajavascript:script:alert(1)",
        '<div/onclick="x()">hi</div>',
        "<body onload =alert(1)>",
        "https://example.com/a.png?onerror=alert(1)",
    ]

    @pytest.mark.parametrize("hostile", HOSTILE)
    def test_no_dangerous_markup_survives(self, hostile: str) -> None:
        out = _run({"name": hostile, "color": hostile, "text": hostile})

        for field in ("name", "caption"):
            value = out[field]
            assert "<script" not in value.lower()
            assert "javascript:" not in value.lower()
            assert HANDLER_RE.search(value) is None
            assert "<" not in value and ">" not in value
        assert out["color"] == "#000000"

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/foto.webp",
            "http://cdn.example.org/a.JPG?size=large",
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://vimeo.com/123456789",
            "https://files.site.com/clip.m4v",
        ],
    )
    def test_media_url_removed_from_caption(self, url: str) -> None:
        out = _run({"text": f"antes {url} despues"})

        assert "kind" in out
        assert url not in out["caption"]
        assert out["caption"] == "antes  despues"


class TestFallback:
    """Unexpected failures degrade to a minimal escaped payload."""

    def test_internal_error_returns_fallback(self, sanitizer, monkeypatch) -> None:
        def boom(url):
            raise RuntimeError("pattern engine failure")

        monkeypatch.setattr(impl_module, "classify_url", boom)
        raw = '{"name": "x", "text": "<b>hi</b> https://a.com/x.png"}'

        with capture_logs() as logs:
            payload = sanitizer.sanitize(raw)

        assert payload == SanitizedPayload(
            name="Anonymous",
            color="#000000",
            caption=raw.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace('"', "&quot;"),
        )
        assert payload.media is None
        assert logs[0]["log_level"] == "error"
        assert logs[0]["error"] == "pattern engine failure"

    def test_sanitize_message_never_raises(self, monkeypatch) -> None:
        def boom(raw):
            raise ValueError("bad envelope")

        monkeypatch.setattr(impl_module, "parse_envelope", boom)

        with capture_logs():
            out = _run({"text": "hola"})

        assert out["name"] == "Anonymous"
        assert out["color"] == "#000000"
        assert "hola" in out["caption"]
        assert "kind" not in out

    def test_unprintable_input_falls_back_to_empty(self, sanitizer) -> None:
        class Hostile:
            def __str__(self):
                raise RuntimeError("no str")

        with capture_logs():
            payload = sanitizer.sanitize(Hostile())

        assert payload.caption == ""
        assert payload.name == "Anonymous"
