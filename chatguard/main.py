"""
Line-oriented filter: one raw message per stdin line, one sanitized
JSON payload per stdout line.
"""

import sys
from typing import TextIO
from uuid import uuid4

import structlog

from .config import settings
from .infrastructure.adapters import MessageSanitizerImpl
from .infrastructure.logging import Timer, configure_logging, set_correlation_id

logger = structlog.get_logger()


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Sanitize every line from stdin. Returns the number of lines processed."""
    sanitizer = MessageSanitizerImpl()
    count = 0

    for line in stdin:
        raw = line.rstrip("\r\n")
        if not raw:
            continue
        set_correlation_id(uuid4().hex)

        with Timer() as t:
            payload = sanitizer.sanitize(raw)
        logger.debug(
            "Message sanitized",
            has_media=payload.media is not None,
            duration_ms=t.duration_ms,
        )

        try:
            stdout.write(payload.to_json() + "\n")
        except UnicodeEncodeError as e:
            # Lone surrogates or a narrow stdout encoding; \u escapes always encode
            logger.warning("Payload not encodable, writing ASCII JSON", error=str(e))
            stdout.write(payload.to_json(ensure_ascii=True) + "\n")
        count += 1

    return count


def main() -> None:
    """Main entry point for the filter."""
    configure_logging(settings.service_name, settings.log_level, settings.log_format)
    logger.info("Starting sanitizer", service=settings.service_name)

    try:
        count = run(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        logger.info("Sanitizer interrupted")
        return
    logger.info("Sanitizer finished", messages=count)


if __name__ == "__main__":
    main()
