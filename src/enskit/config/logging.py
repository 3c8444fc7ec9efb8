"""structlog configuration for enskit.

Everything goes to stderr, so stdout stays clean for piped hashes:
- Human (default): console renderer; 32-byte hex digests are shortened to
  ``0x93cdeb70…a93fc4ae`` so debug lines stay on one line.
- JSON (``--log-json``): one JSON object per line, digests left intact.

The active network and name suffix are bound as context variables, so each
event records which configuration produced it.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

import structlog

_DIGEST_RE = re.compile(r"0x([0-9a-fA-F]{8})[0-9a-fA-F]{48}([0-9a-fA-F]{8})")


def shorten_digests(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Abbreviate every ``0x`` + 64-hex digest in string values."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = _DIGEST_RE.sub(r"0x\1…\2", value)
    return event_dict


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    network: str | None = None,
    suffix: str | None = None,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output for ``enskit.*``. When False, only
            WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        network: Bound as ``network`` on every event when given.
        suffix: Bound as ``suffix`` on every event when given.
    """
    structlog.contextvars.clear_contextvars()
    bound = {k: v for k, v in (("network", network), ("suffix", suffix)) if v is not None}
    if bound:
        structlog.contextvars.bind_contextvars(**bound)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]

    render: list[structlog.types.Processor]
    if log_json:
        render = [structlog.processors.JSONRenderer()]
    else:
        render = [shorten_digests, structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *render],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("enskit").setLevel(logging.DEBUG if verbose else logging.WARNING)
