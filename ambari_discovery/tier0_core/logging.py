"""
ambari_discovery.tier0_core.logging
─────────────────────────────────────
Structured logs with levels, automatic context injection (cluster, service)
and redaction of secret-looking fields.

Minimal stack: structlog (stdout JSON or console)
Configure via: DISCOVERY_LOG_LEVEL, DISCOVERY_LOG_FORMAT=json|console
"""
from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog

from ambari_discovery.tier0_core.config import get_config
from ambari_discovery.tier0_core.errors import ConfigurationError


# ── Configuration ─────────────────────────────────────────────────────────────

def _logging_settings() -> tuple[int, str]:
    # Bad settings must not stop the package from importing; get_config()
    # still raises for callers that read the config directly.
    try:
        config = get_config()
    except ConfigurationError:
        return logging.INFO, "json"
    return getattr(logging, config.log_level, logging.INFO), config.log_format


def _configure_structlog() -> None:
    log_level, log_format = _logging_settings()

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _redact_processor,
    ]

    if log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


# ── Redaction processor ───────────────────────────────────────────────────────

# Hadoop property names embed these words (ssl.server.keystore.password,
# hadoop.security.credential.provider.path), so match on substrings.
_REDACT_MARKERS = (
    "password", "passwd", "secret", "token", "credential", "private_key",
)

_REDACTED = "[REDACTED]"


def _redact_processor(
    logger: Any, method: str, event_dict: dict
) -> dict:
    """Strip sensitive fields from log records before output."""
    for key in list(event_dict.keys()):
        lowered = key.lower()
        if any(marker in lowered for marker in _REDACT_MARKERS):
            event_dict[key] = _REDACTED
    return event_dict


# ── Public API ────────────────────────────────────────────────────────────────

_configured = False


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Return a structured logger bound to the given name.

    Usage:
        log = get_logger(__name__)
        log.debug("webhdfs.topology", ha=True, nameservices="ns1,ns2")
        log.warning("webhdfs.undefined_nameservice", nameservice="ns9")
    """
    global _configured
    if not _configured:
        _configure_structlog()
        _configured = True
    return structlog.get_logger(name or __name__)


def bind_context(**kwargs: Any) -> None:
    """
    Bind key-value pairs to the current async/thread context.
    All subsequent log calls in this context will include these fields.

    Usage:
        bind_context(cluster="c1", service="WEBHDFS")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context-bound log fields."""
    structlog.contextvars.clear_contextvars()


@contextmanager
def bound_context(**kwargs: Any) -> Iterator[None]:
    """
    Bind fields for the duration of a block, then restore whatever was
    bound before. Safe to use inside library calls.

    Usage:
        with bound_context(cluster="c1", service="WEBHDFS"):
            log.debug("webhdfs.topology", ha=True)
    """
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield


__sdk_export__ = {
    "exports": ["get_logger", "bind_context", "bound_context", "clear_context"],
    "description": "structlog setup with context binding and redaction",
    "tier": "tier0_core",
    "module": "logging",
}
