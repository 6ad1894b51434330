"""
ambari_discovery.tier0_core.errors
────────────────────────────────────
Standard error taxonomy for the outer surfaces of the package: loading
cluster documents, registering URL creators and reading settings.

URL resolution itself never raises. Missing configuration degrades to fewer
(or zero) URLs, and data-quality problems are reported through a
diagnostic sink instead.
"""
from __future__ import annotations

from typing import Any


# ── Base error ────────────────────────────────────────────────────────────────

class DiscoveryError(Exception):
    """
    Base class for all discovery errors. Every error has:
    - code: stable machine-readable string (snake_case)
    - user_message: safe to surface to end users
    - detail: internal context, never shown to users
    - status_code: HTTP-style status, for callers that expose discovery
      over an API
    """

    status_code: int = 500
    code: str = "internal_error"

    def __init__(
        self,
        code: str | None = None,
        user_message: str = "An unexpected error occurred.",
        detail: str | None = None,
        **metadata: Any,
    ) -> None:
        self.code = code or self.__class__.code
        self.user_message = user_message
        self.detail = detail or user_message
        self.metadata = metadata
        super().__init__(self.detail)

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.user_message,
            }
        }


# ── Typed error classes ───────────────────────────────────────────────────────

class ValidationError(DiscoveryError):
    """Input document validation failure."""
    status_code = 422
    code = "validation_error"

    def __init__(
        self,
        code: str | None = None,
        user_message: str = "Validation failed.",
        fields: dict | None = None,
        **metadata: Any,
    ) -> None:
        self.fields = fields or {}
        super().__init__(code, user_message, **metadata)

    def to_dict(self) -> dict:
        d = super().to_dict()
        if self.fields:
            d["error"]["fields"] = self.fields
        return d


class NotFoundError(DiscoveryError):
    """Requested resource does not exist."""
    status_code = 404
    code = "not_found"


class ConflictError(DiscoveryError):
    """Resource state conflict (e.g., duplicate registration)."""
    status_code = 409
    code = "conflict"


class ConfigurationError(DiscoveryError):
    """Misconfiguration detected at startup."""
    status_code = 500
    code = "configuration_error"


__sdk_export__ = {
    "exports": [
        "DiscoveryError", "ValidationError", "NotFoundError",
        "ConflictError", "ConfigurationError",
    ],
    "description": "Standard error taxonomy for discovery surfaces",
    "tier": "tier0_core",
    "module": "errors",
}
