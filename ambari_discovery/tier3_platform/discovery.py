"""
ambari_discovery.tier3_platform.discovery
───────────────────────────────────────────
Service endpoint resolution. Translates a logical service name (WEBHDFS,
...) into the base URLs that serve it, using nothing but a cluster
configuration snapshot.

Each supported service has a ServiceURLCreator. Creators are collected from
the module registry (see _registry.TIER_MODULES) and dispatched by service
name; an unsupported service simply resolves to no URLs.

Data-quality problems found while resolving are reported to a
DiagnosticSink rather than raised:
  - NullDiagnosticSink       drop everything (default for bare creators)
  - CollectingDiagnosticSink keep (event, fields) pairs, e.g. for tests
  - LoggingDiagnosticSink    forward to structlog (default for the dispatcher)
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from ambari_discovery import _registry
from ambari_discovery.tier0_core.errors import ConflictError, NotFoundError
from ambari_discovery.tier0_core.logging import bound_context, get_logger
from ambari_discovery.tier3_platform.cluster import ClusterConfigProvider

log = get_logger(__name__)


# ── Diagnostics ───────────────────────────────────────────────────────────────

@runtime_checkable
class DiagnosticSink(Protocol):
    def warning(self, event: str, **fields: Any) -> None: ...


class NullDiagnosticSink:
    def warning(self, event: str, **fields: Any) -> None:
        return None


class CollectingDiagnosticSink:
    """Keeps every diagnostic in emission order."""

    def __init__(self) -> None:
        self.records: list[tuple[str, dict[str, Any]]] = []

    def warning(self, event: str, **fields: Any) -> None:
        self.records.append((event, dict(fields)))

    @property
    def events(self) -> list[str]:
        return [event for event, _ in self.records]

    def clear(self) -> None:
        self.records.clear()


class LoggingDiagnosticSink:
    """Forwards diagnostics to a structlog logger at warning level."""

    def __init__(self, logger: Any = None) -> None:
        self._log = logger if logger is not None else get_logger("ambari_discovery.diagnostics")

    def warning(self, event: str, **fields: Any) -> None:
        self._log.warning(event, **fields)


@dataclass
class ResolutionResult:
    urls: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class ResultRecordingSink:
    """Records event names for a ResolutionResult and forwards to another sink."""

    def __init__(self, result: ResolutionResult, downstream: DiagnosticSink) -> None:
        self._result = result
        self._downstream = downstream

    def warning(self, event: str, **fields: Any) -> None:
        self._result.warnings.append(event)
        self._downstream.warning(event, **fields)


# ── Creator contract ──────────────────────────────────────────────────────────

@runtime_checkable
class ServiceURLCreator(Protocol):
    def get_target_service(self) -> str: ...

    def create(
        self, service: str, params: Mapping[str, str] | None = None
    ) -> list[str]: ...


CreatorFactory = Callable[[ClusterConfigProvider, DiagnosticSink], ServiceURLCreator]


class ServiceURLCreators:
    """
    Dispatches URL creation by service name for one cluster snapshot.

    Usage:
        creators = ServiceURLCreators(cluster)
        creators.create("WEBHDFS", {"discovery-nameservice": "ns2"})
    """

    def __init__(
        self,
        cluster: ClusterConfigProvider,
        sink: DiagnosticSink | None = None,
        factories: Mapping[str, CreatorFactory] | None = None,
    ) -> None:
        self._cluster = cluster
        self._sink = sink if sink is not None else LoggingDiagnosticSink()
        if factories is None:
            factories = _registry.collect_url_creators()
        self._creators: dict[str, ServiceURLCreator] = {
            service: factory(cluster, self._sink) for service, factory in factories.items()
        }

    def register(self, creator: ServiceURLCreator) -> None:
        service = creator.get_target_service()
        if service in self._creators:
            raise ConflictError(
                "creator_already_registered",
                f"A URL creator for {service!r} is already registered.",
                service=service,
            )
        self._creators[service] = creator

    def services(self) -> list[str]:
        return sorted(self._creators)

    def get_creator(self, service: str) -> ServiceURLCreator:
        creator = self._creators.get(service)
        if creator is None:
            raise NotFoundError(
                "creator_not_found",
                f"No URL creator is registered for {service!r}.",
                service=service,
            )
        return creator

    def create(
        self, service: str, params: Mapping[str, str] | None = None
    ) -> list[str]:
        creator = self._creators.get(service)
        if creator is None:
            log.debug("discovery.unknown_service", service=service)
            return []
        with bound_context(service=service):
            return creator.create(service, params)


def discover_urls(
    cluster: ClusterConfigProvider,
    service: str,
    params: Mapping[str, str] | None = None,
    sink: DiagnosticSink | None = None,
) -> list[str]:
    """Return the base URLs for a named service in the given cluster."""
    return ServiceURLCreators(cluster, sink=sink).create(service, params)


__sdk_export__ = {
    "exports": [
        "DiagnosticSink", "NullDiagnosticSink", "CollectingDiagnosticSink",
        "LoggingDiagnosticSink", "ResolutionResult", "ResultRecordingSink",
        "ServiceURLCreator", "ServiceURLCreators", "discover_urls",
    ],
    "description": "Dispatch-by-service-name URL discovery over a cluster snapshot",
    "tier": "tier3_platform",
    "module": "discovery",
}
