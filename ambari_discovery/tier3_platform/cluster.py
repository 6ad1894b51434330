"""
ambari_discovery.tier3_platform.cluster
─────────────────────────────────────────
In-memory snapshot of an Ambari-managed cluster's configuration: service
configuration sections (hdfs-site, core-site, ...) keyed by service name
and config type, plus the components deployed in the cluster.

URL creators only depend on the ClusterConfigProvider protocol, so any
object with the two lookup methods can stand in for Cluster.

Usage:
    cluster = load_cluster({
        "name": "c1",
        "service_configurations": {
            "HDFS": {"hdfs-site": {"properties": {"dfs.namenode.http-address": "host1:50070"}}},
        },
        "components": {"NAMENODE": {"service": "HDFS", "hosts": ["host1"]}},
    })
    cluster.get_service_configuration("HDFS", "hdfs-site").properties
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from ambari_discovery.tier1_runtime.validate import validate_input


# ── Snapshot types ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ServiceConfiguration:
    type: str
    version: str = ""
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))


@dataclass(frozen=True)
class Component:
    name: str
    service_name: str | None = None
    host_names: tuple[str, ...] = ()
    config_properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "host_names", tuple(self.host_names))
        object.__setattr__(
            self, "config_properties", MappingProxyType(dict(self.config_properties))
        )

    def get_config_property(self, key: str) -> str | None:
        return self.config_properties.get(key)


@runtime_checkable
class ClusterConfigProvider(Protocol):
    def get_service_configuration(
        self, service_name: str, config_type: str
    ) -> ServiceConfiguration | None: ...

    def get_component(self, component_name: str) -> Component | None: ...


class Cluster:
    """Read-only cluster snapshot. Implements ClusterConfigProvider."""

    def __init__(
        self,
        name: str,
        service_configurations: Mapping[str, Mapping[str, ServiceConfiguration]] | None = None,
        components: Mapping[str, Component] | None = None,
    ) -> None:
        self._name = name
        self._service_configurations: dict[tuple[str, str], ServiceConfiguration] = {
            (service_name, config_type): config
            for service_name, configs in (service_configurations or {}).items()
            for config_type, config in configs.items()
        }
        self._components: dict[str, Component] = dict(components or {})

    @property
    def name(self) -> str:
        return self._name

    def get_service_configuration(
        self, service_name: str, config_type: str
    ) -> ServiceConfiguration | None:
        return self._service_configurations.get((service_name, config_type))

    def get_component(self, component_name: str) -> Component | None:
        return self._components.get(component_name)

    def service_names(self) -> list[str]:
        seen: dict[str, None] = {}
        for service_name, _ in self._service_configurations:
            seen.setdefault(service_name, None)
        return list(seen)

    def component_names(self) -> list[str]:
        return list(self._components)

    def __repr__(self) -> str:
        return (
            f"Cluster(name={self._name!r}, "
            f"services={self.service_names()!r}, components={self.component_names()!r})"
        )


# ── Document schema ───────────────────────────────────────────────────────────

class _ServiceConfigurationDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: StrictStr = ""
    properties: dict[str, StrictStr] = Field(default_factory=dict)


class _ComponentDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    service: StrictStr | None = None
    hosts: list[StrictStr] = Field(default_factory=list)
    properties: dict[str, StrictStr] = Field(default_factory=dict)


class ClusterDocument(BaseModel):
    """Shape of the plain mapping accepted by load_cluster()."""

    model_config = ConfigDict(extra="forbid")

    name: StrictStr
    service_configurations: dict[str, dict[str, _ServiceConfigurationDocument]] = Field(
        default_factory=dict
    )
    components: dict[str, _ComponentDocument] = Field(default_factory=dict)


def load_cluster(document: Mapping[str, Any]) -> Cluster:
    """
    Build a Cluster from a plain mapping (e.g. parsed JSON).
    Raises ValidationError when the document does not match ClusterDocument.
    """
    parsed = validate_input(ClusterDocument, document)
    return Cluster(
        name=parsed.name,
        service_configurations={
            service_name: {
                config_type: ServiceConfiguration(
                    type=config_type,
                    version=config.version,
                    properties=config.properties,
                )
                for config_type, config in configs.items()
            }
            for service_name, configs in parsed.service_configurations.items()
        },
        components={
            component_name: Component(
                name=component_name,
                service_name=component.service,
                host_names=tuple(component.hosts),
                config_properties=component.properties,
            )
            for component_name, component in parsed.components.items()
        },
    )


__sdk_export__ = {
    "exports": [
        "Cluster", "ClusterConfigProvider", "ClusterDocument",
        "Component", "ServiceConfiguration", "load_cluster",
    ],
    "description": "Immutable cluster configuration snapshot and document loader",
    "tier": "tier3_platform",
    "module": "cluster",
}
