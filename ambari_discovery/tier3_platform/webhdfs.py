"""
ambari_discovery.tier3_platform.webhdfs
─────────────────────────────────────────
URL creator for WEBHDFS. Produces one http://<address>/webhdfs URL per
NameNode HTTP address found in the cluster's HDFS configuration.

Topology is detected from the NAMENODE component's dfs.nameservices:
  - absent/empty  → single NameNode, dfs.namenode.http-address
  - present       → HA; one nameservice is selected, then its NameNodes are
                    enumerated from dfs.ha.namenodes.<ns>, or from
                    dfs.namenode.http-address.<ns>.nn1, nn2, ... until the
                    first missing index

With several nameservices, the caller may pick one through the
discovery-nameservice parameter; otherwise fs.defaultFS (core-site) decides,
and the first listed nameservice is the fallback.

Missing configuration never raises: it only removes URLs from the result.
"""
from __future__ import annotations

from collections.abc import Mapping

from ambari_discovery.tier0_core.logging import get_logger
from ambari_discovery.tier3_platform.cluster import ClusterConfigProvider
from ambari_discovery.tier3_platform.discovery import (
    DiagnosticSink,
    NullDiagnosticSink,
    ResolutionResult,
    ResultRecordingSink,
)

log = get_logger(__name__)

SERVICE = "WEBHDFS"

NAMESERVICE_PARAM = "discovery-nameservice"

HDFS_SERVICE = "HDFS"
HDFS_SITE = "hdfs-site"
CORE_SITE = "core-site"
NAMENODE_COMPONENT = "NAMENODE"

NAMESERVICES_PROPERTY = "dfs.nameservices"
DEFAULT_FS_PROPERTY = "fs.defaultFS"
HA_NAMENODES_PROPERTY = "dfs.ha.namenodes"
HTTP_ADDRESS_PROPERTY = "dfs.namenode.http-address"


def _split(value: str) -> list[str]:
    # Items are not trimmed; trailing empty items are dropped.
    items = value.split(",")
    while items and not items[-1]:
        items.pop()
    return items


def create_url(address: str) -> str:
    return f"http://{address}/webhdfs"


def _ha_http_address(props: Mapping[str, str], nameservice: str, node: str) -> str | None:
    return props.get(f"{HTTP_ADDRESS_PROPERTY}.{nameservice}.{node}")


class WebHdfsUrlCreator:
    """Resolves WEBHDFS endpoints. Stateless; safe to share between threads."""

    def __init__(
        self,
        cluster: ClusterConfigProvider,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self._cluster = cluster
        self._sink = sink if sink is not None else NullDiagnosticSink()

    def get_target_service(self) -> str:
        return SERVICE

    def create(
        self, service: str, params: Mapping[str, str] | None = None
    ) -> list[str]:
        return self._resolve(service, params, self._sink)

    def resolve(
        self, service: str, params: Mapping[str, str] | None = None
    ) -> ResolutionResult:
        """Like create(), but also returns the diagnostics emitted during the call."""
        result = ResolutionResult()
        result.urls = self._resolve(service, params, ResultRecordingSink(result, self._sink))
        return result

    # ── Resolution ────────────────────────────────────────────────────────────

    def _resolve(
        self,
        service: str,
        params: Mapping[str, str] | None,
        sink: DiagnosticSink,
    ) -> list[str]:
        if service != SERVICE:
            return []

        hdfs_site = self._cluster.get_service_configuration(HDFS_SERVICE, HDFS_SITE)
        if hdfs_site is None:
            log.debug("webhdfs.unconfigured", service=service)
            return []
        props = hdfs_site.properties

        nameservices = None
        namenode = self._cluster.get_component(NAMENODE_COMPONENT)
        if namenode is not None:
            nameservices = namenode.get_config_property(NAMESERVICES_PROPERTY)

        if not nameservices:
            log.debug("webhdfs.topology", ha=False)
            address = props.get(HTTP_ADDRESS_PROPERTY)
            return [create_url(address)] if address is not None else []

        log.debug("webhdfs.topology", ha=True, nameservices=nameservices)
        candidates = _split(nameservices)
        if not candidates:
            return []

        nameservice = self._select_nameservice(candidates, props, params, sink)
        log.debug("webhdfs.nameservice_selected", nameservice=nameservice)

        urls: list[str] = []
        nodes = props.get(f"{HA_NAMENODES_PROPERTY}.{nameservice}")
        if nodes is not None:
            for node in _split(nodes):
                address = _ha_http_address(props, nameservice, node)
                if address is not None:
                    urls.append(create_url(address))
        else:
            # No way to know how many nnN entries exist; stop at the first gap.
            index = 1
            address = _ha_http_address(props, nameservice, f"nn{index}")
            while address is not None:
                urls.append(create_url(address))
                index += 1
                address = _ha_http_address(props, nameservice, f"nn{index}")
        return urls

    def _select_nameservice(
        self,
        candidates: list[str],
        hdfs_site_props: Mapping[str, str],
        params: Mapping[str, str] | None,
        sink: DiagnosticSink,
    ) -> str:
        nameservice = None
        if len(candidates) > 1:
            declared = params.get(NAMESERVICE_PARAM) if params is not None else None
            if declared is not None:
                if not _is_declared_nameservice(hdfs_site_props, declared):
                    sink.warning("webhdfs.undefined_nameservice", nameservice=declared)
                nameservice = declared
            else:
                core_site = self._cluster.get_service_configuration(HDFS_SERVICE, CORE_SITE)
                if core_site is not None:
                    default_fs = core_site.properties.get(DEFAULT_FS_PROPERTY)
                    if default_fs is not None:
                        nameservice = default_fs.rsplit("/", 1)[-1]

        if nameservice is None:
            nameservice = candidates[0]
        return nameservice


def _is_declared_nameservice(hdfs_site_props: Mapping[str, str], declared: str) -> bool:
    # Checked against hdfs-site itself, not the NAMENODE component's value.
    nameservices = hdfs_site_props.get(NAMESERVICES_PROPERTY)
    if nameservices is None:
        return False
    return declared in _split(nameservices)


__sdk_export__ = {
    "exports": ["WebHdfsUrlCreator", "create_url"],
    "description": "WEBHDFS endpoint resolution for single and HA NameNode topologies",
    "tier": "tier3_platform",
    "module": "webhdfs",
    "url_creators": [
        {"service": SERVICE, "factory": "WebHdfsUrlCreator"},
    ],
}
