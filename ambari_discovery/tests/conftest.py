"""
ambari_discovery test configuration.

All tests run against in-memory cluster snapshots; no Ambari server
required. Override settings by setting environment variables before
running pytest.
"""
from __future__ import annotations

import os

import pytest

# ── Force test settings ────────────────────────────────────────────────────
# These must be set before any ambari_discovery modules are imported.

os.environ.setdefault("DISCOVERY_ENV", "test")
os.environ.setdefault("DISCOVERY_LOG_LEVEL", "INFO")
os.environ.setdefault("DISCOVERY_LOG_FORMAT", "console")


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture
def make_cluster():
    """
    Return a builder for HDFS cluster snapshots.

    make_cluster(hdfs_site={...}, core_site={...}, namenode={...})
    Passing None for a section leaves it out of the cluster entirely.
    """
    from ambari_discovery.tier3_platform.cluster import load_cluster

    def _make(
        hdfs_site: dict | None = None,
        core_site: dict | None = None,
        namenode: dict | None = None,
    ):
        configs: dict = {}
        if hdfs_site is not None:
            configs["hdfs-site"] = {"version": "1", "properties": hdfs_site}
        if core_site is not None:
            configs["core-site"] = {"version": "1", "properties": core_site}

        document: dict = {"name": "test-cluster", "service_configurations": {}, "components": {}}
        if configs:
            document["service_configurations"]["HDFS"] = configs
        if namenode is not None:
            document["components"]["NAMENODE"] = {
                "service": "HDFS",
                "hosts": ["h1", "h2"],
                "properties": namenode,
            }
        return load_cluster(document)

    return _make


@pytest.fixture
def multi_ns_hdfs_site() -> dict:
    """hdfs-site for two nameservices, ns1 (explicit node list) and ns2 (indexed)."""
    return {
        "dfs.nameservices": "ns1,ns2",
        "dfs.ha.namenodes.ns1": "nn1,nn2",
        "dfs.namenode.http-address.ns1.nn1": "ns1-a:50070",
        "dfs.namenode.http-address.ns1.nn2": "ns1-b:50070",
        "dfs.namenode.http-address.ns2.nn1": "ns2-a:50070",
        "dfs.namenode.http-address.ns2.nn2": "ns2-b:50070",
    }


@pytest.fixture
def diagnostics():
    """Return a fresh CollectingDiagnosticSink."""
    from ambari_discovery.tier3_platform.discovery import CollectingDiagnosticSink
    return CollectingDiagnosticSink()
