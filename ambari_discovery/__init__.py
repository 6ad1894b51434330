"""
ambari_discovery
────────────────
Stable top-level exports. Import from here, not from sub-modules directly.
Every name exported here is part of the public API and subject to semver.
"""
from ambari_discovery.tier0_core.logging import (
    get_logger,
    bind_context,
    bound_context,
    clear_context,
)
from ambari_discovery.tier0_core.errors import (
    DiscoveryError,
    ValidationError,
    NotFoundError,
    ConflictError,
    ConfigurationError,
)
from ambari_discovery.tier0_core.config import get_config, DiscoveryConfig

from ambari_discovery.tier1_runtime.validate import validate_input

from ambari_discovery.tier3_platform.cluster import (
    Cluster,
    ClusterConfigProvider,
    Component,
    ServiceConfiguration,
    load_cluster,
)
from ambari_discovery.tier3_platform.discovery import (
    DiagnosticSink,
    NullDiagnosticSink,
    CollectingDiagnosticSink,
    LoggingDiagnosticSink,
    ResolutionResult,
    ServiceURLCreator,
    ServiceURLCreators,
    discover_urls,
)
from ambari_discovery.tier3_platform.webhdfs import WebHdfsUrlCreator

__version__ = "0.1.0"
__all__ = [
    # logging
    "get_logger", "bind_context", "bound_context", "clear_context",
    # errors
    "DiscoveryError", "ValidationError", "NotFoundError",
    "ConflictError", "ConfigurationError",
    # config
    "get_config", "DiscoveryConfig",
    # validate
    "validate_input",
    # cluster
    "Cluster", "ClusterConfigProvider", "Component",
    "ServiceConfiguration", "load_cluster",
    # discovery
    "DiagnosticSink", "NullDiagnosticSink", "CollectingDiagnosticSink",
    "LoggingDiagnosticSink", "ResolutionResult", "ServiceURLCreator",
    "ServiceURLCreators", "discover_urls",
    # webhdfs
    "WebHdfsUrlCreator",
]
