"""
ambari_discovery._registry
────────────────────────────
Internal module registry: the single source of truth for which modules
exist and which service URL creators each one contributes.

Adding a URL creator for a new service:
  1. Implement the creator in tier3_platform (see webhdfs.py)
  2. Declare it in the module's ``__sdk_export__["url_creators"]``
  3. Add one tuple to TIER_MODULES below

After step 3, ServiceURLCreators dispatches the new service name to it
without any change to discovery.py.
"""
from __future__ import annotations

import importlib
from typing import Any

# ---------------------------------------------------------------------------
# Ordered list of (tier_path, module_name) for all implemented modules.
# ---------------------------------------------------------------------------
TIER_MODULES: list[tuple[str, str]] = [
    # tier0_core: foundational layer
    ("tier0_core", "errors"),
    ("tier0_core", "config"),
    ("tier0_core", "logging"),
    # tier1_runtime: input handling
    ("tier1_runtime", "validate"),
    # tier3_platform: cluster model and discovery
    ("tier3_platform", "cluster"),
    ("tier3_platform", "discovery"),
    ("tier3_platform", "webhdfs"),
]


def collect_url_creators() -> dict[str, Any]:
    """
    Discover all URL creator factories registered across tier modules.

    Iterates ``TIER_MODULES``, imports each one, reads its
    ``__sdk_export__["url_creators"]`` list and resolves each factory
    callable by name.

    Returns:
        Mapping of service name (e.g. ``"WEBHDFS"``) to a factory called as
        ``factory(cluster, sink)``. The first module to claim a service wins.
    """
    creators: dict[str, Any] = {}

    for tier_path, module_name in TIER_MODULES:
        mod = importlib.import_module(f"ambari_discovery.{tier_path}.{module_name}")

        export_meta: dict[str, Any] | None = getattr(mod, "__sdk_export__", None)
        if not export_meta or "url_creators" not in export_meta:
            continue

        for entry in export_meta["url_creators"]:
            factory = getattr(mod, entry.get("factory", ""), None)
            if factory is None:
                continue
            creators.setdefault(entry["service"], factory)

    return creators


def collect_exports() -> dict[str, list[str]]:
    """Return ``module -> exported names`` for every registered module."""
    exports: dict[str, list[str]] = {}
    for tier_path, module_name in TIER_MODULES:
        mod = importlib.import_module(f"ambari_discovery.{tier_path}.{module_name}")
        export_meta = getattr(mod, "__sdk_export__", None) or {}
        exports[f"{tier_path}.{module_name}"] = list(export_meta.get("exports", []))
    return exports
