"""Mark-and-sweep removal of unreachable component registry entries.

The mark phase collects references from the two externally visible graph
roots of an OpenAPI document, ``paths`` and ``webhooks``.  The sweep phase
keeps an entry of a prunable registry only if its canonical address
``#/components/<kind>/<key>`` was marked.  Every other registry and every
other top-level key is copied through unchanged.

Registries that are referenced by name rather than by ``$ref``
(``securitySchemes``) or that are not reached through ``$ref`` in practice
(``links``, ``callbacks``, ``pathItems``) are never pruned.

Running :func:`cleanup_openapi` on its own output removes nothing further.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Optional

from oasprune.engine.collector import collect_used_references
from oasprune.engine.pointer import component_address

if TYPE_CHECKING:
    from oasprune.models import CleanupReport

logger = logging.getLogger(__name__)

GRAPH_ROOTS: tuple[str, ...] = ("paths", "webhooks")

PRUNABLE_COMPONENT_TYPES: tuple[str, ...] = (
    "schemas",
    "responses",
    "parameters",
    "examples",
    "requestBodies",
    "headers",
)

COMPONENT_TYPES: tuple[str, ...] = (
    *PRUNABLE_COMPONENT_TYPES,
    "securitySchemes",
    "links",
    "callbacks",
    "pathItems",
)


def collect_reachable_references(api: dict[str, Any]) -> list[str]:
    """Return every reference reachable from ``paths`` or ``webhooks``.

    Each root is collected from an empty set; the results are merged with
    duplicates dropped, ``paths`` discoveries first.
    """
    used: dict[str, None] = {}
    for root_name in GRAPH_ROOTS:
        for ref in collect_used_references(api, api.get(root_name) or {}):
            used[ref] = None
    return list(used)


def cleanup_openapi(
    api: dict[str, Any],
    prunable: Iterable[str] = PRUNABLE_COMPONENT_TYPES,
    used_references: Optional[Iterable[str]] = None,
) -> dict[str, Any]:
    """Return a copy of *api* without unreachable component entries.

    Args:
        api: The OpenAPI document.  Not modified.
        prunable: Registry kinds subject to pruning.
        used_references: The result of :func:`collect_reachable_references`
            on *api*, when the caller already has it.  Collected otherwise.

    Returns:
        A new document.  If *api* has no ``components`` key, none is added.

    Raises:
        ReferenceError_: If any reference reachable from the graph roots
            cannot be resolved.
    """
    if used_references is None:
        used_references = collect_reachable_references(api)
    used = set(used_references)
    prunable = frozenset(prunable)

    cleaned = {key: value for key, value in api.items() if key != "components"}
    if "components" in api:
        components = api["components"] or {}
        cleaned["components"] = (
            _sweep_components(components, used, prunable)
            if isinstance(components, dict)
            else components
        )
    return copy.deepcopy(cleaned)


def _sweep_components(
    components: dict[str, Any], used: set[str], prunable: frozenset[str]
) -> dict[str, Any]:
    swept: dict[str, Any] = {}
    for kind, registry in components.items():
        if kind not in prunable:
            swept[kind] = registry
            continue
        if registry is None:
            registry = {}
        elif not isinstance(registry, dict):
            swept[kind] = registry
            continue
        swept[kind] = {
            key: entry
            for key, entry in registry.items()
            if component_address(kind, key) in used
        }
        dropped = len(registry) - len(swept[kind])
        if dropped:
            logger.debug("Removed %d unreachable entries from components/%s", dropped, kind)
    return swept


def cleanup_report(
    api: dict[str, Any],
    cleaned: dict[str, Any],
    used_references: list[str],
    prunable: Iterable[str] = PRUNABLE_COMPONENT_TYPES,
) -> CleanupReport:
    """Summarise what a sweep of *api* into *cleaned* kept and removed.

    Args:
        api: The original document.
        cleaned: The result of :func:`cleanup_openapi` on *api*.
        used_references: The reachable set used for the sweep.
        prunable: The registry kinds that were swept.
    """
    from oasprune.models import CleanupReport, RegistrySummary

    prunable = frozenset(prunable)
    before = api.get("components")
    after = cleaned.get("components")
    if not isinstance(before, dict):
        before = {}
    if not isinstance(after, dict):
        after = {}

    summaries = []
    for kind, registry in before.items():
        if not isinstance(registry, dict):
            continue
        kept = after.get(kind) or {}
        summaries.append(
            RegistrySummary(
                kind=kind,
                pruned=kind in prunable,
                kept=[key for key in registry if key in kept],
                removed=[key for key in registry if key not in kept],
            )
        )

    return CleanupReport(used_references=list(used_references), registries=summaries)
