"""Local ``$ref`` resolution and dead-component elimination.

This sub-package is the core of oasprune.  It operates on plain parsed
documents (``dict``/``list``/scalars) and never performs I/O.

Typical usage::

    from oasprune.engine import cleanup_openapi, collect_used_references

    used = collect_used_references(api, api["paths"])
    cleaned = cleanup_openapi(api)

Sub-modules:

* :mod:`~oasprune.engine.pointer` -- parse ``#/a/b`` pointers into segments.
* :mod:`~oasprune.engine.resolver` -- walk a document along segments and
  chase pointer-to-pointer aliases.
* :mod:`~oasprune.engine.collector` -- cycle-safe reachability collection.
* :mod:`~oasprune.engine.cleanup` -- sweep unreachable registry entries.
* :mod:`~oasprune.engine.operations` -- path item method helpers.
* :mod:`~oasprune.engine.aio` -- awaitable wrappers of the above.
"""

from oasprune.engine.cleanup import (
    COMPONENT_TYPES,
    PRUNABLE_COMPONENT_TYPES,
    cleanup_openapi,
    collect_reachable_references,
)
from oasprune.engine.collector import collect_used_references
from oasprune.engine.operations import PATH_ITEM_METHODS, path_item_to_operation_map
from oasprune.engine.pointer import component_address, parse_pointer
from oasprune.engine.resolver import (
    ensure_resolved,
    is_reference,
    resolve_namespace,
    resolve_reference,
)

__all__ = [
    "COMPONENT_TYPES",
    "PATH_ITEM_METHODS",
    "PRUNABLE_COMPONENT_TYPES",
    "cleanup_openapi",
    "collect_reachable_references",
    "collect_used_references",
    "component_address",
    "ensure_resolved",
    "is_reference",
    "parse_pointer",
    "path_item_to_operation_map",
    "resolve_namespace",
    "resolve_reference",
]
