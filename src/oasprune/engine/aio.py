"""Coroutine counterparts of the engine's public operations.

These mirror the synchronous functions one-to-one so the engine can be
awaited alongside other asyncio collaborators (loaders, HTTP clients).
None of them perform I/O or yield to the event loop mid-traversal; each
runs its synchronous twin to completion and returns the result.

See Also:
    :mod:`oasprune.engine` for the blocking equivalents.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Optional

from oasprune.engine.cleanup import PRUNABLE_COMPONENT_TYPES, cleanup_openapi
from oasprune.engine.collector import collect_used_references
from oasprune.engine.pointer import parse_pointer
from oasprune.engine.resolver import ensure_resolved, resolve_namespace


async def parse_pointer_async(ref: str) -> list[str]:
    """Awaitable :func:`~oasprune.engine.pointer.parse_pointer`.

    Raises:
        UnsupportedReference: If *ref* is not a local ``#/`` pointer.
        MalformedReference: If *ref* has an empty segment.
    """
    return parse_pointer(ref)


async def resolve_namespace_async(root: Any, segments: Sequence[str]) -> Any:
    """Awaitable :func:`~oasprune.engine.resolver.resolve_namespace`.

    Returns the value stored at *segments* inside *root*, which may itself
    be a pointer object.
    """
    return resolve_namespace(root, segments)


async def ensure_resolved_async(root: Any, value: Any) -> Any:
    """Awaitable :func:`~oasprune.engine.resolver.ensure_resolved`.

    Raises:
        CyclicReference: If the alias chain starting at *value* loops.
    """
    return ensure_resolved(root, value)


async def collect_used_references_async(
    root: Any,
    node: Any,
    already_found: Optional[list[str]] = None,
) -> list[str]:
    """Awaitable :func:`~oasprune.engine.collector.collect_used_references`.

    The returned list is in discovery order; *already_found* is not mutated.
    """
    return collect_used_references(root, node, already_found)


async def cleanup_openapi_async(
    api: dict[str, Any],
    prunable: Iterable[str] = PRUNABLE_COMPONENT_TYPES,
    used_references: Optional[Iterable[str]] = None,
) -> dict[str, Any]:
    """Awaitable :func:`~oasprune.engine.cleanup.cleanup_openapi`.

    Example::

        cleaned = await cleanup_openapi_async(api)
    """
    return cleanup_openapi(api, prunable, used_references)
