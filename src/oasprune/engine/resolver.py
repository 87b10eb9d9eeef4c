"""Walk a document along a pointer and chase pointer-to-pointer aliases.

Two layers live here:

* :func:`resolve_namespace` -- one finite walk from the document root along
  a parsed segment list.  Returns the stored value as-is, which may itself be
  a ``{"$ref": ...}`` object.
* :func:`ensure_resolved` -- repeatedly parses and resolves until the value
  is no longer a pointer object.  A visited set guards the chase so a loop
  such as ``A -> B -> A`` raises
  :class:`~oasprune.exceptions.CyclicReference` instead of spinning.

Neither function copies or mutates the document.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from oasprune.engine.pointer import parse_pointer
from oasprune.exceptions import (
    CyclicReference,
    EmptyResolveTarget,
    InvalidResolveBase,
    UnresolvedProperty,
)

logger = logging.getLogger(__name__)

REF_KEY = "$ref"


def is_reference(value: Any) -> bool:
    """Return True if *value* is a pointer object (a dict with a string ``$ref``)."""
    return isinstance(value, dict) and isinstance(value.get(REF_KEY), str)


def resolve_namespace(root: Any, segments: Sequence[str]) -> Any:
    """Return the value addressed by *segments* inside *root*.

    Mappings are walked by key, lists by decimal index.

    Args:
        root: The document root.
        segments: Path segments as returned by
            :func:`~oasprune.engine.pointer.parse_pointer`.

    Returns:
        The stored value at the end of the path.

    Raises:
        InvalidResolveBase: If a segment is applied to a scalar or ``None``.
        UnresolvedProperty: If a key or index is missing.
        EmptyResolveTarget: If the addressed value is ``None``.
    """
    current: Any = root

    for segment in segments:
        if isinstance(current, dict):
            if segment not in current:
                raise UnresolvedProperty(segments, segment)
            current = current[segment]
        elif isinstance(current, list):
            if not (segment.isascii() and segment.isdigit()) or int(segment) >= len(current):
                raise UnresolvedProperty(segments, segment)
            current = current[int(segment)]
        else:
            raise InvalidResolveBase(segments, segment)

    if current is None:
        raise EmptyResolveTarget(segments)

    return current


def resolve_reference(root: Any, ref: str) -> Any:
    """Parse *ref* and resolve it against *root* in one step."""
    return resolve_namespace(root, parse_pointer(ref))


def ensure_resolved(root: Any, value: Any) -> Any:
    """Follow pointer objects until a concrete value is reached.

    Sibling keys of a pointer object are ignored; only ``$ref`` drives the
    chase.  Non-pointer values are returned unchanged.

    Raises:
        CyclicReference: If the same pointer string is met twice in one chain.
        ReferenceError_: Any parser or resolver failure, unchanged.

    Example::

        doc = {"$defs": {"x": {"$ref": "#/$defs/y"}, "y": True}}
        ensure_resolved(doc, {"$ref": "#/$defs/x"})  # -> True
    """
    chain: list[str] = []

    while is_reference(value):
        ref = value[REF_KEY]
        if ref in chain:
            raise CyclicReference(ref, chain)
        chain.append(ref)
        value = resolve_reference(root, ref)

    if len(chain) > 1:
        logger.debug("Followed alias chain %s", " -> ".join(chain))

    return value
