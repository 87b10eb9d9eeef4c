"""Collect every ``$ref`` transitively reachable from a subtree.

The walk is depth-first and left-to-right.  When a pointer object is met
for the first time its string is recorded, then its target is expanded in
place before the object's sibling keys are scanned.  A pointer already
recorded is never expanded again, which is what makes recursive schemas
safe to walk.

The walk runs over an explicit stack, so neither document depth nor the
length of a ``$ref`` chain is bounded by the interpreter recursion limit.
The found list is passed in and returned rather than captured in a
closure, so each top-level call owns its own accumulator.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from oasprune.engine.resolver import REF_KEY, resolve_reference

logger = logging.getLogger(__name__)


def collect_used_references(
    root: Any,
    node: Any,
    already_found: Optional[list[str]] = None,
) -> list[str]:
    """Return the pointer strings reachable from *node*, in discovery order.

    Args:
        root: The document every pointer is resolved against.
        node: The subtree to scan (any JSON-compatible value).
        already_found: References treated as already expanded.  Copied, never
            mutated.

    Returns:
        A duplicate-free list: *already_found* first, then every newly
        discovered pointer in the order it was first seen.

    Raises:
        ReferenceError_: If any reachable pointer is unsupported, malformed
            or dangling.  Collection is all-or-nothing.
    """
    found = list(already_found) if already_found else []
    return _collect(root, node, found)


def _collect(root: Any, node: Any, found: list[str]) -> list[str]:
    # Children are pushed in reverse so they pop left-to-right, and a
    # resolved target is pushed last so it is walked before its siblings.
    seen = set(found)
    stack: list[Any] = [node]

    while stack:
        current = stack.pop()

        if isinstance(current, list):
            stack.extend(reversed(current))
            continue

        if not isinstance(current, dict):
            continue

        stack.extend(
            value for key, value in reversed(current.items()) if key != REF_KEY
        )

        ref = current.get(REF_KEY)
        if isinstance(ref, str) and ref not in seen:
            seen.add(ref)
            found.append(ref)
            logger.debug("Discovered reference %s", ref)
            stack.append(resolve_reference(root, ref))

    return found
