"""Parse local ``$ref`` pointers into path segments.

Only same-document fragments of the form ``#/a/b/c`` are accepted.  Anything
else (``https://...``, ``./other.yaml#/x``, ``#foo``) is rejected with
:class:`~oasprune.exceptions.UnsupportedReference` and never fetched.

Segments are used verbatim as property keys: ``~0`` and ``~1`` are not
decoded.
"""

from __future__ import annotations

from oasprune.exceptions import MalformedReference, UnsupportedReference

LOCAL_PREFIX = "#/"


def parse_pointer(ref: str) -> list[str]:
    """Split a local ``$ref`` string into its path segments.

    Args:
        ref: The pointer string, e.g. ``"#/components/schemas/Pet"``.

    Returns:
        The ordered segments, e.g. ``["components", "schemas", "Pet"]``.

    Raises:
        UnsupportedReference: If *ref* does not start with ``#/``.
        MalformedReference: If any segment is empty.

    Example::

        >>> parse_pointer("#/$defs/Node")
        ['$defs', 'Node']
    """
    if not ref.startswith(LOCAL_PREFIX):
        raise UnsupportedReference(ref)

    segments = ref[len(LOCAL_PREFIX):].split("/")
    if any(segment == "" for segment in segments):
        raise MalformedReference(ref, segments)

    return segments


def component_address(kind: str, key: str) -> str:
    """Return the canonical pointer of a component registry entry."""
    return f"{LOCAL_PREFIX}components/{kind}/{key}"
