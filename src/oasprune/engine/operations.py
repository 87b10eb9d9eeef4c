"""Helpers for the operations declared on an OpenAPI path item."""

from __future__ import annotations

from typing import Any

PATH_ITEM_METHODS: tuple[str, ...] = (
    "get",
    "put",
    "post",
    "delete",
    "options",
    "head",
    "patch",
    "trace",
)


def path_item_to_operation_map(path_item: dict[str, Any]) -> dict[str, dict[str, Any]]:
    """Map each HTTP method present on *path_item* to its operation object.

    Methods are returned in :data:`PATH_ITEM_METHODS` order; keys that are
    absent or falsy are skipped.  ``$ref``, ``parameters`` and other path-item
    fields are not operations and never appear in the result.

    Example::

        >>> path_item_to_operation_map({"post": {"operationId": "add"}, "get": {}})
        {'post': {'operationId': 'add'}}
    """
    return {
        method: path_item[method]
        for method in PATH_ITEM_METHODS
        if path_item.get(method)
    }
