"""Read and write OpenAPI documents for the command line.

Documents come from a local file, an ``http(s)`` URL, or stdin (``-``), as
JSON or YAML.  Loading the document itself is the only I/O oasprune does;
``$ref`` pointers inside it are never fetched.

Public functions:

* :func:`load_spec` -- load and parse a document from any supported source.
* :func:`validate_openapi_version` -- require an OpenAPI 3.x document.
* :func:`dump_spec` -- serialise a (cleaned) document to JSON or YAML text.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import httpx
import yaml

from oasprune.exceptions import SpecParseError

logger = logging.getLogger(__name__)


def load_spec(source: str) -> dict[str, Any]:
    """Load an OpenAPI document from a URL, a file path, or stdin (``-``).

    Raises:
        SpecParseError: If the source cannot be read or parsed into a mapping.
    """
    if source == "-":
        content, hint = sys.stdin.read(), ""
        origin = "stdin"
    elif source.startswith(("http://", "https://")):
        content, hint = _fetch(source)
        origin = source
    else:
        content, hint = _read_file(source)
        origin = source

    if not content.strip():
        raise SpecParseError(f"No content received from {origin}")

    logger.debug("Loaded %d characters from %s", len(content), origin)
    return _parse_content(content, hint=hint)


def _fetch(url: str) -> tuple[str, str]:
    try:
        response = httpx.get(url, timeout=30.0, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SpecParseError(
            f"HTTP {exc.response.status_code} fetching spec from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise SpecParseError(f"Failed to fetch spec from {url}: {exc}") from exc

    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        return response.text, "json"
    if "yaml" in content_type or "yml" in content_type:
        return response.text, "yaml"
    return response.text, ""


def _read_file(path: str) -> tuple[str, str]:
    file_path = Path(path)
    if not file_path.is_file():
        raise SpecParseError(f"Spec file not found: {path}")
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SpecParseError(f"Failed to read spec file {path}: {exc}") from exc

    suffix = file_path.suffix.lower()
    if suffix == ".json":
        return content, "json"
    if suffix in (".yaml", ".yml"):
        return content, "yaml"
    return content, ""


def _parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Parse *content* as JSON, falling back to YAML unless *hint* says JSON."""
    if hint != "yaml":
        try:
            return _require_mapping(json.loads(content))
        except json.JSONDecodeError as exc:
            if hint == "json":
                raise SpecParseError(f"Invalid JSON: {exc}") from exc

    try:
        return _require_mapping(_string_keys(yaml.safe_load(content)))
    except yaml.YAMLError as exc:
        raise SpecParseError(f"Failed to parse spec as JSON or YAML: {exc}") from exc


def _string_keys(data: Any) -> Any:
    """Coerce YAML mapping keys to strings, as JSON would have them.

    Unquoted keys such as ``200:`` under ``responses`` load as integers, which
    no ``$ref`` segment could address.
    """
    if isinstance(data, dict):
        return {_key_text(key): _string_keys(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_string_keys(item) for item in data]
    return data


def _key_text(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool) or key is None:
        return json.dumps(key)
    return str(key)


def _require_mapping(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        kind = type(data).__name__ if data is not None else "empty document"
        raise SpecParseError(f"Spec must be a JSON/YAML object (got {kind})")
    return data


def validate_openapi_version(spec: dict[str, Any]) -> str:
    """Return the ``openapi`` version string, rejecting anything but 3.x.

    Raises:
        SpecParseError: For Swagger 2.x, a missing field, or a non-3.x version.
    """
    if "swagger" in spec:
        raise SpecParseError(
            f"Swagger {spec['swagger']} is not supported. "
            "Only OpenAPI 3.x documents are handled."
        )

    version = spec.get("openapi")
    if version is None:
        raise SpecParseError("Missing 'openapi' field. Is this an OpenAPI 3.x document?")

    version_str = str(version)
    if not version_str.startswith("3."):
        raise SpecParseError(f"Unsupported OpenAPI version: {version_str}")
    return version_str


def dump_spec(spec: dict[str, Any], fmt: str = "json") -> str:
    """Serialise *spec* as JSON (2-space indent) or block-style YAML.

    Key order is preserved in both formats.
    """
    if fmt == "yaml":
        return yaml.safe_dump(
            spec, sort_keys=False, allow_unicode=True, default_flow_style=False
        )
    if fmt == "json":
        return json.dumps(spec, indent=2, ensure_ascii=False) + "\n"
    raise ValueError(f"Unknown document format: {fmt}")
