"""Configuration loading with precedence resolution.

Settings are described by :class:`~oasprune.models.CleanupConfig` and
merged from, high to low:

1. CLI flags (``--prune``, ``--format``)
2. Environment variables (``OASPRUNE_PRUNABLE``, ``OASPRUNE_FORMAT``)
3. Project config (``./oasprune.json``, or the path in ``OASPRUNE_CONFIG``)
4. Defaults
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from oasprune.exceptions import ConfigError
from oasprune.models import CleanupConfig

_PROJECT_CONFIG_FILENAME = "oasprune.json"


def project_config_path() -> Path:
    """Return the project config path, honouring ``OASPRUNE_CONFIG``."""
    override = os.environ.get("OASPRUNE_CONFIG", "")
    if override:
        return Path(override).expanduser()
    return Path.cwd() / _PROJECT_CONFIG_FILENAME


def load_project_config() -> Optional[dict[str, Any]]:
    """Load the project config file as a dict.

    Returns:
        The parsed JSON object, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not a JSON object.
    """
    path = project_config_path()
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        raise ConfigError(f"Invalid project config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid project config at {path}: expected a JSON object")
    return data


def _split_kinds(value: str) -> list[str]:
    return [kind.strip() for kind in value.split(",") if kind.strip()]


def resolve_config(
    cli_prunable: Optional[list[str]] = None,
    cli_format: Optional[str] = None,
) -> CleanupConfig:
    """Merge every configuration source into one :class:`CleanupConfig`.

    Raises:
        ConfigError: If a source is unreadable or names an unknown registry
            kind or output format.
    """
    settings: dict[str, Any] = load_project_config() or {}

    env_prunable = os.environ.get("OASPRUNE_PRUNABLE")
    if env_prunable is not None:
        settings["prunable"] = _split_kinds(env_prunable)
    env_format = os.environ.get("OASPRUNE_FORMAT")
    if env_format:
        settings["output_format"] = env_format

    if cli_prunable is not None:
        settings["prunable"] = cli_prunable
    if cli_format is not None:
        settings["output_format"] = cli_format

    try:
        return CleanupConfig.model_validate(settings)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
