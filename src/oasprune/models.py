"""Pydantic models shared across oasprune.

Two groups live here:

**Configuration** -- :class:`CleanupConfig`, read from ``./oasprune.json``,
the environment and CLI flags by :func:`oasprune.config.resolve_config`.

**Results** -- :class:`RegistrySummary` and :class:`CleanupReport`,
produced by :func:`oasprune.engine.cleanup.cleanup_report` to describe what a
sweep kept and removed.

The document itself is never modelled: it stays a plain ``dict`` so that
every key, including ``x-`` extensions, passes through untouched.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field, field_validator

from oasprune.engine.cleanup import COMPONENT_TYPES, PRUNABLE_COMPONENT_TYPES


class DocumentFormat(str, enum.Enum):
    """Serialisation format for documents written by the CLI."""

    JSON = "json"
    YAML = "yaml"


class CleanupConfig(BaseModel):
    """Effective settings for a cleanup run.

    ``prunable`` defaults to the closed set of registry kinds that are swept
    (schemas, responses, parameters, examples, requestBodies, headers).  It
    may be narrowed or widened, but only to kinds OpenAPI 3.1 defines.
    """

    prunable: list[str] = Field(
        default_factory=lambda: list(PRUNABLE_COMPONENT_TYPES),
        description="Component registry kinds whose unreachable entries are removed",
    )
    output_format: DocumentFormat = Field(
        default=DocumentFormat.JSON, description="Format of the written document"
    )

    @field_validator("prunable")
    @classmethod
    def _known_kinds(cls, value: list[str]) -> list[str]:
        unknown = [kind for kind in value if kind not in COMPONENT_TYPES]
        if unknown:
            raise ValueError(
                f"unknown component type(s): {', '.join(unknown)}; "
                f"expected any of {', '.join(COMPONENT_TYPES)}"
            )
        return list(dict.fromkeys(value))


class RegistrySummary(BaseModel):
    """Kept and removed entry keys of one component registry."""

    kind: str
    pruned: bool
    kept: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)


class CleanupReport(BaseModel):
    """Outcome of a sweep: the reachable set and a per-registry summary."""

    used_references: list[str] = Field(default_factory=list)
    registries: list[RegistrySummary] = Field(default_factory=list)

    @property
    def removed_count(self) -> int:
        """Total number of entries removed across all registries."""
        return sum(len(summary.removed) for summary in self.registries)
