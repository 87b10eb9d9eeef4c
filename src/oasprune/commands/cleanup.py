"""``oasprune cleanup`` -- sweep unreachable component entries from a document."""

from __future__ import annotations

from typing import Any, Optional

import typer

from oasprune.exceptions import OasPruneError


def load_document(source: str) -> dict[str, Any]:
    """Load *source* and require an OpenAPI 3.x document."""
    from oasprune.parser import load_spec, validate_openapi_version
    from oasprune.output import debug

    spec = load_spec(source)
    version = validate_openapi_version(spec)
    debug(f"Loaded OpenAPI {version} document from {source}")
    return spec


def cleanup_command(
    source: str = typer.Argument(..., help="Spec file path, URL, or '-' for stdin."),
    output_path: Optional[str] = typer.Option(
        None, "--output", "-o", help="Write the cleaned document to this file."
    ),
    fmt: Optional[str] = typer.Option(
        None, "--format", help="Output format: json or yaml."
    ),
    prune: Optional[list[str]] = typer.Option(
        None,
        "--prune",
        help="Component type to prune (repeatable). Defaults to the standard set.",
    ),
    report: bool = typer.Option(
        False, "--report", help="Print a summary of removed entries to stderr."
    ),
) -> None:
    """Remove component entries not reachable from paths or webhooks.

    Example::

        oasprune cleanup openapi.yaml --format yaml -o openapi.min.yaml
    """
    from oasprune.config import resolve_config
    from oasprune.engine.cleanup import (
        cleanup_openapi,
        cleanup_report,
        collect_reachable_references,
    )
    from oasprune.output import error, get_output, info, success
    from oasprune.parser import dump_spec

    try:
        config = resolve_config(cli_prunable=prune or None, cli_format=fmt)
        api = load_document(source)
        used = collect_reachable_references(api)
        cleaned = cleanup_openapi(api, config.prunable, used_references=used)
    except OasPruneError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    get_output().write_document(dump_spec(cleaned, config.output_format.value), output_path)

    summary = cleanup_report(api, cleaned, used, config.prunable)
    if report:
        for registry in summary.registries:
            if registry.removed:
                info(
                    f"components/{registry.kind}: removed {len(registry.removed)} "
                    f"({', '.join(registry.removed)})"
                )
    success(
        f"{len(used)} reachable reference(s), "
        f"{summary.removed_count} unreachable component(s) removed"
    )
