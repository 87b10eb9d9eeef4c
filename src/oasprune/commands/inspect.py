"""Read-only inspection commands: ``refs`` and ``resolve``.

Both load a document, run one engine operation on it, and print the result
to stdout without modifying anything.
"""

from __future__ import annotations

import json

import typer

from oasprune.commands.cleanup import load_document
from oasprune.exceptions import OasPruneError


def refs_command(
    source: str = typer.Argument(..., help="Spec file path, URL, or '-' for stdin."),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON array."),
) -> None:
    """List references reachable from paths and webhooks, in discovery order."""
    from oasprune.engine.cleanup import collect_reachable_references
    from oasprune.output import error, print_data

    try:
        used = collect_reachable_references(load_document(source))
    except OasPruneError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    if as_json:
        print_data(json.dumps(used, indent=2))
        return
    for ref in used:
        print_data(ref)


def resolve_command(
    source: str = typer.Argument(..., help="Spec file path, URL, or '-' for stdin."),
    pointer: str = typer.Argument(..., help="Local pointer, e.g. '#/components/schemas/Pet'."),
) -> None:
    """Print the value a pointer resolves to, following alias chains."""
    from oasprune.engine.resolver import ensure_resolved
    from oasprune.output import error, print_data

    try:
        value = ensure_resolved(load_document(source), {"$ref": pointer})
    except OasPruneError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    print_data(json.dumps(value, indent=2, ensure_ascii=False, default=str))
