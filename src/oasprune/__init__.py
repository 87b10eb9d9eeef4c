"""oasprune -- remove unreachable components from OpenAPI 3.x documents.

The core lives in :mod:`oasprune.engine`: local ``$ref`` parsing and
resolution, cycle-safe reachability collection, and a mark-and-sweep pass
over ``components``.  Everything else (loading, configuration, output, the
Typer CLI) is a thin layer on top.

Typical usage::

    from oasprune.engine import cleanup_openapi

    cleaned = cleanup_openapi(api)

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models for configuration and cleanup reports.
    config: Configuration precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting with Rich.
"""

__version__ = "0.1.0"
