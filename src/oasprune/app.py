"""Typer application and CLI entry point for oasprune.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``.  Sub-commands live in :mod:`oasprune.commands`; each
catches :class:`~oasprune.exceptions.OasPruneError` itself and exits with the
error's code, so :func:`main` only handles interrupts and unexpected crashes.
"""

from __future__ import annotations

import logging
import signal
import sys
from typing import Any

import typer
from rich.logging import RichHandler

from oasprune import __version__
from oasprune.commands.cleanup import cleanup_command
from oasprune.commands.inspect import refs_command, resolve_command
from oasprune.exit_codes import EXIT_GENERIC_FAILURE

app = typer.Typer(
    name="oasprune",
    help="Remove unreachable components from OpenAPI 3.x documents.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("cleanup")(cleanup_command)
app.command("refs")(refs_command)
app.command("resolve")(resolve_command)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"oasprune {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output."),
) -> None:
    """Install the global output manager and, with ``--verbose``, debug logging."""
    from oasprune.output import OutputManager, set_output

    output = OutputManager(no_color=no_color, quiet=quiet, verbose=verbose)
    set_output(output)
    _configure_logging(output.stderr if verbose else None)


def _configure_logging(console: Any) -> None:
    """Attach a Rich handler to the package logger, or silence it when *console* is None."""
    logger = logging.getLogger("oasprune")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if console is None:
        logger.setLevel(logging.WARNING)
        return

    handler = RichHandler(console=console, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``oasprune`` console script."""
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from oasprune.exceptions import OasPruneError
        from oasprune.output import error

        error(str(exc))
        if isinstance(exc, OasPruneError):
            sys.exit(exc.exit_code)
        logging.getLogger(__name__).debug("Unhandled exception", exc_info=True)
        sys.exit(EXIT_GENERIC_FAILURE)
