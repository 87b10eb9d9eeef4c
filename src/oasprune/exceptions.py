"""Exception hierarchy for oasprune.

All exceptions inherit from :class:`OasPruneError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`oasprune.exit_codes`.
The CLI entry point catches ``OasPruneError`` and exits with that code.

Reference failures keep their payload as attributes so callers can report
the exact pointer and segment at fault without parsing the message.

Subclass hierarchy::

    OasPruneError (exit 1)
    +-- SpecParseError           (exit 7)
    +-- ConfigError              (exit 1)
    +-- ReferenceError_          (exit 8)
        +-- UnsupportedReference
        +-- MalformedReference
        +-- InvalidResolveBase
        +-- UnresolvedProperty
        +-- EmptyResolveTarget
        +-- CyclicReference
"""

from __future__ import annotations

from collections.abc import Sequence

from oasprune.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_REFERENCE_ERROR,
    EXIT_SPEC_PARSE_ERROR,
)


class OasPruneError(Exception):
    """Base exception for all oasprune errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class SpecParseError(OasPruneError):
    """Raised when the OpenAPI document cannot be loaded or parsed."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class ConfigError(OasPruneError):
    """Raised for configuration problems (invalid JSON, unknown registry kinds)."""

    exit_code = EXIT_GENERIC_FAILURE


class ReferenceError_(OasPruneError):
    """Base class for every ``$ref`` resolution failure.

    Named with a trailing underscore to avoid shadowing the built-in
    ``ReferenceError``.
    """

    exit_code = EXIT_REFERENCE_ERROR


def _join(segments: Sequence[str]) -> str:
    return "#/" + "/".join(segments)


class UnsupportedReference(ReferenceError_):
    """The pointer is not a local ``#/...`` fragment (URL, relative file, bare name)."""

    def __init__(self, ref: str):
        super().__init__(
            f"Unsupported $ref '{ref}': only local references (#/...) are handled"
        )
        self.ref = ref


class MalformedReference(ReferenceError_):
    """A local pointer contains an empty segment (``//`` or a trailing ``/``)."""

    def __init__(self, ref: str, segments: Sequence[str]):
        super().__init__(f"Malformed $ref '{ref}': empty path segment")
        self.ref = ref
        self.segments = list(segments)


class InvalidResolveBase(ReferenceError_):
    """A segment was applied to a value that is not a mapping or a list."""

    def __init__(self, segments: Sequence[str], segment: str):
        super().__init__(
            f"Cannot resolve '{_join(segments)}': "
            f"segment '{segment}' applied to a non-object value"
        )
        self.segments = list(segments)
        self.segment = segment


class UnresolvedProperty(ReferenceError_):
    """A segment names a property absent from the current node."""

    def __init__(self, segments: Sequence[str], segment: str):
        super().__init__(
            f"Cannot resolve '{_join(segments)}': key '{segment}' not found"
        )
        self.segments = list(segments)
        self.segment = segment


class EmptyResolveTarget(ReferenceError_):
    """The pointer resolved to ``null``."""

    def __init__(self, segments: Sequence[str]):
        super().__init__(f"Cannot resolve '{_join(segments)}': target is null")
        self.segments = list(segments)


class CyclicReference(ReferenceError_):
    """An alias chain of pointer objects loops back on itself."""

    def __init__(self, ref: str, chain: Sequence[str]):
        super().__init__(
            f"Cyclic $ref '{ref}': " + " -> ".join([*chain, ref])
        )
        self.ref = ref
        self.chain = list(chain)
