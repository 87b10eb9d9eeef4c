"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a failure category and is referenced by the matching
:class:`~oasprune.exceptions.OasPruneError` subclass, so shell wrappers can
tell a dangling ``$ref`` apart from an unreadable input file without parsing
stderr.

Example::

    $ oasprune cleanup broken.yaml
    $ echo $?
    8   # EXIT_REFERENCE_ERROR -- a reachable $ref could not be resolved
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_SPEC_PARSE_ERROR = 7
"""The OpenAPI document could not be loaded or parsed."""

EXIT_REFERENCE_ERROR = 8
"""A ``$ref`` pointer was unsupported, malformed, dangling or cyclic."""
