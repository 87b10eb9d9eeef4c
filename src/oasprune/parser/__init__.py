"""Document I/O for the command line: load, version-check and dump.

Typical usage::

    from oasprune.parser import load_spec, validate_openapi_version, dump_spec

    raw = load_spec("openapi.yaml")
    validate_openapi_version(raw)
    print(dump_spec(raw, "yaml"))
"""

from oasprune.parser.loader import dump_spec, load_spec, validate_openapi_version

__all__ = ["load_spec", "validate_openapi_version", "dump_spec"]
