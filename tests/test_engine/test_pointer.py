"""Tests for oasprune.engine.pointer."""

from __future__ import annotations

import pytest

from oasprune.engine.pointer import component_address, parse_pointer
from oasprune.exceptions import MalformedReference, UnsupportedReference


class TestParsePointer:
    """Test splitting local pointers into segments."""

    @pytest.mark.parametrize(
        "segments",
        [
            ["components"],
            ["components", "schemas", "Pet"],
            ["$defs", "Node"],
            ["paths", "{id}", "get"],
            ["a", "b~1c", "d~0e"],
        ],
    )
    def test_round_trips_segments(self, segments: list[str]) -> None:
        assert parse_pointer("#/" + "/".join(segments)) == segments

    def test_escapes_are_kept_verbatim(self) -> None:
        assert parse_pointer("#/components/schemas/a~1b") == [
            "components",
            "schemas",
            "a~1b",
        ]

    @pytest.mark.parametrize(
        "ref",
        [
            "http://example.com/#/a/b",
            "./other.yaml#/components/schemas/Pet",
            "#components/schemas/Pet",
            "components/schemas/Pet",
            "",
        ],
    )
    def test_rejects_non_local(self, ref: str) -> None:
        with pytest.raises(UnsupportedReference) as exc_info:
            parse_pointer(ref)
        assert exc_info.value.ref == ref

    @pytest.mark.parametrize(
        "ref",
        ["#/", "#/components//Pet", "#/components/schemas/", "#//"],
    )
    def test_rejects_empty_segments(self, ref: str) -> None:
        with pytest.raises(MalformedReference) as exc_info:
            parse_pointer(ref)
        assert exc_info.value.ref == ref
        assert "" in exc_info.value.segments

    def test_malformed_payload_lists_segments(self) -> None:
        with pytest.raises(MalformedReference) as exc_info:
            parse_pointer("#/a//b")
        assert exc_info.value.segments == ["a", "", "b"]


class TestComponentAddress:
    def test_builds_canonical_address(self) -> None:
        assert component_address("schemas", "Pet") == "#/components/schemas/Pet"

    def test_address_parses_back(self) -> None:
        assert parse_pointer(component_address("requestBodies", "NewPet")) == [
            "components",
            "requestBodies",
            "NewPet",
        ]
