"""Tests for oasprune.engine.collector."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from oasprune.engine.collector import collect_used_references
from oasprune.exceptions import (
    EmptyResolveTarget,
    MalformedReference,
    UnresolvedProperty,
    UnsupportedReference,
)


def _recursive_doc() -> dict[str, Any]:
    return {
        "paths": {
            "/r": {"get": {"schema": {"$ref": "#/components/schemas/R"}}},
        },
        "components": {
            "schemas": {
                "R": {"properties": {"child": {"$ref": "#/components/schemas/R"}}},
            }
        },
    }


class TestScalarsAndContainers:
    @pytest.mark.parametrize("node", ["text", 42, 1.5, True, False, None])
    def test_scalars_contribute_nothing(self, node: Any) -> None:
        assert collect_used_references({}, node) == []

    def test_plain_objects_without_refs(self) -> None:
        assert collect_used_references({}, {"a": [1, {"b": None}], "c": "d"}) == []

    def test_refs_inside_lists(self) -> None:
        root = {"d": {"x": 1, "y": 2}}
        node = [{"$ref": "#/d/x"}, [{"$ref": "#/d/y"}], {"$ref": "#/d/x"}]
        assert collect_used_references(root, node) == ["#/d/x", "#/d/y"]


class TestCycleSafety:
    def test_self_referential_schema_visited_once(self) -> None:
        doc = _recursive_doc()
        assert collect_used_references(doc, doc["paths"]) == ["#/components/schemas/R"]

    def test_mutual_recursion_terminates(self) -> None:
        doc = {
            "paths": {"/a": {"$ref": "#/components/pathItems/A"}},
            "components": {
                "pathItems": {
                    "A": {"get": {"callbacks": {"b": {"$ref": "#/components/pathItems/B"}}}},
                    "B": {"post": {"callbacks": {"a": {"$ref": "#/components/pathItems/A"}}}},
                }
            },
        }
        assert collect_used_references(doc, doc["paths"]) == [
            "#/components/pathItems/A",
            "#/components/pathItems/B",
        ]

    def test_pointer_to_pointer_is_followed(self) -> None:
        doc = {
            "paths": {"/p": {"schema": {"$ref": "#/components/schemas/Alias"}}},
            "components": {
                "schemas": {
                    "Alias": {"$ref": "#/components/schemas/Target"},
                    "Target": {"type": "string"},
                }
            },
        }
        assert collect_used_references(doc, doc["paths"]) == [
            "#/components/schemas/Alias",
            "#/components/schemas/Target",
        ]


class TestDiscoveryOrder:
    def test_depth_first_expansion_before_siblings(self) -> None:
        doc = {
            "components": {
                "schemas": {
                    "A": {"properties": {"b": {"$ref": "#/components/schemas/B"}}},
                    "B": {"type": "string"},
                    "C": {"type": "integer"},
                }
            }
        }
        node = {
            "first": {"$ref": "#/components/schemas/A"},
            "second": {"$ref": "#/components/schemas/C"},
        }
        assert collect_used_references(doc, node) == [
            "#/components/schemas/A",
            "#/components/schemas/B",
            "#/components/schemas/C",
        ]

    def test_target_expanded_before_overlay_siblings(self) -> None:
        doc = {"d": {"T": {"x": {"$ref": "#/d/U"}}, "U": 1, "V": 2}}
        node = {"$ref": "#/d/T", "description": {"$ref": "#/d/V"}}
        assert collect_used_references(doc, node) == ["#/d/T", "#/d/U", "#/d/V"]

    def test_sibling_overlays_are_scanned(self) -> None:
        doc = {"d": {"T": 1, "V": 2}}
        node = {"schema": {"$ref": "#/d/T", "examples": [{"$ref": "#/d/V"}]}}
        assert collect_used_references(doc, node) == ["#/d/T", "#/d/V"]

    def test_petstore_paths(self, petstore_raw: dict[str, Any]) -> None:
        assert collect_used_references(petstore_raw, petstore_raw["paths"]) == [
            "#/components/parameters/Limit",
            "#/components/headers/NextPage",
            "#/components/schemas/Pet",
            "#/components/schemas/Tag",
            "#/components/responses/Error",
            "#/components/schemas/Error",
            "#/components/requestBodies/NewPet",
            "#/components/examples/Rex",
        ]


class TestAlreadyFound:
    def test_already_found_refs_are_not_expanded(self) -> None:
        doc = {"d": {"A": {"$ref": "#/d/B"}, "B": 1}}
        result = collect_used_references(doc, {"$ref": "#/d/A"}, ["#/d/A"])
        assert result == ["#/d/A"]

    def test_new_refs_appended_after_already_found(self) -> None:
        doc = {"d": {"A": 1, "B": 2}}
        result = collect_used_references(doc, {"$ref": "#/d/B"}, ["#/d/A"])
        assert result == ["#/d/A", "#/d/B"]

    def test_already_found_is_not_mutated(self) -> None:
        doc = {"d": {"A": 1, "B": 2}}
        already = ["#/d/A"]
        collect_used_references(doc, {"$ref": "#/d/B"}, already)
        assert already == ["#/d/A"]

    def test_document_is_not_mutated(self, petstore_raw: dict[str, Any]) -> None:
        snapshot = copy.deepcopy(petstore_raw)
        collect_used_references(petstore_raw, petstore_raw)
        assert petstore_raw == snapshot


class TestNonStringRef:
    def test_non_string_ref_is_ignored(self) -> None:
        node = {"$ref": {"nested": {"$ref": "#/d/never"}}, "other": "x"}
        assert collect_used_references({}, node) == []

    def test_property_named_ref_under_properties(self) -> None:
        doc = {"d": {"S": {"type": "string"}}}
        node = {"properties": {"$ref": {"$ref": "#/d/S"}}}
        assert collect_used_references(doc, node) == []


class TestFailures:
    def test_dangling_ref_fails_whole_collection(self) -> None:
        doc = {"d": {"A": 1}}
        node = [{"$ref": "#/d/A"}, {"$ref": "#/d/Missing"}]
        with pytest.raises(UnresolvedProperty) as exc_info:
            collect_used_references(doc, node)
        assert exc_info.value.segment == "Missing"

    def test_null_target_fails(self) -> None:
        with pytest.raises(EmptyResolveTarget):
            collect_used_references({"d": {"A": None}}, {"$ref": "#/d/A"})

    def test_external_ref_fails(self) -> None:
        with pytest.raises(UnsupportedReference):
            collect_used_references({}, {"$ref": "https://example.com/pet.json"})

    def test_malformed_ref_fails(self) -> None:
        with pytest.raises(MalformedReference):
            collect_used_references({}, {"$ref": "#/components//Pet"})

    def test_unreached_dangling_ref_is_harmless(self) -> None:
        doc = {"paths": {}, "components": {"schemas": {"X": {"$ref": "#/nowhere"}}}}
        assert collect_used_references(doc, doc["paths"]) == []


class TestLongChains:
    """Chains and nesting deeper than the interpreter recursion limit."""

    def test_schema_chain_of_fifteen_hundred(self) -> None:
        size = 1500
        schemas = {
            f"S{i}": {"properties": {"next": {"$ref": f"#/components/schemas/S{i + 1}"}}}
            for i in range(size - 1)
        }
        schemas[f"S{size - 1}"] = {"type": "string"}
        doc = {
            "paths": {"/s": {"get": {"schema": {"$ref": "#/components/schemas/S0"}}}},
            "components": {"schemas": schemas},
        }

        result = collect_used_references(doc, doc["paths"])

        assert len(result) == size
        assert result[0] == "#/components/schemas/S0"
        assert result[-1] == f"#/components/schemas/S{size - 1}"

    def test_deeply_nested_subtree(self) -> None:
        node: Any = {"$ref": "#/d/leaf"}
        for _ in range(5000):
            node = {"items": [node]}
        assert collect_used_references({"d": {"leaf": 1}}, node) == ["#/d/leaf"]

    def test_order_kept_across_chain_and_siblings(self) -> None:
        doc = {
            "d": {
                "A": {"x": {"$ref": "#/d/B"}, "y": {"$ref": "#/d/C"}},
                "B": {"$ref": "#/d/D"},
                "C": 1,
                "D": 2,
            }
        }
        node = [{"$ref": "#/d/A", "z": {"$ref": "#/d/C"}}, {"$ref": "#/d/D"}]
        assert collect_used_references(doc, node) == ["#/d/A", "#/d/B", "#/d/D", "#/d/C"]
