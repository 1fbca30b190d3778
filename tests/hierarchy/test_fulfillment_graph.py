"""Unit tests for the FulfillmentGraph class and its cycle search."""

from __future__ import annotations

from typing import Any

from nominal_types.config import CycleReporting
from nominal_types.hierarchy import (
    CycleReport,
    FulfillmentGraph,
    HierarchyDefinition,
    resolve_supertypes,
)
from nominal_types.structure import LeftBracketError, TypeStructure


def build_graph(hierarchy_def: dict[str, Any]) -> FulfillmentGraph:
    """Construct the fulfillment graph of a raw hierarchy definition."""
    return FulfillmentGraph.from_definition(HierarchyDefinition.from_mapping(hierarchy_def))


def test_resolve_supertypes() -> None:
    """Verify that each `fulfills` entry is parsed and resolved against the declared names."""
    # Arrange - Declare entries that resolve, don't resolve, and don't parse
    definition = HierarchyDefinition.from_mapping(
        {
            "list": {"fulfills": ["Collection[T]", "missing", "broken["]},
            "collection": {},
        },
    )

    # Act - Parse and resolve every entry
    refs = resolve_supertypes(definition)["list"]

    # Assert - Expect one reference per entry, in declared order
    assert [r.text for r in refs] == ["Collection[T]", "missing", "broken["]
    assert refs[0].structure == TypeStructure("Collection", (TypeStructure("T"),))
    assert refs[0].target == "collection"
    assert refs[1].target is None
    assert refs[1].error is None
    assert isinstance(refs[2].error, LeftBracketError)
    assert refs[2].structure is None


def test_graph_only_contains_resolved_edges() -> None:
    """Verify that unresolved and unparseable entries don't become edges."""
    graph = build_graph({"typeA": {"fulfills": ["typeB", "typeZ", "typeB]"]}, "typeB": {}})

    assert graph.nodes == ["typeA", "typeB"]
    assert [ref.target for ref in graph.successors("typeA")] == ["typeB"]
    assert graph.successors("typeB") == []
    assert graph.successors("unknown") == []


def test_acyclic_graph_has_no_cycles() -> None:
    """Verify that a diamond-shaped hierarchy contains no cycles in either reporting mode."""
    graph = build_graph(
        {
            "top": {},
            "left": {"fulfills": ["top"]},
            "right": {"fulfills": ["top"]},
            "bottom": {"fulfills": ["left", "right"]},
        },
    )

    assert graph.find_cycles() == []
    assert graph.find_cycles(CycleReporting.PER_MEMBER) == []


def test_first_found_cycle_report() -> None:
    """Verify that a single search reports a three-type cycle once."""
    graph = build_graph(
        {
            "typeA": {"fulfills": ["typeB"]},
            "typeB": {"fulfills": ["typeC[x]"]},
            "typeC": {"fulfills": ["TypeA"]},
        },
    )

    cycles = graph.find_cycles()

    assert cycles == [CycleReport("typeA", ("typeA", "typeB", "typeC[x]", "TypeA"))]
    assert str(cycles[0]) == "typeA fulfills typeB fulfills typeC[x] fulfills TypeA"


def test_cycle_closing_after_the_root() -> None:
    """Verify that a cycle not containing the search root is reported from where it closes."""
    graph = build_graph(
        {
            "start": {"fulfills": ["typeA"]},
            "typeA": {"fulfills": ["typeB"]},
            "typeB": {"fulfills": ["typeA"]},
        },
    )

    assert [str(c) for c in graph.find_cycles()] == ["typeA fulfills typeB fulfills typeA"]


def test_cycle_through_each_member() -> None:
    """Verify that every member of a cycle finds a cycle back to itself."""
    graph = build_graph(
        {
            "typeA": {"fulfills": ["typeB"]},
            "typeB": {"fulfills": ["typeC"]},
            "typeC": {"fulfills": ["typeA"]},
            "typeD": {"fulfills": ["typeA"]},
        },
    )

    cycle = graph.cycle_through("typeB")

    assert cycle is not None
    assert str(cycle) == "typeB fulfills typeC fulfills typeA fulfills typeB"
    assert graph.cycle_through("typeD") is None
    assert [c.type_name for c in graph.find_cycles(CycleReporting.PER_MEMBER)] == [
        "typeA",
        "typeB",
        "typeC",
    ]


def test_cycle_through_follows_declared_order() -> None:
    """Verify that the first cycle in depth-first, declared order is the one reported."""
    graph = build_graph(
        {
            "typeA": {"fulfills": ["typeB", "typeC"]},
            "typeB": {"fulfills": ["typeD"]},
            "typeC": {"fulfills": ["typeA"]},
            "typeD": {"fulfills": ["typeA"]},
        },
    )

    cycle = graph.cycle_through("typeA")

    assert cycle is not None
    assert cycle.chain == ("typeA", "typeB", "typeD", "typeA")
