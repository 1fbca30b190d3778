"""Define the directed graph of "type A fulfills type B" relationships and search it for cycles.

Only the base name of each `fulfills` entry creates an edge; type parameters (e.g., the `A`
in `typeB[A]`) are not walked.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from nominal_types.config import CycleReporting
from nominal_types.hierarchy.hierarchy_definition import HierarchyDefinition
from nominal_types.structure import TypeParseError, TypeStructure, parse_type


@dataclass(frozen=True)
class SupertypeRef:
    """A single `fulfills` entry of a declared type, parsed and resolved against the hierarchy."""

    source: str
    """Name of the type declaring the entry."""

    text: str
    """The entry exactly as written (e.g., `"TypeB[A]"`)."""

    structure: TypeStructure | None = None
    """Parsed type expression (None if the entry failed to parse)."""

    error: TypeParseError | None = None
    """Error raised while parsing the entry (None if it parsed)."""

    target: str | None = None
    """Declared type name that the entry's base name resolves to (None if unresolved)."""


def resolve_supertypes(definition: HierarchyDefinition) -> dict[str, list[SupertypeRef]]:
    """Parse and resolve every `fulfills` entry in the given hierarchy.

    :param definition: Hierarchy whose declarations are examined
    :return: Map from each declared type name to its parsed entries, in declared order
    """
    supertypes: dict[str, list[SupertypeRef]] = {}

    for name, decl in definition.items():
        refs: list[SupertypeRef] = []
        for text in decl.fulfills:
            try:
                structure = parse_type(text)
            except TypeParseError as error:
                refs.append(SupertypeRef(name, text, error=error))
                continue

            target = definition.resolve(structure.name)
            refs.append(SupertypeRef(name, text, structure=structure, target=target))
        supertypes[name] = refs

    return supertypes


@dataclass(frozen=True)
class CycleReport:
    """A circular chain of fulfillment relationships that returns to its first type."""

    type_name: str
    """Declared name of the type at which the cycle starts and ends."""

    chain: tuple[str, ...]
    """The starting type's name, followed by each traversed `fulfills` entry as written."""

    def __str__(self) -> str:
        """Render the cycle, e.g. `"typeA fulfills typeB fulfills typeA"`."""
        return " fulfills ".join(self.chain)


class FulfillmentGraph:
    """A directed graph with an edge from each type to every type that it fulfills."""

    def __init__(self, supertypes: dict[str, list[SupertypeRef]]) -> None:
        """Initialize the graph from the resolved `fulfills` entries of each type.

        :param supertypes: Map from each declared type name to its resolved entries
        """
        self._edges: dict[str, list[SupertypeRef]] = {
            name: [ref for ref in refs if ref.target is not None]
            for name, refs in supertypes.items()
        }
        """A map from each type name to its outgoing edges, in declared `fulfills` order."""

    @classmethod
    def from_definition(cls, definition: HierarchyDefinition) -> FulfillmentGraph:
        """Construct the fulfillment graph of the given hierarchy."""
        return cls(resolve_supertypes(definition))

    @property
    def nodes(self) -> list[str]:
        """Retrieve the declared type names in declaration order."""
        return list(self._edges)

    def successors(self, name: str) -> list[SupertypeRef]:
        """Retrieve the resolved `fulfills` entries of the named type."""
        return list(self._edges.get(name, ()))

    def _children(self, name: str) -> Iterator[SupertypeRef]:
        return iter(self._edges.get(name, ()))

    def find_cycles(self, mode: CycleReporting = CycleReporting.FIRST_FOUND) -> list[CycleReport]:
        """Find the circular dependencies in the graph.

        :param mode: Strategy deciding which cycles are reported (default: FIRST_FOUND)
        :return: Reported cycles, in the order they were found
        """
        if mode == CycleReporting.PER_MEMBER:
            reports = (self.cycle_through(name) for name in self._edges)
            return [r for r in reports if r is not None]

        return self._first_found_cycles()

    def _first_found_cycles(self) -> list[CycleReport]:
        """Search the whole graph once, reporting every edge that closes a cycle.

        Types are visited depth-first in declaration order, and each type's edges in the
        order of its `fulfills` list. A type is expanded at most once across the search, so
        a cycle is reported from the first of its members that the search returns to.
        """
        reports: list[CycleReport] = []
        visited: set[str] = set()

        for root in self._edges:
            if root in visited:
                continue

            visited.add(root)
            path = [root]
            texts: list[str] = []  # texts[i] labels the edge from path[i] to path[i + 1]
            on_path = {root: 0}
            stack = [self._children(root)]

            while stack:
                ref = next(stack[-1], None)
                if ref is None:  # All edges of the deepest type have been explored
                    stack.pop()
                    del on_path[path.pop()]
                    if texts:
                        texts.pop()
                    continue

                if ref.target in on_path:
                    start = on_path[ref.target]
                    chain = (ref.target, *texts[start:], ref.text)
                    reports.append(CycleReport(ref.target, chain))
                elif ref.target not in visited:
                    visited.add(ref.target)
                    on_path[ref.target] = len(path)
                    path.append(ref.target)
                    texts.append(ref.text)
                    stack.append(self._children(ref.target))

        return reports

    def cycle_through(self, name: str) -> CycleReport | None:
        """Find the first cycle (in depth-first order) leading from the named type back to it.

        :param name: Declared name of the type where the cycle must start and end
        :return: The first cycle found, or None if the type cannot reach itself
        """
        visited = {name}
        texts: list[str] = []
        stack = [self._children(name)]

        while stack:
            ref = next(stack[-1], None)
            if ref is None:
                stack.pop()
                if texts:
                    texts.pop()
                continue

            if ref.target == name:
                return CycleReport(name, (name, *texts, ref.text))

            if ref.target not in visited:
                visited.add(ref.target)
                texts.append(ref.text)
                stack.append(self._children(ref.target))

        return None
