"""Validate a type hierarchy definition for internal consistency.

Validation reports every problem it finds rather than stopping at the first one. The passes
run in a fixed order, each over the whole hierarchy:

    1. Shape: the definition must be a mapping (if not, no other pass runs).
    2. Names that conflict when case is ignored.
    3. Names containing illegal characters.
    4. Single-character names, which behave like generic types.
    5. Supertypes that fail to parse or aren't defined.
    6. Circular dependencies between types.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from nominal_types.config import ValidationConfig
from nominal_types.diagnostics import Diagnostic, DiagnosticKind, DiagnosticSink, Severity
from nominal_types.hierarchy.fulfillment_graph import (
    FulfillmentGraph,
    SupertypeRef,
    resolve_supertypes,
)
from nominal_types.hierarchy.hierarchy_definition import HierarchyDefinition
from nominal_types.structure import is_generic_name

logger = logging.getLogger(__name__)

SHAPE_MSG = "The hierarchy definition should be an object."
CONFLICT_MSG = "The type name '%s' conflicts with the type name(s) %s"
ILLEGAL_CHARACTER_MSG = "The type %s includes an illegal %s character ('%s')."
GENERIC_NAME_MSG = (
    "The type %s will act like a generic type if used as a connection check, "
    "because it is a single character."
)
UNPARSEABLE_SUPERTYPE_MSG = (
    "The type %s says it fulfills the type %s, but that type could not be parsed: %s"
)
UNDEFINED_SUPERTYPE_MSG = "The type %s says it fulfills the type %s, but that type is not defined"
CIRCULAR_DEPENDENCY_MSG = "The type %s creates a circular dependency: %s"

ILLEGAL_CHARACTERS = {
    ",": "comma",
    " ": "space",
    "[": "left bracket",
    "]": "right bracket",
}
"""Characters that may not appear in type names, mapped to their human-readable names."""


class HierarchyValidator:
    """Runs every validation pass over a type hierarchy definition and reports the results."""

    def __init__(
        self,
        sink: DiagnosticSink | None = None,
        config: ValidationConfig | None = None,
    ) -> None:
        """Initialize the validator.

        :param sink: Optional receiver of each diagnostic as it is found (defaults to None)
        :param config: Options controlling validation (defaults to None = default options)
        """
        self.sink = sink
        self.config = config if config is not None else ValidationConfig()
        self.diagnostics: list[Diagnostic] = []
        """Diagnostics reported by the most recent call to `validate()`, in order."""

    def report(self, kind: DiagnosticKind, template: str, *args: Any) -> None:
        """Record a diagnostic and forward it to the sink, unless its kind is disabled."""
        if not self.config.is_enabled(kind):
            return

        severity = Severity.WARNING if kind == DiagnosticKind.GENERIC_NAME else Severity.ERROR
        if self.config.warnings_as_errors:
            severity = Severity.ERROR

        diagnostic = Diagnostic(kind, severity, template, args)
        self.diagnostics.append(diagnostic)
        if self.sink is not None:
            self.sink.report(diagnostic)

    def validate(self, hierarchy_def: Any = None) -> list[Diagnostic]:
        """Validate the given hierarchy definition.

        :param hierarchy_def: Map from type names to type declarations
        :return: Every diagnostic found, in the order it was reported
        """
        self.diagnostics = []

        if not isinstance(hierarchy_def, Mapping):
            self.report(DiagnosticKind.INVALID_SHAPE, SHAPE_MSG)
            return self.diagnostics

        definition = HierarchyDefinition.from_mapping(hierarchy_def)
        supertypes = resolve_supertypes(definition)

        self.check_name_conflicts(definition)
        self.check_characters(definition)
        self.check_generic_names(definition)
        self.check_supertypes(supertypes)
        self.check_circular_dependencies(FulfillmentGraph(supertypes))

        logger.debug(
            "Validated %d type(s) and found %d problem(s).",
            len(definition),
            len(self.diagnostics),
        )
        return self.diagnostics

    def check_name_conflicts(self, definition: HierarchyDefinition) -> None:
        """Report each group of type names that are equal when case is ignored.

        Raw keys that became the same name when converted to strings are reported as well.
        """
        for first, *others in definition.case_groups():
            self.report(DiagnosticKind.NAME_CONFLICT, CONFLICT_MSG, first, others)

        for name, duplicates in definition.duplicate_keys.items():
            self.report(DiagnosticKind.NAME_CONFLICT, CONFLICT_MSG, name, duplicates)

    def check_characters(self, definition: HierarchyDefinition) -> None:
        """Report the first illegal character in each type name."""
        for name in definition:
            char = next((c for c in name if c in ILLEGAL_CHARACTERS), None)
            if char is not None:
                char_name = ILLEGAL_CHARACTERS[char]
                self.report(
                    DiagnosticKind.ILLEGAL_CHARACTER,
                    ILLEGAL_CHARACTER_MSG,
                    name,
                    char_name,
                    char,
                )

    def check_generic_names(self, definition: HierarchyDefinition) -> None:
        """Warn about type names that will act like generic types."""
        for name in definition:
            if is_generic_name(name):
                self.report(DiagnosticKind.GENERIC_NAME, GENERIC_NAME_MSG, name)

    def check_supertypes(self, supertypes: dict[str, list[SupertypeRef]]) -> None:
        """Report `fulfills` entries that fail to parse or name a type that isn't defined."""
        for name, refs in supertypes.items():
            for ref in refs:
                if ref.error is not None:
                    self.report(
                        DiagnosticKind.UNPARSEABLE_SUPERTYPE,
                        UNPARSEABLE_SUPERTYPE_MSG,
                        name,
                        ref.text,
                        ref.error,
                    )
                elif ref.target is None and ref.structure is not None:
                    self.report(
                        DiagnosticKind.UNDEFINED_SUPERTYPE,
                        UNDEFINED_SUPERTYPE_MSG,
                        name,
                        ref.structure.name,
                    )

    def check_circular_dependencies(self, graph: FulfillmentGraph) -> None:
        """Report the circular dependencies found in the fulfillment graph."""
        if not self.config.is_enabled(DiagnosticKind.CIRCULAR_DEPENDENCY):
            return

        for cycle in graph.find_cycles(self.config.cycle_reporting):
            self.report(
                DiagnosticKind.CIRCULAR_DEPENDENCY,
                CIRCULAR_DEPENDENCY_MSG,
                cycle.type_name,
                str(cycle),
            )


def validate_hierarchy(
    hierarchy_def: Any = None,
    sink: DiagnosticSink | None = None,
    config: ValidationConfig | None = None,
) -> list[Diagnostic]:
    """Validate a type hierarchy definition and report every problem found.

    Malformed content is reported, never raised; only a definition that isn't a mapping
    stops validation early (after reporting that it should be an object).

    :param hierarchy_def: Map from type names to type declarations (defaults to None)
    :param sink: Optional receiver of each diagnostic as it is found (defaults to None)
    :param config: Options controlling validation (defaults to None = default options)
    :return: Every diagnostic found, in the order it was reported
    """
    return HierarchyValidator(sink, config).validate(hierarchy_def)
