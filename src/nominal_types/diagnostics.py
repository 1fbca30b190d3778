"""Define diagnostics reported while validating a type hierarchy, and sinks that receive them.

Each diagnostic is a message template plus positional arguments, mirroring a logging call such
as `logger.error(template, *args)`. Arguments may include structured values (e.g., the
`TypeParseError` raised for a malformed supertype) so that callers can inspect them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Protocol

from nominal_types.structure import TypeParseError


class Severity(StrEnum):
    """Enumeration of how serious a reported diagnostic is."""

    ERROR = "error"
    WARNING = "warning"

    @property
    def log_level(self) -> int:
        """Retrieve the `logging` level corresponding to the severity."""
        return logging.ERROR if self == Severity.ERROR else logging.WARNING


class DiagnosticKind(StrEnum):
    """Enumeration of the problems that hierarchy validation can report."""

    INVALID_SHAPE = "invalid_shape"
    NAME_CONFLICT = "name_conflict"
    ILLEGAL_CHARACTER = "illegal_character"
    GENERIC_NAME = "generic_name"
    UNPARSEABLE_SUPERTYPE = "unparseable_supertype"
    UNDEFINED_SUPERTYPE = "undefined_supertype"
    CIRCULAR_DEPENDENCY = "circular_dependency"


@dataclass(frozen=True)
class Diagnostic:
    """A single problem found in a type hierarchy definition."""

    kind: DiagnosticKind
    severity: Severity
    template: str
    """Printf-style message template (e.g., `"The type %s creates a circular dependency: %s"`)."""

    args: tuple[Any, ...] = field(default=())
    """Positional arguments substituted into the template."""

    @property
    def message(self) -> str:
        """Render the diagnostic's template with its arguments."""
        return self.template % self.args if self.args else self.template

    @property
    def error(self) -> TypeParseError | None:
        """Retrieve the parse error attached to the diagnostic, if there is one."""
        return next((a for a in self.args if isinstance(a, TypeParseError)), None)

    def __str__(self) -> str:
        """Return the rendered message prefixed with the diagnostic's severity."""
        return f"{self.severity}: {self.message}"


class DiagnosticSink(Protocol):
    """A receiver of diagnostics, called once per diagnostic in the order they are found."""

    def report(self, diagnostic: Diagnostic) -> None:
        """Receive a single diagnostic."""
        ...


class DiagnosticCollector:
    """A sink that stores every reported diagnostic in an ordered list."""

    def __init__(self) -> None:
        """Initialize an empty collection of diagnostics."""
        self.diagnostics: list[Diagnostic] = []

    def __len__(self) -> int:
        return len(self.diagnostics)

    def report(self, diagnostic: Diagnostic) -> None:
        """Append the given diagnostic to the collection."""
        self.diagnostics.append(diagnostic)

    @property
    def errors(self) -> list[Diagnostic]:
        """Retrieve the collected diagnostics with error severity."""
        return [d for d in self.diagnostics if d.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        """Retrieve the collected diagnostics with warning severity."""
        return [d for d in self.diagnostics if d.severity == Severity.WARNING]

    @property
    def messages(self) -> list[str]:
        """Retrieve the rendered messages of all collected diagnostics."""
        return [d.message for d in self.diagnostics]

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        """Retrieve the collected diagnostics of the given kind."""
        return [d for d in self.diagnostics if d.kind == kind]


class LoggingSink:
    """A sink forwarding each diagnostic to a `logging.Logger` as `template, *args`."""

    def __init__(self, logger: logging.Logger) -> None:
        """Initialize the sink to log through the given logger."""
        self.logger = logger

    def report(self, diagnostic: Diagnostic) -> None:
        """Log the diagnostic at the level matching its severity."""
        self.logger.log(diagnostic.severity.log_level, diagnostic.template, *diagnostic.args)
