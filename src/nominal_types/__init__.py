"""Parse nominal type expressions and validate type hierarchy definitions."""

from .config import CycleReporting as CycleReporting
from .config import ValidationConfig as ValidationConfig
from .diagnostics import Diagnostic as Diagnostic
from .diagnostics import DiagnosticCollector as DiagnosticCollector
from .diagnostics import DiagnosticKind as DiagnosticKind
from .diagnostics import LoggingSink as LoggingSink
from .diagnostics import Severity as Severity
from .hierarchy import HierarchyDefinition as HierarchyDefinition
from .hierarchy import validate_hierarchy as validate_hierarchy
from .structure import TypeStructure as TypeStructure
from .structure import parse_type as parse_type
