"""Import classes and functions for defining and validating type hierarchies."""

from .fulfillment_graph import CycleReport as CycleReport
from .fulfillment_graph import FulfillmentGraph as FulfillmentGraph
from .fulfillment_graph import SupertypeRef as SupertypeRef
from .fulfillment_graph import resolve_supertypes as resolve_supertypes
from .hierarchy_definition import HierarchyDefinition as HierarchyDefinition
from .hierarchy_definition import ParamDecl as ParamDecl
from .hierarchy_definition import TypeDecl as TypeDecl
from .hierarchy_definition import Variance as Variance
from .hierarchy_validation import HierarchyValidator as HierarchyValidator
from .hierarchy_validation import validate_hierarchy as validate_hierarchy
