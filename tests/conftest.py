"""Make the shared test fixtures available to every test module."""

from .fixtures.hierarchy_fixtures import blocks_hierarchy as blocks_hierarchy
from .fixtures.hierarchy_fixtures import blocks_hierarchy_yaml as blocks_hierarchy_yaml
from .fixtures.hierarchy_fixtures import cyclic_hierarchy_yaml as cyclic_hierarchy_yaml
from .fixtures.hierarchy_fixtures import many_problems_hierarchy as many_problems_hierarchy
from .fixtures.hierarchy_fixtures import two_independent_cycles as two_independent_cycles
