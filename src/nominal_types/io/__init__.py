"""Import functions used for input/output or user interfaces."""

from .logging import configure_logging as configure_logging
from .logging import console as console
from .logging import log_info as log_info
from .yaml_utils import export_hierarchy_file as export_hierarchy_file
from .yaml_utils import load_hierarchy_file as load_hierarchy_file
from .yaml_utils import load_yaml_data as load_yaml_data
