"""Import classes and functions for parsing type expressions."""

from .parse_errors import ExtraCharactersError as ExtraCharactersError
from .parse_errors import LeftBracketError as LeftBracketError
from .parse_errors import MissingTypeNameError as MissingTypeNameError
from .parse_errors import RightBracketError as RightBracketError
from .parse_errors import TypeParseError as TypeParseError
from .type_parser import TypeParser as TypeParser
from .type_parser import parse_type as parse_type
from .type_scanner import TypeScanner as TypeScanner
from .type_scanner import TypeToken as TypeToken
from .type_scanner import TypeTokenType as TypeTokenType
from .type_structure import TypeStructure as TypeStructure
from .type_structure import is_generic_name as is_generic_name
