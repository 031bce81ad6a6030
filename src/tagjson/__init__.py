"""
Recursive descent JSON parser producing a tree of tagged values.

Parses an in-memory JSON buffer into immutable variant objects (``Null``,
``Bool``, ``Int``, ``Double``, ``String``, ``List``, ``Dict``) and renders
such trees back to text. Malformed input always raises ``ParseError`` with
a kind and offset; there is no partial or best-effort result.
"""

from ._config import ParseConfig
from ._errors import ParseError
from ._errors import ParseErrorKind
from ._errors import Position
from ._parser import Parser
from ._parser import load
from ._parser import loads
from ._parser import parse
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import format_hot_path_stats
from ._profile import get_hot_path_stats
from ._render import render
from ._render import render_to
from ._values import Bool
from ._values import Dict
from ._values import Double
from ._values import Int
from ._values import List
from ._values import Null
from ._values import PyValue
from ._values import String
from ._values import Value
from ._values import ValueType
from ._values import from_python
from ._values import is_value

__version__ = "0.1.0"

__all__ = [
    "Bool",
    "Dict",
    "Double",
    "HotPathStats",
    "Int",
    "List",
    "Null",
    "ParseConfig",
    "ParseError",
    "ParseErrorKind",
    "Parser",
    "Position",
    "PyValue",
    "String",
    "Value",
    "ValueType",
    "clear_hot_path_stats",
    "format_hot_path_stats",
    "from_python",
    "get_hot_path_stats",
    "is_value",
    "load",
    "loads",
    "parse",
    "render",
    "render_to",
]
