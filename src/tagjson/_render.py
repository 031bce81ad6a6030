"""
Text rendering of value trees.

Rendering is best-effort: string payloads are quoted but not re-escaped, so
a string holding a quote, backslash or control character does not survive a
render/parse round trip.
"""

import math
from typing import IO

from ._values import Bool
from ._values import Dict
from ._values import Double
from ._values import Int
from ._values import List
from ._values import Null
from ._values import String
from ._values import Value

_ITEM_SEPARATOR = ", "
_KEY_SEPARATOR = ": "


def _render_double(number: float) -> str:
    if not math.isfinite(number):
        msg = "Out of range float values cannot be rendered"
        raise ValueError(msg)
    # repr always carries a '.' or an exponent, so the text re-parses as Double
    return repr(number)


def _render_into(value: Value, out: list[str]) -> None:
    match value:
        case Null():
            out.append("null")
        case Bool(flag):
            out.append("true" if flag else "false")
        case Int(number):
            out.append(str(number))
        case Double(number):
            out.append(_render_double(number))
        case String(text):
            out.append(f'"{text}"')
        case List(items):
            out.append("[")
            for i, item in enumerate(items):
                if i:
                    out.append(_ITEM_SEPARATOR)
                _render_into(item, out)
            out.append("]")
        case Dict(entries):
            out.append("{")
            for i, (key, item) in enumerate(entries.items()):
                if i:
                    out.append(_ITEM_SEPARATOR)
                out.append(f'"{key}"{_KEY_SEPARATOR}')
                _render_into(item, out)
            out.append("}")
        case _:
            msg = f"Object of type {type(value).__name__} is not a value"
            raise TypeError(msg)


def render(value: Value) -> str:
    """Renders a value tree to text, dict entries in iteration order."""
    out: list[str] = []
    _render_into(value, out)
    return "".join(out)


def render_to(value: Value, fp: IO[str]) -> None:
    """
    Writes the rendered value to a text stream.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(render(value))
