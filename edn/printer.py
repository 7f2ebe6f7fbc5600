"""
Printer: renders an edn Value as text.

Collections are written with `, ` between elements, Maps and Sets in the
total order of their keys/members, so equal values always print the same.
Strings escape `\\`, `"`, newline, return and tab, which makes
`read(print(x)) == x` hold for every String.
"""

from __future__ import annotations

import numpy as np

from edn.errors import EdnTypeError
from edn.types.value import Value
from edn.types.nil import NilType
from edn.types.scalars import Boolean, String, Char, Integer, Float
from edn.types.symbol import Symbol, Keyword
from edn.types.containers import List, Vector, Map, Set
from edn.types.tagged import Tagged

STRING_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_ESCAPE_TABLE = str.maketrans(STRING_ESCAPES)


def escape_string(s: str) -> str:
    return s.translate(_ESCAPE_TABLE)


def format_float(x: float) -> str:
    # positional notation: the reader has no exponent syntax
    return np.format_float_positional(x, trim="0")


def _join(values) -> str:
    return ", ".join(print_value(v) for v in values)


def print_value(value: Value) -> str:
    if isinstance(value, NilType):
        return "nil"
    if isinstance(value, Boolean):
        return "true" if value.value else "false"
    if isinstance(value, Integer):
        return str(value.value)
    if isinstance(value, Float):
        return format_float(value.value)
    if isinstance(value, String):
        return f'"{escape_string(value.value)}"'
    if isinstance(value, Char):
        return f"\\{value.value}"
    if isinstance(value, Symbol):
        return value.value
    if isinstance(value, Keyword):
        return f":{value.value}"
    if isinstance(value, List):
        return f"({_join(value)})"
    if isinstance(value, Vector):
        return f"[{_join(value)}]"
    if isinstance(value, Map):
        pairs = ", ".join(f"{print_value(k)} {print_value(v)}" for k, v in value.items())
        return f"{{{pairs}}}"
    if isinstance(value, Set):
        return f"#{{{_join(value)}}}"
    if isinstance(value, Tagged):
        return f"#{value.tag} {print_value(value.value)}"
    raise EdnTypeError(f"Not an edn value: {value!r}")


dumps = print_value
