# Reader, value model and printer for edn, the Lisp-derived data notation.
#
# text --Reader--> Value tree --print_value--> text
#
# Naming guidance:
# - Value: the closed set of edn variants defined in edn.types. Every tree the
#   reader produces is built from them and is immutable.
# - ReadResult: what a single Reader.read() step can produce.

from typing import Union

from edn.errors import EdnError, EdnParseError, EdnTypeError, EdnOverflowError
from edn.types import (
    Value, Nil, NilType, Boolean, String, Char, Integer, Float, Symbol, Keyword,
    List, Vector, Map, Set, Tagged, INT64_MIN, INT64_MAX, from_python, to_python,
)
from edn.reader import Reader, EOF, EOFType, read_string, read_all
from edn.printer import print_value, dumps

# Result of one read step; errors are raised by Reader.read() but yielded by Reader.results()
ReadResult = Union[Value, EdnParseError, EOFType]

__version__ = "0.1.0"

__all__ = [
    "EdnError", "EdnParseError", "EdnTypeError", "EdnOverflowError",
    "Value", "Nil", "NilType", "Boolean", "String", "Char", "Integer", "Float",
    "Symbol", "Keyword", "List", "Vector", "Map", "Set", "Tagged", "INT64_MIN", "INT64_MAX",
    "from_python", "to_python",
    "Reader", "EOF", "EOFType", "read_string", "read_all",
    "print_value", "dumps", "ReadResult",
]
