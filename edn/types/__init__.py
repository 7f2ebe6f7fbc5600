from edn.types.value import Value
from edn.types.nil import Nil, NilType
from edn.types.scalars import Boolean, String, Char, Integer, Float, INT64_MIN, INT64_MAX
from edn.types.symbol import Symbol, Keyword
from edn.types.containers import List, Vector, Map, Set
from edn.types.tagged import Tagged
from edn.types.convert import from_python, to_python

__all__ = [
    "Value", "Nil", "NilType", "Boolean", "String", "Char", "Integer", "Float",
    "INT64_MIN", "INT64_MAX", "Symbol", "Keyword", "List", "Vector", "Map", "Set",
    "Tagged", "from_python", "to_python",
]
