"""
Conversions between host (Python and numpy) values and edn Values.

    None            -> Nil
    bool, np.bool_  -> Boolean
    str             -> String   (build a Char explicitly with Char("x"))
    int, np.integer -> Integer
    float, np.floating -> Float
    list, tuple, 1-d np.ndarray -> Vector
    dict            -> Map
    set, frozenset  -> Set
    Value           -> itself
"""

from __future__ import annotations

from typing import Any

import numpy as np

from edn.errors import EdnTypeError
from edn.types.value import Value
from edn.types.nil import Nil
from edn.types.scalars import Boolean, String, Integer, Float
from edn.types.containers import List, Vector, Map, Set


def from_python(obj: Any) -> Value:
    if isinstance(obj, Value):
        return obj
    if obj is None:
        return Nil
    # bool before int: bool is an int subclass
    if isinstance(obj, (bool, np.bool_)):
        return Boolean(obj)
    if isinstance(obj, (int, np.integer)):
        return Integer(obj)
    if isinstance(obj, (float, np.floating)):
        return Float(obj)
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, np.ndarray):
        if obj.ndim != 1:
            raise EdnTypeError(f"Only one-dimensional arrays convert to a Vector, got shape {obj.shape}")
        return Vector(from_python(x) for x in obj)
    if isinstance(obj, (list, tuple)):
        return Vector(from_python(x) for x in obj)
    if isinstance(obj, dict):
        return Map((from_python(k), from_python(v)) for k, v in obj.items())
    if isinstance(obj, (set, frozenset)):
        return Set(from_python(x) for x in obj)
    raise EdnTypeError(f"Cannot convert {type(obj).__name__} to an edn value: {obj!r}")


def to_python(value: Value) -> Any:
    """Project a Value onto plain Python data.

    Symbols, Keywords, Chars and Tagged values have no plain counterpart
    and are returned unchanged.

    Python treats 1, 1.0 and True as the same dict key, so Map keys or Set
    members that are distinct Values (Integer(1), Float(1.0), Boolean(True))
    can merge into one entry. Keep the Values when that matters.
    """
    if value is Nil:
        return None
    if isinstance(value, (Boolean, String, Integer, Float)):
        return value.value
    if isinstance(value, (List, Vector)):
        return [to_python(x) for x in value]
    if isinstance(value, Map):
        return {_hashable(to_python(k)): to_python(v) for k, v in value.items()}
    if isinstance(value, Set):
        return frozenset(_hashable(to_python(x)) for x in value)
    return value


def _hashable(obj: Any) -> Any:
    if isinstance(obj, list):
        return tuple(_hashable(x) for x in obj)
    if isinstance(obj, dict):
        return frozenset((k, _hashable(v)) for k, v in obj.items())
    return obj
