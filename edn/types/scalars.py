from __future__ import annotations

import math

import numpy as np

from edn.errors import EdnTypeError, EdnOverflowError
from edn.types.value import Scalar, BOOLEAN, STRING, CHAR, INTEGER, FLOAT

_INT64 = np.iinfo(np.int64)
INT64_MIN = int(_INT64.min)
INT64_MAX = int(_INT64.max)


class Boolean(Scalar):
    __slots__ = ()
    rank = BOOLEAN

    def __init__(self, value: bool):
        if not isinstance(value, (bool, np.bool_)):
            raise EdnTypeError(f"Boolean expects a bool, got {value!r}")
        self._init(value=bool(value))

    def __bool__(self):
        return self.value


class String(Scalar):
    __slots__ = ()
    rank = STRING

    def __init__(self, value: str):
        if not isinstance(value, str):
            raise EdnTypeError(f"String expects a str, got {value!r}")
        self._init(value=value)

    def __len__(self):
        return len(self.value)


class Char(Scalar):
    """A single code point, e.g. `\\a`, `\\π` or `\\newline`."""

    __slots__ = ()
    rank = CHAR

    def __init__(self, value: str):
        if not isinstance(value, str) or len(value) != 1:
            raise EdnTypeError(f"Char expects a single character, got {value!r}")
        self._init(value=value)


class Integer(Scalar):
    """A signed 64-bit integer."""

    __slots__ = ()
    rank = INTEGER

    def __init__(self, value: int):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise EdnTypeError(f"Integer expects an int, got {value!r}")
        value = int(value)
        if not INT64_MIN <= value <= INT64_MAX:
            raise EdnOverflowError(f"{value} does not fit in a signed 64-bit integer")
        self._init(value=value)

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value


class Float(Scalar):
    """An IEEE double with a total order.

    Unlike the native float comparison, every NaN equals every other NaN and
    sorts above all other floats, and -0.0 equals 0.0.
    """

    __slots__ = ()
    rank = FLOAT

    def __init__(self, value: float):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (float, int, np.floating, np.integer)):
            raise EdnTypeError(f"Float expects a float, got {value!r}")
        try:
            value = float(value)
        except OverflowError:
            raise EdnOverflowError("integer does not fit in a double") from None
        self._init(value=value)

    def _payload_key(self):
        if math.isnan(self.value):
            return (1, 0.0)
        # adding 0.0 folds -0.0 into 0.0
        return (0, self.value + 0.0)

    def __float__(self):
        return self.value
