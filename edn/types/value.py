"""
Base class of the edn value model.

Every variant is an immutable subclass of `Value`. Values are totally
ordered: first by the variant's rank, then by payload. Equality and
hashing are derived from the same sort key, so any Value can be used as
a Map key or a Set member and containers print in a canonical order.

    Nil < Boolean < String < Char < Symbol < Keyword < Integer < Float
        < List < Vector < Map < Set < Tagged
"""

from __future__ import annotations

from typing import Any, ClassVar

from edn.errors import EdnTypeError

# Variant ranks, in total order.
NIL, BOOLEAN, STRING, CHAR, SYMBOL, KEYWORD, INTEGER, FLOAT, LIST, VECTOR, MAP, SET, TAGGED = range(13)


class Value:
    __slots__ = ("_key",)

    rank: ClassVar[int]

    def _payload_key(self) -> Any:
        raise NotImplementedError

    def sort_key(self) -> tuple:
        try:
            return self._key
        except AttributeError:
            key = (self.rank, self._payload_key())
            object.__setattr__(self, "_key", key)
            return key

    # Values never change after construction.
    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _init(self, **fields) -> None:
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.sort_key() != other.sort_key()

    def __lt__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def __hash__(self) -> int:
        return hash(self.sort_key())

    def __str__(self) -> str:
        from edn.printer import print_value
        return print_value(self)


class Scalar(Value):
    """A Value wrapping a single Python primitive in `.value`."""

    __slots__ = ("value",)

    def _payload_key(self):
        return self.value

    def __repr__(self):
        return f"{type(self).__name__}({self.value!r})"


def ensure_value(obj: Any, context: str) -> Value:
    if not isinstance(obj, Value):
        raise EdnTypeError(f"{context} expects edn Values, got {type(obj).__name__}: {obj!r}")
    return obj
