"""
Container variants: List, Vector, Map and Set.

Maps and Sets are kept in canonical (total) order of their keys/members.
Duplicate Map keys resolve to the last value written, duplicate Set members
are dropped.
"""

from __future__ import annotations

from collections import abc
from typing import Any, Iterable, Iterator, Mapping

from edn.errors import EdnTypeError
from edn.types.value import Value, ensure_value, LIST, VECTOR, MAP, SET


class Sequence(Value):
    __slots__ = ("items",)

    def __init__(self, items: Iterable[Value] = ()):
        name = type(self).__name__
        self._init(items=tuple(ensure_value(x, name) for x in items))

    def _payload_key(self):
        return tuple(x.sort_key() for x in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self.items[index])
        return self.items[index]

    def __repr__(self):
        return f"{type(self).__name__}({list(self.items)!r})"


class List(Sequence):
    """`(a b c)`"""
    __slots__ = ()
    rank = LIST


class Vector(Sequence):
    """`[a b c]`"""
    __slots__ = ()
    rank = VECTOR


class Map(Value):
    """`{k v ...}`; iteration yields keys in total order."""

    __slots__ = ("_index", "_keys")
    rank = MAP

    def __init__(self, entries: Mapping[Value, Value] | Iterable[tuple[Value, Value]] = ()):
        if isinstance(entries, (abc.Mapping, Map)):
            entries = entries.items()
        index: dict[Value, Value] = {}
        for entry in entries:
            try:
                key, val = entry
            except (TypeError, ValueError):
                raise EdnTypeError(f"Map entries must be (key, value) pairs, got {entry!r}") from None
            ensure_value(key, "Map")
            ensure_value(val, "Map")
            # last write wins, for the key object as well as the value
            index.pop(key, None)
            index[key] = val
        self._init(_index=index, _keys=tuple(sorted(index)))

    def _payload_key(self):
        return tuple((k.sort_key(), self._index[k].sort_key()) for k in self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __getitem__(self, key: Value) -> Value:
        return self._index[key]

    def get(self, key: Value, default: Any = None) -> Any:
        return self._index.get(key, default)

    def keys(self) -> tuple[Value, ...]:
        return self._keys

    def values(self) -> tuple[Value, ...]:
        return tuple(self._index[k] for k in self._keys)

    def items(self) -> tuple[tuple[Value, Value], ...]:
        return tuple((k, self._index[k]) for k in self._keys)

    def __repr__(self):
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"Map({{{inner}}})"


class Set(Value):
    """`#{a b c}`; iteration yields members in total order."""

    __slots__ = ("_members", "_ordered")
    rank = SET

    def __init__(self, members: Iterable[Value] = ()):
        unique = dict.fromkeys(ensure_value(x, "Set") for x in members)
        self._init(_members=frozenset(unique), _ordered=tuple(sorted(unique)))

    def _payload_key(self):
        return tuple(x.sort_key() for x in self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._ordered)

    def __contains__(self, member: object) -> bool:
        return member in self._members

    def __repr__(self):
        return f"Set({list(self._ordered)!r})"
