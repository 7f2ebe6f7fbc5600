from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from edn.types.value import Value
from edn.types.containers import Set
from edn.types.tagged import Tagged

if TYPE_CHECKING:
    from edn.reader.parser import Reader

# (reader, start) -> Value, where start is the offset of the `#`
DispatchFn = Callable[["Reader", int], Value]


class DispatchMacros:
    """
    Registry of the forms introduced by `#`.
    Maps the character following `#` to the function reading the rest of
    the form. `fallback` handles every character accepted by `accepts_fallback`,
    which is how `#tag value` is read.
    """

    def __init__(self):
        self.macros: dict[str, DispatchFn] = {}
        self.fallback: DispatchFn | None = None
        self.accepts_fallback: Callable[[str], bool] = lambda ch: False

    def define(self, char: str, fn: DispatchFn) -> None:
        """Register a dispatch macro for the character after `#`."""
        self.macros[char] = fn

    def define_fallback(self, accepts: Callable[[str], bool], fn: DispatchFn) -> None:
        self.accepts_fallback = accepts
        self.fallback = fn

    def is_macro(self, char: str) -> bool:
        return char in self.macros or (self.fallback is not None and self.accepts_fallback(char))

    def dispatch(self, char: str, reader: "Reader", start: int) -> Value:
        if char in self.macros:
            return self.macros[char](reader, start)
        if self.fallback is not None and self.accepts_fallback(char):
            return self.fallback(reader, start)
        raise ValueError(f"No dispatch macro defined for #{char}")


def read_set(reader: "Reader", start: int) -> Value:
    """`#{a b c}`"""
    reader.advance(2)
    return Set(reader.read_delimited("#{", "}", start))


def read_tagged(reader: "Reader", start: int) -> Value:
    """`#tag value`, the tag name may contain `/` as in `#my.app/point`."""
    reader.advance(1)
    name_start = reader.pos
    tag = reader.scan_symbol()
    with reader.nested(start, "#" + tag):
        reader.skip_whitespace()
        if reader.at_end() or reader.peek() in CLOSERS:
            raise reader.error(name_start, reader.pos, "malformed tagged value")
        return Tagged(tag, reader.read_form())


CLOSERS = frozenset(")]}")


# -------------------------
# Single global instance
# -------------------------
dispatch_macros: DispatchMacros = DispatchMacros()

dispatch_macros.define("{", read_set)
