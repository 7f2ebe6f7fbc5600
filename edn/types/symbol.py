from __future__ import annotations
import sys

from edn.errors import EdnTypeError
from edn.types.value import Scalar, SYMBOL, KEYWORD


class Named(Scalar):
    __slots__ = ()

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise EdnTypeError(f"{type(self).__name__} name must be a non-empty str, got {name!r}")
        # Intern to ensure fast equality/hash and reduce memory
        self._init(value=sys.intern(name))

    @property
    def name(self) -> str:
        return self.value

    @property
    def namespace(self) -> str | None:
        """The part before `/` in `ns/name`, or None."""
        ns, sep, rest = self.value.partition("/")
        return ns if sep and ns and rest else None


class Symbol(Named):
    """An unquoted identifier such as `foo`, `+` or `my.ns/name`."""

    __slots__ = ()
    rank = SYMBOL


class Keyword(Named):
    """`:name`; the colon is not part of the stored name."""

    __slots__ = ()
    rank = KEYWORD
