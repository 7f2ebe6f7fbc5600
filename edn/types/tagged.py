from __future__ import annotations

from edn.errors import EdnTypeError
from edn.types.value import Value, ensure_value, TAGGED


class Tagged(Value):
    """`#tag value`: a named wrapper around exactly one Value.

    Tags are not resolved against application types, the reader keeps
    them as they are written.
    """

    __slots__ = ("tag", "value")
    rank = TAGGED

    def __init__(self, tag: str, value: Value):
        if not isinstance(tag, str) or not tag:
            raise EdnTypeError(f"Tagged expects a non-empty tag name, got {tag!r}")
        self._init(tag=tag, value=ensure_value(value, "Tagged"))

    def _payload_key(self):
        return (self.tag, self.value.sort_key())

    def __repr__(self):
        return f"Tagged({self.tag!r}, {self.value!r})"
