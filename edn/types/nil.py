from __future__ import annotations

from edn.types.value import Value, NIL


class NilType(Value):
    __slots__ = ()
    rank = NIL

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def _payload_key(self):
        return ()

    def __repr__(self): return "Nil"
    def __bool__(self): return False

    def __reduce__(self):
        return NilType, ()


Nil = NilType()
