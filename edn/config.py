from __future__ import annotations
import os

# Each nesting level costs a few Python frames, keep well below sys.getrecursionlimit().
DEFAULT_MAX_DEPTH = 200


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_max_depth() -> int:
    return int_from_env('EDN_MAX_DEPTH', DEFAULT_MAX_DEPTH)
