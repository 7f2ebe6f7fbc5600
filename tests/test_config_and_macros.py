import pytest

from edn import Reader, Set, Tagged, Integer, Symbol
from edn.config import get_max_depth, DEFAULT_MAX_DEPTH
from edn.reader.reader_macros import DispatchMacros, dispatch_macros, read_set


def test_default_max_depth(monkeypatch):
    monkeypatch.delenv("EDN_MAX_DEPTH", raising=False)
    assert get_max_depth() == DEFAULT_MAX_DEPTH


def test_max_depth_from_env(max_depth_env):
    max_depth_env(42)
    assert get_max_depth() == 42
    assert Reader("x").max_depth == 42


def test_explicit_max_depth_overrides_env(max_depth_env):
    max_depth_env(42)
    assert Reader("x", max_depth=5).max_depth == 5


@pytest.mark.parametrize("raw", ["zero", "0", "-3"])
def test_bad_max_depth_env(monkeypatch, raw):
    monkeypatch.setenv("EDN_MAX_DEPTH", raw)
    with pytest.raises(ValueError):
        get_max_depth()


def test_builtin_dispatch_macros():
    assert dispatch_macros.is_macro("{")
    assert dispatch_macros.is_macro("t")  # #tag
    assert dispatch_macros.is_macro("_")
    assert not dispatch_macros.is_macro("(")
    assert not dispatch_macros.is_macro("")


def test_dispatch_macros_registry():
    macros = DispatchMacros()
    assert not macros.is_macro("{")
    macros.define("{", read_set)
    assert macros.is_macro("{")
    reader = Reader("#{1 1}")
    assert macros.dispatch("{", reader, 0) == Set([Integer(1)])
    with pytest.raises(ValueError):
        macros.dispatch("x", reader, 0)


def test_underscore_tag_is_a_tagged_value():
    assert Reader("#_foo bar").read() == Tagged("_foo", Symbol("bar"))
