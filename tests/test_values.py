import math
import pickle

import pytest

from edn import (
    Nil, NilType, Boolean, String, Char, Symbol, Keyword, Integer, Float,
    List, Vector, Map, Set, Tagged, EdnTypeError, EdnOverflowError,
)


# one value of every variant, in total order
ORDERED = [
    Nil,
    Boolean(False),
    String("a"),
    Char("a"),
    Symbol("a"),
    Keyword("a"),
    Integer(1),
    Float(1.0),
    List([]),
    Vector([]),
    Map(),
    Set(),
    Tagged("a", Nil),
]


def test_variants_order_by_rank_first():
    assert sorted(reversed(ORDERED)) == ORDERED
    for lo, hi in zip(ORDERED, ORDERED[1:]):
        assert lo < hi
        assert hi > lo
        assert lo != hi


def test_same_payload_different_variant_not_equal():
    assert String("a") != Char("a")
    assert Symbol("a") != Keyword("a")
    assert Integer(1) != Float(1.0)
    assert List([Integer(1)]) != Vector([Integer(1)])
    assert Boolean(True) != Integer(1)


@pytest.mark.parametrize(
    "smaller,larger",
    [
        (Boolean(False), Boolean(True)),
        (Integer(-5), Integer(3)),
        (String("abc"), String("abd")),
        (Float(-math.inf), Float(-1.0)),
        (Float(math.inf), Float(math.nan)),
        (List([Integer(1)]), List([Integer(1), Integer(0)])),
        (Vector([Integer(1), Integer(9)]), Vector([Integer(2)])),
        (Tagged("a", Integer(9)), Tagged("b", Integer(0))),
        (Tagged("a", Integer(0)), Tagged("a", Integer(9))),
        (Set([Integer(1)]), Set([Integer(2)])),
        (Map({Integer(1): Integer(9)}), Map({Integer(2): Integer(0)})),
    ]
)
def test_payload_order(smaller, larger):
    assert smaller < larger
    assert smaller <= larger
    assert not larger < smaller


def test_float_total_order():
    nan = Float(math.nan)
    assert nan == Float(float("nan"))
    assert hash(nan) == hash(Float(float("nan")))
    assert Float(-0.0) == Float(0.0)
    assert hash(Float(-0.0)) == hash(Float(0.0))
    assert sorted([nan, Float(1.0), Float(-math.inf)]) == [Float(-math.inf), Float(1.0), nan]


def test_nan_is_usable_as_key_and_member():
    assert len(Set([Float(math.nan), Float(math.nan)])) == 1
    m = Map([(Float(math.nan), Integer(1)), (Float(math.nan), Integer(2))])
    assert m[Float(math.nan)] == Integer(2)


def test_map_last_write_wins():
    m = Map([(Keyword("a"), Integer(1)), (Keyword("b"), Integer(2)), (Keyword("a"), Integer(3))])
    assert len(m) == 2
    assert m[Keyword("a")] == Integer(3)
    assert m.get(Keyword("zzz")) is None
    assert Keyword("b") in m


def test_map_iterates_in_key_order():
    m = Map({Integer(2): Nil, Keyword("k"): Nil, String("s"): Nil})
    assert list(m) == [String("s"), Keyword("k"), Integer(2)]
    assert m.keys() == (String("s"), Keyword("k"), Integer(2))
    assert m.values() == (Nil, Nil, Nil)


def test_map_equality_ignores_insertion_order():
    a = Map([(Integer(1), Integer(2)), (Integer(3), Integer(4))])
    b = Map([(Integer(3), Integer(4)), (Integer(1), Integer(2))])
    assert a == b
    assert hash(a) == hash(b)


def test_set_dedup_and_order():
    s = Set([Integer(3), Integer(1), Integer(3), Integer(2)])
    assert len(s) == 3
    assert list(s) == [Integer(1), Integer(2), Integer(3)]
    assert Integer(2) in s
    assert Integer(4) not in s


def test_collections_as_keys():
    key = Vector([Integer(1), Keyword("x")])
    m = Map({key: String("v")})
    assert m[Vector([Integer(1), Keyword("x")])] == String("v")


def test_values_are_immutable():
    with pytest.raises(AttributeError):
        Integer(1).value = 2
    v = Vector([Integer(1)])
    with pytest.raises(AttributeError):
        v.items = ()
    with pytest.raises(AttributeError):
        del Tagged("t", Nil).value


def test_nil_is_a_singleton():
    assert NilType() is Nil
    assert not Nil
    assert pickle.loads(pickle.dumps(Nil)) is Nil


@pytest.mark.parametrize("value", [2 ** 63, -(2 ** 63) - 1])
def test_integer_overflow(value):
    with pytest.raises(EdnOverflowError):
        Integer(value)


def test_integer_bounds():
    assert Integer(2 ** 63 - 1).value == 2 ** 63 - 1
    assert Integer(-(2 ** 63)).value == -(2 ** 63)


@pytest.mark.parametrize(
    "build",
    [
        lambda: Integer("1"),
        lambda: Integer(True),
        lambda: Float("1.0"),
        lambda: String(1),
        lambda: Char("ab"),
        lambda: Char(""),
        lambda: Symbol(""),
        lambda: Keyword(3),
        lambda: Tagged("", Nil),
        lambda: Tagged("t", 1),
        lambda: List([1, 2]),
        lambda: Map([(Integer(1),)]),
        lambda: Set([None]),
    ]
)
def test_constructors_reject_bad_payloads(build):
    with pytest.raises(EdnTypeError):
        build()


def test_sequence_access():
    v = Vector([Integer(1), Integer(2), Integer(3)])
    assert len(v) == 3
    assert v[0] == Integer(1)
    assert v[1:] == Vector([Integer(2), Integer(3)])
    assert list(v) == [Integer(1), Integer(2), Integer(3)]


def test_symbol_namespace():
    assert Symbol("my.ns/name").namespace == "my.ns"
    assert Symbol("name").namespace is None
    assert Symbol("/").namespace is None
    assert Keyword("a/b").name == "a/b"


def test_repr():
    assert repr(Vector([Integer(1), Nil])) == "Vector([Integer(1), Nil])"
    assert repr(Tagged("t", Keyword("k"))) == "Tagged('t', Keyword('k'))"
    assert repr(Map({Integer(1): String("x")})) == "Map({Integer(1): String('x')})"


def test_float_overflow():
    with pytest.raises(EdnOverflowError):
        Float(10 ** 400)
