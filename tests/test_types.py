import pytest

from explang.types import (
    TypeKind,
    align_of,
    boolean_type,
    function_type,
    i64_type,
    nil_type,
    size_of,
    tuple_type,
)


def test_scalar_names():
    assert str(nil_type()) == "nil"
    assert str(boolean_type()) == "bool"
    assert str(i64_type()) == "i64"


def test_tuple_and_function_names():
    pair = tuple_type([i64_type(), boolean_type()])
    assert str(pair) == "(i64, bool)"
    fn = function_type(nil_type(), [i64_type(), boolean_type()])
    assert str(fn) == "fn (i64, bool) -> nil"


def test_structural_equality():
    assert i64_type() == i64_type()
    assert nil_type() != i64_type()
    assert tuple_type([i64_type(), nil_type()]) == tuple_type(
        (i64_type(), nil_type())
    )
    assert tuple_type([i64_type()]) != tuple_type([i64_type(), i64_type()])
    assert function_type(i64_type(), [boolean_type()]) == function_type(
        i64_type(), [boolean_type()]
    )
    assert function_type(i64_type(), []) != function_type(nil_type(), [])


def test_types_are_hashable_consistently():
    a = tuple_type([i64_type(), boolean_type()])
    b = tuple_type([i64_type(), boolean_type()])
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_is_scalar():
    assert nil_type().is_scalar()
    assert boolean_type().is_scalar()
    assert i64_type().is_scalar()
    assert not tuple_type([i64_type(), i64_type()]).is_scalar()
    assert not function_type(nil_type(), []).is_scalar()


def test_kinds():
    assert tuple_type([]).kind is TypeKind.TUPLE
    assert function_type(nil_type(), []).kind is TypeKind.FUNCTION


def test_scalar_size_and_alignment():
    assert size_of(i64_type()) == 8
    assert size_of(nil_type()) == size_of(i64_type())
    assert size_of(boolean_type()) == size_of(i64_type())
    assert align_of(i64_type()) == size_of(i64_type())


def test_tuple_size_is_sum_of_elements():
    inner = tuple_type([i64_type(), boolean_type()])
    outer = tuple_type([inner, nil_type()])
    assert size_of(inner) == size_of(i64_type()) + size_of(boolean_type())
    assert size_of(outer) == size_of(inner) + size_of(nil_type())
    assert align_of(outer) == align_of(i64_type())


def test_function_has_no_layout():
    fn = function_type(nil_type(), [i64_type()])
    with pytest.raises(ValueError):
        size_of(fn)
    with pytest.raises(ValueError):
        align_of(fn)