import pytest

from shaderlsp.operators import (
    ArithOp,
    CompoundOp,
    EqualityOp,
    LogicOp,
    Ordering,
    OrderingOp,
    UnaryOp,
)


@pytest.mark.parametrize(
    "op, symbol",
    [
        (UnaryOp.MINUS, "-"),
        (UnaryOp.NOT, "!"),
        (UnaryOp.REF, "&"),
        (UnaryOp.DEREF, "*"),
        (UnaryOp.BIT_NOT, "~"),
    ],
)
def test_unary_symbols(op, symbol):
    assert op.symbol() == symbol


def test_logic_symbols():
    assert LogicOp.AND.symbol() == "&&"
    assert LogicOp.OR.symbol() == "||"


@pytest.mark.parametrize(
    "op, symbol",
    [
        (ArithOp.ADD, "+"),
        (ArithOp.MUL, "*"),
        (ArithOp.SUB, "-"),
        (ArithOp.DIV, "/"),
        (ArithOp.SHL, "<<"),
        (ArithOp.SHR, ">>"),
        (ArithOp.BIT_XOR, "^"),
        (ArithOp.BIT_OR, "|"),
        (ArithOp.BIT_AND, "&"),
        (ArithOp.MODULO, "%"),
    ],
)
def test_arith_symbols(op, symbol):
    assert op.symbol() == symbol


def test_equality_symbols():
    assert EqualityOp(negated=True).symbol() == "=="
    assert EqualityOp(negated=False).symbol() == "!="


@pytest.mark.parametrize(
    "ordering, strict, symbol",
    [
        (Ordering.LESS, False, "<="),
        (Ordering.LESS, True, "<"),
        (Ordering.GREATER, False, ">="),
        (Ordering.GREATER, True, ">"),
    ],
)
def test_ordering_symbols(ordering, strict, symbol):
    assert OrderingOp(ordering, strict).symbol() == symbol


@pytest.mark.parametrize(
    "name",
    [
        "ADD",
        "MUL",
        "SUB",
        "DIV",
        "SHL",
        "SHR",
        "MODULO",
        "BIT_AND",
        "BIT_OR",
        "BIT_XOR",
    ],
)
def test_compound_maps_to_matching_arith(name):
    binary = CompoundOp[name].to_binary()
    assert binary is ArithOp[name]


def test_compound_mapping_is_injective():
    results = set(map(CompoundOp.to_binary, CompoundOp))
    assert len(results) == len(CompoundOp)
    assert results == set(ArithOp)


def test_compound_add_is_plus():
    assert CompoundOp.ADD.to_binary().symbol() == "+"
    assert CompoundOp.SHL.to_binary().symbol() == "<<"


def test_comparison_ops_are_hashable_values():
    assert OrderingOp(Ordering.LESS, True) == OrderingOp(Ordering.LESS, True)
    assert len({EqualityOp(True), EqualityOp(True), EqualityOp(False)}) == 2