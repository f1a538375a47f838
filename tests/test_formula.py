"""
Tests for the formula AST: structural identity and evaluation.
"""

import pytest

from akari.constraints.formula import (
    FALSE,
    TRUE,
    And,
    Eq,
    IntVar,
    Or,
    conj,
    disj,
    eq,
    evaluate,
    ge,
    iff,
    implies,
    le,
    neg,
    variables_of,
)


A = IntVar("(0,0-1)")
B = IntVar("(1,0-0)")


def test_structural_equality_and_hash():
    f1 = iff(conj([eq(A, 0), eq(B, 0)]), neg(disj([])))
    f2 = iff(conj([eq(A, 0), eq(B, 0)]), neg(disj([])))

    assert f1 == f2
    assert hash(f1) == hash(f2)
    assert len({f1, f2}) == 1
    assert eq(A, 1) != eq(A, 2)
    assert eq(A, 1) != eq(B, 1)


def test_variables_are_identified_by_name():
    assert IntVar("(0,0-1)") == A
    assert variables_of(implies(eq(A, 0), ge(B, 0))) == {A, B}


def test_empty_connectives():
    assert evaluate(And(()), {}) is True
    assert evaluate(Or(()), {}) is False
    assert evaluate(TRUE, {}) and not evaluate(FALSE, {})


def test_evaluate_atoms():
    assignment = {A: 1, B: 0}
    assert evaluate(eq(A, 1), assignment)
    assert evaluate(ge(A, 1), assignment) and not evaluate(ge(A, 2), assignment)
    assert evaluate(le(B, 0), assignment) and not evaluate(le(A, 0), assignment)


def test_evaluate_connectives():
    assignment = {A: 2, B: 0}
    a_bulb = eq(A, 0)   # false
    b_bulb = eq(B, 0)   # true

    assert evaluate(neg(a_bulb), assignment)
    assert evaluate(disj([a_bulb, b_bulb]), assignment)
    assert not evaluate(conj([a_bulb, b_bulb]), assignment)
    assert evaluate(implies(a_bulb, FALSE), assignment)
    assert not evaluate(implies(b_bulb, a_bulb), assignment)
    assert evaluate(iff(a_bulb, neg(b_bulb)), assignment)


def test_evaluate_missing_variable():
    with pytest.raises(KeyError):
        evaluate(eq(A, 0), {B: 0})


def test_str_is_readable():
    assert str(eq(A, 0)) == "(0,0-1) == 0"
    assert str(conj([])) == "true"
    assert str(disj([eq(A, 0), eq(B, 0)])) == "((0,0-1) == 0 | (1,0-0) == 0)"
    assert isinstance(eq(A, 0), Eq)
