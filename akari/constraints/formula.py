"""
Boolean formulas over integer stripe variables.

Formulas are immutable trees with structural equality and hashing, so the
constraint builder can deduplicate them and backends can memoize
translations per sub-formula.

Atoms compare one integer variable with a constant:

    Eq(v, 3)    v == 3
    Ge(v, 0)    v >= 0
    Le(v, 5)    v <= 5

Connectives: Not, And, Or, Implies, Iff, plus BoolConst.
And() with no arguments is true, Or() with no arguments is false.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Set, Tuple, Union


@dataclass(frozen=True)
class IntVar:
    """Integer decision variable identified by name."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class BoolConst:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Eq:
    var: IntVar
    value: int

    def __str__(self) -> str:
        return f"{self.var} == {self.value}"


@dataclass(frozen=True)
class Ge:
    var: IntVar
    value: int

    def __str__(self) -> str:
        return f"{self.var} >= {self.value}"


@dataclass(frozen=True)
class Le:
    var: IntVar
    value: int

    def __str__(self) -> str:
        return f"{self.var} <= {self.value}"


@dataclass(frozen=True)
class Not:
    arg: Formula

    def __str__(self) -> str:
        return f"!({self.arg})"


@dataclass(frozen=True)
class And:
    args: Tuple[Formula, ...]

    def __str__(self) -> str:
        return "(" + " & ".join(str(a) for a in self.args) + ")" if self.args else "true"


@dataclass(frozen=True)
class Or:
    args: Tuple[Formula, ...]

    def __str__(self) -> str:
        return "(" + " | ".join(str(a) for a in self.args) + ")" if self.args else "false"


@dataclass(frozen=True)
class Implies:
    lhs: Formula
    rhs: Formula

    def __str__(self) -> str:
        return f"({self.lhs} -> {self.rhs})"


@dataclass(frozen=True)
class Iff:
    lhs: Formula
    rhs: Formula

    def __str__(self) -> str:
        return f"({self.lhs} <-> {self.rhs})"


Atom = Union[Eq, Ge, Le]
Formula = Union[BoolConst, Eq, Ge, Le, Not, And, Or, Implies, Iff]

TRUE = BoolConst(True)
FALSE = BoolConst(False)


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def eq(var: IntVar, value: int) -> Eq:
    return Eq(var, int(value))


def ge(var: IntVar, value: int) -> Ge:
    return Ge(var, int(value))


def le(var: IntVar, value: int) -> Le:
    return Le(var, int(value))


def neg(f: Formula) -> Not:
    return Not(f)


def conj(fs: Iterable[Formula]) -> And:
    return And(tuple(fs))


def disj(fs: Iterable[Formula]) -> Or:
    return Or(tuple(fs))


def implies(lhs: Formula, rhs: Formula) -> Implies:
    return Implies(lhs, rhs)


def iff(lhs: Formula, rhs: Formula) -> Iff:
    return Iff(lhs, rhs)


# ---------------------------------------------------------------------------
# Traversal / evaluation
# ---------------------------------------------------------------------------

def children(f: Formula) -> Tuple[Formula, ...]:
    """Direct sub-formulas of f (empty for atoms and constants)."""
    if isinstance(f, Not):
        return (f.arg,)
    if isinstance(f, (And, Or)):
        return f.args
    if isinstance(f, (Implies, Iff)):
        return (f.lhs, f.rhs)
    return ()


def iter_atoms(f: Formula) -> Iterator[Atom]:
    """Yield every comparison atom in f (with repeats), depth-first."""
    stack = [f]
    while stack:
        node = stack.pop()
        if isinstance(node, (Eq, Ge, Le)):
            yield node
        else:
            stack.extend(reversed(children(node)))


def variables_of(f: Formula) -> Set[IntVar]:
    return {atom.var for atom in iter_atoms(f)}


def evaluate(f: Formula, assignment: Dict[IntVar, int]) -> bool:
    """
    Evaluate a formula under a concrete assignment.

    Raises:
        KeyError: if a variable used by f has no value in assignment
    """
    if isinstance(f, BoolConst):
        return f.value
    if isinstance(f, Eq):
        return assignment[f.var] == f.value
    if isinstance(f, Ge):
        return assignment[f.var] >= f.value
    if isinstance(f, Le):
        return assignment[f.var] <= f.value
    if isinstance(f, Not):
        return not evaluate(f.arg, assignment)
    if isinstance(f, And):
        return all(evaluate(a, assignment) for a in f.args)
    if isinstance(f, Or):
        return any(evaluate(a, assignment) for a in f.args)
    if isinstance(f, Implies):
        return (not evaluate(f.lhs, assignment)) or evaluate(f.rhs, assignment)
    if isinstance(f, Iff):
        return evaluate(f.lhs, assignment) == evaluate(f.rhs, assignment)
    raise TypeError(f"Not a formula: {f!r}")
