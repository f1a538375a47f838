"""
SMT backend on z3.

Stripe variables become z3 Int constants named after the stripe triple;
formulas are translated structurally and asserted on a z3.Solver.
"""

import logging
from typing import Dict, Optional

import z3

from akari.constraints.formula import (
    And,
    BoolConst,
    Eq,
    Formula,
    Ge,
    Iff,
    Implies,
    IntVar,
    Le,
    Not,
    Or,
)
from akari.solver.backend import (
    Model,
    ModelIncompleteError,
    SolverBackend,
    SolverError,
    UnsupportedFormulaError,
    Verdict,
)
from akari.solver.factory import register_backend


logger = logging.getLogger(__name__)


class Z3Model(Model):
    """Wraps a z3.ModelRef, resolving variables by name."""

    def __init__(self, model: z3.ModelRef, ints: Dict[IntVar, z3.ArithRef]) -> None:
        self._model = model
        self._ints = ints

    def evaluate(self, var: IntVar) -> int:
        if var not in self._ints:
            raise ModelIncompleteError(f"Variable {var.name} was never asserted")
        # var appears in asserted formulas, so completion only fills in
        # values the solver left unconstrained
        value = self._model.eval(self._ints[var], model_completion=True)
        if not z3.is_int_value(value):
            raise ModelIncompleteError(f"Model has no value for variable {var.name}")
        return value.as_long()


@register_backend
class Z3Backend(SolverBackend):
    """
    z3 SMT backend.

    Args:
        timeout_sec: Optional wall-clock limit for check(); on expiry the
                     verdict is UNKNOWN.
    """
    name = "z3"
    description = "z3 SMT solver over integer stripe variables"

    def __init__(self, timeout_sec: Optional[float] = None) -> None:
        self.solver = z3.Solver()
        if timeout_sec is not None:
            self.solver.set("timeout", int(timeout_sec * 1000))
        self._ints: Dict[IntVar, z3.ArithRef] = {}
        self._cache: Dict[Formula, z3.BoolRef] = {}
        self._last: Optional[Verdict] = None

    def _int(self, var: IntVar) -> z3.ArithRef:
        if var not in self._ints:
            self._ints[var] = z3.Int(var.name)
        return self._ints[var]

    def translate(self, f: Formula) -> z3.BoolRef:
        """Translate a formula into a z3 boolean expression (memoized)."""
        if f in self._cache:
            return self._cache[f]

        if isinstance(f, BoolConst):
            expr = z3.BoolVal(f.value)
        elif isinstance(f, Eq):
            expr = self._int(f.var) == f.value
        elif isinstance(f, Ge):
            expr = self._int(f.var) >= f.value
        elif isinstance(f, Le):
            expr = self._int(f.var) <= f.value
        elif isinstance(f, Not):
            expr = z3.Not(self.translate(f.arg))
        elif isinstance(f, And):
            expr = z3.And([self.translate(a) for a in f.args]) if f.args else z3.BoolVal(True)
        elif isinstance(f, Or):
            expr = z3.Or([self.translate(a) for a in f.args]) if f.args else z3.BoolVal(False)
        elif isinstance(f, Implies):
            expr = z3.Implies(self.translate(f.lhs), self.translate(f.rhs))
        elif isinstance(f, Iff):
            expr = self.translate(f.lhs) == self.translate(f.rhs)
        else:
            raise UnsupportedFormulaError(f"Cannot translate {f!r} for z3")

        self._cache[f] = expr
        return expr

    def add(self, formula: Formula) -> None:
        self.solver.add(self.translate(formula))
        self._last = None

    def check(self) -> Verdict:
        result = self.solver.check()
        if result == z3.sat:
            self._last = Verdict.SAT
        elif result == z3.unsat:
            self._last = Verdict.UNSAT
        else:
            logger.info("z3 returned unknown: %s", self.solver.reason_unknown())
            self._last = Verdict.UNKNOWN
        return self._last

    def get_model(self) -> Model:
        if self._last is not Verdict.SAT:
            raise SolverError(f"No model available, last verdict: {self._last}")
        return Z3Model(self.solver.model(), dict(self._ints))
