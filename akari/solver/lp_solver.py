"""
ILP backend on PuLP / CBC.

This module turns the boolean formulas over bounded integer variables into a
0/1 integer program:

  - every variable v with domain [lo, hi] gets binaries x[v,k], k in lo..hi,
    with sum_k x[v,k] = 1 (v takes exactly one value)
  - atoms become linear expressions over those binaries:
        v == k  ->  x[v,k]
        v >= k  ->  sum_{j>=k} x[v,j]
        v <= k  ->  sum_{j<=k} x[v,j]
  - Not / And / Or / Implies / Iff are linearised with auxiliary binaries
  - every asserted formula is forced to 1

Domains are read from the asserted top-level Ge / Le atoms (the builder's
domain constraints). A variable without both bounds cannot be encoded.

Uses standard pulp library (no custom solver implementation).
"""

import logging
from typing import Dict, List, Optional, Tuple, Union

import pulp

from akari.config.types import OBJECTIVES
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
    variables_of,
)
from akari.solver.backend import (
    DictModel,
    Model,
    SolverBackend,
    SolverError,
    UnsupportedFormulaError,
    Verdict,
)
from akari.solver.factory import register_backend


logger = logging.getLogger(__name__)

# An encoded formula is either a constant 0/1 or a pulp expression in [0, 1]
Encoded = Union[int, pulp.LpAffineExpression, pulp.LpVariable]


def _is_const(e: Encoded) -> bool:
    return isinstance(e, int)


@register_backend
class PulpBackend(SolverBackend):
    """
    PuLP/CBC backend.

    Args:
        timeout_sec: Optional CBC time limit in seconds. When the limit hits
                     before a solution is found the verdict is UNKNOWN.
        objective:
            - "none":      zero objective (feasibility only)
            - "min_bulbs": minimise the number of variables not sitting at
                           their upper bound (the "no bulb" sentinel)
    """
    name = "pulp"
    description = "PuLP/CBC 0-1 integer program over one-hot stripe values"

    def __init__(self, timeout_sec: Optional[float] = None, objective: str = "none") -> None:
        if objective not in OBJECTIVES:
            raise ValueError(f"Unknown objective: {objective}")
        self.timeout_sec = timeout_sec
        self.objective = objective
        self.formulas: List[Formula] = []
        self._last: Optional[Verdict] = None
        self._model: Optional[DictModel] = None

        # Per-check state
        self._prob: Optional[pulp.LpProblem] = None
        self._x: Dict[IntVar, Dict[int, pulp.LpVariable]] = {}
        self._memo: Dict[Formula, Encoded] = {}
        self._num_aux = 0

    def add(self, formula: Formula) -> None:
        self.formulas.append(formula)
        self._last = None
        self._model = None

    # ------------------------------------------------------------------
    # Domains
    # ------------------------------------------------------------------

    def _domains(self) -> Dict[IntVar, Tuple[int, int]]:
        """
        Collect [lo, hi] for every variable from top-level bound atoms.

        Raises:
            UnsupportedFormulaError: if some variable lacks a lower or upper bound
        """
        lows: Dict[IntVar, int] = {}
        highs: Dict[IntVar, int] = {}
        for f in self.formulas:
            if isinstance(f, Ge):
                lows[f.var] = max(lows.get(f.var, f.value), f.value)
            elif isinstance(f, Le):
                highs[f.var] = min(highs.get(f.var, f.value), f.value)

        used = set()
        for f in self.formulas:
            used |= variables_of(f)

        domains = {}
        for var in sorted(used, key=lambda v: v.name):
            if var not in lows or var not in highs:
                raise UnsupportedFormulaError(
                    f"Variable {var.name} needs asserted lower and upper bounds for the ILP encoding"
                )
            domains[var] = (lows[var], highs[var])
        return domains

    # ------------------------------------------------------------------
    # Linearisation
    # ------------------------------------------------------------------

    def _aux(self) -> pulp.LpVariable:
        self._num_aux += 1
        return pulp.LpVariable(f"aux_{self._num_aux}", cat=pulp.LpBinary)

    def _encode(self, f: Formula) -> Encoded:
        if f in self._memo:
            return self._memo[f]

        if isinstance(f, BoolConst):
            e: Encoded = 1 if f.value else 0
        elif isinstance(f, Eq):
            e = self._x[f.var].get(f.value, 0)
        elif isinstance(f, (Ge, Le)):
            if isinstance(f, Ge):
                chosen = [x for k, x in self._x[f.var].items() if k >= f.value]
            else:
                chosen = [x for k, x in self._x[f.var].items() if k <= f.value]
            if not chosen:
                e = 0
            elif len(chosen) == len(self._x[f.var]):
                e = 1
            else:
                e = pulp.lpSum(chosen)
        elif isinstance(f, Not):
            e = 1 - self._encode(f.arg)
        elif isinstance(f, And):
            e = self._encode_and([self._encode(a) for a in f.args])
        elif isinstance(f, Or):
            e = self._encode_or([self._encode(a) for a in f.args])
        elif isinstance(f, Implies):
            e = self._encode(Or((Not(f.lhs), f.rhs)))
        elif isinstance(f, Iff):
            e = self._encode_iff(self._encode(f.lhs), self._encode(f.rhs))
        else:
            raise UnsupportedFormulaError(f"Cannot linearise {f!r}")

        self._memo[f] = e
        return e

    def _encode_and(self, parts: List[Encoded]) -> Encoded:
        if any(_is_const(p) and p == 0 for p in parts):
            return 0
        terms = [p for p in parts if not _is_const(p)]
        if not terms:
            return 1
        if len(terms) == 1:
            return terms[0]
        b = self._aux()
        for t in terms:
            self._prob += b <= t
        self._prob += b >= pulp.lpSum(terms) - (len(terms) - 1)
        return b

    def _encode_or(self, parts: List[Encoded]) -> Encoded:
        if any(_is_const(p) and p == 1 for p in parts):
            return 1
        terms = [p for p in parts if not _is_const(p)]
        if not terms:
            return 0
        if len(terms) == 1:
            return terms[0]
        b = self._aux()
        for t in terms:
            self._prob += b >= t
        self._prob += b <= pulp.lpSum(terms)
        return b

    def _encode_iff(self, a: Encoded, b: Encoded) -> Encoded:
        if _is_const(a) and _is_const(b):
            return 1 if a == b else 0
        if _is_const(a):
            return b if a == 1 else 1 - b
        if _is_const(b):
            return a if b == 1 else 1 - a
        z = self._aux()
        self._prob += z <= 1 - a + b
        self._prob += z <= 1 + a - b
        self._prob += z >= a + b - 1
        self._prob += z >= 1 - a - b
        return z

    # ------------------------------------------------------------------
    # Solving
    # ------------------------------------------------------------------

    def check(self) -> Verdict:
        self._model = None
        domains = self._domains()

        if any(lo > hi for lo, hi in domains.values()):
            logger.debug("Empty variable domain, model is infeasible")
            self._last = Verdict.UNSAT
            return self._last

        # 1. Create model
        self._prob = pulp.LpProblem("akari_ilp", pulp.LpMinimize)
        self._memo = {}
        self._num_aux = 0

        # 2. One-hot value binaries per variable
        self._x = {}
        for idx, (var, (lo, hi)) in enumerate(domains.items()):
            self._x[var] = {
                k: pulp.LpVariable(f"v{idx}_{k - lo}", cat=pulp.LpBinary)
                for k in range(lo, hi + 1)
            }
            self._prob += pulp.lpSum(self._x[var].values()) == 1

        # 3. Assert every formula
        for f in self.formulas:
            e = self._encode(f)
            if _is_const(e):
                if e == 0:
                    logger.debug("Formula %s is constant false", f)
                    self._last = Verdict.UNSAT
                    return self._last
                continue
            self._prob += e == 1

        if not self._x and self._num_aux == 0:
            # Nothing to decide
            self._model = DictModel({})
            self._last = Verdict.SAT
            return self._last

        # 4. Set objective
        if self.objective == "min_bulbs":
            self._prob += pulp.lpSum(
                1 - values[max(values)] for values in self._x.values()
            )
        else:
            self._prob += 0

        # 5. Solve using pulp's CBC solver
        solver_kwargs = {"msg": False}
        if self.timeout_sec is not None:
            solver_kwargs["timeLimit"] = self.timeout_sec
        status = self._prob.solve(pulp.PULP_CBC_CMD(**solver_kwargs))
        status_str = pulp.LpStatus[status]
        logger.debug("CBC status: %s", status_str)

        if status_str == "Optimal":
            self._model = self._extract_model()
            self._last = Verdict.SAT
        elif status_str == "Infeasible":
            self._last = Verdict.UNSAT
        else:
            self._last = Verdict.UNKNOWN
        return self._last

    def _extract_model(self) -> DictModel:
        values: Dict[str, int] = {}
        for var, binaries in self._x.items():
            chosen = [
                k for k, x in binaries.items()
                if x.varValue is not None and x.varValue > 0.5
            ]
            # Sanity check: one-hot per variable
            if len(chosen) != 1:
                raise SolverError(
                    f"One-hot constraint violated for {var.name}: values {chosen}"
                )
            values[var.name] = chosen[0]
        return DictModel(values)

    def get_model(self) -> Model:
        if self._last is not Verdict.SAT or self._model is None:
            raise SolverError(f"No model available, last verdict: {self._last}")
        return self._model
