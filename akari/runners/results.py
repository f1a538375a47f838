"""
Result and diagnostics structures for a solve run.

SolveDiagnostics captures everything about one attempt: verdict, encoding
sizes, timings, the bulbs placed and any rule violations found when the
decoded board was re-checked.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from akari.solver.backend import Verdict


@dataclass
class SolveDiagnostics:
    """
    Diagnostics for a single solve attempt.

    Attributes:
        verdict: Sat / Unsat / Unknown from the backend
        backend: Backend name used
        shape: (rows, cols) of the board
        num_stripes: Number of stripes (= number of variables)
        num_constraints: Deduplicated formulas handed to the backend
        family_counts: Formulas per family ("domain", "clue", "illumination")
        bulbs: Decoded bulb positions (empty unless Sat)
        encode_sec: Time spent building constraints
        solve_sec: Time spent inside the backend (assert + check)
        violations: Rule violations of the decoded board (only when verified)
        verified: Whether the decoded board was re-checked
    """
    verdict: Verdict
    backend: str
    shape: tuple
    num_stripes: int
    num_constraints: int
    family_counts: Dict[str, int] = field(default_factory=dict)
    bulbs: List[tuple] = field(default_factory=list)
    encode_sec: float = 0.0
    solve_sec: float = 0.0
    violations: List[Dict] = field(default_factory=list)
    verified: bool = False

    @property
    def num_variables(self) -> int:
        return self.num_stripes

    @property
    def is_sat(self) -> bool:
        return self.verdict is Verdict.SAT

    @property
    def elapsed_sec(self) -> float:
        return self.encode_sec + self.solve_sec

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly dict (verdict as its display string, tuples as lists)."""
        data = asdict(self)
        data["verdict"] = str(self.verdict)
        data["shape"] = list(self.shape)
        data["bulbs"] = [list(b) for b in self.bulbs]
        data["num_variables"] = self.num_variables
        return data


def summarize(diag: SolveDiagnostics) -> str:
    """One-line human summary of a solve attempt."""
    parts = [
        f"{diag.verdict}",
        f"backend={diag.backend}",
        f"stripes={diag.num_stripes}",
        f"constraints={diag.num_constraints}",
        f"bulbs={len(diag.bulbs)}",
        f"time={diag.elapsed_sec:.3f}s",
    ]
    if diag.verified:
        parts.append(f"violations={len(diag.violations)}")
    return " ".join(parts)
