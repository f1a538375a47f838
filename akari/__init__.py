"""
Akari ("light up") puzzle solver built on a stripe-based constraint encoding.

Pipeline:
  1. Parse board text into a Board (core)
  2. Extract horizontal stripes and allocate one integer variable per stripe
  3. Build domain / clue / illumination constraints (constraints)
  4. Hand the formulas to a SAT/SMT/ILP backend (solver)
  5. Decode the model back into bulb markers on the Board
"""

from akari.core.board import Board
from akari.core.errors import AkariError
from akari.constraints.builder import build_constraints
from akari.solver.backend import Verdict
from akari.runners.kernel import solve_board

__version__ = "0.1.0"

__all__ = [
    "Board",
    "AkariError",
    "build_constraints",
    "Verdict",
    "solve_board",
]
