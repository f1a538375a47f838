"""
Core pipeline for solving an Akari board.

  1. Build stripes, variables and constraints from the board
  2. Create the configured backend and assert every constraint
  3. Check satisfiability
  4. On Sat only, decode the model into bulbs on the board (in place)
  5. Optionally re-check the decoded board against the puzzle rules
"""

from __future__ import annotations

import logging
import time
from typing import Optional, Tuple

from akari.config.types import SolverConfig
from akari.constraints.builder import build_constraints
from akari.core.board import Board
from akari.core.rules import find_rule_violations
from akari.runners.results import SolveDiagnostics
from akari.solver.backend import SolverBackend, Verdict
from akari.solver.decoding import set_solution
from akari.solver.factory import create_backend


logger = logging.getLogger(__name__)


def solve_board(
    board: Board,
    config: Optional[SolverConfig] = None,
    backend: Optional[SolverBackend] = None,
) -> SolveDiagnostics:
    """
    Solve a board in place and report what happened.

    Args:
        board: Unsolved board; bulbs are written onto it when the verdict is Sat
        config: Run options (defaults to SolverConfig())
        backend: Pre-built backend; when None one is created from config

    Returns:
        SolveDiagnostics with verdict, sizes, timings and bulbs

    Raises:
        BoardAlreadySolvedError, InvalidClueError: from encoding
        ModelIncompleteError, DecodingError: if the backend's model is unusable

    Example:
        >>> board = Board.from_text("x - x\\n- 4 -\\nx - x")
        >>> diag = solve_board(board)
        >>> str(diag.verdict)
        'Sat'
    """
    if config is None:
        config = SolverConfig()
    if backend is None:
        backend = create_backend(config.backend, **config.backend_options())

    # 1. Encode
    t0 = time.perf_counter()
    encoding = build_constraints(board)
    encode_sec = time.perf_counter() - t0
    logger.info(
        "Encoded %dx%d board: %d stripes, %d constraints",
        board.rows, board.cols, len(encoding.stripes), len(encoding.constraints),
    )

    # 2-3. Assert and check
    t1 = time.perf_counter()
    backend.add_all(encoding.constraints)
    verdict = backend.check()
    solve_sec = time.perf_counter() - t1
    logger.info("Backend %s verdict: %s in %.3fs", backend.name, verdict, solve_sec)

    diag = SolveDiagnostics(
        verdict=verdict,
        backend=backend.name,
        shape=board.shape,
        num_stripes=len(encoding.stripes),
        num_constraints=len(encoding.constraints),
        family_counts=dict(encoding.builder.family_counts),
        encode_sec=encode_sec,
        solve_sec=solve_sec,
    )

    if verdict is not Verdict.SAT:
        return diag

    # 4. Decode
    model = backend.get_model()
    diag.bulbs = set_solution(board, model, encoding.stripes, encoding.variables)

    # 5. Verify
    if config.verify:
        diag.violations = find_rule_violations(board)
        diag.verified = True
        if diag.violations:
            logger.warning(
                "Decoded board breaks %d rules: %s",
                len(diag.violations), diag.violations[:5],
            )

    return diag


def solve_text(
    text: str,
    config: Optional[SolverConfig] = None,
) -> Tuple[Board, SolveDiagnostics]:
    """
    Parse board text and solve it.

    Returns:
        (board, diagnostics); the board carries bulbs when the verdict is Sat
    """
    board = Board.from_text(text)
    diag = solve_board(board, config)
    return board, diag
