"""
Rule checking for solved boards.

Independent of the constraint encoding: the checks walk the grid directly,
so they can validate any solver's output.

Violation records (dicts, JSON-friendly):
  {"rule": "clue",     "r": int, "c": int, "expected": int, "actual": int}
  {"rule": "conflict", "a": [r, c], "b": [r, c]}
  {"rule": "unlit",    "r": int, "c": int}
"""

from typing import Dict, List

import numpy as np

from akari.core.board import BULB, Board, Pos


_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _ray(board: Board, pos: Pos, dr: int, dc: int) -> List[Pos]:
    """Cells reached from pos in one direction before an opaque cell or the edge."""
    r, c = pos[0] + dr, pos[1] + dc
    cells = []
    while board.in_bounds(r, c) and not board.is_opaque(r, c):
        cells.append((r, c))
        r, c = r + dr, c + dc
    return cells


def illuminated_mask(board: Board) -> np.ndarray:
    """
    Boolean mask of cells lit by at least one bulb (bulb cells included).
    """
    lit = np.zeros(board.shape, dtype=bool)
    for pos in board.bulbs():
        lit[pos] = True
        for dr, dc in _DIRECTIONS:
            for cell in _ray(board, pos, dr, dc):
                lit[cell] = True
    return lit


def count_adjacent_bulbs(board: Board, pos: Pos) -> int:
    r, c = pos
    return sum(
        1 for dr, dc in _DIRECTIONS
        if board.in_bounds(r + dr, c + dc) and board.cell(r + dr, c + dc) == BULB
    )


def find_rule_violations(board: Board) -> List[Dict]:
    """
    List every rule a (solved) board breaks.

    Checks:
      1. every clue has exactly its number of adjacent bulbs
      2. no bulb lights another bulb
      3. every non-opaque cell is lit

    Returns:
        Violation records, empty if the board is a valid solution
    """
    violations: List[Dict] = []

    for (r, c), n in board.clues():
        actual = count_adjacent_bulbs(board, (r, c))
        if actual != n:
            violations.append({"rule": "clue", "r": r, "c": c, "expected": n, "actual": actual})

    for pos in board.bulbs():
        # Only look right and down so each pair is reported once
        for dr, dc in ((1, 0), (0, 1)):
            for cell in _ray(board, pos, dr, dc):
                if board.cell(*cell) == BULB:
                    violations.append({"rule": "conflict", "a": list(pos), "b": list(cell)})

    unlit = ~illuminated_mask(board) & ~board.opaque_mask()
    for r, c in np.argwhere(unlit):
        violations.append({"rule": "unlit", "r": int(r), "c": int(c)})

    return violations


def is_solved(board: Board) -> bool:
    return not find_rule_violations(board)
