"""
End-to-end checks that the encoding describes exactly the valid solutions.

For small boards every assignment of the stripe variables is enumerated and
compared with every subset of empty cells that passes the rule checker.
"""

from itertools import combinations, product

import pytest

from akari.config.types import SolverConfig
from akari.constraints.builder import build_constraints
from akari.constraints.formula import evaluate
from akari.core.board import Board
from akari.core.rules import is_solved
from akari.runners.kernel import solve_board
from akari.solver.backend import DictModel
from akari.solver.decoding import bulb_positions


def encoded_solutions(board):
    encoding = build_constraints(board)
    domains = [range(s.start, s.sentinel + 1) for s in encoding.stripes]

    solutions = set()
    for values in product(*domains):
        assignment = dict(zip(encoding.variables, values))
        if all(evaluate(f, assignment) for f in encoding.constraints):
            model = DictModel.from_vars(assignment)
            solutions.add(frozenset(bulb_positions(model, encoding.stripes, encoding.variables)))
    return solutions


def rule_solutions(board):
    empties = [(r, c) for r in range(board.rows) for c in range(board.cols)
               if board.is_placeable(r, c)]

    solutions = set()
    for k in range(len(empties) + 1):
        for chosen in combinations(empties, k):
            candidate = board.copy()
            for r, c in chosen:
                candidate.place_bulb(r, c)
            if is_solved(candidate):
                solutions.add(frozenset(chosen))
    return solutions


@pytest.mark.parametrize("text, solvable", [
    ("- - -\n- 2 -\n- - -", True),
    ("- 1 - -\n- x - -\n- - - 0", True),
    ("x - x\n- 4 -\nx - x", True),
    ("- 2 -\n- - -", False),
    ("- -\n- 2", True),
])
def test_encoding_matches_rules(text, solvable):
    board = Board.from_text(text)

    expected = rule_solutions(board)

    assert encoded_solutions(board) == expected
    assert bool(expected) == solvable


def test_ring_minimum(ring_board):
    assert min(len(s) for s in encoded_solutions(ring_board)) == 3


@pytest.mark.parametrize("backend", ["z3", "pulp"])
def test_backend_solutions_are_valid(backend):
    text = "- 1 - -\n- x - -\n- - - 0"
    board = Board.from_text(text)
    valid = rule_solutions(Board.from_text(text))

    diag = solve_board(board, SolverConfig(backend=backend))

    assert diag.is_sat
    assert frozenset(diag.bulbs) in valid
