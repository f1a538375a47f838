"""
Tests for the rule checker on solved and broken boards.
"""

import numpy as np

from akari.core.board import Board
from akari.core.rules import (
    count_adjacent_bulbs,
    find_rule_violations,
    illuminated_mask,
    is_solved,
)


def test_solved_cross():
    board = Board.from_text("x o x\no 4 o\nx o x")
    assert find_rule_violations(board) == []
    assert is_solved(board)


def test_empty_cross_reports_clue_and_unlit(cross_board):
    violations = find_rule_violations(cross_board)

    clue = [v for v in violations if v["rule"] == "clue"]
    unlit = [v for v in violations if v["rule"] == "unlit"]
    assert clue == [{"rule": "clue", "r": 1, "c": 1, "expected": 4, "actual": 0}]
    assert len(unlit) == 4
    assert not is_solved(cross_board)


def test_bulbs_facing_each_other():
    violations = find_rule_violations(Board.from_text("o - o"))
    assert violations == [{"rule": "conflict", "a": [0, 0], "b": [0, 2]}]


def test_column_conflict_reported_once():
    violations = find_rule_violations(Board.from_text("o\n-\no"))
    assert violations == [{"rule": "conflict", "a": [0, 0], "b": [2, 0]}]


def test_wall_blocks_light():
    board = Board.from_text("o x o")
    assert is_solved(board)


def test_illuminated_mask():
    board = Board.from_text("o - x -\n- - - -")
    expected = np.array([
        [True, True, False, False],
        [True, False, False, False],
    ])
    assert np.array_equal(illuminated_mask(board), expected)


def test_count_adjacent_bulbs():
    board = Board.from_text("- o -\no 3 o\n- - -")
    assert count_adjacent_bulbs(board, (1, 1)) == 3
    assert count_adjacent_bulbs(board, (0, 0)) == 2
    assert count_adjacent_bulbs(board, (2, 2)) == 1
