"""
Tests for decoding a model into bulbs on the board.
"""

import pytest

from akari.core.board import Board
from akari.core.errors import DecodingError
from akari.constraints.stripes import get_stripes
from akari.constraints.variables import allocate_variables
from akari.solver.backend import DictModel, ModelIncompleteError
from akari.solver.decoding import bulb_positions, set_solution


def test_decode_two_row_board():
    """
    - 2 -     stripes (0,0-0), (0,2-2), (1,0-2)
    - - -
    """
    board = Board.from_text("- 2 -\n- - -")
    model = DictModel({"(0,0-0)": 0, "(0,2-2)": 3, "(1,0-2)": 1})

    bulbs = set_solution(board, model)

    assert bulbs == [(0, 0), (1, 1)]
    assert board.render() == "o 2 -\n- o -"


def test_sentinel_decodes_to_no_bulb():
    board = Board.from_text("- - -\nx - x")
    stripes = get_stripes(board)
    variables = allocate_variables(stripes)
    model = DictModel({v.name: s.sentinel for v, s in zip(variables, stripes)})

    assert set_solution(board, model, stripes, variables) == []
    assert not board.has_bulbs()


def test_cross_round_trip(cross_board):
    model = DictModel({"(0,1-1)": 1, "(1,0-0)": 0, "(1,2-2)": 2, "(2,1-1)": 1})

    set_solution(cross_board, model)

    assert cross_board.render() == "x o x\no 4 o\nx o x"


def test_missing_variable_is_fatal():
    board = Board.from_text("- x -")
    model = DictModel({"(0,0-0)": 0})

    with pytest.raises(ModelIncompleteError):
        set_solution(board, model)
    assert not board.has_bulbs(), "Board must stay untouched on failure"


def test_out_of_domain_value():
    board = Board.from_text("- -")
    stripes = get_stripes(board)
    variables = allocate_variables(stripes)

    with pytest.raises(DecodingError):
        bulb_positions(DictModel({"(0,0-1)": 5}), stripes, variables)


def test_misaligned_lists():
    stripes = get_stripes(Board.from_text("- x -"))
    with pytest.raises(DecodingError):
        bulb_positions(DictModel({}), stripes, allocate_variables(stripes)[:1])
