"""
Tests for stripe extraction and board geometry helpers.
"""

from akari.core.board import Board
from akari.constraints.stripes import (
    Stripe,
    get_column_segments,
    get_stripes,
    neighbour_stripes,
    orthogonal_capacity,
    stripes_in_segment,
)


def test_three_stripe_example():
    """
    - - 2 - -   ->  (0, 0-1), (0, 3-4)
    - - - - -   ->  (1, 0-4)
    """
    board = Board.from_text("- - 2 - -\n- - - - -")

    stripes = get_stripes(board)

    assert stripes == [Stripe(0, 0, 1), Stripe(0, 3, 4), Stripe(1, 0, 4)], \
        f"Unexpected stripes {stripes}"


def test_extraction_is_deterministic():
    board = Board.from_text("- x - -\n- - 1 -\nx - - x")
    assert get_stripes(board) == get_stripes(board)


def test_board_without_empty_cells_has_no_stripes():
    assert get_stripes(Board.from_text("0")) == []
    assert get_stripes(Board.from_text("x 1\n2 x")) == []


def test_single_cell_stripe():
    stripes = get_stripes(Board.from_text("-"))

    assert stripes == [Stripe(0, 0, 0)]
    assert stripes[0].sentinel == 1
    assert stripes[0].name == "(0,0-0)"
    assert list(stripes[0].columns) == [0]


def test_stripe_helpers():
    s = Stripe(row=2, start=1, end=3)
    assert s.sentinel == 4
    assert s.contains_col(1) and s.contains_col(3)
    assert not s.contains_col(0) and not s.contains_col(4)
    assert s.name == "(2,1-3)"


def test_column_segments():
    """
    - x
    - -
    x -
    """
    board = Board.from_text("- x\n- -\nx -")

    assert get_column_segments(board, 0) == [(0, 1)]
    assert get_column_segments(board, 1) == [(1, 2)]


def test_column_segments_split_by_wall():
    board = Board.from_text("-\nx\n-\n-")
    assert get_column_segments(board, 0) == [(0, 0), (2, 3)]


def test_stripes_in_segment():
    board = Board.from_text("- - -\n- x -\n- - -")
    stripes = get_stripes(board)
    # (0,0-2), (1,0-0), (1,2-2), (2,0-2)

    assert stripes_in_segment(stripes, 0, 0, 2) == [0, 1, 3]
    assert stripes_in_segment(stripes, 1, 0, 0) == [0]
    assert stripes_in_segment(stripes, 2, 0, 2) == [0, 2, 3]


def test_neighbour_stripes():
    board = Board.from_text("- - 2 - -\n- - - - -")
    stripes = get_stripes(board)

    nbrs = neighbour_stripes((0, 2), stripes)

    assert nbrs == [(0, (0, 1)), (1, (0, 3)), (2, (1, 2))]


def test_neighbour_stripes_above_and_below():
    board = Board.from_text("- - -\n- 3 -\n- - -")
    stripes = get_stripes(board)

    positions = sorted(pos for _, pos in neighbour_stripes((1, 1), stripes))

    assert positions == [(0, 1), (1, 0), (1, 2), (2, 1)]


def test_orthogonal_capacity():
    board = Board.from_text("- - -\n- - -\n- - -")
    assert orthogonal_capacity(board, (0, 0)) == 2
    assert orthogonal_capacity(board, (0, 1)) == 3
    assert orthogonal_capacity(board, (1, 1)) == 4
    assert orthogonal_capacity(Board.from_text("0"), (0, 0)) == 0
