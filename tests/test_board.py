"""
Tests for board parsing, rendering and board IO.
"""

import io

import numpy as np
import pytest

from akari.core.board import Board
from akari.core.board_io import load_board, read_board, save_board
from akari.core.errors import BoardParseError


def test_parse_two_row_board():
    """
    "- 2 -\\n- - -": 2 rows, 3 cols, a clue 2 between two empty cells.
    """
    board = Board.from_text("- 2 -\n- - -")

    assert board.shape == (2, 3), f"Unexpected shape {board.shape}"
    assert board.clue_value(0, 1) == 2
    assert board.clue_value(0, 0) is None
    assert board.is_placeable(0, 0) and board.is_placeable(1, 1)
    assert not board.is_placeable(0, 1)
    assert board.clues() == [((0, 1), 2)]


def test_spaces_and_blank_lines_are_ignored():
    spaced = Board.from_text("\n- 2 -\n\n- - -\n")
    compact = Board.from_text("-2-\n---")
    assert spaced == compact


def test_ragged_rows_rejected():
    """Unequal row widths fail before any board exists."""
    with pytest.raises(BoardParseError, match="same size"):
        Board.from_text("- - -\n- -")


@pytest.mark.parametrize("text", ["", "\n\n", "   \n"])
def test_empty_board_rejected(text):
    with pytest.raises(BoardParseError):
        Board.from_text(text)


@pytest.mark.parametrize("text", ["- 5 -", "- a -", "-.-"])
def test_unknown_characters_rejected(text):
    with pytest.raises(BoardParseError, match="Unrecognized"):
        Board.from_text(text)


def test_grid_constructor_checks_characters():
    with pytest.raises(BoardParseError, match=r"Unrecognized '9' at \(0, 1\)"):
        Board(grid=np.array([["-", "9"]]))


def test_walls_and_clues_are_opaque():
    board = Board.from_text("x 0 -")
    assert board.is_opaque(0, 0)
    assert board.is_opaque(0, 1)
    assert not board.is_opaque(0, 2)
    assert np.array_equal(board.opaque_mask(), np.array([[True, True, False]]))


def test_render_round_trip():
    text = "- x 1\n0 - -"
    board = Board.from_text(text)

    assert board.render() == text
    assert board.render(pretty=False) == "-x1\n0--"
    assert Board.from_text(board.render(pretty=False)) == board
    assert str(board) == text


def test_place_bulb_and_copy():
    board = Board.from_text("- x\n- -")
    clone = board.copy()

    board.place_bulb(1, 1)

    assert board.bulbs() == [(1, 1)]
    assert board.has_bulbs()
    assert not clone.has_bulbs(), "copy() must not share the grid"
    assert board.render() == "- x\n- o"


def test_place_bulb_on_wall_rejected():
    board = Board.from_text("- x")
    with pytest.raises(ValueError):
        board.place_bulb(0, 1)


def test_solved_board_parses_back():
    board = Board.from_text("o 1\n- -")
    assert board.bulbs() == [(0, 0)]


def test_read_board_from_stream():
    board = read_board(io.StringIO("- 2 -\n- - -\n"))
    assert board.shape == (2, 3)


def test_save_and_load_board(tmp_path):
    board = Board.from_text("- 1\nx -")
    path = tmp_path / "boards" / "small.txt"

    save_board(board, path)
    loaded = load_board(path)

    assert loaded == board
    assert path.read_text(encoding="utf-8") == "- 1\nx -\n"


def test_non_utf8_file_rejected(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"- \xff -\n")

    with pytest.raises(BoardParseError, match="UTF-8"):
        load_board(path)
