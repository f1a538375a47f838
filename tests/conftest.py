"""
Shared boards for the test suite.
"""

import pytest

from akari.core.board import Board


# Clue 4 in the middle: the only solution lights all four arms
CROSS_TEXT = "x - x\n- 4 -\nx - x"
CROSS_SOLVED = "x o x\no 4 o\nx o x"

# Clue 2 in the middle of a 3x3 board: several solutions, 3 bulbs minimum
RING_TEXT = "- - -\n- 2 -\n- - -"

# 5x5 with zero clues, built from the solution (0,2), (2,0), (4,4)
LATTICE_TEXT = """
- - - - -
- 0 - 0 -
- - - - -
- x - x -
- - - - -
"""


@pytest.fixture
def cross_board() -> Board:
    return Board.from_text(CROSS_TEXT)


@pytest.fixture
def ring_board() -> Board:
    return Board.from_text(RING_TEXT)


@pytest.fixture
def lattice_board() -> Board:
    return Board.from_text(LATTICE_TEXT)
