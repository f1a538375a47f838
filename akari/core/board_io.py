"""
Board text IO.

Loads Akari boards from text files or streams (stdin) and writes solved
boards back in the same textual grid format.

Expected text format:

    - - 2 - -
    - x - - -
    1 - - - 0

Spaces between cells are optional; blank lines are ignored.
"""

from pathlib import Path
from typing import TextIO

from akari.core.board import Board
from akari.core.errors import BoardParseError


def read_board(stream: TextIO) -> Board:
    """
    Read a board from an open text stream until EOF.

    Args:
        stream: text stream (file object, sys.stdin, io.StringIO)

    Returns:
        Parsed Board

    Raises:
        BoardParseError: if the text is not valid UTF-8 or not a valid
                         rectangular board
    """
    try:
        text = stream.read()
    except UnicodeDecodeError as e:
        raise BoardParseError(f"Board text is not valid UTF-8: {e}") from e
    return Board.from_text(text)


def load_board(path: Path) -> Board:
    """
    Load a board from a text file.

    Args:
        path: Path to the board file

    Returns:
        Parsed Board
    """
    with open(path, "r", encoding="utf-8") as f:
        return read_board(f)


def save_board(board: Board, path: Path, pretty: bool = True) -> None:
    """
    Write a board to a text file, creating parent directories if needed.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(board.render(pretty=pretty))
        f.write("\n")
