"""
Board model for Akari puzzles.

The grid is stored as a 2-D numpy array of single characters:

  '-'      Empty cell (placeable, light passes through)
  'x'      Wall without a clue
  '0'..'4' Numbered wall (clue): exactly that many orthogonally adjacent bulbs
  'o'      Bulb (only written by the solution decoder)

Cells are addressed as (row, col) tuples, row-major, 0-based.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, TypeAlias

import numpy as np

from akari.core.errors import BoardParseError


Pos: TypeAlias = Tuple[int, int]  # (row, col)

EMPTY = "-"
WALL = "x"
BULB = "o"
CLUE_CHARS = "01234"
MAX_CLUE = 4

VALID_CHARS = frozenset(EMPTY + WALL + BULB + CLUE_CHARS)


@dataclass(eq=False)
class Board:
    """
    Rectangular Akari board.

    Attributes:
        grid: numpy array of shape (rows, cols), dtype '<U1', one character per cell

    Example:
        >>> board = Board.from_text("- 2 -\\n- - -")
        >>> board.rows, board.cols
        (2, 3)
        >>> board.clue_value(0, 1)
        2
    """
    grid: np.ndarray

    def __post_init__(self) -> None:
        if self.grid.ndim != 2:
            raise BoardParseError(f"Board grid must be 2D, got {self.grid.ndim}D")
        if self.grid.shape[0] == 0 or self.grid.shape[1] == 0:
            raise BoardParseError("Board dimension must be greater than 0.")
        bad = np.argwhere(~np.isin(self.grid, sorted(VALID_CHARS)))
        if len(bad):
            r, c = (int(i) for i in bad[0])
            raise BoardParseError(
                f"Unrecognized cell {str(self.grid[r, c])!r} at ({r}, {c})"
            )

    @classmethod
    def from_text(cls, text: str) -> Board:
        """
        Parse board text into a Board.

        Rows are separated by newlines, blank lines are dropped and spaces
        inside a row are stripped before the row is read.

        Raises:
            BoardParseError: on unknown characters, zero rows/columns or
                             rows of unequal width
        """
        rows = [
            line.replace(" ", "").strip()
            for line in text.split("\n")
            if line.strip() != ""
        ]
        return cls.from_rows(rows)

    @classmethod
    def from_rows(cls, rows: List[str]) -> Board:
        """
        Build a Board from a list of row strings (spaces already removed).
        """
        if not rows or not rows[0]:
            raise BoardParseError("Board dimension must be greater than 0.")

        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise BoardParseError(
                    f"All rows must have the same size: row {r} has {len(row)} "
                    f"cells, expected {width}"
                )
            for c, ch in enumerate(row):
                if ch not in VALID_CHARS:
                    raise BoardParseError(
                        f"Unrecognized cell {ch!r} at ({r}, {c})"
                    )

        grid = np.array([list(row) for row in rows], dtype="<U1")
        return cls(grid=grid)

    @property
    def rows(self) -> int:
        return int(self.grid.shape[0])

    @property
    def cols(self) -> int:
        return int(self.grid.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def cell(self, r: int, c: int) -> str:
        return str(self.grid[r, c])

    def is_placeable(self, r: int, c: int) -> bool:
        """True for Empty cells (bulbs may be placed, light passes)."""
        return self.grid[r, c] == EMPTY

    def is_opaque(self, r: int, c: int) -> bool:
        """True for walls and clues, which block light."""
        ch = self.grid[r, c]
        return ch == WALL or ch in CLUE_CHARS

    def clue_value(self, r: int, c: int) -> Optional[int]:
        """Return the clue number at (r, c), or None if the cell is not a clue."""
        ch = str(self.grid[r, c])
        if ch in CLUE_CHARS:
            return int(ch)
        return None

    def clues(self) -> List[Tuple[Pos, int]]:
        """All clue cells in row-major order as ((r, c), n)."""
        result = []
        for r in range(self.rows):
            for c in range(self.cols):
                n = self.clue_value(r, c)
                if n is not None:
                    result.append(((r, c), n))
        return result

    def placeable_mask(self) -> np.ndarray:
        """Boolean mask of Empty cells, shape (rows, cols)."""
        return self.grid == EMPTY

    def opaque_mask(self) -> np.ndarray:
        """Boolean mask of walls and clues (bulbs are not opaque)."""
        return (self.grid != EMPTY) & (self.grid != BULB)

    def bulbs(self) -> List[Pos]:
        """Positions of all placed bulbs, row-major."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.grid == BULB)]

    def has_bulbs(self) -> bool:
        return bool((self.grid == BULB).any())

    def place_bulb(self, r: int, c: int) -> None:
        """
        Mark a bulb at (r, c). Only Empty cells can take a bulb.
        """
        if not self.is_placeable(r, c):
            raise ValueError(
                f"Cannot place bulb on non-empty cell {self.cell(r, c)!r} at ({r}, {c})"
            )
        self.grid[r, c] = BULB

    def copy(self) -> Board:
        return Board(grid=self.grid.copy())

    def render(self, pretty: bool = True) -> str:
        """
        Render the board as text, one row per line.

        Args:
            pretty: If True, cells are separated by single spaces ("- 2 -"),
                    otherwise rows are compact ("-2-").
        """
        sep = " " if pretty else ""
        return "\n".join(sep.join(str(ch) for ch in row) for row in self.grid)

    def __str__(self) -> str:
        return self.render(pretty=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))

    __hash__ = None  # mutable
