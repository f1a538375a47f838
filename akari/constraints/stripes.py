"""
Stripe extraction and board geometry helpers for the constraint system.

A stripe is a maximal horizontal run of Empty cells within one row. Every
stripe carries exactly one integer decision variable, so at most one bulb
can ever sit on a stripe.

Conventions:
  - Stripes are listed row-major, then left-to-right
  - (row, start, end) with start <= end, all columns inclusive
  - sentinel = end + 1 means "no bulb on this stripe"

Example (three stripes):

    - - 2 - -      (0, 0, 1), (0, 3, 4)
    - - - - -      (1, 0, 4)
"""

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from akari.core.board import Board, Pos


@dataclass(frozen=True)
class Stripe:
    """
    Maximal horizontal run of placeable cells.

    Attributes:
        row: Row index of the run
        start: First column of the run
        end: Last column of the run (inclusive)
    """
    row: int
    start: int
    end: int

    @property
    def sentinel(self) -> int:
        """Variable value meaning "no bulb on this stripe"."""
        return self.end + 1

    @property
    def columns(self) -> range:
        return range(self.start, self.end + 1)

    @property
    def name(self) -> str:
        """Unique variable identifier derived from the stripe triple."""
        return f"({self.row},{self.start}-{self.end})"

    def contains_col(self, c: int) -> bool:
        return self.start <= c <= self.end


def _runs(mask: np.ndarray) -> List[Tuple[int, int]]:
    """
    Return maximal runs of True in a 1-D boolean array as (first, last) pairs.

    Example:
        >>> _runs(np.array([True, True, False, True]))
        [(0, 1), (3, 3)]
    """
    padded = np.concatenate(([False], mask.astype(bool), [False]))
    edges = np.flatnonzero(np.diff(padded.astype(np.int8)))
    # edges alternates run starts and (last + 1)
    return [(int(s), int(e) - 1) for s, e in zip(edges[::2], edges[1::2])]


def get_stripes(board: Board) -> List[Stripe]:
    """
    Extract the ordered list of stripes from a board.

    Deterministic: calling twice on the same board yields identical lists,
    which the decoder relies on.

    Args:
        board: Board to scan

    Returns:
        Stripes in row-major, left-to-right order. Rows without Empty
        cells contribute nothing.
    """
    placeable = board.placeable_mask()
    stripes: List[Stripe] = []
    for r in range(board.rows):
        for start, end in _runs(placeable[r]):
            stripes.append(Stripe(row=r, start=start, end=end))
    return stripes


def get_column_segments(board: Board, c: int) -> List[Tuple[int, int]]:
    """
    Maximal runs of placeable rows in column c, as (start_row, end_row).

    A segment is terminated by a wall/clue in column c or by the board edge.
    Bulbs inside one segment would light each other.
    """
    return _runs(board.placeable_mask()[:, c])


def stripes_in_segment(
    stripes: List[Stripe],
    c: int,
    start_row: int,
    end_row: int,
) -> List[int]:
    """
    Indices of stripes crossing column c with their row inside [start_row, end_row].
    """
    return [
        i for i, s in enumerate(stripes)
        if s.contains_col(c) and start_row <= s.row <= end_row
    ]


def orthogonal_capacity(board: Board, pos: Pos) -> int:
    """
    Number of in-bounds orthogonal neighbours of a cell (2 in corners, 3 on edges, else 4).
    """
    r, c = pos
    return sum(
        1 for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1))
        if board.in_bounds(r + dr, c + dc)
    )


def neighbour_stripes(pos: Pos, stripes: List[Stripe]) -> List[Tuple[int, Pos]]:
    """
    Find the stripes that own a cell orthogonally adjacent to pos.

    Same row: a stripe ending just left of c or starting just right of c.
    Rows above/below: a stripe whose column range includes c.

    Args:
        pos: (r, c) of the clue cell
        stripes: Stripe list of the board

    Returns:
        List of (stripe_index, adjacent_position) pairs, in stripe order
    """
    r, c = pos
    result: List[Tuple[int, Pos]] = []
    for i, s in enumerate(stripes):
        if s.row == r:
            if s.end + 1 == c:
                result.append((i, (r, s.end)))
            elif s.start - 1 == c:
                result.append((i, (r, s.start)))
        elif s.row in (r - 1, r + 1) and s.contains_col(c):
            result.append((i, (s.row, c)))
    return result


if __name__ == "__main__":
    # Self-test on the three-stripe example from the module docstring
    print("Testing stripes.py...")
    print("=" * 70)

    board = Board.from_text("- - 2 - -\n- - - - -")
    stripes = get_stripes(board)
    print(f"Stripes: {stripes}")
    assert stripes == [Stripe(0, 0, 1), Stripe(0, 3, 4), Stripe(1, 0, 4)]
    assert get_stripes(board) == stripes, "Extraction must be deterministic"

    nbrs = neighbour_stripes((0, 2), stripes)
    print(f"Neighbours of clue (0, 2): {nbrs}")
    assert nbrs == [(0, (0, 1)), (1, (0, 3)), (2, (1, 2))]

    print("\n✓ stripes.py self-test passed.")
