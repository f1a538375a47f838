"""
Constraint builder for the Akari encoding.

This module collects boolean formulas over the stripe variables. Three
families are emitted:

  1. domain:        start <= v <= end + 1   (end + 1 = no bulb)
  2. clue:          exactly n bulbs on the cells next to a numbered wall
  3. illumination:  no two bulbs in one column segment, and every cell of
                    a stripe without a bulb is lit from its column segment

Row conflicts need no formula: a stripe is a maximal unbroken run and has
a single variable, so it never holds two bulbs.

The builder is an append-only accumulator, deduplicated by structural
equality of the formulas. No solver logic here.
"""

import logging
from dataclasses import dataclass, field
from itertools import combinations
from typing import Dict, List, Set

from akari.core.board import MAX_CLUE, Board
from akari.core.errors import BoardAlreadySolvedError, InvalidClueError
from akari.constraints.formula import (
    FALSE,
    Formula,
    IntVar,
    conj,
    disj,
    eq,
    ge,
    iff,
    implies,
    le,
    neg,
)
from akari.constraints.stripes import (
    Stripe,
    get_column_segments,
    get_stripes,
    neighbour_stripes,
    orthogonal_capacity,
    stripes_in_segment,
)
from akari.constraints.variables import allocate_variables


logger = logging.getLogger(__name__)

DOMAIN = "domain"
CLUE = "clue"
ILLUMINATION = "illumination"


@dataclass
class ConstraintBuilder:
    """
    Ordered, deduplicated collection of formulas.

    Attributes:
        constraints: Formulas in insertion order (each appears once)
        family_counts: Number of new formulas contributed per family
    """
    constraints: List[Formula] = field(default_factory=list)
    family_counts: Dict[str, int] = field(default_factory=dict)
    _seen: Set[Formula] = field(default_factory=set, repr=False)

    def add(self, formula: Formula, family: str = "other") -> bool:
        """
        Append a formula unless a structurally equal one is already present.

        Returns:
            True if the formula was new
        """
        if formula in self._seen:
            return False
        self._seen.add(formula)
        self.constraints.append(formula)
        self.family_counts[family] = self.family_counts.get(family, 0) + 1
        return True

    def __len__(self) -> int:
        return len(self.constraints)

    def __iter__(self):
        return iter(self.constraints)

    def __contains__(self, formula: object) -> bool:
        return formula in self._seen


@dataclass
class Encoding:
    """
    Everything produced by one encoding pass over a board.

    Attributes:
        stripes: Stripe list (row-major)
        variables: One IntVar per stripe, index-aligned
        builder: Accumulated constraints
    """
    stripes: List[Stripe]
    variables: List[IntVar]
    builder: ConstraintBuilder

    @property
    def constraints(self) -> List[Formula]:
        return self.builder.constraints


def add_domain_constraints(
    builder: ConstraintBuilder,
    stripes: List[Stripe],
    variables: List[IntVar],
) -> None:
    """
    Limit every variable to a column of its stripe or the sentinel end + 1.
    """
    for var, stripe in zip(variables, stripes):
        builder.add(ge(var, stripe.start), DOMAIN)
        builder.add(le(var, stripe.sentinel), DOMAIN)


def add_clue_constraints(
    builder: ConstraintBuilder,
    board: Board,
    stripes: List[Stripe],
    variables: List[IntVar],
) -> None:
    """
    Require exactly n adjacent bulbs around every clue cell with value n.

    For n = 0 none of the neighbour indicators may hold. For n >= 1 every
    n-subset of the indicators is tied to the absence of all other bulbs:

        AND(subset)  <->  NOT OR(rest)

    which holds for every subset exactly when n indicators are true.

    Raises:
        InvalidClueError: if n exceeds 4 or the cell's orthogonal capacity
    """
    for pos, n in board.clues():
        if n > MAX_CLUE:
            raise InvalidClueError(f"Square can only have 0-4 neighbours, got {n} at {pos}")
        capacity = orthogonal_capacity(board, pos)
        if n > capacity:
            raise InvalidClueError(
                f"Clue {n} at {pos} exceeds its {capacity} orthogonal neighbours"
            )

        # dict.fromkeys keeps order and drops structural duplicates
        indicators = list(dict.fromkeys(
            eq(variables[i], adj[1]) for i, adj in neighbour_stripes(pos, stripes)
        ))

        if n == 0:
            builder.add(neg(disj(indicators)), CLUE)
            continue

        if len(indicators) < n:
            logger.debug("Clue %d at %s has only %d neighbours", n, pos, len(indicators))
            builder.add(FALSE, CLUE)
            continue

        for group in combinations(indicators, n):
            others = [ind for ind in indicators if ind not in group]
            builder.add(iff(conj(group), neg(disj(others))), CLUE)


def add_illumination_constraints(
    builder: ConstraintBuilder,
    board: Board,
    stripes: List[Stripe],
    variables: List[IntVar],
) -> None:
    """
    Encode column interactions between stacked stripes.

    For every column c and every column segment [start_row, end_row] (a run
    of Empty cells in c between walls or edges), with S the stripes crossing c
    inside the segment:

      - no two stripes of S both put their bulb in column c
      - a stripe of S without a bulb forces some other stripe of S to put its
        bulb in column c, so cell (row, c) is still lit

    A lone stripe in a segment gets the second rule with an empty OR, which
    forbids its sentinel.
    """
    for c in range(board.cols):
        for start_row, end_row in get_column_segments(board, c):
            members = stripes_in_segment(stripes, c, start_row, end_row)

            for a, b in combinations(members, 2):
                builder.add(
                    neg(conj([eq(variables[a], c), eq(variables[b], c)])),
                    ILLUMINATION,
                )

            for i in members:
                others = [eq(variables[j], c) for j in members if j != i]
                builder.add(
                    implies(eq(variables[i], stripes[i].sentinel), disj(others)),
                    ILLUMINATION,
                )


def build_constraints(board: Board) -> Encoding:
    """
    Encode a board as stripes, variables and the full constraint set.

    Args:
        board: Unsolved board (must not carry bulbs)

    Returns:
        Encoding with stripes, index-aligned variables and the builder

    Raises:
        BoardAlreadySolvedError: if the board already has bulbs
        InvalidClueError: if a clue cannot be satisfied by geometry

    Example:
        >>> enc = build_constraints(Board.from_text("-"))
        >>> [str(v) for v in enc.variables]
        ['(0,0-0)']
    """
    if board.has_bulbs():
        raise BoardAlreadySolvedError(
            f"Board already has {len(board.bulbs())} bulbs; encode the unsolved board"
        )

    stripes = get_stripes(board)
    variables = allocate_variables(stripes)
    builder = ConstraintBuilder()

    add_domain_constraints(builder, stripes, variables)
    add_clue_constraints(builder, board, stripes, variables)
    add_illumination_constraints(builder, board, stripes, variables)

    logger.debug(
        "Encoded %dx%d board: %d stripes, %d constraints %s",
        board.rows, board.cols, len(stripes), len(builder), builder.family_counts,
    )
    return Encoding(stripes=stripes, variables=variables, builder=builder)
