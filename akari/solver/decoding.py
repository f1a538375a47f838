"""
Solution decoding from a solver model to bulbs on the Board.

Given:
  - model: value for every stripe variable
  - stripes / variables: the same lists used at encoding time

Writes a bulb at (row, value) for every variable whose value is inside its
stripe. The sentinel end + 1 decodes to "no bulb on this stripe".

Stripe extraction is deterministic, so when stripes/variables are not
passed in they are re-derived from the (still unsolved) board.
"""

from typing import List, Optional

from akari.core.board import Board, Pos
from akari.core.errors import DecodingError
from akari.constraints.formula import IntVar
from akari.constraints.stripes import Stripe, get_stripes
from akari.constraints.variables import allocate_variables
from akari.solver.backend import Model


def bulb_positions(
    model: Model,
    stripes: List[Stripe],
    variables: List[IntVar],
) -> List[Pos]:
    """
    Decode a model into bulb positions without touching any board.

    Raises:
        ModelIncompleteError: if the model lacks a variable
        DecodingError: if a value lies outside [start, end + 1]
    """
    if len(stripes) != len(variables):
        raise DecodingError(
            f"{len(stripes)} stripes but {len(variables)} variables"
        )

    bulbs: List[Pos] = []
    for var, stripe in zip(variables, stripes):
        c = model.evaluate(var)
        if not stripe.start <= c <= stripe.sentinel:
            raise DecodingError(
                f"Value {c} for {var.name} outside domain "
                f"[{stripe.start}, {stripe.sentinel}]"
            )
        if c <= stripe.end:
            bulbs.append((stripe.row, c))
    return bulbs


def set_solution(
    board: Board,
    model: Model,
    stripes: Optional[List[Stripe]] = None,
    variables: Optional[List[IntVar]] = None,
) -> List[Pos]:
    """
    Write the model's bulbs onto the board in place.

    All values are decoded before the first bulb is written, so a failing
    model leaves the board untouched.

    Args:
        board: Board that was encoded (mutated)
        model: Model from a SAT check
        stripes: Stripes used at encoding time (re-derived if None)
        variables: Variables used at encoding time (re-derived if None)

    Returns:
        Bulb positions, in stripe order

    Example:
        >>> board = Board.from_text("-")
        >>> set_solution(board, DictModel({"(0,0-0)": 0}))
        [(0, 0)]
        >>> board.render()
        'o'
    """
    if stripes is None:
        stripes = get_stripes(board)
    if variables is None:
        variables = allocate_variables(stripes)

    bulbs = bulb_positions(model, stripes, variables)
    for r, c in bulbs:
        board.place_bulb(r, c)
    return bulbs


if __name__ == "__main__":
    from akari.solver.backend import DictModel

    print("Testing decoding.py with minimal example...")
    print("=" * 70)

    board = Board.from_text("- 2 -\n- - -")
    # Row 0 has stripes (0,0-0) and (0,2-2); row 1 has (1,0-2)
    model = DictModel({"(0,0-0)": 0, "(0,2-2)": 3, "(1,0-2)": 1})
    bulbs = set_solution(board, model)

    print(f"Bulbs: {bulbs}")
    print(board.render())
    assert bulbs == [(0, 0), (1, 1)]
    assert board.render() == "o 2 -\n- o -"

    print("\n✓ decoding.py self-test passed.")
