"""
Variable allocation: one integer variable per stripe.

The i-th variable belongs to the i-th stripe. Names are derived from the
stripe triple, so encoding the same board twice yields structurally equal
variables.
"""

from typing import List

from akari.constraints.formula import IntVar
from akari.constraints.stripes import Stripe


def stripe_variable(stripe: Stripe) -> IntVar:
    """
    Variable for a single stripe.

    Domain (asserted by the builder): [stripe.start, stripe.end + 1], where
    end + 1 is the "no bulb" sentinel.
    """
    return IntVar(stripe.name)


def allocate_variables(stripes: List[Stripe]) -> List[IntVar]:
    """Index-aligned variables for a stripe list."""
    return [stripe_variable(s) for s in stripes]
