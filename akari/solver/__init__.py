"""
Solver module for Akari boards.

This module provides the backend interface, the z3 and PuLP backends that
take a constraint set and produce a model, and the decoder that turns the
model back into bulbs.
"""
