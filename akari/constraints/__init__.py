"""
Constraint encoding for Akari boards.

Stripes (maximal horizontal runs of Empty cells) each get one integer
variable; the builder emits domain, clue and illumination formulas over
those variables.
"""
