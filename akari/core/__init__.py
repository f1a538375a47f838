"""
Core board types, board IO and rule checking.
"""
