"""
Exception hierarchy for the Akari solver.

Unsat / Unknown solver verdicts are ordinary outcomes and are never raised.
"""


class AkariError(Exception):
    """Base class for all errors raised by this package."""
    pass


class BoardParseError(AkariError):
    """Raised when board text is malformed (bad characters, ragged rows, empty)."""
    pass


class BoardAlreadySolvedError(AkariError):
    """Raised when a board that already carries bulbs is handed to the encoder."""
    pass


class InvalidClueError(AkariError):
    """Raised when a clue asks for more bulbs than the cell has orthogonal neighbours."""
    pass


class DecodingError(AkariError):
    """Raised when a model value cannot be mapped back onto its stripe."""
    pass


class ConfigError(AkariError):
    """Raised when a solver config file exists but cannot be read."""
    pass
