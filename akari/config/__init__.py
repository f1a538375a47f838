"""
Solver configuration types and JSON storage.
"""

from akari.config.types import SolverConfig
from akari.config.store import load_solver_config, save_solver_config

__all__ = [
    "SolverConfig",
    "load_solver_config",
    "save_solver_config",
]
