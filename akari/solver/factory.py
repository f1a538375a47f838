"""
Backend factory - registry and instantiation of solver backends by name.
"""

from typing import Any, Dict, List, Type

from akari.solver.backend import SolverBackend


# Global registry of backends
_BACKENDS: Dict[str, Type[SolverBackend]] = {}

DEFAULT_BACKEND = "z3"


def register_backend(cls: Type[SolverBackend]) -> Type[SolverBackend]:
    """
    Decorator to register a backend class under its name attribute.

    Usage:
        @register_backend
        class MyBackend(SolverBackend):
            name = "mine"
            ...
    """
    _BACKENDS[cls.name] = cls
    return cls


def create_backend(name: str, **kwargs: Any) -> SolverBackend:
    """
    Create a backend instance by name.

    Args:
        name: Backend name ("z3", "pulp")
        **kwargs: Passed to the backend constructor (e.g. timeout_sec)

    Raises:
        ValueError: If the backend name is not registered
    """
    _load_builtin_backends()
    if name not in _BACKENDS:
        available = ", ".join(sorted(_BACKENDS))
        raise ValueError(f"Unknown backend: {name}. Available: {available}")
    return _BACKENDS[name](**kwargs)


def get_backend_names() -> List[str]:
    _load_builtin_backends()
    return sorted(_BACKENDS)


def get_backend_info() -> List[Dict[str, str]]:
    """Name and description for all registered backends."""
    _load_builtin_backends()
    return [
        {"name": cls.name, "description": cls.description}
        for _, cls in sorted(_BACKENDS.items())
    ]


def get_default_backend_name() -> str:
    return DEFAULT_BACKEND


def _load_builtin_backends() -> None:
    # Importing the modules runs their @register_backend decorators
    import akari.solver.lp_solver  # noqa: F401
    import akari.solver.z3_backend  # noqa: F401
