"""
Configuration types for a solve run.

SolverConfig selects the backend and its options, and how the runner
renders and verifies results. Stored as JSON by config/store.py.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

from akari.core.errors import ConfigError


# Objectives understood by the pulp backend
OBJECTIVES = ("none", "min_bulbs")


@dataclass
class SolverConfig:
    """
    Options for one solve run.

    Attributes:
        backend: Registered backend name ("z3" or "pulp")
        timeout_sec: Optional limit handed to the backend; expiry gives Unknown
        objective: ILP objective for the pulp backend ("none" or "min_bulbs")
        pretty: Render boards with spaces between cells
        verify: Re-check the decoded board against the puzzle rules

    Example:
        >>> cfg = SolverConfig(backend="pulp", timeout_sec=5.0)
        >>> cfg.backend_options()
        {'timeout_sec': 5.0, 'objective': 'none'}
    """
    backend: str = "z3"
    timeout_sec: Optional[float] = None
    objective: str = "none"
    pretty: bool = True
    verify: bool = True

    def validate(self) -> None:
        """
        Check option types and ranges.

        Raises:
            ConfigError: on a non-string backend, unknown objective, negative
                         or non-numeric timeout, or non-bool flags
        """
        if not isinstance(self.backend, str):
            raise ConfigError(f"backend must be a string, got {self.backend!r}")
        if self.objective not in OBJECTIVES:
            raise ConfigError(
                f"Unknown objective {self.objective!r}, choose from {list(OBJECTIVES)}"
            )
        if self.timeout_sec is not None:
            if isinstance(self.timeout_sec, bool) or not isinstance(self.timeout_sec, (int, float)):
                raise ConfigError(f"timeout_sec must be a number, got {self.timeout_sec!r}")
            if self.timeout_sec < 0:
                raise ConfigError(f"timeout_sec must be non-negative, got {self.timeout_sec}")
        for flag in ("pretty", "verify"):
            if not isinstance(getattr(self, flag), bool):
                raise ConfigError(f"{flag} must be true or false, got {getattr(self, flag)!r}")

    def backend_options(self) -> Dict[str, Any]:
        """Keyword arguments for create_backend()."""
        options: Dict[str, Any] = {"timeout_sec": self.timeout_sec}
        if self.backend == "pulp":
            options["objective"] = self.objective
        return options

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SolverConfig":
        """
        Build a validated config from a dict, ignoring unknown keys.

        Raises:
            TypeError: if data is not a dict
            ConfigError: if a value has the wrong type or range
        """
        if not isinstance(data, dict):
            raise TypeError(f"Config must be a JSON object, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        config = cls(**{k: v for k, v in data.items() if k in known})
        config.validate()
        return config
