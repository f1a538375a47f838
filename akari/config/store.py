"""
JSON storage for solver configurations.

Storage structure:
    akari.json  (or any path given on the command line)

    {
      "backend": "z3",
      "timeout_sec": 10.0,
      "objective": "none",
      "pretty": true,
      "verify": true
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from akari.config.types import SolverConfig
from akari.core.errors import ConfigError


logger = logging.getLogger(__name__)

# Default config file
DEFAULT_CONFIG_PATH = Path("akari.json")


def load_solver_config(path: Path = DEFAULT_CONFIG_PATH) -> Optional[SolverConfig]:
    """
    Load a SolverConfig from a JSON file.

    Args:
        path: Config file path

    Returns:
        SolverConfig if the file exists, None otherwise

    Raises:
        ConfigError: if the file exists but is not a valid config
    """
    if not path.exists():
        logger.debug("No config file at %s", path)
        return None

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        return SolverConfig.from_dict(data)
    except (json.JSONDecodeError, TypeError, ConfigError) as e:
        raise ConfigError(f"Invalid solver config {path}: {e}") from e


def save_solver_config(config: SolverConfig, path: Path = DEFAULT_CONFIG_PATH) -> None:
    """
    Save a SolverConfig as JSON, creating parent directories if needed.
    Overwrites any existing file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)
