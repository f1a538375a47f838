"""
Solver backend interface.

A backend is anything that can:
  - accept boolean formulas over integer variables (add)
  - decide satisfiability (check -> Verdict)
  - hand back a model when satisfiable (get_model -> Model)

The encoder and decoder only talk to this interface, so any SAT/SMT/ILP
engine can be plugged in (see z3_backend.py and lp_solver.py).
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Iterable, Mapping

from akari.core.errors import AkariError
from akari.constraints.formula import Formula, IntVar


class SolverError(AkariError):
    """Raised when a backend is used incorrectly or fails internally."""
    pass


class ModelIncompleteError(SolverError):
    """Raised when a model has no value for a variable the decoder needs."""
    pass


class UnsupportedFormulaError(SolverError):
    """Raised when a backend cannot translate a formula."""
    pass


class Verdict(Enum):
    """Outcome of a satisfiability check."""
    SAT = "Sat"
    UNSAT = "Unsat"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


class Model(ABC):
    """Assignment of integers to variables, returned by a SAT check."""

    @abstractmethod
    def evaluate(self, var: IntVar) -> int:
        """
        Value of var in this model.

        Raises:
            ModelIncompleteError: if the model does not cover var
        """
        pass


class DictModel(Model):
    """
    Model backed by a plain {variable name: value} mapping.

    Also used to feed hand-made assignments to the decoder in tests.
    """

    def __init__(self, values: Mapping[str, int]) -> None:
        self.values: Dict[str, int] = dict(values)

    @classmethod
    def from_vars(cls, assignment: Mapping[IntVar, int]) -> "DictModel":
        return cls({var.name: value for var, value in assignment.items()})

    def evaluate(self, var: IntVar) -> int:
        if var.name not in self.values:
            raise ModelIncompleteError(f"Model has no value for variable {var.name}")
        return int(self.values[var.name])

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        return f"DictModel({self.values!r})"


class SolverBackend(ABC):
    """
    Abstract base class for satisfiability backends.

    Subclasses must implement add(), check() and get_model() and define the
    name and description class attributes.

    Attributes:
        name: Short identifier used by the factory and the CLI
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base backend"

    @abstractmethod
    def add(self, formula: Formula) -> None:
        """Assert a formula."""
        pass

    def add_all(self, formulas: Iterable[Formula]) -> None:
        for formula in formulas:
            self.add(formula)

    @abstractmethod
    def check(self) -> Verdict:
        """Run the satisfiability search over everything asserted so far."""
        pass

    @abstractmethod
    def get_model(self) -> Model:
        """
        Model of the last SAT check.

        Raises:
            SolverError: if the last check was not SAT
        """
        pass
