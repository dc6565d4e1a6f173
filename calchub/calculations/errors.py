"""
Calculation Errors

Failure kinds raised by the calculation engine. The ``compute_*`` entry
points catch these and return ``None``; everything else lets them propagate.
"""


class CalculationError(ValueError):
    """Base class for all calculation failures."""


class InvalidInputError(CalculationError):
    """Inputs violate a domain rule (e.g. salvage value above cost)."""


class ConvergenceError(CalculationError):
    """An iterative solver did not settle within its iteration cap."""


class BracketError(ConvergenceError):
    """The solver bounds do not bracket a solution."""
