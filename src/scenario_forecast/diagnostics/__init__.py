# src/scenario_forecast/diagnostics/__init__.py

"""
Diagnostics for finished simulations: sanity checks and a continuous-time reference.
"""

from .validation import validate_simulation, validation_checks
from .reference import reference_solution, discretisation_gap

__all__ = [
    "validate_simulation",
    "validation_checks",
    "reference_solution",
    "discretisation_gap",
]
