# src/scenario_forecast/engine/__init__.py

"""
Numerical core: coefficient derivation, Euler integrator, estimators,
scenario vocabulary and result assembly.
"""

from .parameters import SimulationParameters, DerivedCoefficients, derive_coefficients
from .integrator import PopulationTooSmallError, SimulationState, integrate
from .scenarios import SCENARIOS, ScenarioContext, adjust_parameters, get_simulation_context
from .results import SimulationResult, DailySnapshot, ConfidenceInterval
from .simulate import run_simulation, run_simulation_record

__all__ = [
    "SimulationParameters",
    "DerivedCoefficients",
    "derive_coefficients",
    "PopulationTooSmallError",
    "SimulationState",
    "integrate",
    "SCENARIOS",
    "ScenarioContext",
    "adjust_parameters",
    "get_simulation_context",
    "SimulationResult",
    "DailySnapshot",
    "ConfidenceInterval",
    "run_simulation",
    "run_simulation_record",
]
