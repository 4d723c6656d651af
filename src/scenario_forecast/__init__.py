# src/scenario_forecast/__init__.py

"""
Scenario-skinned compartmental outbreak forecaster.
"""

from .version_info import VERSION as __version__
from .engine import (
    SCENARIOS,
    PopulationTooSmallError,
    ScenarioContext,
    SimulationParameters,
    SimulationResult,
    get_simulation_context,
    run_simulation,
)
from .diagnostics import validate_simulation

__all__ = [
    "__version__",
    "SCENARIOS",
    "PopulationTooSmallError",
    "ScenarioContext",
    "SimulationParameters",
    "SimulationResult",
    "get_simulation_context",
    "run_simulation",
    "validate_simulation",
]
