# src/scenario_forecast/diagnostics/validation.py
"""
Post-hoc sanity checks on a finished simulation.

Never called by ``run_simulation``; a failed check only logs a warning and
does not alter the result.
"""

from typing import Dict
import logging

from ..engine.results import SimulationResult

logger = logging.getLogger(__name__)

REALISTIC_PEAK_WINDOW = (20, 60)
ACCURACY_THRESHOLD = 80
MAX_FINAL_R = 2.5


def validation_checks(result: SimulationResult) -> Dict[str, bool]:
    lo, hi = REALISTIC_PEAK_WINDOW
    return {
        "peakExists": result.peak_infections > 0,
        "realisticPeak": lo <= result.peak_day <= hi,
        "accuracyMet": result.accuracy >= ACCURACY_THRESHOLD,
        "R0Reduced": result.final_r < MAX_FINAL_R,
    }


def validate_simulation(result: SimulationResult) -> bool:
    """True if every check in ``validation_checks`` passes."""
    checks = validation_checks(result)
    passed = all(checks.values())
    if not passed:
        logger.warning("Simulation validation failed: %s", checks)
    return passed
