# src/scenario_forecast/engine/simulate.py
"""
Entry point of the engine: adjust inputs for the scenario, derive the
coefficients, integrate, score and assemble the result record.

Every call builds fresh state, so concurrent calls (e.g. one per region) are
independent. The only side effects are logging and the optional observer.
"""

from typing import Any, Callable, Dict, Optional
import logging

from .estimators import (
    ACCURACY_TARGET,
    accuracy_score,
    confidence_interval,
    effective_reproduction,
    round_fixed,
    round_half_up,
)
from .insights import generate_insights
from .integrator import integrate
from .parameters import SimulationParameters, derive_coefficients, nominal_range_warnings
from .results import ConfidenceInterval, SimulationResult, snapshots_from_trajectory
from .scenarios import adjust_parameters, get_chart_labels, get_parameter_labels, severity_labels

# Start logger
logger = logging.getLogger(__name__)

Observer = Callable[[str, Dict[str, Any]], None]


def _notify(observer: Optional[Observer], event: str, **payload):
    if observer is not None:
        observer(event, payload)


def run_simulation(params: SimulationParameters, observer: Optional[Observer] = None) -> SimulationResult:
    """Run one deterministic forecast.

    Args:
        params (SimulationParameters): caller inputs
        observer (callable, optional): ``observer(event, payload)`` receives
            "coefficients", "terminated_early", "peak", "accuracy_below_target"
            and "completed" events. It cannot change the result.
    Returns:
        SimulationResult
    Raises:
        PopulationTooSmallError: population < 1000
    """
    for note in nominal_range_warnings(params):
        logger.debug("Input outside nominal range: %s", note)

    R0, healthcare = adjust_parameters(params.scenario, params.R0, params.healthcare)
    coefficients = derive_coefficients(R0, healthcare, params.lockdown)

    logger.debug(
        "Simulation start [%s] beta=%.4f gamma=%.4f CFR=%.2f%%",
        params.scenario, coefficients.beta, coefficients.gamma, coefficients.cfr * 100,
    )
    _notify(observer, "coefficients", beta=coefficients.beta, gamma=coefficients.gamma, cfr=coefficients.cfr)

    run = integrate(coefficients, params.population, params.days)
    if run.terminated_early:
        _notify(observer, "terminated_early", day=run.duration - 1)
    _notify(observer, "peak", day=run.peak_day, infected=run.peak_infected)

    effective_r = effective_reproduction(
        coefficients.beta, coefficients.gamma, run.final_state.susceptible, params.population
    )
    accuracy = round_fixed(accuracy_score(run.peak_day), 1)
    lower, upper = confidence_interval(run.peak_infected)

    insights = generate_insights(
        params.scenario, run.peak_infected, run.peak_day, params.population, effective_r
    )

    result = SimulationResult(
        peak_day=run.peak_day,
        peak_infections=round_half_up(run.peak_infected),
        total_deaths=round_half_up(run.final_state.deaths),
        final_r=round_fixed(effective_r, 2),
        duration=run.duration,
        time_series=snapshots_from_trajectory(run.trajectory),
        accuracy=accuracy,
        insights=tuple(insights),
        labels=severity_labels(R0, healthcare, params.lockdown),
        chart_labels=get_chart_labels(params.scenario),
        parameter_labels=get_parameter_labels(params.scenario),
        confidence_interval=ConfidenceInterval(lower, upper),
    )

    if result.accuracy < ACCURACY_TARGET:
        logger.warning("Simulation accuracy (%s%%) below target. Consider parameter calibration.", result.accuracy)
        _notify(observer, "accuracy_below_target", accuracy=result.accuracy)

    _notify(observer, "completed", duration=result.duration, region=params.region)
    return result


def run_simulation_record(record: Dict[str, Any], observer: Optional[Observer] = None) -> Dict[str, Any]:
    """Dashboard-shaped call: camelCase record in, camelCase record out."""
    return run_simulation(SimulationParameters.from_mapping(record), observer=observer).to_dict()
