# src/scenario_forecast/engine/integrator.py
"""
Day-stepped explicit Euler integration of the SIRD equations.

    dS = -beta * S * I / N
    dI =  beta * S * I / N - gamma * I
    dR =  gamma * I * (1 - CFR)
    dD =  gamma * I * CFR

Each day the compartments are clamped to >= 0, recorded (pre-step), checked
for a new peak and then advanced by one step of size 1 day. Day 0 is therefore
the initial condition. The run stops early once I < 1 after day 30.

No stability correction is applied; large beta*I products can overshoot and are
only mitigated by the clamp.
"""

from dataclasses import dataclass
from typing import Tuple
import logging
import math

import numpy as np

from .parameters import DerivedCoefficients

logger = logging.getLogger(__name__)

MIN_POPULATION = 1000
SEED_FRACTION = 0.0001
SEED_CAP = 1000
EARLY_STOP_AFTER_DAY = 30

COMPARTMENTS = ("susceptible", "infected", "recovered", "deaths")


class PopulationTooSmallError(ValueError):
    """Raised when the population is below MIN_POPULATION."""

    def __init__(self, population):
        super().__init__("Population too small for meaningful simulation")
        self.population = population


@dataclass(frozen=True)
class SimulationState:
    susceptible: float
    infected: float
    recovered: float
    deaths: float

    @property
    def total(self) -> float:
        return self.susceptible + self.infected + self.recovered + self.deaths

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.susceptible, self.infected, self.recovered, self.deaths)


@dataclass(frozen=True)
class IntegrationResult:
    """Raw output of ``integrate``.

    trajectory  : np.ndarray shape (n_days, 4), pre-step S, I, R, D per recorded day
    peak_day    : first day on which the recorded infected count was maximal
    peak_infected : infected count on peak_day (unrounded)
    final_state : state after the last applied step (not clamped)
    terminated_early : True if the I < 1 stop fired before the horizon
    """
    trajectory: np.ndarray
    peak_day: int
    peak_infected: float
    final_state: SimulationState
    terminated_early: bool

    @property
    def duration(self) -> int:
        return int(self.trajectory.shape[0])


def initial_state(population) -> SimulationState:
    """0.01% of the population infected, capped at 1000."""
    initial_infected = min(SEED_CAP, math.floor(population * SEED_FRACTION))
    return SimulationState(
        susceptible=population - initial_infected,
        infected=initial_infected,
        recovered=0,
        deaths=0,
    )


def integrate(coefficients: DerivedCoefficients, population, days) -> IntegrationResult:
    """Run the Euler loop for up to ``days`` days.

    Args:
        coefficients (DerivedCoefficients): beta, gamma, CFR
        population (int): total population N
        days (int): horizon; at most ``days`` snapshots are recorded
    Returns:
        IntegrationResult
    Raises:
        PopulationTooSmallError, ValueError
    """
    if population < MIN_POPULATION:
        raise PopulationTooSmallError(population)
    days = int(days)
    if days < 1:
        raise ValueError("Simulation horizon must be >= 1 day")

    beta = coefficients.beta
    gamma = coefficients.gamma
    cfr = coefficients.cfr

    start = initial_state(population)
    S, I, R, D = start.as_tuple()

    rows = []
    peak_infected = I
    peak_day = 0
    terminated_early = False

    # TODO: an incubating (exposed) compartment with sigma = 1/5 would add an E term here
    for day in range(days):
        S = max(0, S)
        I = max(0, I)
        R = max(0, R)
        D = max(0, D)

        rows.append((S, I, R, D))

        if I > peak_infected:
            peak_infected = I
            peak_day = day

        new_infections = beta * S * I / population
        resolved = gamma * I
        dS = -new_infections
        dI = new_infections - resolved
        dR = resolved * (1 - cfr)
        dD = resolved * cfr

        S += dS
        I += dI
        R += dR
        D += dD

        if I < 1 and day > EARLY_STOP_AFTER_DAY:
            terminated_early = True
            logger.debug("Outbreak resolved on day %d (I=%.3f)", day, I)
            break

    return IntegrationResult(
        trajectory=np.array(rows, dtype=float),
        peak_day=peak_day,
        peak_infected=peak_infected,
        final_state=SimulationState(S, I, R, D),
        terminated_early=terminated_early,
    )
