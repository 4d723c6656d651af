# src/scenario_forecast/engine/insights.py
from typing import List

from .estimators import round_half_up
from .scenarios import PANDEMIC_SPREAD, SUPPLY_CHAIN_CRISIS

BED_CAPACITY_FRACTION = 0.005
LOGISTICS_CAPACITY_FRACTION = 0.1


def scenario_insight(scenario, peak_infected, peak_day, population) -> str:
    """First insight: scenario-specific reading of the peak."""
    if scenario == PANDEMIC_SPREAD:
        total_beds = population * BED_CAPACITY_FRACTION
        if peak_infected > total_beds:
            deficit = round_half_up(peak_infected - total_beds)
            return f"Healthcare capacity overwhelmed on Day {peak_day}. Projected deficit: {deficit:,} beds."
        return "Healthcare infrastructure remains resilient under this load."

    if scenario == SUPPLY_CHAIN_CRISIS:
        if peak_infected > population * LOGISTICS_CAPACITY_FRACTION:
            return (f"Logistics infrastructure at risk of collapse on Day {peak_day}. "
                    "National stock reserves likely to be depleted.")
        return "Alternative logistics routes capable of absorbing current disruption."

    return f"Strategic response has stabilized the {scenario} by Day {round_half_up(peak_day * 1.5)}."


def transmission_insight(effective_r) -> str:
    """Second insight: whether Rt ended below 1."""
    if effective_r < 1:
        return "System recovery (Rt < 1.0) achieved by simulation end."
    return "Warning: Potential for further instability remains active at simulation end."


def generate_insights(scenario, peak_infected, peak_day, population, effective_r) -> List[str]:
    """Always two insights: scenario-conditioned, then Rt-conditioned.

    ``peak_infected`` and ``effective_r`` are the unrounded values.
    """
    return [
        scenario_insight(scenario, peak_infected, peak_day, population),
        transmission_insight(effective_r),
    ]
