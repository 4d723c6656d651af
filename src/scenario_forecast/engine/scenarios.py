# src/scenario_forecast/engine/scenarios.py
"""
Scenario vocabulary and scenario-specific input adjustment.

The numerical core is the same for every scenario. A scenario only renames the
inputs and compartments for display, and pre-scales R0/healthcare before the
coefficients are derived.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

PANDEMIC_SPREAD = "Pandemic Spread"
ECONOMIC_SHOCK = "Economic Shock"
CYBER_INFRASTRUCTURE = "Cyber Infrastructure"
SUPPLY_CHAIN_CRISIS = "Supply Chain Crisis"
CLIMATE_EMERGENCY = "Climate Emergency"
URBAN_MIGRATION = "Urban Migration"
ENERGY_GRID_FAILURE = "Energy Grid Failure"

SCENARIOS = (
    PANDEMIC_SPREAD,
    ECONOMIC_SHOCK,
    CYBER_INFRASTRUCTURE,
    SUPPLY_CHAIN_CRISIS,
    CLIMATE_EMERGENCY,
    URBAN_MIGRATION,
    ENERGY_GRID_FAILURE,
)


@dataclass(frozen=True)
class ParameterLabels:
    r0: str
    healthcare: str
    lockdown: str

    def to_dict(self) -> Dict[str, str]:
        return {"r0": self.r0, "healthcare": self.healthcare, "lockdown": self.lockdown}


@dataclass(frozen=True)
class CompartmentLabels:
    susceptible: str
    infected: str
    recovered: str
    deaths: str
    peak: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "susceptible": self.susceptible,
            "infected": self.infected,
            "recovered": self.recovered,
            "deaths": self.deaths,
            "peak": self.peak,
        }


@dataclass(frozen=True)
class ScenarioContext:
    parameters: ParameterLabels
    chart: CompartmentLabels

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {"parameters": self.parameters.to_dict(), "chart": self.chart.to_dict()}


_DEFAULT_PARAMETER_LABELS = ParameterLabels("Viral R0 Factor", "Healthcare Capacity", "Lockdown Stringency")
_DEFAULT_CHART_LABELS = CompartmentLabels("Susceptible", "Infected", "Recovered", "Fatalities", "Infection Peak")

_PARAMETER_LABELS = {
    PANDEMIC_SPREAD: _DEFAULT_PARAMETER_LABELS,
    ECONOMIC_SHOCK: ParameterLabels("Destabilization Force", "Economic Resilience", "Market Control"),
    CYBER_INFRASTRUCTURE: ParameterLabels("Attack Propagation", "System Defense", "Network Isolation"),
    SUPPLY_CHAIN_CRISIS: ParameterLabels("Disruption Speed", "Logistics Capacity", "Border/Port Restrictions"),
    CLIMATE_EMERGENCY: ParameterLabels("Disaster Escalation", "Response Mobility", "Evacuation Strictness"),
    URBAN_MIGRATION: ParameterLabels("Migration Pull", "Urban Infrastructure", "Zoning Controls"),
    ENERGY_GRID_FAILURE: ParameterLabels("Cascade Speed", "Grid Redundancy", "Usage Curtailment"),
}

_CHART_LABELS = {
    PANDEMIC_SPREAD: _DEFAULT_CHART_LABELS,
    ECONOMIC_SHOCK: CompartmentLabels(
        "Stable Economy", "Struggling Assets", "Restored Growth", "Liquidated Units", "Economic Downturn"),
    CYBER_INFRASTRUCTURE: CompartmentLabels(
        "Secure Nodes", "Compromised", "Patched/Secure", "Permanently Damaged", "System Breach"),
    SUPPLY_CHAIN_CRISIS: CompartmentLabels(
        "Stable Logistics", "Disrupted/Blocked", "Alternative Routes", "Lost Inventory", "Logistics Failure"),
    CLIMATE_EMERGENCY: CompartmentLabels(
        "Safe Zones", "Disaster Zones", "Rehabilitated", "Displaced/Loss", "Environment Impact"),
    URBAN_MIGRATION: CompartmentLabels(
        "Rural Pop", "Migrating", "Urban Settled", "Displaced", "Migration Peak"),
    ENERGY_GRID_FAILURE: CompartmentLabels(
        "Powered Units", "Blackout Zones", "Restored Grid", "Hardware Failure", "Power Outage"),
}

# (R0 multiplier, healthcare multiplier)
_ADJUSTMENTS = {
    ECONOMIC_SHOCK: (1.0, 0.7),
    CLIMATE_EMERGENCY: (1.2, 0.8),
    CYBER_INFRASTRUCTURE: (1.0, 0.5),
}


def get_parameter_labels(scenario: str) -> ParameterLabels:
    return _PARAMETER_LABELS.get(scenario, _DEFAULT_PARAMETER_LABELS)


def get_chart_labels(scenario: str) -> CompartmentLabels:
    return _CHART_LABELS.get(scenario, _DEFAULT_CHART_LABELS)


def get_simulation_context(scenario: str) -> ScenarioContext:
    """Label sets for a scenario; unknown scenarios get the epidemiological defaults.

    Does not depend on any simulation state, so it can be used to preview labels
    before a run.
    """
    return ScenarioContext(parameters=get_parameter_labels(scenario), chart=get_chart_labels(scenario))


def adjust_parameters(scenario: str, R0, healthcare) -> Tuple[float, float]:
    """Apply the scenario pre-scaling to R0 and healthcare.

    Returns:
        (adjusted_R0, adjusted_healthcare)
    """
    if scenario not in _ADJUSTMENTS:
        return R0, healthcare
    r0_scale, healthcare_scale = _ADJUSTMENTS[scenario]
    return R0 * r0_scale, healthcare * healthcare_scale


# ---------- qualitative severity labels ----------

def viral_label(r0) -> str:
    if r0 < 1.0:
        return "Stable (Sub-critical)"
    if r0 < 1.5:
        return "Slow Spread"
    if r0 < 2.5:
        return "Moderate Outbreak"
    if r0 < 4.0:
        return "Rapid Contagion"
    return "Extreme Pandemic"


def healthcare_label(healthcare) -> str:
    if healthcare < 25:
        return "Critical Shortage"
    if healthcare < 50:
        return "Strained Capacity"
    if healthcare < 75:
        return "Standard Care"
    return "Optimal Resilience"


def lockdown_label(lockdown) -> str:
    if lockdown < 20:
        return "Unrestricted"
    if lockdown < 45:
        return "Partial Distancing"
    if lockdown < 75:
        return "Intermediate"
    return "Full Containment"


def severity_labels(R0, healthcare, lockdown) -> ParameterLabels:
    """Qualitative description of the inputs, keyed like the parameter labels."""
    return ParameterLabels(viral_label(R0), healthcare_label(healthcare), lockdown_label(lockdown))
