# src/scenario_forecast/engine/parameters.py
"""
Caller-facing simulation parameters and the model coefficients derived from them.

Raw inputs use the dashboard scale:
    R0          : transmissibility factor, nominally 0-5
    healthcare  : healthcare capacity, percent 0-100
    lockdown    : containment stringency, percent 0-100

None of these are range checked. Values outside the nominal ranges still go
through the formulas below; ``nominal_range_warnings`` only reports them.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

# Model constants
INFECTIOUS_PERIOD_DAYS = 12
LOCKDOWN_MAX_REDUCTION = 0.85
HEALTHCARE_RECOVERY_DIVISOR = 200.0
BASELINE_CFR = 0.02
CFR_FLOOR_FACTOR = 0.2
CFR_GAMMA_SCALE = 0.15

DEFAULT_SCENARIO = "Pandemic Spread"
DEFAULT_DAYS = 180


@dataclass(frozen=True)
class SimulationParameters:
    scenario: str = DEFAULT_SCENARIO
    R0: float = 2.5
    healthcare: float = 60.0
    lockdown: float = 80.0
    population: int = 10_000_000
    days: int = DEFAULT_DAYS
    region: Optional[str] = None

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> "SimulationParameters":
        """Build parameters from the camelCase record used by the dashboard.

        ``state`` is accepted as an alias of ``region``; ``days`` defaults to 180.
        """
        region = record.get("region", record.get("state"))
        days = record.get("days")
        return cls(
            scenario=record.get("scenario", DEFAULT_SCENARIO),
            R0=float(record["R0"]),
            healthcare=float(record["healthcare"]),
            lockdown=float(record["lockdown"]),
            population=int(record["population"]),
            days=DEFAULT_DAYS if days is None else int(days),
            region=region,
        )


@dataclass(frozen=True)
class DerivedCoefficients:
    beta: float
    gamma: float
    cfr: float

    @property
    def basic_reproduction(self) -> float:
        """beta / gamma, the R0 the integrator actually sees."""
        return self.beta / self.gamma


def lockdown_factor(lockdown):
    # Containment cuts transmission by at most 85%
    return 1 - (lockdown / 100) * LOCKDOWN_MAX_REDUCTION


def healthcare_factor(healthcare):
    # Healthcare raises the recovery rate by up to 50%
    return 1 + (healthcare / HEALTHCARE_RECOVERY_DIVISOR)


def case_fatality_rate(gamma):
    """Healthcare-dependent CFR, never below 20% of the 2% baseline."""
    reduction = max(CFR_FLOOR_FACTOR, 1 - (gamma / CFR_GAMMA_SCALE))
    return BASELINE_CFR * reduction


def derive_coefficients(R0, healthcare, lockdown) -> DerivedCoefficients:
    """Map raw (already scenario-adjusted) inputs onto beta, gamma and CFR.

    Args:
        R0 (float): transmissibility factor
        healthcare (float): healthcare capacity percent
        lockdown (float): containment stringency percent
    Returns:
        DerivedCoefficients
    """
    beta = (R0 * lockdown_factor(lockdown)) / INFECTIOUS_PERIOD_DAYS
    gamma = (1 / INFECTIOUS_PERIOD_DAYS) * healthcare_factor(healthcare)
    return DerivedCoefficients(beta=beta, gamma=gamma, cfr=case_fatality_rate(gamma))


def nominal_range_warnings(params: SimulationParameters) -> List[str]:
    """List inputs that sit outside their nominal ranges (they are still simulated)."""
    notes = []
    if not 0 <= params.R0 <= 5:
        notes.append(f"R0={params.R0} outside nominal range 0-5")
    if not 0 <= params.healthcare <= 100:
        notes.append(f"healthcare={params.healthcare} outside nominal range 0-100")
    if not 0 <= params.lockdown <= 100:
        notes.append(f"lockdown={params.lockdown} outside nominal range 0-100")
    return notes
