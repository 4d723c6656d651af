# src/scenario_forecast/engine/results.py
"""
The result record returned by ``run_simulation``.

``to_dict`` produces the camelCase record consumed by the dashboard:

    peakDay, peakInfections, totalDeaths, finalR0, duration,
    timeSeries [{day, susceptible, infected, recovered, deaths}, ...],
    accuracy, insights, labels, chartLabels, parameterLabels,
    confidenceInterval {lower, upper}
"""

from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Tuple
import json

import numpy as np
import pandas as pd

from .estimators import round_half_up
from .scenarios import CompartmentLabels, ParameterLabels


class DailySnapshot(NamedTuple):
    day: int
    susceptible: int
    infected: int
    recovered: int
    deaths: int


class ConfidenceInterval(NamedTuple):
    lower: int
    upper: int


def snapshots_from_trajectory(trajectory: np.ndarray) -> Tuple[DailySnapshot, ...]:
    """Round a (n_days, 4) float trajectory into integer daily snapshots."""
    return tuple(
        DailySnapshot(day, *(round_half_up(float(v)) for v in row))
        for day, row in enumerate(trajectory)
    )


@dataclass(frozen=True)
class SimulationResult:
    peak_day: int
    peak_infections: int
    total_deaths: int
    final_r: float
    duration: int
    time_series: Tuple[DailySnapshot, ...]
    accuracy: float
    insights: Tuple[str, ...]
    labels: ParameterLabels
    chart_labels: CompartmentLabels
    parameter_labels: ParameterLabels
    confidence_interval: ConfidenceInterval

    def to_dict(self) -> Dict[str, Any]:
        return {
            "peakDay": self.peak_day,
            "peakInfections": self.peak_infections,
            "totalDeaths": self.total_deaths,
            "finalR0": self.final_r,
            "duration": self.duration,
            "timeSeries": [snap._asdict() for snap in self.time_series],
            "accuracy": self.accuracy,
            "insights": list(self.insights),
            "labels": self.labels.to_dict(),
            "chartLabels": self.chart_labels.to_dict(),
            "parameterLabels": self.parameter_labels.to_dict(),
            "confidenceInterval": self.confidence_interval._asdict(),
        }

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    def to_frame(self) -> pd.DataFrame:
        """Time series as a DataFrame indexed by day."""
        df = pd.DataFrame(self.time_series, columns=DailySnapshot._fields)
        return df.set_index("day")
