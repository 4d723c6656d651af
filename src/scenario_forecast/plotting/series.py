# src/scenario_forecast/plotting/series.py
from pathlib import Path
from typing import Optional, Tuple
import logging

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from ..engine.results import SimulationResult

logger = logging.getLogger(__name__)

# one colour per compartment, in time series order
COMPARTMENT_COLOURS = {
    "susceptible": "#1f77b4",
    "infected": "#d62728",
    "recovered": "#2ca02c",
    "deaths": "#7f7f7f",
}


def compartment_arrays(result: SimulationResult):
    """Days and a dict of compartment arrays from the result's time series."""
    arr = np.array([tuple(snap) for snap in result.time_series], dtype=float)
    days = arr[:, 0]
    series = {name: arr[:, i + 1] for i, name in enumerate(COMPARTMENT_COLOURS)}
    return days, series


def plot_time_series(
    result: SimulationResult,
    save_path: str = "figs/time_series.png",
    title: Optional[str] = None,
    log_scale: bool = False,
    figsize: Tuple[int, int] = (10, 6),
):
    """
    Plot the four compartments with the scenario's chart labels and mark the peak.
    Returns the saved path.
    """
    labels = result.chart_labels.to_dict()
    days, series = compartment_arrays(result)

    fig, ax = plt.subplots(figsize=figsize)
    for name, colour in COMPARTMENT_COLOURS.items():
        ax.plot(days, series[name], color=colour, linewidth=1.8, label=labels[name])

    # peak marker
    ax.axvline(result.peak_day, color="black", linestyle="--", linewidth=1.0, alpha=0.6)
    ax.scatter([result.peak_day], [result.peak_infections], color="red", s=30, zorder=3,
               label=f"{labels['peak']} (day {result.peak_day})")

    if log_scale:
        ax.set_yscale("symlog")
    ax.set_xlabel("Day")
    ax.set_ylabel("Population")
    ax.set_title(title or f"{labels['peak']}: {result.peak_infections:,} at day {result.peak_day}")
    ax.grid(alpha=0.25)
    ax.legend(loc="upper right", fontsize="small")
    Path(save_path).parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    logger.info("Saved time series plot to %s", save_path)
    return Path(save_path)
