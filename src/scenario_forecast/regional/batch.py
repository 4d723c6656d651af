# src/scenario_forecast/regional/batch.py
"""
Run one independent simulation per region and tabulate the headline numbers.

Regions come either from a ``state_data`` JSON file

    {"state_data": {"Kerala": {"population": 35699443, ...}, ...}}

(a bare {region: {...}} mapping is accepted too) or from a CSV with
``region`` and ``population`` columns. Regions too small to simulate are
skipped with a warning rather than aborting the batch.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple
import json
import logging

import pandas as pd

from ..engine.integrator import PopulationTooSmallError
from ..engine.parameters import DEFAULT_DAYS, DEFAULT_SCENARIO, SimulationParameters
from ..engine.simulate import run_simulation

# Start logger
logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    "region",
    "population",
    "peak_day",
    "peak_infections",
    "total_deaths",
    "final_r",
    "duration",
    "accuracy",
    "ci_lower",
    "ci_upper",
]


@dataclass
class RegionalBatchConfig:
    input_path: str = "data/state_data.json"
    out_path: Optional[str] = "data/regional_summary.csv"
    scenario: str = DEFAULT_SCENARIO
    R0: float = 2.5
    healthcare: float = 60.0
    lockdown: float = 80.0
    days: int = DEFAULT_DAYS


def load_regions(path) -> List[Tuple[str, int]]:
    """Read (region, population) pairs from a JSON or CSV file."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Region file not found: {path}")

    if p.suffix.lower() == ".json":
        with p.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        table = data.get("state_data", data) if isinstance(data, dict) else None
        if not isinstance(table, dict):
            raise ValueError(f"Expected a mapping of regions in {path}")
        regions = []
        for name, info in table.items():
            if not isinstance(info, dict) or "population" not in info:
                raise ValueError(f"Region '{name}' has no population field")
            regions.append((str(name), int(info["population"])))
        return regions

    df = pd.read_csv(p)
    missing = [c for c in ("region", "population") if c not in df.columns]
    if missing:
        raise ValueError(f"Region CSV missing required columns: {missing}")
    return [(str(r), int(n)) for r, n in zip(df["region"], df["population"])]


def run_regions(
    regions: Iterable[Tuple[str, int]],
    scenario=DEFAULT_SCENARIO,
    R0=2.5,
    healthcare=60.0,
    lockdown=80.0,
    days=DEFAULT_DAYS,
) -> pd.DataFrame:
    """Simulate every region with the same scenario inputs.

    Returns:
        pd.DataFrame with SUMMARY_COLUMNS, one row per simulated region
    """
    rows: List[Dict] = []
    for region, population in regions:
        params = SimulationParameters(
            scenario=scenario,
            R0=R0,
            healthcare=healthcare,
            lockdown=lockdown,
            population=population,
            days=days,
            region=region,
        )
        try:
            result = run_simulation(params)
        except PopulationTooSmallError:
            logger.warning("Skipping region %s: population %d too small", region, population)
            continue

        rows.append({
            "region": region,
            "population": population,
            "peak_day": result.peak_day,
            "peak_infections": result.peak_infections,
            "total_deaths": result.total_deaths,
            "final_r": result.final_r,
            "duration": result.duration,
            "accuracy": result.accuracy,
            "ci_lower": result.confidence_interval.lower,
            "ci_upper": result.confidence_interval.upper,
        })

    logger.info("Simulated %d regions for scenario %s", len(rows), scenario)
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def write_summary(summary: pd.DataFrame, out_path) -> Path:
    csv_path = Path(out_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    summary.to_csv(csv_path, index=False, columns=SUMMARY_COLUMNS)
    return csv_path


def run_regional_batch(cfg: RegionalBatchConfig):
    """Load regions, simulate them and optionally write the summary CSV.

    Returns:
        (summary DataFrame, csv path or None)
    """
    regions = load_regions(cfg.input_path)
    summary = run_regions(
        regions,
        scenario=cfg.scenario,
        R0=cfg.R0,
        healthcare=cfg.healthcare,
        lockdown=cfg.lockdown,
        days=cfg.days,
    )
    csv_path = None
    if cfg.out_path is not None:
        csv_path = write_summary(summary, cfg.out_path)
        logger.info("Regional summary written to: %s", csv_path)
    return summary, csv_path
