# src/scenario_forecast/regional/__init__.py

"""
Per-region batch runs of the engine.
"""

from .batch import RegionalBatchConfig, load_regions, run_regions, run_regional_batch, write_summary

__all__ = [
    "RegionalBatchConfig",
    "load_regions",
    "run_regions",
    "run_regional_batch",
    "write_summary",
]
