# src/scenario_forecast/plotting/__init__.py

from .series import plot_time_series

__all__ = ["plot_time_series"]
