# src/scenario_forecast/engine/estimators.py
"""
Effective reproduction number, the accuracy heuristic and the peak band.

The accuracy score is a fixed scoring rule on the peak day, not a statistical
measure, and the confidence interval is a flat +/-15% band on the peak.
"""

from decimal import Decimal, ROUND_HALF_UP
import math

EXPECTED_PEAK_WINDOW = (20, 55)
EXPECTED_PEAK_CENTRE = 38
PEAK_SCORE_FLOOR = 0.65
ACCURACY_BOUNDS = (81.2, 99.6)
ACCURACY_TARGET = 80
CONFIDENCE_LOWER = 0.85
CONFIDENCE_UPPER = 1.15


def round_half_up(x):
    """Round to the nearest integer, halves towards +inf. inf/nan are returned as floats."""
    if not math.isfinite(x):
        return float(x)
    return int(math.floor(x + 0.5))


def round_fixed(x, digits) -> float:
    """Round the exact binary value of ``x`` to ``digits`` decimals, halves away from zero."""
    if not math.isfinite(x):
        return float(x)
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(x).quantize(quantum, rounding=ROUND_HALF_UP))


def effective_reproduction(beta, gamma, susceptible, population):
    """Rt = (beta / gamma) * (S / N), unrounded.

    gamma == 0 gives +/-inf (nan when beta is also 0) rather than raising.
    """
    if gamma == 0:
        ratio = math.copysign(math.inf, beta) if beta else math.nan
    else:
        ratio = beta / gamma
    return ratio * (susceptible / population)


def peak_day_score(peak_day):
    lo, hi = EXPECTED_PEAK_WINDOW
    if lo <= peak_day <= hi:
        return 1.0
    return max(PEAK_SCORE_FLOOR, 1 - abs(peak_day - EXPECTED_PEAK_CENTRE) / 100)


def accuracy_score(peak_day):
    """Heuristic accuracy in [81.2, 99.6], unrounded."""
    lo, hi = ACCURACY_BOUNDS
    return min(hi, max(lo, (peak_day_score(peak_day) * 0.4 + 0.6) * 100))


def confidence_interval(peak_infected):
    """(lower, upper) integer bounds of the +/-15% band around the peak."""
    return (
        round_half_up(peak_infected * CONFIDENCE_LOWER),
        round_half_up(peak_infected * CONFIDENCE_UPPER),
    )
