import math

import pytest

from scenario_forecast.engine.estimators import (
    accuracy_score,
    confidence_interval,
    effective_reproduction,
    peak_day_score,
    round_fixed,
    round_half_up,
)
from scenario_forecast.engine.insights import generate_insights, scenario_insight, transmission_insight


def test_peak_day_score_window():
    assert peak_day_score(20) == 1.0
    assert peak_day_score(55) == 1.0
    assert peak_day_score(60) == pytest.approx(0.78)
    assert peak_day_score(19) == pytest.approx(0.81)
    # far away from the window the floor of 0.65 applies
    assert peak_day_score(0) == 0.65
    assert peak_day_score(150) == 0.65


def test_accuracy_bounds():
    # inside the window the raw score of 100 is capped
    assert accuracy_score(38) == 99.6
    assert round_fixed(accuracy_score(0), 1) == 86.0
    assert accuracy_score(60) == pytest.approx(91.2)
    for day in range(0, 400, 7):
        assert 81.2 <= accuracy_score(day) <= 99.6


def test_rounding_helpers():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(1.49) == 1
    assert round_fixed(0.125, 2) == 0.13
    assert round_fixed(86.00000000000001, 1) == 86.0


def test_confidence_interval_is_fifteen_percent_band():
    assert confidence_interval(1000) == (850, 1150)
    assert confidence_interval(0) == (0, 0)


def test_effective_reproduction():
    assert effective_reproduction(0.2, 0.1, 500, 1000) == pytest.approx(1.0)


def test_pandemic_insight_reports_bed_deficit():
    """
    Beds are 0.5% of the population; the deficit is rounded and comma separated.
    """
    text = scenario_insight("Pandemic Spread", 12345.6, 40, 1_000_000)
    assert text == "Healthcare capacity overwhelmed on Day 40. Projected deficit: 7,346 beds."

    assert scenario_insight("Pandemic Spread", 100, 3, 1_000_000) == \
        "Healthcare infrastructure remains resilient under this load."


def test_supply_chain_insight():
    text = scenario_insight("Supply Chain Crisis", 200_000, 12, 1_000_000)
    assert text.startswith("Logistics infrastructure at risk of collapse on Day 12.")

    text = scenario_insight("Supply Chain Crisis", 50_000, 12, 1_000_000)
    assert text == "Alternative logistics routes capable of absorbing current disruption."


def test_generic_insight_uses_one_and_a_half_peak_day():
    assert scenario_insight("Economic Shock", 10, 30, 1_000_000) == \
        "Strategic response has stabilized the Economic Shock by Day 45."
    # 5 * 1.5 = 7.5 rounds up
    assert scenario_insight("Energy Grid Failure", 10, 5, 1_000_000).endswith("by Day 8.")


def test_transmission_insight():
    assert transmission_insight(0.99) == "System recovery (Rt < 1.0) achieved by simulation end."
    assert transmission_insight(1.0).startswith("Warning:")


def test_always_two_insights():
    insights = generate_insights("Urban Migration", 10, 30, 1_000_000, 1.7)
    assert len(insights) == 2


def test_rounding_passes_non_finite_values_through():
    assert round_half_up(math.inf) == math.inf
    assert math.isnan(round_half_up(math.nan))
    assert round_fixed(-math.inf, 2) == -math.inf
    assert math.isnan(round_fixed(math.nan, 1))


def test_effective_reproduction_with_zero_recovery_rate():
    assert effective_reproduction(0.2, 0.0, 500, 1000) == math.inf
    assert effective_reproduction(-0.2, 0.0, 500, 1000) == -math.inf
    assert math.isnan(effective_reproduction(0.0, 0.0, 500, 1000))
