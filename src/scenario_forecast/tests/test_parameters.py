import pytest

from scenario_forecast.engine.parameters import (
    BASELINE_CFR,
    SimulationParameters,
    derive_coefficients,
    nominal_range_warnings,
)


def test_reference_coefficients():
    """
    R0=2.5, healthcare=60, lockdown=80:
    - lockdown factor 1 - 0.8 * 0.85 = 0.32
    - healthcare factor 1 + 60/200 = 1.3
    """
    c = derive_coefficients(2.5, 60, 80)

    assert c.beta == pytest.approx(2.5 * 0.32 / 12)
    assert c.gamma == pytest.approx(1.3 / 12)
    # 1 - gamma/0.15 is above the 0.2 floor here
    assert c.cfr == pytest.approx(0.02 * (1 - (1.3 / 12) / 0.15))


def test_full_lockdown_keeps_15_percent_of_transmission():
    c = derive_coefficients(4.0, 0, 100)
    assert c.beta == pytest.approx(4.0 * 0.15 / 12)


def test_cfr_floor_applies_with_high_healthcare():
    """
    healthcare=100 gives gamma=0.125, 1 - 0.125/0.15 < 0.2 so the floor is used.
    """
    c = derive_coefficients(2.5, 100, 0)
    assert c.gamma == pytest.approx(0.125)
    assert c.cfr == pytest.approx(BASELINE_CFR * 0.2)


def test_no_healthcare_gives_base_recovery():
    c = derive_coefficients(2.5, 0, 0)
    assert c.gamma == pytest.approx(1 / 12)
    assert c.basic_reproduction == pytest.approx(2.5)


def test_out_of_range_inputs_are_not_rejected():
    """
    Negative R0 still produces a (non-physical) negative beta.
    """
    c = derive_coefficients(-1.0, 150, 120)
    assert c.beta < 0
    assert c.cfr >= BASELINE_CFR * 0.2


def test_from_mapping_accepts_dashboard_record():
    params = SimulationParameters.from_mapping({
        "scenario": "Economic Shock",
        "R0": 3,
        "healthcare": 40,
        "lockdown": 10,
        "population": 2_000_000,
        "state": "Kerala",
    })

    assert params.scenario == "Economic Shock"
    assert params.R0 == 3.0
    assert params.days == 180
    assert params.region == "Kerala"


def test_nominal_range_warnings():
    ok = SimulationParameters(R0=2.5, healthcare=60, lockdown=80)
    assert nominal_range_warnings(ok) == []

    bad = SimulationParameters(R0=7.0, healthcare=-5, lockdown=101)
    notes = nominal_range_warnings(bad)
    assert len(notes) == 3
