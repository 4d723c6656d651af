import json

from scenario_forecast.engine.parameters import SimulationParameters
from scenario_forecast.engine.simulate import run_simulation
from scenario_forecast.plotting.series import compartment_arrays, plot_time_series
from scenario_forecast.runner import main


def test_plot_time_series_writes_png(tmp_path):
    result = run_simulation(SimulationParameters(R0=3.0, healthcare=0, lockdown=0, population=1_000_000))
    out = plot_time_series(result, save_path=str(tmp_path / "figs" / "series.png"))
    assert out.exists()
    assert out.stat().st_size > 0


def test_compartment_arrays():
    result = run_simulation(SimulationParameters(population=100_000))
    days, series = compartment_arrays(result)
    assert len(days) == result.duration
    assert set(series) == {"susceptible", "infected", "recovered", "deaths"}


def test_runner_context(capsys):
    assert main(["context", "--scenario", "Economic Shock"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["parameters"]["r0"] == "Destabilization Force"
    assert out["chart"]["peak"] == "Economic Downturn"


def test_runner_simulate_json_and_csv(capsys, tmp_path):
    csv_out = tmp_path / "series.csv"
    status = main(["simulate", "--json", "--population", "10000000", "--csv", str(csv_out)])
    assert status == 0
    stdout = capsys.readouterr().out
    record = json.loads(stdout[: stdout.rindex("}") + 1])
    assert record["peakInfections"] == 1000
    assert csv_out.exists()


def test_runner_validate_exit_code(capsys):
    # default inputs peak on day 0, so the realistic-peak check fails
    assert main(["validate"]) == 1
    assert "realisticPeak: FAILED" in capsys.readouterr().out


def test_runner_regions(tmp_path, capsys):
    src = tmp_path / "state_data.json"
    src.write_text(json.dumps({"state_data": {"A": {"population": 40_000}}}))
    out = tmp_path / "summary.csv"
    assert main(["regions", "--input", str(src), "--out", str(out)]) == 0
    assert out.exists()
