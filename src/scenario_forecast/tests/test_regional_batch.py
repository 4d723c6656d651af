import csv
import json

import pandas as pd
import pytest

from scenario_forecast.regional.batch import (
    SUMMARY_COLUMNS,
    RegionalBatchConfig,
    load_regions,
    run_regional_batch,
    run_regions,
    write_summary,
)


def write_state_data(path, table):
    path.write_text(json.dumps({"state_data": table}))
    return path


def test_batch_from_state_data_json(tmp_path):
    """
    - one summary row per region large enough to simulate
    - regions below 1000 people are skipped
    - CSV is written with the summary header
    """
    src = write_state_data(tmp_path / "state_data.json", {
        "Alpha": {"population": 2_000_000, "density": 400},
        "Tiny": {"population": 500},
        "Beta": {"population": 50_000},
    })
    out_csv = tmp_path / "out" / "summary.csv"

    summary, csv_path = run_regional_batch(RegionalBatchConfig(input_path=str(src), out_path=str(out_csv)))

    assert list(summary["region"]) == ["Alpha", "Beta"]
    assert list(summary.columns) == SUMMARY_COLUMNS
    assert csv_path == out_csv
    rows = list(csv.reader(csv_path.open()))
    assert rows[0] == SUMMARY_COLUMNS
    assert len(rows) == 3


def test_regions_are_independent():
    """
    A region's numbers do not depend on which other regions share the batch.
    """
    together = run_regions([("A", 300_000), ("B", 80_000)], R0=3.0, healthcare=10, lockdown=0)
    alone = run_regions([("B", 80_000)], R0=3.0, healthcare=10, lockdown=0)
    assert together.iloc[1].to_dict() == alone.iloc[0].to_dict()


def test_load_regions_csv_and_bare_json(tmp_path):
    csv_src = tmp_path / "regions.csv"
    pd.DataFrame({"region": ["X", "Y"], "population": [10_000, 20_000]}).to_csv(csv_src, index=False)
    assert load_regions(csv_src) == [("X", 10_000), ("Y", 20_000)]

    bare = tmp_path / "bare.json"
    bare.write_text(json.dumps({"Z": {"population": 12_345}}))
    assert load_regions(bare) == [("Z", 12_345)]


def test_load_regions_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_regions(tmp_path / "missing.json")

    bad_csv = tmp_path / "bad.csv"
    pd.DataFrame({"name": ["X"], "pop": [1]}).to_csv(bad_csv, index=False)
    with pytest.raises(ValueError):
        load_regions(bad_csv)

    no_pop = write_state_data(tmp_path / "no_pop.json", {"X": {"density": 3}})
    with pytest.raises(ValueError):
        load_regions(no_pop)


def test_write_summary_round_trips_through_pandas(tmp_path):
    summary = run_regions([("A", 300_000), ("B", 80_000)], R0=3.0, healthcare=10, lockdown=0)
    path = write_summary(summary, tmp_path / "nested" / "summary.csv")

    back = pd.read_csv(path)
    assert list(back.columns) == SUMMARY_COLUMNS
    assert list(back["region"]) == ["A", "B"]
    assert list(back["peak_infections"]) == list(summary["peak_infections"])
    assert list(back["final_r"]) == pytest.approx(list(summary["final_r"]))
