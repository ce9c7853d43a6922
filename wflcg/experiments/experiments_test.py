"""Tests for the benchmark harness and heatmap plotting."""

import glob
import os

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from wflcg.experiments import plot_heatmap, run_benchmark


def test_every_case_runs():
    for case in run_benchmark.CASES:
        assert run_benchmark.run_single(case, 32) >= 0.0


def test_run_all_rows():
    cases = [("WFLCG", "u32"), ("WFLCG", "direct")]
    rows = run_benchmark.run_all(64, 2, cases)
    assert len(rows) == 4
    assert {(r[0], r[1]) for r in rows} == set(cases)
    assert [r[2] for r in rows] == [0, 1, 0, 1]


def test_main_writes_csv(tmp_path, capsys):
    run_benchmark.main([
        "--iterations", "48",
        "--trials", "1",
        "--generators", "WFLCG,random.Random",
        "--out-dir", str(tmp_path),
    ])
    files = glob.glob(os.path.join(str(tmp_path), "benchmark_*.csv"))
    assert len(files) == 1
    df = pd.read_csv(files[0])
    assert list(df.columns) == run_benchmark.CSV_HEADER
    assert set(df["generator"]) == {"WFLCG", "random.Random"}
    assert len(df) == 7
    assert "CSV saved at" in capsys.readouterr().out


def test_main_rejects_unknown_generator(tmp_path):
    with pytest.raises(SystemExit):
        run_benchmark.main(["--generators", "nope", "--out-dir", str(tmp_path)])


def _frame():
    return pd.DataFrame({
        "generator": ["WFLCG", "WFLCG", "WFLCG", "random.Random", "random.Random"],
        "method": ["u32", "u32", "direct", "u32", "double"],
        "trial": [0, 1, 0, 0, 0],
        "seconds": [1.0, 1.0, 1.0, 1.0, 1.0],
        "ns_per_value": [100.0, 200.0, 20.0, 90.0, 80.0],
    })


def test_prepare_pivot():
    pivot = plot_heatmap.prepare_pivot(_frame())
    assert pivot.index.tolist() == ["WFLCG", "random.Random"]
    assert pivot.columns.tolist() == ["u32", "double", "direct"]
    assert pivot.loc["WFLCG", "u32"] == 150.0
    assert pd.isna(pivot.loc["WFLCG", "double"])
    assert pd.isna(pivot.loc["random.Random", "direct"])


def test_plot_saves_png(tmp_path):
    out = tmp_path / "plots" / "heat.png"
    pivot = plot_heatmap.prepare_pivot(_frame())
    plot_heatmap.plot_heatmap(pivot, out_file=str(out), show=False)
    assert out.exists()


def test_load_results_requires_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("a,b\n1,2\n")
    with pytest.raises(SystemExit):
        plot_heatmap.load_results(str(path))


def test_plot_main(tmp_path):
    csv_path = tmp_path / "bench.csv"
    _frame().to_csv(csv_path, index=False)
    out = tmp_path / "heat.png"
    plot_heatmap.main(["--csv", str(csv_path), "--out", str(out), "--no-show"])
    assert out.exists()
