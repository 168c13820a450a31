"""
Tests for result loading, statistics and summary generation.
"""

import os

import pandas as pd
import pytest

from plotter import (
    SUMMARY_STATS_FILE_NAME,
    sanitize_filename,
    get_implementation_sort_key,
    load_data_file,
    calculate_stats_excluding_warmup,
    generate_all_plots,
)

HEADER = "Run,Timestamp,Time(s),Size,MElements/s,Verified\n"


def _write_results(path, times):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w") as f:
        f.write(HEADER)
        for run_number, t in enumerate(times, start=1):
            f.write(f"{run_number},2026-01-01 00:00:00,{t},1000,{1.0 / t:.2f},True\n")


class TestHelpers:

    def test_sanitize_filename(self):
        assert sanitize_filename("MElements/s") == "MElements_s"
        assert sanitize_filename("a b:c") == "a_b_c"

    def test_radix_sorts_before_baselines(self):
        names = ["python_sorted_stats", "lsd_radix_sort_stats", "numpy_sort_stats"]
        assert sorted(names, key=get_implementation_sort_key) == [
            "lsd_radix_sort_stats", "numpy_sort_stats", "python_sorted_stats"]


class TestLoadDataFile:

    def test_drops_failed_runs(self, tmp_path):
        path = tmp_path / "r.txt"
        path.write_text(HEADER
                        + "1,2026-01-01 00:00:00,0.5,10,1.00,True\n"
                        + "2,2026-01-01 00:00:00,inf,10,0.0,False\n")
        df = load_data_file(str(path))
        assert df["Run"].tolist() == [1]

    def test_missing_columns(self, tmp_path, capsys):
        path = tmp_path / "r.txt"
        path.write_text("a,b\n1,2\n")
        assert load_data_file(str(path)) is None
        assert "Warning:" in capsys.readouterr().out

    def test_empty_file(self, tmp_path):
        path = tmp_path / "r.txt"
        path.write_text("")
        assert load_data_file(str(path)) is None

    def test_missing_file(self, tmp_path):
        assert load_data_file(str(tmp_path / "missing.txt")) is None


class TestCalculateStats:

    def test_basic_stats(self):
        stats = calculate_stats_excluding_warmup(pd.Series([1.0, 2.0, 3.0]))
        assert stats["mean"] == pytest.approx(2.0)
        assert stats["median"] == pytest.approx(2.0)
        assert stats["stdev"] == pytest.approx(1.0)
        assert stats["count"] == 3

    def test_single_value_has_zero_stdev(self):
        assert calculate_stats_excluding_warmup(pd.Series([4.0]))["stdev"] == 0.0

    def test_non_series(self):
        assert calculate_stats_excluding_warmup([1, 2])["count"] == 0


class TestGenerateAllPlots:

    def test_summary_and_plots_written(self, tmp_path):
        results_dir = tmp_path / "results"
        output_dir = tmp_path / "out"
        size_dir = results_dir / "radix_sort" / "1000"
        _write_results(str(size_dir / "lsd_radix_sort_stats.txt"), [0.9, 0.4, 0.4, 0.4])
        _write_results(str(size_dir / "python_sorted_stats.txt"), [0.3, 0.1, 0.1, 0.1])

        summary_df = generate_all_plots(str(results_dir), str(output_dir))

        assert os.path.exists(output_dir / SUMMARY_STATS_FILE_NAME)
        radix_time = summary_df[(summary_df["Implementation"] == "lsd_radix_sort_stats")
                                & (summary_df["Metric"] == "Time(s)")].iloc[0]
        assert radix_time["Median"] == pytest.approx(0.4)
        assert radix_time["Count"] == 3

        ratio = summary_df[summary_df["Metric"] == "Median Time Ratio"].iloc[0]
        assert ratio["Median"] == pytest.approx(4.0)

        plot_dir = output_dir / "radix_sort" / "1000"
        assert (plot_dir / "comparison_average_Times_excl_warmup_log.png").exists()
        assert (plot_dir / "lsd_radix_sort_stats_Times_vs_run_excl_warmup.png").exists()

    def test_no_results(self, tmp_path, capsys):
        assert generate_all_plots(str(tmp_path / "empty"), str(tmp_path / "out")) is None
        assert "No summary statistics" in capsys.readouterr().out
