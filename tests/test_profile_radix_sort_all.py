"""
Tests for the radix sort profiling harness.
"""

import os

import pandas as pd
import pytest

from algorithms.radix_sort.single_threaded import radix_sort
from performance_profiling.radix_sort import profile_radix_sort_all
from performance_profiling.radix_sort.profile_radix_sort_all import (
    IMPL_CONFIG,
    profile_and_save_stats,
    run_radix_sort_benchmark,
)
from performance_profiling.radix_sort.array_generation import save_arrays, load_arrays


def _result_dir(base, size):
    return os.path.join(str(base), "radix_sort", str(size))


class TestProfileAndSaveStats:

    def test_writes_one_file_per_implementation(self, tmp_path):
        run_times = profile_and_save_stats(200, 3, output_base=str(tmp_path))

        assert set(run_times) == set(IMPL_CONFIG)
        for key, config_item in IMPL_CONFIG.items():
            assert len(run_times[key]) == 3
            df = pd.read_csv(os.path.join(_result_dir(tmp_path, 200), config_item["file_suffix"]))
            assert list(df.columns) == ["Run", "Timestamp", "Time(s)", "Size", "MElements/s", "Verified"]
            assert df["Run"].tolist() == [1, 2, 3]
            assert df["Verified"].all()
            assert (df["Size"] == 200).all()

    def test_baselines_can_be_skipped(self, tmp_path):
        run_times = profile_and_save_stats(50, 2, run_baselines=False, output_base=str(tmp_path))

        assert list(run_times) == ["lsd_radix_sort"]
        assert os.listdir(_result_dir(tmp_path, 50)) == ["lsd_radix_sort_stats.txt"]

    def test_failing_run_is_recorded_as_inf(self, tmp_path, monkeypatch, capsys):
        def broken_sort(arr):
            raise RuntimeError("boom")

        broken_config = {"lsd_radix_sort": dict(IMPL_CONFIG["lsd_radix_sort"], func=broken_sort)}
        monkeypatch.setattr(profile_radix_sort_all, "IMPL_CONFIG", broken_config)

        run_times = profile_and_save_stats(10, 2, output_base=str(tmp_path))

        assert run_times["lsd_radix_sort"] == [float("inf"), float("inf")]
        df = pd.read_csv(os.path.join(_result_dir(tmp_path, 10), "lsd_radix_sort_stats.txt"))
        assert not df["Verified"].any()
        assert "Error during" in capsys.readouterr().out

    def test_unsorted_result_is_not_verified(self, tmp_path, monkeypatch, capsys):
        def reversed_sort(arr):
            return sorted(arr, reverse=True)

        bad_config = {"python_sorted": dict(IMPL_CONFIG["python_sorted"], func=reversed_sort)}
        monkeypatch.setattr(profile_radix_sort_all, "IMPL_CONFIG", bad_config)

        profile_and_save_stats(30, 1, output_base=str(tmp_path))

        df = pd.read_csv(os.path.join(_result_dir(tmp_path, 30), "python_sorted_stats.txt"))
        assert df["Verified"].tolist() == [False]
        assert "first order violation at index 0" in capsys.readouterr().out

    def test_uses_pre_generated_arrays(self, tmp_path, monkeypatch):
        arrays_file = save_arrays(40, num_arrays=2, output_dir=str(tmp_path / "arrays"))
        seen = []

        def recording_sort(arr):
            seen.append(list(arr))
            return radix_sort(arr)

        config = {"lsd_radix_sort": dict(IMPL_CONFIG["lsd_radix_sort"], func=recording_sort)}
        monkeypatch.setattr(profile_radix_sort_all, "IMPL_CONFIG", config)

        profile_and_save_stats(40, 3, output_base=str(tmp_path), arrays_file=arrays_file)

        expected = load_arrays(arrays_file)
        assert seen == [expected[0], expected[1], expected[0]]

    def test_pre_generated_size_mismatch_rejected(self, tmp_path):
        arrays_file = save_arrays(10, num_arrays=1, output_dir=str(tmp_path))
        with pytest.raises(ValueError):
            profile_and_save_stats(20, 1, output_base=str(tmp_path), arrays_file=arrays_file)


class TestRunRadixSortBenchmark:

    def test_prints_system_info(self, tmp_path, capsys):
        run_radix_sort_benchmark(20, 1, run_baselines=False, output_base=str(tmp_path))
        out = capsys.readouterr().out
        assert "CPU Info:" in out
        assert "RAM Info:" in out
