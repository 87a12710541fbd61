import os

import pandas as pd
import pytest

from performance_profiling.singleton import profile_singleton_all
from performance_profiling.singleton.profile_singleton_all import (
    IMPL_CONFIG, melements_per_second, profile_and_save_stats
)


def test_melements_per_second():
    assert melements_per_second(2_000_000, 2.0) == 1.0
    assert melements_per_second(0, 1.0) == 0.0
    assert melements_per_second(10, 0.0) == 0.0


def test_writes_one_stats_file_per_implementation(tmp_path):
    summary = profile_and_save_stats(64, 3, output_base=str(tmp_path))

    assert set(summary) == set(IMPL_CONFIG)
    for impl_key, config_item in IMPL_CONFIG.items():
        assert summary[impl_key]["disagreements"] == 0
        assert summary[impl_key]["errors"] == 0
        assert len(summary[impl_key]["times"]) == 3
        df = pd.read_csv(os.path.join(str(tmp_path), "singleton", "64", config_item["file_suffix"]))
        assert list(df.columns) == ["Run", "Timestamp", "Time(s)", "Size", "MElements/s"]
        assert df["Run"].tolist() == [1, 2, 3]
        assert (df["Size"] == 127).all()


def test_empty_samples_are_profiled(tmp_path):
    summary = profile_and_save_stats(0, 2, output_base=str(tmp_path), implementations=["xor", "radix"])
    assert set(summary) == {"xor", "radix"}
    assert all(impl["disagreements"] == 0 for impl in summary.values())


def test_unknown_implementation_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        profile_and_save_stats(10, 1, output_base=str(tmp_path), implementations=["bogo"])


def test_failing_finder_is_recorded_as_inf(tmp_path, monkeypatch):
    def broken(arr):
        raise RuntimeError("boom")

    monkeypatch.setitem(IMPL_CONFIG, "xor", dict(IMPL_CONFIG["xor"], func=broken))
    summary = profile_and_save_stats(10, 2, output_base=str(tmp_path), implementations=["xor"])

    assert summary["xor"]["times"] == []
    assert summary["xor"]["errors"] == 2
    df = pd.read_csv(os.path.join(str(tmp_path), "singleton", "10", "xor_stats.txt"))
    assert df["Time(s)"].tolist() == [float("inf"), float("inf")]


def test_wrong_answer_counts_as_disagreement(tmp_path, monkeypatch):
    monkeypatch.setitem(IMPL_CONFIG, "hashmap", dict(IMPL_CONFIG["hashmap"], func=lambda arr: -1))
    summary = profile_and_save_stats(10, 2, output_base=str(tmp_path), implementations=["hashmap"])
    assert summary["hashmap"]["disagreements"] == 2


def test_run_singleton_benchmark_can_skip_numba(tmp_path):
    summary = profile_singleton_all.run_singleton_benchmark(10, 1, output_base=str(tmp_path), run_numba=False)
    assert "radix_numba" not in summary
    assert not os.path.exists(os.path.join(str(tmp_path), "singleton", "10", "radix_numba_stats.txt"))
