import os

import pandas as pd

from plotter import calculate_stats_excluding_warmup, generate_all_plots, load_data_file, sanitize_filename
from performance_profiling.singleton.profile_singleton_all import profile_and_save_stats


def test_sanitize_filename():
    assert sanitize_filename("MElements/s") == "MElements_s"
    assert sanitize_filename("a b:c") == "a_b_c"


def test_stats_of_empty_series():
    stats = calculate_stats_excluding_warmup(pd.Series([], dtype=float))
    assert stats["count"] == 0
    assert pd.isna(stats["mean"])


def test_stats_of_values():
    stats = calculate_stats_excluding_warmup(pd.Series([1.0, 2.0, 3.0]))
    assert stats["mean"] == 2.0
    assert stats["median"] == 2.0
    assert stats["stdev"] == 1.0
    assert stats["count"] == 3


def test_load_data_file_drops_failed_runs(tmp_path):
    path = tmp_path / "xor_stats.txt"
    path.write_text("Run,Timestamp,Time(s),Size,MElements/s\n"
                    "1,2026-01-01 00:00:00,inf,9,0.0\n"
                    "2,2026-01-01 00:00:01,0.5,9,0.00\n")
    df = load_data_file(str(path))
    assert df["Run"].tolist() == [2]


def test_load_data_file_missing_columns(tmp_path):
    path = tmp_path / "bad_stats.txt"
    path.write_text("a,b\n1,2\n")
    assert load_data_file(str(path)) is None


def test_generate_all_plots(tmp_path):
    results_dir = str(tmp_path / "results")
    output_dir = str(tmp_path / "plots")
    for nums_count in (64, 1024):
        profile_and_save_stats(nums_count, 3, output_base=results_dir, implementations=["xor", "hashmap", "radix"])

    summary_df = generate_all_plots(results_dir=results_dir, output_dir=output_dir)

    assert set(summary_df["Implementation"]) == {"xor", "hashmap", "radix"}
    assert set(summary_df["Elements"]) == {127, 2047}
    assert (summary_df["Count"] == 2).all()
    assert os.path.exists(os.path.join(output_dir, "summary_statistics_excl_warmup.csv"))
    assert os.path.exists(os.path.join(output_dir, "singleton", "1024",
                                       "comparison_median_Times_excl_warmup_log.png"))
    assert os.path.exists(os.path.join(output_dir, "singleton", "scaling_median_time_excl_warmup_loglog.png"))


def test_generate_all_plots_without_results(tmp_path):
    summary_df = generate_all_plots(results_dir=str(tmp_path / "missing"), output_dir=str(tmp_path / "out"))
    assert summary_df.empty
