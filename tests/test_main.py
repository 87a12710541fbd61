import os

import main
from performance_profiling.singleton.profile_singleton_all import IMPL_CONFIG


def test_main_runs_suite_and_plots(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exit_code = main.main(["--runs", "2", "--sizes", "0", "10", "--results_dir", "results", "--skip_numba", "--plot"])

    assert exit_code == 0
    assert os.path.exists(os.path.join("results", "system_info.txt"))
    assert os.path.exists(os.path.join("results", "singleton", "10", "radix_stats.txt"))
    assert os.path.exists(os.path.join("visualizations_and_stats", "summary_statistics_excl_warmup.csv"))


def test_suite_reports_disagreements(tmp_path, monkeypatch):
    def fake_benchmark(size, runs, output_base, run_numba):
        return {"xor": {"times": [], "disagreements": 1 if size == 10 else 0, "errors": 2 if size == 0 else 0}}

    monkeypatch.setattr(main, "run_singleton_benchmark", fake_benchmark)
    assert main.run_singleton_suite([0, 10], runs=1, output_base=str(tmp_path)) == {0: 2, 10: 1}


def test_crashing_finder_gives_nonzero_exit_code(tmp_path, monkeypatch, capsys):
    def broken(arr):
        raise RuntimeError("boom")

    monkeypatch.setitem(IMPL_CONFIG, "radix", dict(IMPL_CONFIG["radix"], func=broken))
    exit_code = main.main(["--runs", "2", "--sizes", "10", "--results_dir", str(tmp_path), "--skip_numba"])

    assert exit_code == 1
    out = capsys.readouterr().out
    assert "All finders agreed" not in out
    assert "Finders failed or disagreed" in out
