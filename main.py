import time
import argparse

from constants.params import RUNS, SAMPLE_SIZES, RESULTS_BASE_PATH
from performance_profiling.singleton.profile_singleton_all import run_singleton_benchmark
from plotter import generate_all_plots
from utils.utils import get_formatted_elapsed_time, write_system_info


def run_singleton_suite(sizes, runs=RUNS, output_base=RESULTS_BASE_PATH, run_numba=True):
    """Runs the singleton benchmark for every size and returns disagreements plus errors per size."""
    failures = {}
    for size in sizes:
        print(f"--- Singleton Suite: Size {size}, Runs {runs} ---")
        summary = run_singleton_benchmark(size=size, runs=runs, output_base=output_base, run_numba=run_numba)
        failures[size] = sum(impl["disagreements"] + impl["errors"] for impl in summary.values())
    return failures


def build_parser():
    parser = argparse.ArgumentParser(description="Main benchmark runner script.")
    parser.add_argument(
        "--runs",
        type=int,
        default=RUNS,
        help="Number of times to run each benchmark (the first run is treated as warm-up)."
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=SAMPLE_SIZES,
        help="Numbers of distinct values per sample to benchmark."
    )
    parser.add_argument(
        "--results_dir",
        default=RESULTS_BASE_PATH,
        help="Directory the stats files are written to."
    )
    parser.add_argument(
        "--skip_numba",
        action="store_true",
        help="If set, skips the Numba radix sort implementation."
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="If set, generates plots and summary statistics after benchmarking."
    )
    return parser


def main(argv=None):
    main_args = build_parser().parse_args(argv)

    start_time = time.time()
    try:
        file_path = write_system_info(main_args.results_dir)
        print(f"System info successfully written to {file_path}")
    except IOError as e:
        print(f"Error writing system info to {main_args.results_dir}: {e}")

    print(f"\nInitial System Check Complete. Elapsed time: {get_formatted_elapsed_time(start_time)}")

    failures = run_singleton_suite(main_args.sizes, runs=main_args.runs, output_base=main_args.results_dir,
                                        run_numba=not main_args.skip_numba)
    print(f"\nElapsed time: {get_formatted_elapsed_time(start_time)}")

    failed_sizes = [size for size, count in failures.items() if count]
    if failed_sizes:
        print(f"Warning: Finders failed or disagreed with the expected singleton for sizes: {failed_sizes}")
    else:
        print("All finders agreed with the expected singleton.")

    if main_args.plot:
        print("\nGenerating plots...")
        generate_all_plots(results_dir=main_args.results_dir)

    print(f"\nTotal benchmarking time: {get_formatted_elapsed_time(start_time)}")
    return 1 if failed_sizes else 0


if __name__ == "__main__":
    raise SystemExit(main())
