import os
import time
import traceback
import platform
import argparse

from algorithms.singleton.xor_fold import find_xor
from algorithms.singleton.hash_tally import find_hashmap
from algorithms.singleton.radix_scan import find_radix, find_radix_optimised
from constants.params import RANDOM_SEED, RESULTS_BASE_PATH, SINGLETON_PATH, DATE_FORMAT, STATS_HEADER, RUNS
from performance_profiling.singleton.array_generation import generate_sample
from utils.utils import get_core_info

IMPL_CONFIG = {
    "xor": {
        "file_suffix": 'xor_stats.txt',
        "func": find_xor,
        "name_print": "XOR Fold",
        "needs_warmup": False,
    },
    "hashmap": {
        "file_suffix": 'hashmap_stats.txt',
        "func": find_hashmap,
        "name_print": "HashMap Tally",
        "needs_warmup": False,
    },
    "radix": {
        "file_suffix": 'radix_stats.txt',
        "func": find_radix,
        "name_print": "Radix Sort + Scan",
        "needs_warmup": False,
    },
    "radix_numba": {
        "file_suffix": 'radix_numba_stats.txt',
        "func": find_radix_optimised,
        "name_print": "Radix Sort + Scan (Numba)",
        "needs_warmup": True,
    },
}


def melements_per_second(num_elements, exec_time):
    if num_elements == 0 or exec_time <= 0:
        return 0.0
    return num_elements / exec_time / 1e6


def warm_up(active_implementations):
    """Calls JIT-compiled finders once so compilation is not timed."""
    warmup_sample, _ = generate_sample(1000, RANDOM_SEED - 1)
    for impl_key, config_item in active_implementations.items():
        if not config_item["needs_warmup"]:
            continue
        print(f"  Warming up {config_item['name_print']}...")
        try:
            config_item["func"](warmup_sample)
            print(f"  {config_item['name_print']} warm-up complete.")
        except Exception as e_warmup:
            print(f"  Warning: {config_item['name_print']} warm-up failed: {e_warmup}")


def profile_and_save_stats(nums_count: int, total_runs: int, output_base: str = RESULTS_BASE_PATH,
                           implementations=None):
    """
    Times every selected finder on fresh samples and writes one stats file per
    implementation under <output_base>/singleton/<nums_count>/.

    Each finder's answer is checked against the value the generator removed;
    mismatches and exceptions are reported and counted but do not stop the run.

    Args:
        nums_count: Number of distinct values in each sample.
        total_runs: Number of samples to time.
        output_base: Root results directory.
        implementations: Keys of IMPL_CONFIG to run; all when None.

    Returns:
        Dict of implementation key to {"times": [...], "disagreements": int, "errors": int}.
    """
    size_str = f"N{nums_count}"
    sample_len = max(2 * nums_count - 1, 0)
    print(f"\nInfo: Profiling singleton finders for configuration: {size_str} (Elements: {sample_len:,})")
    print(f"Parameters: Runs={total_runs}")

    selected = list(IMPL_CONFIG) if implementations is None else list(implementations)
    unknown = [key for key in selected if key not in IMPL_CONFIG]
    if unknown:
        raise ValueError(f"Unknown implementations: {', '.join(unknown)}")

    output_dir = os.path.join(output_base, SINGLETON_PATH, str(nums_count))
    os.makedirs(output_dir, exist_ok=True)

    summary = {key: {"times": [], "disagreements": 0, "errors": 0} for key in selected}
    file_handles = {}
    active_implementations = {}

    try:
        for impl_key in selected:
            config_item = IMPL_CONFIG[impl_key]
            path = os.path.join(output_dir, config_item["file_suffix"])
            file_handles[impl_key] = open(path, 'w')
            file_handles[impl_key].write(STATS_HEADER)
            active_implementations[impl_key] = config_item

        if not active_implementations:
            print(f"    No implementations selected to run for {size_str}. Skipping.")
            return summary

        warm_up(active_implementations)

        for run_number in range(1, total_runs + 1):
            print(f"  Starting Run {run_number}/{total_runs} for {size_str}...")
            sample, once = generate_sample(nums_count, RANDOM_SEED + run_number)
            expected = 0 if once is None else once

            for impl_key, config_item in active_implementations.items():
                impl_name_print = config_item["name_print"]
                timestamp = time.strftime(DATE_FORMAT)
                try:
                    start_time = time.perf_counter()
                    found = config_item["func"](sample)
                    exec_time = time.perf_counter() - start_time
                except Exception as e:
                    print(f"      Error during {impl_name_print} profiling for run {run_number}: {e}")
                    traceback.print_exc()
                    summary[impl_key]["errors"] += 1
                    file_handles[impl_key].write(f"{run_number},{timestamp},inf,{sample_len},0.0\n")
                    continue

                if found != expected:
                    summary[impl_key]["disagreements"] += 1
                    print(f"      Warning: {impl_name_print} returned {found}, expected {expected}.")

                melements = melements_per_second(sample_len, exec_time)
                summary[impl_key]["times"].append(exec_time)
                file_handles[impl_key].write(
                    f"{run_number},{timestamp},{exec_time:.6f},{sample_len},{melements:.2f}\n")
                print(f"      {impl_name_print} Run {run_number}: {exec_time:.6f}s, MElements/s: {melements:.2f}")
        print(f"  Finished all runs for {size_str}.")

    except IOError as e_io:
        print(f"Error writing results for {size_str}: {e_io}")
    finally:
        for fh in file_handles.values():
            if not fh.closed:
                fh.close()

    return summary


def run_singleton_benchmark(size: int, runs: int, output_base: str = RESULTS_BASE_PATH, run_numba: bool = True):
    try:
        print(f"CPU Info: {platform.processor()}")
        print(f"CPU Cores: {get_core_info()}")
    except Exception as e_cpu_info:
        print(f"Could not get CPU info: {e_cpu_info}")

    implementations = [key for key in IMPL_CONFIG if run_numba or key != "radix_numba"]
    return profile_and_save_stats(
        nums_count=size,
        total_runs=runs,
        output_base=output_base,
        implementations=implementations
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Profiler for singleton finder implementations.")
    parser.add_argument(
        "--size",
        type=int,
        default=1000000,
        help="Number of distinct values in each sample."
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=RUNS,
        help="Number of times to run each benchmark."
    )
    parser.add_argument(
        "--no_numba",
        action="store_true",
        help="If set, skips the Numba radix sort implementation."
    )

    args = parser.parse_args()

    if args.size >= 1000000:
        print(f"Note: For {args.size:,} values, the pure Python radix sort might be slow.")

    run_singleton_benchmark(size=args.size, runs=args.runs, run_numba=not args.no_numba)
    print("\nSingleton profiling complete. Results saved to respective files.")
