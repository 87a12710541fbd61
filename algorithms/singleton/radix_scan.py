import numpy as np

from algorithms.radix_sort.single_threaded import radix_sort
from algorithms.radix_sort.optimised_radix_sort import radix_sort as radix_sort_optimised


def find_odd_run(sorted_arr):
    """
    Returns the value of the first run of equal elements with an odd length.

    Expects the input sorted ascending so that equal values are contiguous.
    Returns 0 when the input is empty or no odd run exists; malformed input
    (e.g. a value occurring three times) is not reported as an error.
    """
    it = iter(sorted_arr)
    try:
        last = next(it)
    except StopIteration:
        return 0

    count = 1
    for value in it:
        if value == last:
            count += 1
            continue
        if count % 2 != 0:
            return int(last)
        last = value
        count = 1

    if count % 2 != 0:
        return int(last)
    return 0


def find_radix(arr, sort=radix_sort):
    """Sorts a copy of arr and scans it for the singleton."""
    owned = list(arr)
    sort(owned)
    return find_odd_run(owned)


def find_odd_run_array(sorted_arr: np.ndarray):
    """Vectorised find_odd_run for a sorted 1-D NumPy array."""
    if sorted_arr.size == 0:
        return 0
    run_starts = np.concatenate(([0], np.flatnonzero(np.diff(sorted_arr)) + 1))
    run_lengths = np.diff(np.append(run_starts, sorted_arr.size))
    odd_runs = np.flatnonzero(run_lengths % 2)
    if odd_runs.size == 0:
        return 0
    return int(sorted_arr[run_starts[odd_runs[0]]])


def find_radix_optimised(arr):
    """Sorts a NumPy copy of arr with the Numba sorter and scans it without leaving NumPy."""
    owned = np.array(arr, dtype=np.int64).ravel()
    radix_sort_optimised(owned)
    return find_odd_run_array(owned)
