import numpy as np
import time
from numba import njit

from algorithms.radix_sort.single_threaded import select_radix


@njit(cache=True)
def counting_sort_pass(src, dst, count, place, radix):
    n = src.size
    count[:] = 0

    for i in range(n):
        digit = (src[i] // place) % radix
        count[digit] += 1

    for d in range(1, radix):
        count[d] += count[d - 1]

    for i in range(n - 1, -1, -1):
        value = src[i]
        digit = (value // place) % radix
        count[digit] -= 1
        dst[count[digit]] = value


def radix_sort(arr: np.ndarray):
    if not isinstance(arr, np.ndarray):
        raise TypeError("Input must be a NumPy array.")
    if not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"Input must have an integer dtype, got {arr.dtype}.")
    n = arr.size
    if n > 0 and np.min(arr) < 0:
        raise ValueError("Input array contains negative numbers, cannot use radix sort.")
    if n <= 1:
        return arr

    max_val = int(np.max(arr))
    if max_val > np.iinfo(np.int64).max:
        raise ValueError("Input array contains values that do not fit in int64.")

    radix = select_radix(n)
    # Both buffers and the counting table are reused by every pass
    src = arr.astype(np.int64).ravel()
    dst = np.empty_like(src)
    count = np.zeros(radix, dtype=np.intp)

    place = 1
    while place <= max_val:
        counting_sort_pass(src, dst, count, place, radix)
        src, dst = dst, src
        if place > max_val // radix:
            break
        place *= radix

    arr[...] = src.reshape(arr.shape).astype(arr.dtype, copy=False)
    return arr


if __name__ == "__main__":
    array_size = 2_000_000

    print(f"Generating {array_size:,} int32 random integers (0 to {2**31 - 1})...")
    test_arr_orig = np.random.randint(0, 2**31 - 1, size=array_size, dtype=np.int32)
    test_arr_to_sort = test_arr_orig.copy()

    print("Starting optimised radix sort (first call includes Numba compilation)...")
    start_time = time.perf_counter()
    radix_sort(test_arr_to_sort)
    elapsed_time = time.perf_counter() - start_time
    print(f"Optimised radix sort complete in {elapsed_time:.3f} seconds.")
    if elapsed_time > 0:
        print(f"Throughput: {array_size / elapsed_time / 1e6:.2f} MElements/s")

    if np.array_equal(test_arr_to_sort, np.sort(test_arr_orig)):
        print("Verification PASSED.")
    else:
        print("Verification FAILED.")
