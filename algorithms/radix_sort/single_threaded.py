def _identity(x):
    return x


def select_radix(n):
    """Smallest power of two >= n, with 1 for an empty sequence."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def counting_sort(arr, place, radix, key=None):
    """Performs one stable counting sort pass on the digit at `place`."""
    key = key or _identity
    n = len(arr)
    output = [None] * n
    count = [0] * radix

    for i in range(n):
        digit = (key(arr[i]) // place) % radix
        count[digit] += 1

    # count[d] becomes one past the last slot of bucket d
    for d in range(1, radix):
        count[d] += count[d - 1]

    # Right to left keeps equal digits in their previous order
    for i in range(n - 1, -1, -1):
        item = arr[i]
        digit = (key(item) // place) % radix
        count[digit] -= 1
        output[count[digit]] = item

    arr[:] = output


def radix_sort(arr, radix=None, key=None):
    """
    Sorts a mutable sequence of non-negative integers in place (LSD radix sort).

    The radix defaults to the smallest power of two >= len(arr), which keeps the
    counting table and the number of passes balanced: time is
    O((n + b) * log_b(max)) and extra space is O(n + b).

    Args:
        arr: List (or other mutable sequence) to sort.
        radix: Number of buckets per digit pass. Derived from len(arr) if omitted.
        key: Extracts the integer sort key from each element.

    Returns:
        The same sequence, sorted ascending.
    """
    key = key or _identity
    n = len(arr)
    if n == 0:
        return arr

    keys = [key(x) for x in arr]
    if min(keys) < 0:
        raise ValueError("Input contains negative numbers, cannot use radix sort.")
    max_key = max(keys)

    if radix is None:
        radix = select_radix(n)
    if n == 1:
        return arr
    if radix < 2:
        raise ValueError(f"Radix must be at least 2 to sort {n} elements, got {radix}.")

    place = 1
    while place <= max_key:
        counting_sort(arr, place, radix, key)
        place *= radix
    return arr


if __name__ == "__main__":
    import random

    arr = [random.randint(0, 100000) for _ in range(10000)]
    print(arr[:20])
    radix_sort(arr)
    print(arr[:20])
    print("Radix sort complete.")
