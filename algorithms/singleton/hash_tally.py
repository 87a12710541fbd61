from collections import Counter


def find_hashmap(arr):
    """Tallies occurrences and returns a value seen an odd number of times, or 0."""
    counts = Counter(arr)
    for value, count in counts.items():
        if count % 2 != 0:
            return int(value)
    return 0
