from functools import reduce
from operator import xor


def find_xor(arr):
    """XOR of all elements; pairs cancel out, leaving the singleton."""
    return int(reduce(xor, arr, 0))
