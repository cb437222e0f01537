"""Counting, merging and binary-search routines."""

from collections.abc import Iterable, Sequence


def count_occurrences(values: Iterable, target) -> int:
    """Return how many elements of ``values`` equal ``target``."""
    return sum(1 for value in values if value == target)


def merge_sorted(first: Sequence, second: Sequence) -> list:
    """Merge two ascending sequences into one ascending list.

    On equal elements the one from ``second`` comes first.
    """
    a, b = list(first), list(second)
    merged = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            merged.append(a[i])
            i += 1
        else:
            merged.append(b[j])
            j += 1
    merged.extend(a[i:])
    merged.extend(b[j:])
    return merged


def median_of_sorted(first: Sequence, second: Sequence) -> float:
    """Return the median of the union of two ascending sequences."""
    merged = merge_sorted(first, second)
    size = len(merged)
    if size == 0:
        raise ValueError("median of no values is undefined")
    if size % 2 == 0:
        return (merged[(size - 1) // 2] + merged[size // 2]) / 2.0
    return float(merged[size // 2])


def floor_sqrt(x: int) -> int:
    """Return the floor of the square root of a non-negative integer."""
    if x < 0:
        raise ValueError(f"square root of a negative number: {x}")
    if x in (0, 1):
        return x
    start, end, answer = 1, x, 0
    while start <= end:
        mid = (start + end) // 2
        square = mid * mid
        if square == x:
            return mid
        if square < x:
            start = mid + 1
            answer = mid
        else:
            end = mid - 1
    return answer