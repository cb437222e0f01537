"""Array manipulation routines."""

from collections.abc import Iterable, MutableSequence, Sequence


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of ``matrix`` in clockwise spiral order."""
    rows = [list(row) for row in matrix]
    result: list[int] = []
    while rows:
        result.extend(rows.pop(0))
        # Rotate the remainder counter-clockwise so its right column leads.
        rows = [list(column) for column in zip(*rows)][::-1]
    return result


def reverse_range(values: MutableSequence, start: int, end: int) -> None:
    """Reverse ``values[start..end]`` (both ends inclusive) in place."""
    if start >= end:
        return
    values[start : end + 1] = values[start : end + 1][::-1]


def rotate_left(values: Sequence, d: int) -> list:
    """Return ``values`` rotated left by ``d`` positions."""
    items = list(values)
    if not items:
        return []
    shift = d % len(items)
    return items[shift:] + items[:shift]


def rotate_right_by_one(values: Sequence) -> list:
    """Return ``values`` with its last element moved to the front."""
    items = list(values)
    if not items:
        return []
    return items[-1:] + items[:-1]


def has_triplet_sum(values: Iterable[int], target: int) -> bool:
    """Tell whether three distinct positions of ``values`` sum to ``target``."""
    items = sorted(values)
    for i, first in enumerate(items):
        lo, hi = i + 1, len(items) - 1
        while lo < hi:
            total = first + items[lo] + items[hi]
            if total == target:
                return True
            if total < target:
                lo += 1
            else:
                hi -= 1
    return False


def max_pairwise_product(values: Sequence[int]) -> int:
    """Return the largest product of two distinct positions, or 0 if none is positive."""
    items = list(values)
    best = 0
    for i, a in enumerate(items):
        for b in items[i + 1 :]:
            best = max(best, a * b)
    return best


def max_pairwise_product_fast(values: Iterable[int]) -> int:
    """Return the product of the two largest distinct positive values, in one pass.

    A value equal to the current maximum is not counted a second time, so a
    repeated maximum pairs with the next smaller value (or with 0).
    """
    first = second = 0
    for value in values:
        if value > first:
            first, second = value, first
        elif second < value < first:
            second = value
    return first * second


def sort_012(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of a sequence containing only 0, 1 and 2."""
    items = list(values)
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        current = items[mid]
        if current == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif current == 1:
            mid += 1
        elif current == 2:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
        else:
            raise ValueError(f"only 0, 1 and 2 may be sorted, got {current!r}")
    return items