"""Classic sorting algorithms. Each returns a new sorted list."""

import random
from collections.abc import Iterable


def _counting_pass(items: list[int], digit: int, base: int) -> list[int]:
    buckets = [0] * base
    for value in items:
        buckets[(value // digit) % base] += 1
    for i in range(1, base):
        buckets[i] += buckets[i - 1]
    output = [0] * len(items)
    for value in reversed(items):
        key = (value // digit) % base
        buckets[key] -= 1
        output[buckets[key]] = value
    return output


def radix_sort(values: Iterable[int], base: int = 10) -> list[int]:
    """Sort non-negative integers with an LSD radix sort in the given base."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("radix sort handles non-negative integers only")
    largest = max(items)
    digit = 1
    while largest // digit > 0:
        items = _counting_pass(items, digit, base)
        digit *= base
    return items


def bubble_sort(values: Iterable) -> list:
    """Sort with bubble sort, stopping early once a pass makes no swap."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers with a stable counting sort."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort handles non-negative integers only")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    for i in range(1, len(counts)):
        counts[i] += counts[i - 1]
    output = [0] * len(items)
    for value in reversed(items):
        counts[value] -= 1
        output[counts[value]] = value
    return output


def _sift_down(items: list, size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable) -> list:
    """Sort with an in-place max-heap."""
    items = list(values)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, i)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _partition(items: list, low: int, high: int, rng: random.Random) -> int:
    pivot = rng.randint(low, high)
    items[high], items[pivot] = items[pivot], items[high]
    index = low
    for i in range(low, high):
        if items[i] < items[high]:
            items[i], items[index] = items[index], items[i]
            index += 1
    items[high], items[index] = items[index], items[high]
    return index


def _quick_sort(items: list, low: int, high: int, rng: random.Random) -> None:
    while low < high:
        pivot = _partition(items, low, high, rng)
        # Recurse into the smaller side to bound the stack depth.
        if pivot - low < high - pivot:
            _quick_sort(items, low, pivot - 1, rng)
            low = pivot + 1
        else:
            _quick_sort(items, pivot + 1, high, rng)
            high = pivot - 1


def quick_sort(values: Iterable, rng: random.Random | None = None) -> list:
    """Sort with quicksort using a randomly chosen pivot."""
    items = list(values)
    _quick_sort(items, 0, len(items) - 1, rng or random.Random())
    return items