"""Greedy algorithms: fractional knapsack and railway platforms."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item with a value and a positive weight."""

    value: int
    weight: int

    @property
    def ratio(self) -> float:
        return self.value / self.weight


def fractional_knapsack(capacity: int, items: Iterable[Item]) -> float:
    """Return the greatest value that fits in ``capacity``, splitting items if needed.

    Items are taken in order of decreasing value per unit of weight; ties go
    to the item that appears later.
    """
    pool = list(items)
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    if any(item.weight <= 0 for item in pool):
        raise ValueError("item weights must be positive")

    ranked = sorted(
        enumerate(pool), key=lambda pair: (pair[1].ratio, pair[0]), reverse=True
    )
    used = 0
    total = 0.0
    for _, item in ranked:
        if used + item.weight < capacity:
            total += item.value
            used += item.weight
        else:
            total += (capacity - used) * item.ratio
            break
    return total


def min_platforms(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Return the fewest platforms needed so that no train waits.

    A train arriving at the same moment another departs needs its own platform.
    """
    if len(arrivals) != len(departures):
        raise ValueError("arrivals and departures must have the same length")
    if not arrivals:
        return 0

    arr = sorted(arrivals)
    dep = iter(sorted(departures))
    earliest_departure = next(dep)
    platforms = 1
    for arrival in arr[1:]:
        if arrival <= earliest_departure:
            platforms += 1
        else:
            earliest_departure = next(dep)
    return platforms