"""Dynamic-programming routines."""

from collections.abc import Iterable


def count_change_ways(coins: Iterable[int], amount: int) -> int:
    """Count the distinct combinations of ``coins`` that add up to ``amount``.

    Each coin denomination may be used any number of times and the order of
    coins within a combination does not matter.
    """
    denominations = list(coins)
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin denominations must be positive")

    ways = [1] + [0] * amount
    for coin in denominations:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]