import pytest

from algokit.greedy import Item, fractional_knapsack, min_platforms


def test_knapsack_classic_example():
    items = [Item(60, 10), Item(100, 20), Item(120, 30)]
    assert fractional_knapsack(50, items) == pytest.approx(240.0)


def test_knapsack_takes_everything_when_capacity_exceeds_weight():
    items = [Item(10, 2), Item(7, 3), Item(4, 4)]
    assert fractional_knapsack(100, items) == pytest.approx(sum(i.value for i in items))


def test_knapsack_exact_fit_takes_everything():
    items = [Item(10, 2), Item(7, 3)]
    assert fractional_knapsack(5, items) == pytest.approx(17)


def test_knapsack_zero_capacity():
    assert fractional_knapsack(0, [Item(5, 1)]) == 0.0


def test_knapsack_no_items():
    assert fractional_knapsack(10, []) == 0.0


def test_knapsack_splits_single_item():
    item = Item(30, 10)
    assert fractional_knapsack(5, [item]) == pytest.approx(item.value / 2)


def test_knapsack_prefers_best_ratio():
    best = Item(100, 10)
    worse = Item(10, 10)
    assert fractional_knapsack(10, [worse, best]) == pytest.approx(best.value)


def test_knapsack_order_independent():
    items = [Item(60, 10), Item(100, 20), Item(120, 30)]
    assert fractional_knapsack(35, items) == pytest.approx(
        fractional_knapsack(35, list(reversed(items)))
    )


def test_knapsack_monotonic_in_capacity():
    items = [Item(60, 10), Item(100, 20), Item(120, 30)]
    values = [fractional_knapsack(c, items) for c in range(0, 70, 5)]
    assert values == sorted(values)


def test_knapsack_rejects_zero_weight():
    with pytest.raises(ValueError):
        fractional_knapsack(10, [Item(5, 0)])


def test_knapsack_rejects_negative_capacity():
    with pytest.raises(ValueError):
        fractional_knapsack(-1, [Item(5, 1)])


def test_item_ratio():
    assert Item(9, 3).ratio == pytest.approx(3.0)


def test_platforms_classic_example():
    arrivals = [900, 940, 950, 1100, 1500, 1800]
    departures = [910, 1200, 1120, 1130, 1900, 2000]
    assert min_platforms(arrivals, departures) == 3


def test_platforms_single_train():
    assert min_platforms([1000], [1030]) == 1


def test_platforms_disjoint_trains():
    assert min_platforms([100, 300, 500], [200, 400, 600]) == 1


def test_platforms_all_overlap():
    arrivals = [100, 100, 100, 100]
    departures = [900, 900, 900, 900]
    assert min_platforms(arrivals, departures) == len(arrivals)


def test_platforms_arrival_at_departure_needs_new_platform():
    assert min_platforms([100, 200], [200, 300]) == 2


def test_platforms_input_order_irrelevant():
    arrivals = [900, 940, 950, 1100, 1500, 1800]
    departures = [910, 1200, 1120, 1130, 1900, 2000]
    assert min_platforms(arrivals[::-1], departures) == min_platforms(arrivals, departures)


def test_platforms_does_not_mutate_input():
    arrivals = [950, 900]
    departures = [1000, 910]
    min_platforms(arrivals, departures)
    assert arrivals == [950, 900] and departures == [1000, 910]


def test_platforms_empty():
    assert min_platforms([], []) == 0


def test_platforms_length_mismatch():
    with pytest.raises(ValueError):
        min_platforms([1, 2], [3])