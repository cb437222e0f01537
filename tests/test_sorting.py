import random

import pytest

from algokit.sorting import bubble_sort, counting_sort, heap_sort, quick_sort, radix_sort


def _samples(non_negative=False):
    rng = random.Random(2024)
    low = 0 if non_negative else -50
    cases = [[], [1], [2, 1], [5, 5, 5], list(range(10)), list(range(10, 0, -1))]
    for size in (3, 8, 25, 100):
        cases.append([rng.randint(low, 500) for _ in range(size)])
    return cases


@pytest.mark.parametrize("values", _samples())
def test_bubble_sort(values):
    assert bubble_sort(values) == sorted(values)


@pytest.mark.parametrize("values", _samples())
def test_heap_sort(values):
    assert heap_sort(values) == sorted(values)


@pytest.mark.parametrize("values", _samples())
def test_quick_sort(values):
    assert quick_sort(values, random.Random(1)) == sorted(values)


@pytest.mark.parametrize("values", _samples(non_negative=True))
def test_counting_sort(values):
    assert counting_sort(values) == sorted(values)


@pytest.mark.parametrize("values", _samples(non_negative=True))
@pytest.mark.parametrize("base", [2, 3, 10, 16])
def test_radix_sort(values, base):
    assert radix_sort(values, base) == sorted(values)


def test_bubble_sort_source_data():
    data = [5, 6, 2, 6, 9, 0, -1]
    assert bubble_sort(data) == sorted(data)


def test_heap_sort_source_data():
    data = [1, 12, 9, 5, 6, 10]
    assert heap_sort(data) == [1, 5, 6, 9, 10, 12]


def test_quick_sort_without_rng():
    data = [3, -1, 4, 1, 5, -9, 2, 6]
    assert quick_sort(data) == sorted(data)


def test_quick_sort_large_sorted_input():
    data = list(range(3000))
    assert quick_sort(data[::-1], random.Random(5)) == data


def test_sorts_do_not_mutate_input():
    data = [3, 1, 2]
    for sort in (bubble_sort, heap_sort, counting_sort, radix_sort):
        sort(data)
    quick_sort(data, random.Random(0))
    assert data == [3, 1, 2]


def test_radix_sort_zeros():
    assert radix_sort([0, 0, 0], 10) == [0, 0, 0]


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1], 10)


@pytest.mark.parametrize("base", [0, 1])
def test_radix_sort_rejects_small_base(base):
    with pytest.raises(ValueError):
        radix_sort([3, 1], base)


def test_counting_sort_rejects_negative():
    with pytest.raises(ValueError):
        counting_sort([2, -3])