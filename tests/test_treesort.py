import random

from sampler.treesort import sort


def _is_sorted(data):
    return all(a <= b for a, b in zip(data, data[1:]))


def test_sort_random():
    rng = random.Random(1)
    data = [rng.randrange(1 << 30) % 50 for _ in range(50)]
    original = list(data)
    sort(data)
    assert _is_sorted(data)
    assert sorted(original) == data


def test_sort_in_place():
    data = [3, 1, 2]
    alias = data
    sort(data)
    assert alias == [1, 2, 3]


def test_sort_empty():
    data = []
    sort(data)
    assert data == []


def test_sort_long_presorted_input():
    data = list(range(3000, 0, -1))
    sort(data)
    assert data == list(range(1, 3001))


def test_sort_keeps_duplicates():
    data = [5, 5, 1, 5, 1]
    sort(data)
    assert data == [1, 1, 5, 5, 5]