import random

import pytest

from algokit.searching import binary_search, linear_search, min_max, min_max_divide


def _random_lists():
    rng = random.Random(2024)
    return [[rng.randint(-50, 50) for _ in range(size)] for size in (1, 2, 3, 7, 16, 33, 100)]


@pytest.mark.parametrize("items", _random_lists())
def test_linear_search_finds_first_occurrence(items):
    for key in set(items):
        assert linear_search(items, key) == items.index(key)


def test_linear_search_missing_key():
    assert linear_search([4, 8, 15], 16) is None
    assert linear_search([], 1) is None


def test_linear_search_accepts_iterators():
    assert linear_search(iter("abcabc"), "c") == "abcabc".index("c")


@pytest.mark.parametrize("items", [sorted(items) for items in _random_lists()])
def test_binary_search_finds_present_keys(items):
    for key in items:
        index = binary_search(items, key)
        assert items[index] == key


@pytest.mark.parametrize("items", [sorted(items) for items in _random_lists()])
def test_binary_search_missing_keys(items):
    present = set(items)
    for key in range(-60, 61):
        if key not in present:
            assert binary_search(items, key) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None


def test_binary_search_unique_items_exact_index():
    items = list(range(0, 200, 3))
    for position, key in enumerate(items):
        assert binary_search(items, key) == position


@pytest.mark.parametrize("finder", [min_max, min_max_divide])
@pytest.mark.parametrize("items", _random_lists())
def test_min_max_matches_builtins(finder, items):
    assert finder(items) == (min(items), max(items))


@pytest.mark.parametrize("finder", [min_max, min_max_divide])
def test_min_max_single_element(finder):
    assert finder([42]) == (42, 42)


@pytest.mark.parametrize("finder", [min_max, min_max_divide])
def test_min_max_strings(finder):
    words = ["pear", "apple", "zucchini", "mango"]
    assert finder(words) == (min(words), max(words))


@pytest.mark.parametrize("finder", [min_max, min_max_divide])
def test_min_max_empty_raises(finder):
    with pytest.raises(ValueError):
        finder([])