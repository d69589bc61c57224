import pytest

from dsakit.searching import binary_search, linear_search

SORTED = [2, 5, 7, 11, 14, 23, 29, 35, 41, 53, 59, 69, 73, 79, 85]
UNSORTED = [23, 47, 73, 2, 79, 17, 11, 7, 29, 41, 35]


def test_binary_search_source_example():
    index = binary_search(SORTED, 41)
    assert SORTED[index] == 41


@pytest.mark.parametrize("index", range(len(SORTED)))
def test_binary_search_finds_every_element(index):
    assert binary_search(SORTED, SORTED[index]) == index


@pytest.mark.parametrize("missing", [0, 1, 6, 40, 86, 1000])
def test_binary_search_missing(missing):
    assert binary_search(SORTED, missing) == -1


def test_binary_search_empty():
    assert binary_search([], 3) == -1


@pytest.mark.parametrize("value", UNSORTED)
def test_linear_search_unsorted(value):
    assert linear_search(UNSORTED, value) == UNSORTED.index(value)


def test_linear_search_finds_last_element():
    assert linear_search(UNSORTED, UNSORTED[-1]) == len(UNSORTED) - 1


def test_linear_search_returns_first_occurrence():
    items = [4, 1, 4, 1]
    assert linear_search(items, 1) == items.index(1)


def test_linear_search_missing():
    assert linear_search(UNSORTED, 1000) == -1
    assert linear_search([], 1) == -1