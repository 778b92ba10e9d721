import itertools
import statistics

import pytest

from dsakit.searching import (
    count_occurrences,
    count_ones,
    count_pairs_with_sum,
    find_repeating,
    find_repeating_naive,
    first_occurrence,
    isqrt_floor,
    last_occurrence,
    linear_first_occurrence,
    median_of_two_sorted,
    min_pages,
    min_pages_naive,
    peak_index,
    peak_naive,
    search_rotated,
    search_unbounded,
)

PAGE_CASES = [
    ([10, 20, 30, 40], 2),
    ([10, 5, 30, 1, 2, 5, 10, 10], 3),
    ([10, 20, 10, 30], 2),
    ([5, 5, 5, 5], 4),
    ([7, 2, 5, 10, 8], 3),
    ([12], 2),
]


@pytest.mark.parametrize("pages,k", PAGE_CASES)
def test_min_pages_agrees_with_naive(pages, k):
    assert min_pages(pages, k) == min_pages_naive(pages, k)


@pytest.mark.parametrize("pages,k", PAGE_CASES)
def test_min_pages_bounds(pages, k):
    result = min_pages(pages, k)
    assert max(pages) <= result <= sum(pages)


def test_min_pages_extremes():
    pages = [10, 20, 30, 40]
    assert min_pages(pages, 1) == sum(pages)
    assert min_pages(pages, len(pages)) == max(pages)
    assert min_pages_naive(pages, 1) == sum(pages)


@pytest.mark.parametrize("func", [min_pages, min_pages_naive])
def test_min_pages_rejects_zero_parts(func):
    with pytest.raises(ValueError):
        func([1, 2], 0)


@pytest.mark.parametrize(
    "arr", [[0, 0, 1, 1, 1], [1, 1], [0, 0, 0], [], [0, 1]]
)
def test_count_ones(arr):
    assert count_ones(arr) == arr.count(1)


DATA = [5, 10, 10, 10, 20, 20, 40]


@pytest.mark.parametrize("x", sorted(set(DATA)))
def test_occurrences_present(x):
    assert linear_first_occurrence(DATA, x) == DATA.index(x)
    assert first_occurrence(DATA, x) == DATA.index(x)
    assert last_occurrence(DATA, x) == len(DATA) - 1 - DATA[::-1].index(x)
    assert count_occurrences(DATA, x) == DATA.count(x)


@pytest.mark.parametrize("x", [0, 15, 50])
def test_occurrences_absent(x):
    assert linear_first_occurrence(DATA, x) == -1
    assert first_occurrence(DATA, x) == -1
    assert last_occurrence(DATA, x) == -1
    assert count_occurrences(DATA, x) == 0


@pytest.mark.parametrize(
    "arr,k", [([1, 5, 7, 1], 6), ([1, 1, 1, 1], 2), ([3, -1, 4, 0, 2], 3), ([], 4)]
)
def test_count_pairs_against_all_pairs(arr, k):
    expected = sum(1 for a, b in itertools.combinations(arr, 2) if a + b == k)
    assert count_pairs_with_sum(arr, k) == expected


PEAK_CASES = [[5, 10, 20, 15, 7], [10, 20, 15, 2, 23, 90, 67], [1], [3, 3, 3], [1, 2, 3], [9, 4, 1]]


def _is_peak(arr, i):
    left_ok = i == 0 or arr[i - 1] <= arr[i]
    right_ok = i == len(arr) - 1 or arr[i + 1] <= arr[i]
    return left_ok and right_ok


@pytest.mark.parametrize("arr", PEAK_CASES)
def test_peak_index_is_peak(arr):
    index = peak_index(arr)
    assert 0 <= index < len(arr)
    neighbourhood = arr[max(index - 1, 0): index + 2]
    assert arr[index] == max(neighbourhood)


@pytest.mark.parametrize("arr", PEAK_CASES)
def test_peak_naive_is_peak_value(arr):
    value = peak_naive(arr)
    assert any(arr[i] == value and _is_peak(arr, i) for i in range(len(arr)))


@pytest.mark.parametrize("func", [peak_naive, peak_index])
def test_peak_empty(func):
    with pytest.raises(ValueError):
        func([])


@pytest.mark.parametrize(
    "a,b",
    [
        ([10, 20, 30, 40, 50], [5, 15, 25, 35, 45]),
        ([1, 2, 3, 4, 5, 6], [10, 20, 30, 40, 50, 60, 70]),
        ([30, 40, 50, 60], [5, 6, 7, 8, 9]),
        ([], [1, 2, 3, 4]),
        ([7], []),
        ([1, 3], [2]),
    ],
)
def test_median_of_two_sorted(a, b):
    assert median_of_two_sorted(a, b) == statistics.median(a + b)
    assert median_of_two_sorted(b, a) == statistics.median(a + b)


def test_median_of_two_empty():
    with pytest.raises(ValueError):
        median_of_two_sorted([], [])


@pytest.mark.parametrize(
    "arr", [[0, 2, 1, 3, 2, 2], [0, 1, 2, 2, 2, 3], [1, 2, 3, 0, 3, 4, 5], [0, 0]]
)
def test_find_repeating(arr):
    value = find_repeating(arr)
    assert arr.count(value) >= 2
    assert value == find_repeating_naive(arr)


def test_find_repeating_worked_example():
    assert find_repeating([0, 2, 1, 3, 2, 2]) == 2


def test_find_repeating_rejects_out_of_range():
    with pytest.raises(ValueError):
        find_repeating([0, 5, 1])
    with pytest.raises(ValueError):
        find_repeating([0])


def test_find_repeating_naive_without_duplicate():
    with pytest.raises(ValueError):
        find_repeating_naive([3, 1, 2])


def test_search_unbounded_on_endless_stream():
    evens = itertools.count(0, 2)
    assert search_unbounded(evens, 40) == 20
    assert search_unbounded(itertools.count(0, 2), 41) == -1


def test_search_unbounded_finite():
    arr = [1, 10, 15, 20, 40, 80]
    assert search_unbounded(arr, 40) == arr.index(40)
    assert search_unbounded(arr, 100) == -1


BASE = [10, 20, 40, 60, 80, 100]


@pytest.mark.parametrize("shift", range(len(BASE)))
def test_search_rotated_finds_each(shift):
    arr = BASE[shift:] + BASE[:shift]
    for value in arr:
        assert search_rotated(arr, value) == arr.index(value)
    assert search_rotated(arr, 50) == -1
    assert search_rotated(arr, 5) == -1


def test_search_rotated_empty():
    assert search_rotated([], 3) == -1


@pytest.mark.parametrize("x", [0, 1, 2, 3, 4, 10, 14, 15, 16, 99, 10**6])
def test_isqrt_floor(x):
    root = isqrt_floor(x)
    assert root * root <= x < (root + 1) * (root + 1)


def test_isqrt_negative():
    with pytest.raises(ValueError):
        isqrt_floor(-1)