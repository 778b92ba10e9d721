import copy
import statistics

import pytest

from dsakit.matrix import (
    boundary_elements,
    flatten,
    make_matrix,
    median_of_row_sorted,
    rotate90_anticlockwise,
    rotate90_in_place,
    search_linear,
    search_sorted,
    snake_order,
    spiral_order,
    transpose,
    transpose_in_place,
)

GRID = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
WIDE = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]


def test_make_matrix_with_callable():
    mat = make_matrix(3, 2, lambda i, j: i + j)
    assert len(mat) == 3
    assert all(len(row) == 2 for row in mat)
    assert all(mat[i][j] == i + j for i in range(3) for j in range(2))


def test_make_matrix_rows_are_independent():
    mat = make_matrix(3, 2, 10)
    mat[0][0] = 99
    assert mat[1][0] == 10
    assert flatten(mat)[1:] == [10] * 5


def test_make_matrix_negative_size():
    with pytest.raises(ValueError):
        make_matrix(-1, 2, 0)


def test_flatten_jagged():
    assert flatten([[1], [2, 3], []]) == [1, 2, 3]


def test_snake_order():
    assert snake_order(GRID) == [1, 2, 3, 6, 5, 4, 7, 8, 9]


def test_snake_order_is_permutation():
    assert sorted(snake_order(WIDE)) == sorted(flatten(WIDE))
    assert snake_order([[4, 5, 6]]) == [4, 5, 6]


@pytest.mark.parametrize(
    "mat",
    [
        GRID,
        [[1, 3, 5], [2, 6, 9], [3, 6, 9]],
        [[5, 10, 20, 30, 40], [1, 2, 3, 4, 6], [11, 13, 15, 17, 19]],
        [[7]],
    ],
)
def test_median_of_row_sorted_matches_statistics(mat):
    assert median_of_row_sorted(mat) == statistics.median(flatten(mat))


def test_median_of_empty_raises():
    with pytest.raises(ValueError):
        median_of_row_sorted([])


def test_boundary_of_square():
    assert boundary_elements(GRID) == [1, 2, 3, 6, 9, 8, 7, 4]


def test_boundary_single_row_and_column():
    assert boundary_elements([[1, 2, 3]]) == [1, 2, 3]
    assert boundary_elements([[1], [2], [3]]) == [1, 2, 3]
    assert boundary_elements([]) == []


def test_boundary_length_and_membership():
    ring = boundary_elements(WIDE)
    assert len(ring) == 2 * (3 + 4) - 4
    assert 6 not in ring and 7 not in ring
    assert ring[:4] == WIDE[0]


def test_rotate_two_by_two():
    assert rotate90_anticlockwise([[1, 2], [3, 4]]) == [[2, 4], [1, 3]]


def test_rotate_four_times_is_identity():
    mat = WIDE
    for _ in range(4):
        mat = rotate90_anticlockwise(mat)
    assert mat == WIDE


def test_rotate_first_row_is_last_column():
    assert rotate90_anticlockwise(WIDE)[0] == [row[-1] for row in WIDE]


def test_rotate_in_place_matches_copy():
    mat = copy.deepcopy(GRID)
    rotate90_in_place(mat)
    assert mat == rotate90_anticlockwise(GRID)


def test_rotate_in_place_rejects_rectangle():
    with pytest.raises(ValueError):
        rotate90_in_place(copy.deepcopy(WIDE))


SORTED = [[10, 20, 30, 40], [15, 25, 35, 45], [27, 29, 37, 48], [32, 33, 39, 50]]


@pytest.mark.parametrize("search", [search_linear, search_sorted])
def test_search_finds_every_value(search):
    for value in flatten(SORTED):
        i, j = search(SORTED, value)
        assert SORTED[i][j] == value


@pytest.mark.parametrize("search", [search_linear, search_sorted])
def test_search_missing(search):
    assert search(SORTED, 31) is None
    assert search(SORTED, 5) is None
    assert search(SORTED, 51) is None


def test_search_linear_returns_first_in_row_major():
    assert search_linear([[1, 2], [2, 1]], 2) == (0, 1)


@pytest.mark.parametrize(
    "mat",
    [
        [[1, 2], [4, 3]],
        [[1, 2, 3], [8, 9, 4], [7, 6, 5]],
        [[1, 2, 3, 4], [10, 11, 12, 5], [9, 8, 7, 6]],
        [[1, 2, 3], [10, 11, 4], [9, 12, 5], [8, 7, 6]],
    ],
)
def test_spiral_of_numbered_spiral_is_sorted(mat):
    assert spiral_order(mat) == sorted(flatten(mat))


def test_spiral_single_row_and_column():
    assert spiral_order([[3, 1, 2]]) == [3, 1, 2]
    assert spiral_order([[3], [1], [2]]) == [3, 1, 2]
    assert spiral_order([]) == []


def test_transpose_elements():
    result = transpose(WIDE)
    assert len(result) == 4
    assert all(result[j][i] == WIDE[i][j] for i in range(3) for j in range(4))


def test_transpose_twice_is_identity():
    assert transpose(transpose(WIDE)) == WIDE


def test_transpose_in_place_matches_copy():
    mat = copy.deepcopy(GRID)
    transpose_in_place(mat)
    assert mat == transpose(GRID)


def test_transpose_in_place_rejects_rectangle():
    with pytest.raises(ValueError):
        transpose_in_place(copy.deepcopy(WIDE))


def test_jagged_matrix_rejected():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])