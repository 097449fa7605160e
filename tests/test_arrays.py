import pytest

from estruturas.arrays import (
    count_even,
    find_last,
    find_last_recursive,
    find_pivot_value,
    insert_at,
    insert_at_recursive,
    invert_permutation,
    max_recursive,
    remove_all,
    remove_all_recursive,
    remove_at,
    remove_at_recursive,
    remove_zeros,
)

PERMUTATION = [8, 3, 4, 7, 6, 5, 1, 2, 9, 0]
WITH_TWOS = [2, 8, 0, 3, 4, 7, 2, 2, 6, 5, 1, 0, 2, 9, 2]
WITH_ZEROS = [0, 8, 0, 3, 4, 7, 0, 6, 5, 1, 0, 2, 9, 0]


def _is_subsequence(small, big):
    it = iter(big)
    return all(any(item == other for other in it) for item in small)


@pytest.mark.parametrize("x", [2, 0, 9, 8])
def test_find_last_points_at_last_occurrence(x):
    index = find_last(WITH_TWOS, x)
    assert WITH_TWOS[index] == x
    assert x not in WITH_TWOS[index + 1:]


def test_find_last_missing_is_none():
    assert find_last(PERMUTATION, 42) is None
    assert find_last([], 1) is None


@pytest.mark.parametrize("x", list(range(-1, 11)))
def test_find_last_recursive_agrees(x):
    assert find_last_recursive(WITH_TWOS, x) == find_last(WITH_TWOS, x)
    assert find_last_recursive(PERMUTATION, x) == find_last(PERMUTATION, x)


def test_invert_permutation_property():
    inverted = invert_permutation(PERMUTATION)
    for i, j in enumerate(PERMUTATION):
        assert inverted[j] == i


def test_invert_permutation_twice_is_identity():
    assert invert_permutation(invert_permutation(PERMUTATION)) == PERMUTATION


def test_invert_permutation_rejects_non_permutation():
    with pytest.raises(ValueError):
        invert_permutation([0, 0, 1])


@pytest.mark.parametrize("k", range(len(PERMUTATION)))
def test_remove_at_then_insert_round_trip(k):
    removed, rest = remove_at(PERMUTATION, k)
    assert removed == PERMUTATION[k]
    assert len(rest) == len(PERMUTATION) - 1
    assert insert_at(rest, k, removed) == PERMUTATION


@pytest.mark.parametrize("k", range(len(PERMUTATION)))
def test_recursive_remove_and_insert_agree(k):
    assert remove_at_recursive(PERMUTATION, k) == remove_at(PERMUTATION, k)
    assert insert_at_recursive(PERMUTATION, k, 77) == insert_at(PERMUTATION, k, 77)


def test_insert_at_end_and_position():
    result = insert_at(PERMUTATION, len(PERMUTATION), 42)
    assert result[-1] == 42
    assert result[:-1] == PERMUTATION
    middle = insert_at_recursive(PERMUTATION, 4, 42)
    assert middle[4] == 42
    assert len(middle) == len(PERMUTATION) + 1


def test_input_is_not_mutated():
    data = list(PERMUTATION)
    remove_at(data, 3)
    insert_at(data, 3, 99)
    assert data == PERMUTATION


@pytest.mark.parametrize(
    "func", [remove_at, remove_at_recursive]
)
def test_remove_at_out_of_range(func):
    with pytest.raises(IndexError):
        func(PERMUTATION, len(PERMUTATION))
    with pytest.raises(IndexError):
        func([], 0)


@pytest.mark.parametrize("func", [insert_at, insert_at_recursive])
def test_insert_at_out_of_range(func):
    with pytest.raises(IndexError):
        func(PERMUTATION, len(PERMUTATION) + 1, 5)
    with pytest.raises(IndexError):
        func(PERMUTATION, -1, 5)


def test_remove_all_removes_every_occurrence():
    result = remove_all(WITH_TWOS, 2)
    assert 2 not in result
    assert len(result) == len(WITH_TWOS) - WITH_TWOS.count(2)
    assert _is_subsequence(result, WITH_TWOS)


@pytest.mark.parametrize("x", [2, 0, 9, 100])
def test_remove_all_recursive_agrees(x):
    assert remove_all_recursive(WITH_TWOS, x) == remove_all(WITH_TWOS, x)


def test_remove_zeros():
    result = remove_zeros(WITH_ZEROS)
    assert 0 not in result
    assert len(result) == len(WITH_ZEROS) - WITH_ZEROS.count(0)
    assert _is_subsequence(result, WITH_ZEROS)


def test_max_recursive_matches_builtin():
    assert max_recursive(PERMUTATION) == max(PERMUTATION)
    assert max_recursive([-5, -3, -9]) == max([-5, -3, -9])


def test_max_recursive_empty_raises():
    with pytest.raises(ValueError):
        max_recursive([])


def test_find_pivot_value_sorted():
    assert find_pivot_value([1, 2, 3]) == 2


@pytest.mark.parametrize(
    "values", [[5, 1, 4, 6, 9, 7], [3, 1, 2, 10, 11, 12], [0, 4, 8]]
)
def test_find_pivot_value_has_property(values):
    pivot = find_pivot_value(values)
    j = values.index(pivot)
    assert 0 < j < len(values) - 1
    assert all(v < pivot for v in values[:j])
    assert all(v > pivot for v in values[j + 1:])


@pytest.mark.parametrize("values", [[3, 2, 1], [4, 4, 4], [1, 2], []])
def test_find_pivot_value_absent(values):
    assert find_pivot_value(values) is None


def test_count_even():
    assert count_even(PERMUTATION + [2]) == count_even(PERMUTATION) + 1
    assert count_even(PERMUTATION + [7]) == count_even(PERMUTATION)
    assert count_even([-2, -3]) == 1
    assert count_even([1, 3, 5]) == 0