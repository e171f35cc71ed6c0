import itertools

import pytest

from mathprog.combi import permutation_count, permutations, subset_count, subsets


def test_permutations_of_three_order():
    assert list(permutations(3)) == [
        (0, 1, 2),
        (0, 2, 1),
        (2, 0, 1),
        (2, 1, 0),
        (1, 2, 0),
        (1, 0, 2),
    ]


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_permutations_are_all_distinct_and_complete(n):
    result = list(permutations(n))
    assert len(result) == permutation_count(n)
    assert set(result) == set(itertools.permutations(range(n)))


@pytest.mark.parametrize("n", [2, 3, 4, 5])
def test_consecutive_permutations_differ_by_adjacent_swap(n):
    result = list(permutations(n))
    for a, b in zip(result, result[1:]):
        diff = [i for i, (u, v) in enumerate(zip(a, b)) if u != v]
        assert len(diff) == 2
        assert diff[1] - diff[0] == 1


def test_permutations_start_with_identity():
    assert next(permutations(4)) == tuple(range(4))


def test_no_permutations_for_zero():
    assert list(permutations(0)) == []


def test_permutation_count_negative_raises():
    with pytest.raises(ValueError):
        permutation_count(-1)


def test_subsets_of_two_order():
    assert list(subsets(2)) == [(), (0,), (1,), (0, 1)]


@pytest.mark.parametrize("n", [0, 1, 3, 4])
def test_subsets_complete(n):
    result = list(subsets(n))
    assert len(result) == subset_count(n)
    expected = {c for r in range(n + 1) for c in itertools.combinations(range(n), r)}
    assert set(result) == expected


def test_subsets_of_empty_set_is_one_empty():
    assert list(subsets(0)) == [()]


def test_subsets_are_sorted_tuples():
    for s in subsets(4):
        assert list(s) == sorted(set(s))


def test_subset_count_negative_raises():
    with pytest.raises(ValueError):
        subset_count(-2)