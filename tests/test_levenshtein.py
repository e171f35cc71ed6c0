import itertools

import pytest

from mathprog.levenshtein import levenshtein, levenshtein_recursive

SAMPLES = ["", "a", "ab", "abc", "kitten", "sitting", "flaw", "lawn", "abcb", "bca"]


def test_worked_example():
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein_recursive("kitten", "sitting") == 3


@pytest.mark.parametrize("text", SAMPLES)
def test_empty_against_text_is_length(text):
    assert levenshtein("", text) == len(text)
    assert levenshtein(text, "") == len(text)
    assert levenshtein_recursive("", text) == len(text)


@pytest.mark.parametrize("text", SAMPLES)
def test_identical_is_zero(text):
    assert levenshtein(text, text) == 0
    assert levenshtein_recursive(text, text) == 0


@pytest.mark.parametrize("x, y", list(itertools.product(SAMPLES, repeat=2)))
def test_implementations_agree(x, y):
    assert levenshtein(x, y) == levenshtein_recursive(x, y)


@pytest.mark.parametrize("x, y", list(itertools.product(SAMPLES, repeat=2)))
def test_symmetric_and_bounded(x, y):
    d = levenshtein(x, y)
    assert d == levenshtein(y, x)
    assert abs(len(x) - len(y)) <= d <= max(len(x), len(y))


def test_triangle_inequality():
    for a, b, c in itertools.product(SAMPLES[:6], repeat=3):
        assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)


def test_single_characters():
    assert levenshtein_recursive("a", "a") == levenshtein("a", "a")
    assert levenshtein_recursive("a", "b") == levenshtein("a", "b") == len("b")


def test_works_on_lists():
    assert levenshtein([1, 2, 3], [1, 2, 3]) == levenshtein("abc", "abc")
    assert levenshtein([1, 2, 3], [1, 9, 3]) == levenshtein("abc", "axc")