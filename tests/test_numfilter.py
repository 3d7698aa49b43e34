import pytest

from kata.numfilter import (
    filter_even_and_multiple_of_five_numbers,
    filter_even_numbers,
    filter_items_on_all_predicates,
    filter_items_on_any_predicates,
    filter_odd_and_multiple_of_three_and_greater_than_ten,
    filter_odd_numbers,
    filter_odd_prime_numbers,
    filter_prime_numbers,
    is_all_applicable,
    is_any_applicable,
    is_even,
    is_greater_than_ten,
    is_multiple_of_five,
    is_multiple_of_three,
    is_odd,
    is_prime,
)


@pytest.mark.parametrize(
    "numbers, expected",
    [([], []), ([0, 2, 4, 6], [0, 2, 4, 6]), ([1, 3, 5], []), ([1, 2, 3, 4], [2, 4])],
)
def test_filter_even_numbers(numbers, expected):
    assert filter_even_numbers(numbers) == expected


@pytest.mark.parametrize(
    "numbers, expected",
    [([], []), ([1, 3, 5], [1, 3, 5]), ([0, 2, 4], []), ([1, 2, 3, 4], [1, 3])],
)
def test_filter_odd_numbers(numbers, expected):
    assert filter_odd_numbers(numbers) == expected


@pytest.mark.parametrize(
    "numbers, expected",
    [
        ([], []),
        ([-1, 1, 4], []),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 37, 101], [2, 3, 5, 7, 37, 101]),
    ],
)
def test_filter_prime_numbers(numbers, expected):
    assert filter_prime_numbers(numbers) == expected


@pytest.mark.parametrize(
    "numbers, expected",
    [
        ([], []),
        ([-1, 1, 4], []),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 37, 101], [3, 5, 7, 37, 101]),
    ],
)
def test_filter_odd_prime_numbers(numbers, expected):
    assert filter_odd_prime_numbers(numbers) == expected


@pytest.mark.parametrize(
    "numbers, expected",
    [([], []), ([1, 5, 15, 4], []), ([10, 20, 30, 5, 8], [10, 20, 30])],
)
def test_filter_even_and_multiple_of_five(numbers, expected):
    assert filter_even_and_multiple_of_five_numbers(numbers) == expected


@pytest.mark.parametrize(
    "numbers, expected",
    [([], []), ([3, 6, 12], []), (list(range(1, 21)), [15])],
)
def test_filter_odd_multiple_of_three_greater_than_ten(numbers, expected):
    assert filter_odd_and_multiple_of_three_and_greater_than_ten(numbers) == expected


@pytest.mark.parametrize(
    "numbers, expected",
    [
        ([], []),
        ([1, 2, 3], [1, 3]),
        ([12, 14], [12, 14]),
        ([1, 2, 3, 5, 11, 12, 14], [1, 3, 5, 11, 12, 14]),
    ],
)
def test_filter_odd_or_greater_than_ten(numbers, expected):
    assert filter_items_on_any_predicates(numbers, [is_odd, is_greater_than_ten]) == expected


def test_filter_all_with_no_predicates_keeps_everything():
    assert filter_items_on_all_predicates([1, 2, 3], []) == [1, 2, 3]


def test_filter_any_with_no_predicates_keeps_nothing():
    assert filter_items_on_any_predicates([1, 2, 3], []) == []


def test_filter_works_on_strings():
    assert filter_items_on_all_predicates(["a", "bb", "ccc"], [lambda s: len(s) > 1]) == [
        "bb",
        "ccc",
    ]


def test_is_all_and_is_any_applicable():
    assert is_all_applicable(15, [is_odd, is_multiple_of_three, is_multiple_of_five])
    assert not is_all_applicable(10, [is_odd, is_multiple_of_five])
    assert is_any_applicable(10, [is_odd, is_multiple_of_five])
    assert not is_any_applicable(7, [is_even, is_greater_than_ten])


@pytest.mark.parametrize(
    "number, expected",
    [(-7, False), (0, False), (1, False), (2, True), (3, True), (4, False), (25, False), (97, True)],
)
def test_is_prime(number, expected):
    assert is_prime(number) is expected


def test_simple_predicates():
    assert is_odd(-3) and not is_odd(-4)
    assert is_even(0) and not is_even(7)
    assert is_multiple_of_five(-10) and not is_multiple_of_five(12)
    assert is_multiple_of_three(9) and not is_multiple_of_three(10)
    assert is_greater_than_ten(11) and not is_greater_than_ten(10)