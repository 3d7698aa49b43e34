"""Filtering integers by combinations of predicates."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")
Predicate = Callable[[T], bool]


def is_odd(num: int) -> bool:
    return num % 2 != 0


def is_even(num: int) -> bool:
    return num % 2 == 0


def is_prime(number: int) -> bool:
    if number <= 1:
        return False
    if number in (2, 3):
        return True
    divisor = 2
    while divisor * divisor <= number:
        if number % divisor == 0:
            return False
        divisor += 1
    return True


def is_multiple_of_five(number: int) -> bool:
    return number % 5 == 0


def is_multiple_of_three(number: int) -> bool:
    return number % 3 == 0


def is_greater_than_ten(number: int) -> bool:
    return number > 10


def is_all_applicable(item: T, predicates: Sequence[Predicate]) -> bool:
    return all(predicate(item) for predicate in predicates)


def is_any_applicable(item: T, predicates: Sequence[Predicate]) -> bool:
    return any(predicate(item) for predicate in predicates)


def filter_items_on_all_predicates(
    items: Iterable[T], predicates: Sequence[Predicate]
) -> list[T]:
    """Keep the items that satisfy every predicate, in their original order."""
    return [item for item in items if is_all_applicable(item, predicates)]


def filter_items_on_any_predicates(
    items: Iterable[T], predicates: Sequence[Predicate]
) -> list[T]:
    """Keep the items that satisfy at least one predicate, in their original order."""
    return [item for item in items if is_any_applicable(item, predicates)]


def filter_even_numbers(numbers: Iterable[int]) -> list[int]:
    return filter_items_on_all_predicates(numbers, [is_even])


def filter_odd_numbers(numbers: Iterable[int]) -> list[int]:
    return filter_items_on_all_predicates(numbers, [is_odd])


def filter_prime_numbers(numbers: Iterable[int]) -> list[int]:
    return filter_items_on_all_predicates(numbers, [is_prime])


def filter_odd_prime_numbers(numbers: Iterable[int]) -> list[int]:
    return filter_items_on_all_predicates(numbers, [is_odd, is_prime])


def filter_even_and_multiple_of_five_numbers(numbers: Iterable[int]) -> list[int]:
    return filter_items_on_all_predicates(numbers, [is_even, is_multiple_of_five])


def filter_odd_and_multiple_of_three_and_greater_than_ten(
    numbers: Iterable[int],
) -> list[int]:
    return filter_items_on_all_predicates(
        numbers, [is_odd, is_multiple_of_three, is_greater_than_ten]
    )