"""Small functions used to practise writing tests."""

from __future__ import annotations


def times_two(num: int) -> int:
    return num * 2


def is_even(num: int) -> bool:
    return num % 2 == 0