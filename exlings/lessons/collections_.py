"""Dictionaries and lists: fruit baskets and simple list transforms."""

from __future__ import annotations

from enum import Enum


class Fruit(Enum):
    """Kinds of fruit that can go in a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 2, "mango": 2}


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add ten of every fruit kind not yet in the basket, leaving others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 10)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    a = (10, 20, 30, 40)
    return a, list(a)


def vec_loop(v: list[int]) -> list[int]:
    """Every element multiplied by two."""
    return [x * 2 for x in v]