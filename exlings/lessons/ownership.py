"""Passing lists around, module-level names, variadic helpers and small fixes."""

from __future__ import annotations

import math
import time

_FRUITS = {"PEAR": "Pear", "APPLE": "Apple"}
_VEGGIES = {"CUCUMBER": "Cucumber", "CARROT": "Carrot"}


def fill_vec(vec: list[int]) -> list[int]:
    """A new list holding the given items followed by 22, 44 and 66."""
    return [*vec, 22, 44, 66]


def fill_new_vec() -> list[int]:
    """A freshly created list of 22, 44 and 66."""
    return fill_vec([])


def add_through_references(x: int) -> int:
    """Add 100 and then 1000 to x, one step after the other."""
    x += 100
    x += 1000
    return x


def _get_secret_recipe() -> str:
    return "Ginger"


def make_sausage() -> str:
    """Make a sausage using the secret recipe."""
    _get_secret_recipe()
    line = "sausage!"
    print(line)
    return line


def favorite_snacks() -> str:
    """The favourite fruit and vegetable in one sentence."""
    fruit = _FRUITS["PEAR"]
    veggie = _VEGGIES["CUCUMBER"]
    return f"favorite snacks: {fruit} and {veggie}"


def seconds_since_epoch() -> int:
    """Whole seconds since 1970-01-01 00:00:00 UTC."""
    now = time.time()
    if now < 0:
        raise RuntimeError("SystemTime before UNIX EPOCH!")
    return int(now)


def check_macro(*args) -> str:
    """Print a fixed line with no argument, or one mentioning a single argument."""
    match args:
        case ():
            line = "Check out my macro!"
        case (value,):
            line = f"Look at this other macro: {value}"
        case _:
            raise TypeError("check_macro takes at most one argument")
    print(line)
    return line


def circle_area(radius: float) -> float:
    """Area of a circle with the given radius."""
    return math.pi * radius**2


def add_optional(res: int, option: int | None) -> int:
    """Add the optional value to res when it is present."""
    if option is not None:
        res += option
    return res


def string_slice(arg: str) -> str:
    """Print a borrowed piece of text and hand it back."""
    print(arg)
    return arg


def string(arg: str) -> str:
    """Print an owned piece of text and hand it back."""
    print(arg)
    return arg