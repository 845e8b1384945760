"""Variables, functions, conditionals and strings."""

from __future__ import annotations

NUMBER = 3
_COLOR_WORDS = frozenset({"green", "blue", "red"})


def calculate_apple_price(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return quantity * 2 if quantity <= 40 else quantity


def variables_report() -> list[str]:
    """Lines produced by the variable binding, shadowing and constant examples."""
    x = 5
    lines = [f"x has the value {x}"]
    x = 10
    lines.append("Ten!" if x == 10 else "Not ten!")
    x = 3
    lines.append(f"Number {x}")
    x = 5
    lines.append(f"Number {x}")
    x = 0
    lines.append(f"Number {x}")
    number = "T-H-R-E-E"
    lines.append(f"Spell a Number : {number}")
    count = 3
    lines.append(f"Number plus two is : {count + 2}")
    lines.append(f"Number {NUMBER}")
    return lines


def ring_calls(num: int) -> list[str]:
    """One ring message per call, numbered from 1."""
    return [f"Ring! Call number {i + 1}" for i in range(num)]


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd ones 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def fizz_if_foo(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    return attempt in _COLOR_WORDS