"""Enums, structs, primitive values and optional values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Sequence


@dataclass(frozen=True)
class Point:
    """A position on a small grid."""

    x: int
    y: int


class Message:
    """Base of the messages a State can process."""


@dataclass(frozen=True)
class Quit(Message):
    """Ask the state to quit."""


@dataclass(frozen=True)
class Echo(Message):
    """Print the text."""

    text: str


@dataclass(frozen=True)
class Move(Message):
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class ChangeColor(Message):
    """Switch to a new RGB colour."""

    color: tuple[int, int, int]


@dataclass
class State:
    """Mutable state driven by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.color = color
            case Echo(text=text):
                print(text)
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")


@dataclass(frozen=True)
class ColorClassicStruct:
    """A named colour with its hex code."""

    name: str
    hex: str


class ColorTupleStruct(NamedTuple):
    """A named colour addressed by position."""

    name: str
    hex: str


class UnitStruct:
    """A type that carries no data."""

    def __repr__(self) -> str:
        return "UnitStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitStruct)

    def __hash__(self) -> int:
        return hash(UnitStruct)


@dataclass(frozen=True)
class Order:
    """An order placed by a customer."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """The template other orders are derived from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A parcel sent between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("weightless")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Transport fees in cents."""
        return self.weight_in_grams * cents_per_gram


def time_greetings(is_morning: bool, is_evening: bool) -> list[str]:
    """Greetings for the times of day that apply."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_character(ch: str) -> str:
    """Say whether a character is alphabetic, numeric or neither."""
    if len(ch) != 1:
        raise ValueError("expected a single character")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(items: Sequence) -> str:
    """Comment on the size of a sequence."""
    if len(items) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def slice_out_of_array(items: Sequence) -> list:
    """The elements at positions 1 to 3."""
    return list(items[1:4])


def second_of(numbers: tuple):
    """The second element of a tuple."""
    return numbers[1]


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a (name, age) pair."""
    name, age = cat
    return f"{name} is {age} years old."


def print_number(maybe_number: int | None) -> str:
    """Print a number that must be present; raise ValueError when it is None."""
    if maybe_number is None:
        raise ValueError("no number to print")
    line = f"printing: {maybe_number}"
    print(line)
    return line


def optional_numbers() -> list[int | None]:
    """Five computed numbers, each wrapped as an optional value."""
    return [((i * 1235) + 2) // (4 * 16) for i in range(5)]


def drain_optionals(values: list[int | None]) -> list[str]:
    """Pop values from the end while they are present; return a line for each."""
    lines = []
    while values:
        value = values.pop()
        if value is None:
            break
        lines.append(f"current value: {value}")
    for line in lines:
        print(line)
    return lines


def describe_point(point: Point | None) -> str:
    """Describe a point's coordinates, or say there is none."""
    match point:
        case Point(x=x, y=y):
            return f"Co-ordinates are {x},{y} "
        case _:
            return "no match"