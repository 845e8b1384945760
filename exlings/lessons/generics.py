"""Generic containers, a report card for any grade, and appending "Bar"."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def shopping_list() -> list[str]:
    """A shopping list with milk on it."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


@dataclass(frozen=True)
class ReportCard(Generic[T]):
    """A student's report card; the grade may be numeric or alphabetic."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        """The report card as one line of text."""
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"


@singledispatch
def append_bar(value: Any) -> Any:
    """Return the value with "Bar" appended."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


def my_macro(text: str) -> str:
    """Greet the given text."""
    return f"Hello {text}"