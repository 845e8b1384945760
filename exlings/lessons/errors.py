"""Error handling: optional results, parse errors and custom error types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_DIGITS = frozenset("0123456789")

I32_MIN, I32_MAX = -(2**31), 2**31 - 1
I64_MIN, I64_MAX = -(2**63), 2**63 - 1

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_integer(text: str, low: int, high: int) -> int:
    """Parse a whole number within [low, high]; raise ValueError with the reason."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text
    if low < 0 and digits[0] in "+-":
        digits = digits[1:]
    elif digits[0] == "+":
        digits = digits[1:]
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; empty names are refused."""
    if not name:
        raise ValueError("Empty names are not allowed")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity of items, fee included.

    Raises ValueError when the quantity is not a valid 32-bit integer.
    """
    quantity = _parse_integer(item_quantity, I32_MIN, I32_MAX)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    if not I32_MIN <= cost <= I32_MAX:
        raise OverflowError("attempt to compute total cost with overflow")
    return cost


def buy_items(tokens: int, item_quantity: str) -> tuple[int, str]:
    """Spend tokens on items if affordable; return what is left and a message."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return tokens, "You can't afford that many!"
    remaining = tokens - cost
    return remaining, f"You now have {remaining} tokens."


class CreationErrorKind(Enum):
    """Why a positive nonzero integer could not be created."""

    NEGATIVE = "negative"
    ZERO = "zero"


class CreationError(ValueError):
    """A value was not a positive nonzero integer."""

    _MESSAGES = {
        CreationErrorKind.NEGATIVE: "number is negative",
        CreationErrorKind.ZERO: "number is zero",
    }

    def __init__(self, kind: CreationErrorKind):
        super().__init__(self._MESSAGES[kind])
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing a positive nonzero integer failed.

    ``source`` holds either the CreationError or the integer parse error.
    """

    def __init__(self, source: ValueError):
        super().__init__(str(source))
        self.source = source

    @property
    def is_creation(self) -> bool:
        return isinstance(self.source, CreationError)


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text as a positive nonzero integer; raise ParsePosNonzeroError."""
    try:
        value = _parse_integer(s, I64_MIN, I64_MAX)
    except ValueError as error:
        raise ParsePosNonzeroError(error) from error
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as error:
        raise ParsePosNonzeroError(error) from error