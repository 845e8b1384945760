"""Custom error types with causes and readable messages."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .errors import (
    I64_MAX,
    I64_MIN,
    CreationError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    _parse_integer,
)

U32_MAX = 2**32 - 1
_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _parse_float(text: str) -> float:
    if not text:
        raise ValueError("cannot parse float from empty string")
    if not _FLOAT.fullmatch(text):
        raise ValueError("invalid float literal")
    return float(text)


class ClimateErrorKind(Enum):
    """Why a climate record could not be parsed."""

    EMPTY = "empty"
    BAD_LEN = "bad_len"
    NO_CITY = "no_city"
    PARSE_INT = "parse_int"
    PARSE_FLOAT = "parse_float"


class ParseClimateError(ValueError):
    """Parsing a climate record failed; ``source`` holds any inner parse error."""

    def __init__(self, kind: ClimateErrorKind, source: ValueError | None = None):
        match kind:
            case ClimateErrorKind.EMPTY:
                message = "empty input"
            case ClimateErrorKind.BAD_LEN:
                message = "incorrect number of fields"
            case ClimateErrorKind.NO_CITY:
                message = "no city name"
            case ClimateErrorKind.PARSE_INT:
                message = f"error parsing year: {source}"
            case ClimateErrorKind.PARSE_FLOAT:
                message = f"error parsing temperature: {source}"
        super().__init__(message)
        self.kind = kind
        self.source = source


@dataclass(frozen=True)
class Climate:
    """A city's temperature in a given year."""

    city: str
    year: int
    temp: float


def parse_climate(s: str) -> Climate:
    """Parse "city,year,temp"; raise ParseClimateError on any problem."""
    if not s:
        raise ParseClimateError(ClimateErrorKind.EMPTY)
    fields = s.split(",")
    if len(fields) != 3:
        raise ParseClimateError(ClimateErrorKind.BAD_LEN)
    city, year_text, temp_text = fields
    if not city:
        raise ParseClimateError(ClimateErrorKind.NO_CITY)
    try:
        year = _parse_integer(year_text, 0, U32_MAX)
    except ValueError as error:
        raise ParseClimateError(ClimateErrorKind.PARSE_INT, error) from error
    try:
        temp = _parse_float(temp_text)
    except ValueError as error:
        raise ParseClimateError(ClimateErrorKind.PARSE_FLOAT, error) from error
    return Climate(city=city, year=year, temp=temp)


def parse_positive(s: str) -> PositiveNonzeroInteger:
    """Parse text as a positive nonzero integer; raise ParsePosNonzeroError."""
    try:
        return PositiveNonzeroInteger(_parse_integer(s, I64_MIN, I64_MAX))
    except (CreationError, ValueError) as error:
        raise ParsePosNonzeroError(error) from error