"""Conversions into people and colours, and counting over text."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1


def _parse_usize(text: str) -> int:
    """Parse an unsigned integer strictly: an optional plus sign, then ASCII digits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] == "+" else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass
class Person:
    """A person with a name and an age; the default is 30 year old John."""

    name: str = "John"
    age: int = 30


def person_from(text: str) -> Person:
    """Build a person from "name,age", falling back to the default person on any problem."""
    if not text:
        return Person()
    fields = text.split(",")
    name = fields[0]
    if not name or len(fields) < 2:
        return Person()
    try:
        age = _parse_usize(fields[1])
    except ValueError:
        return Person()
    return Person(name=name, age=age)


class ParsePersonErrorKind(enum.Enum):
    """Why text could not be parsed into a person."""

    EMPTY = "empty input string"
    BAD_LEN = "incorrect number of fields"
    NO_NAME = "empty name field"
    PARSE_INT = "invalid age"


class ParsePersonError(ValueError):
    """Text did not describe a person."""

    def __init__(self, kind: ParsePersonErrorKind, detail: str | None = None):
        super().__init__(kind.value if detail is None else f"{kind.value}: {detail}")
        self.kind = kind


def parse_person(text: str) -> Person:
    """Parse exactly "name,age"; raise ParsePersonError otherwise."""
    if not text:
        raise ParsePersonError(ParsePersonErrorKind.EMPTY)
    fields = text.split(",")
    if len(fields) != 2:
        raise ParsePersonError(ParsePersonErrorKind.BAD_LEN)
    name, age_text = fields
    if not name:
        raise ParsePersonError(ParsePersonErrorKind.NO_NAME)
    try:
        age = _parse_usize(age_text)
    except ValueError as error:
        raise ParsePersonError(ParsePersonErrorKind.PARSE_INT, str(error)) from error
    return Person(name=name, age=age)


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..=255."""

    red: int
    green: int
    blue: int


class IntoColorErrorKind(enum.Enum):
    """Why values could not be turned into a colour."""

    BAD_LEN = "incorrect length"
    INT_CONVERSION = "component out of range"


class IntoColorError(ValueError):
    """Values did not describe a colour."""

    def __init__(self, kind: IntoColorErrorKind):
        super().__init__(kind.value)
        self.kind = kind


def color_from(values: Sequence[int]) -> Color:
    """Build a colour from three components; raise IntoColorError otherwise."""
    components = tuple(values)
    if len(components) != 3:
        raise IntoColorError(IntoColorErrorKind.BAD_LEN)
    if any(not 0 <= component <= 255 for component in components):
        raise IntoColorError(IntoColorErrorKind.INT_CONVERSION)
    red, green, blue = components
    return Color(red=red, green=green, blue=blue)


def byte_counter(text: str) -> int:
    """Number of bytes in the UTF-8 encoding of the text."""
    return len(text.encode("utf-8"))


def char_counter(text: str) -> int:
    """Number of characters in the text."""
    return len(text)


def num_sq(value: int) -> int:
    """Return the square of a number."""
    return value * value