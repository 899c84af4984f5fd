"""Optional values and errors: ice cream, name tags, costs and positive integers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, strictly: optional sign, then digits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour of the day; None for hours past 23."""
    if time_of_day > 23:
        return None
    if time_of_day < 22:
        return 5
    return 0


class EmptyNameError(ValueError):
    """A name tag was requested for an empty name."""

    def __init__(self) -> None:
        super().__init__("`name` was empty; it must be nonempty.")


def generate_nametag_text(name: str) -> str:
    """Return the text of a name tag; raise EmptyNameError for an empty name."""
    if not name:
        raise EmptyNameError()
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost in tokens of buying the typed-in quantity; raise ValueError if it is not a number."""
    quantity = _parse_int(item_quantity, 32)
    return quantity * _COST_PER_ITEM + _PROCESSING_FEE


class CreationErrorKind(enum.Enum):
    """Why a positive nonzero integer could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value was not a positive nonzero integer."""

    def __init__(self, kind: CreationErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(init=False)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __init__(self, value: int):
        if value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if value == 0:
            raise CreationError(CreationErrorKind.ZERO)
        self.value = value


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed, or did not hold a positive nonzero integer."""

    def __init__(self, error: ValueError):
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive nonzero integer; raise ParsePosNonzeroError otherwise."""
    try:
        number = _parse_int(text, 64)
    except ValueError as error:
        raise ParsePosNonzeroError(error) from error
    try:
        return PositiveNonzeroInteger(number)
    except CreationError as error:
        raise ParsePosNonzeroError(error) from error