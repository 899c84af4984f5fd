"""Apply string commands to a list of strings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the string."""


@dataclass(frozen=True)
class Trim:
    """Strip whitespace from both ends."""


@dataclass(frozen=True)
class Append:
    """Append "bar" a number of times."""

    times: int


Command = Union[Uppercase, Trim, Append]


def _apply(text: str, command: Command) -> str:
    match command:
        case Uppercase():
            return text.upper()
        case Trim():
            return text.strip()
        case Append(times):
            return text + "bar" * times
        case _:
            raise TypeError(f"unknown command: {command!r}")


def transformer(pairs: Iterable[tuple[str, Command]]) -> list[str]:
    """Return each string transformed by its command."""
    return [_apply(text, command) for text, command in pairs]