"""Records, messages, validated shapes and a linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NamedTuple, TypeVar, Union

T = TypeVar("T")


@dataclass
class ColorClassicStruct:
    """A colour with named components."""

    red: int
    green: int
    blue: int


class ColorTupleStruct(NamedTuple):
    """A colour with positional components."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class UnitLikeStruct:
    """A record without fields."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the order that new orders start from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(init=False)
class Package:
    """A parcel sent between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __init__(self, sender_country: str, recipient_country: str, weight_in_grams: int):
        if weight_in_grams < 10:
            raise ValueError("Can not ship a package with weight below 10 grams.")
        self.sender_country = sender_country
        self.recipient_country = recipient_country
        self.weight_in_grams = weight_in_grams

    def is_international(self) -> bool:
        """True when sender and recipient countries differ."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Shipping fee in cents."""
        return self.weight_in_grams * cents_per_gram


@dataclass
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Quit:
    pass


Message = Union[ChangeColor, Echo, Move, Quit]


@dataclass
class State:
    """State changed by processing messages."""

    color: tuple[int, int, int]
    position: Point
    quit: bool
    message: str

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red, green, blue):
                self.color = (red, green, blue)
            case Echo(text):
                self.message = text
            case Move(point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")


@dataclass(init=False)
class Rectangle:
    """A rectangle with strictly positive sides."""

    width: int
    height: int

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")
        self.width = width
        self.height = height


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@dataclass
class ReportCard:
    """A student's grade, numeric or alphabetical."""

    grade: float | str
    student_name: str
    student_age: int

    def render(self) -> str:
        """Return the report card as one line."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons list cell: a value and the rest of the list."""

    value: int
    rest: Union["Cons", Nil]


def create_empty_list() -> Nil:
    """Return the empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """Return a cons list holding 1 and 2."""
    return Cons(1, Cons(2, Nil()))