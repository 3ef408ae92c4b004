"""
Optional values.

A ``Maybe`` is either ``Just(value)`` or the ``Nothing`` singleton. Both are
plain frozen dataclasses, so they work with structural pattern matching::

    match safe_max([1, 3, 0, 5]):
        case Just(value):
            print(value)
        case NothingType():
            print("empty")
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Just(Generic[T]):
    """A present value."""
    value: T

    @property
    def is_just(self) -> bool:
        return True

    @property
    def is_nothing(self) -> bool:
        return False

    def get_or_else(self, default: Any) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Just[U]":
        return Just(fn(self.value))

    def fold(self, on_nothing: Callable[[], U], on_just: Callable[[T], U]) -> U:
        """Eliminate the Maybe: call ``on_just`` with the value."""
        return on_just(self.value)


@dataclass(frozen=True)
class NothingType:
    """The absent value. Use the ``Nothing`` instance rather than this class."""

    @property
    def is_just(self) -> bool:
        return False

    @property
    def is_nothing(self) -> bool:
        return True

    def get_or_else(self, default: Any) -> Any:
        return default

    def map(self, fn: Callable[[Any], Any]) -> "NothingType":
        return self

    def fold(self, on_nothing: Callable[[], U], on_just: Callable[[Any], U]) -> U:
        """Eliminate the Maybe: call ``on_nothing``."""
        return on_nothing()

    def __repr__(self) -> str:
        return "Nothing"


Nothing = NothingType()

Maybe = Union[Just[T], NothingType]
