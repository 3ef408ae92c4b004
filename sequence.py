"""
Restartable lazy sequences.

A ``Sequence`` never holds a live cursor. It only keeps a factory that builds
a fresh iterator each time the sequence is iterated, so the same sequence can
be walked any number of times and abandoning a walk early leaves nothing
behind. Operators (see ``operators``) and terminal operations (see
``terminals``) are available both as curried functions and as chainable
methods::

    Range(10).drop(3).take(2).to_list()   # [3, 4]
"""

import itertools
import sys
from collections.abc import Iterable
from typing import Any, Callable, Iterator, Optional, Tuple, TypeVar

from errors import IllegalArgumentError, ZERO_STEP

T = TypeVar("T")
U = TypeVar("U")

# Largest count that take/drop handle reliably.
ALL = sys.maxsize


def is_iterable(candidate: Any) -> bool:
    """Check whether ``candidate`` supports the iteration protocol."""
    return isinstance(candidate, Iterable)


class Sequence:
    """
    A lazy, possibly infinite, restartable collection.

    Every transformation returns a new ``Sequence``; nothing is evaluated
    until the sequence is iterated.
    """

    def __init__(self, iterator_factory: Callable[[], Iterator[Any]]):
        self._iterator_factory = iterator_factory

    def __iter__(self) -> Iterator[Any]:
        return self._iterator_factory()

    # --------- monadic interface ----------
    @staticmethod
    def pure(value: Any) -> "Sequence":
        """Lift a single value into a sequence."""
        return PureSequence(value)

    @staticmethod
    def empty() -> "Sequence":
        return nil

    def fmap(self, mapper):
        return operators.map_(mapper)(self)

    def bind(self, bind_fn):
        """Map every element to a sequence and flatten the results."""
        return operators.bind(bind_fn)(self)

    # --------- chainable operators (lazy) ----------
    map = fmap

    def drop(self, count):
        return operators.drop(count)(self)

    def drop_while(self, predicate):
        return operators.drop_while(predicate)(self)

    def drop_where(self, predicate):
        return operators.drop_where(predicate)(self)

    def take(self, count):
        return operators.take(count)(self)

    def take_while(self, predicate):
        return operators.take_while(predicate)(self)

    def take_where(self, predicate):
        return operators.take_where(predicate)(self)

    retain_all = take_where
    reject_all = drop_where

    def cons(self, element):
        return operators.cons(element)(self)

    def snoc(self, element):
        return operators.snoc(element)(self)

    def append(self, other):
        return operators.append(self)(other)

    def cycle(self):
        return operators.cycle(self)

    def reverse(self):
        """Reverse a finite sequence. Buffers the whole source when iterated."""
        return operators.reverse_(self)

    def zip(self, other):
        return operators.zip_(self)(other)

    def zip_with(self, zipper, other):
        return operators.zip_with(zipper)(self)(other)

    def mconcat(self):
        return operators.mconcat(self)

    def cat_maybes(self):
        return operators.cat_maybes(self)

    def tap(self, callback):
        return operators.tap(callback)(self)

    def pipe(self, *transformers):
        return operators.pipe(*transformers)(self)

    # --------- terminal operations (force evaluation) ----------
    def to_list(self) -> list:
        return list(self)

    def reduce(self, accumulation_fn, start):
        return terminals.reduce_(accumulation_fn, start)(self)

    foldl = reduce

    def foldr(self, accumulation_fn, start):
        return terminals.foldr(accumulation_fn, start)(self)

    def for_each(self, callback) -> None:
        terminals.for_each(callback)(self)

    def head(self):
        return terminals.head(self)

    def is_empty(self) -> bool:
        return terminals.is_empty(self)

    def max(self, comparator=None):
        return terminals.max_(self, comparator)

    def min(self, comparator=None):
        return terminals.min_(self, comparator)

    def safe_max(self, comparator=None):
        return terminals.safe_max(self, comparator)

    def safe_min(self, comparator=None):
        return terminals.safe_min(self, comparator)

    def count(self) -> int:
        return terminals.count(self)

    def eq(self, other) -> bool:
        """Elementwise equality against any iterable; False for non-iterables."""
        if not is_iterable(other):
            return False
        return terminals.eq(self)(other)

    def show(self, max_values: Optional[int] = None) -> str:
        return terminals.show(self, max_values)

    def uncons(self) -> Tuple[Any, "Sequence"]:
        return terminals.uncons(self)

    # --------- operators on the Python data model ----------
    def __eq__(self, other):
        return self.eq(other)

    __hash__ = None

    def __add__(self, other):
        if not is_iterable(other):
            return NotImplemented
        return self.append(other)

    def __str__(self):
        return self.show()

    def __repr__(self):
        return f"{type(self).__name__}({self.show()})"


# ---------- constructors ----------

class Track(Sequence):
    """
    Walk from ``start`` by repeatedly applying ``step`` while ``proceed`` holds.

    ``proceed`` is checked before each value is produced, so the sequence is
    empty when ``proceed(start)`` is false. ``step`` is only called when the
    consumer asks for the next value.

    ``proceed`` and ``step`` must not depend on mutable state outside their
    arguments, otherwise two walks over the same track may differ.
    """

    def __init__(self, start, proceed: Callable[[Any], bool], step: Callable[[Any], Any]):
        def walk():
            value = start
            while proceed(value):
                yield value
                value = step(value)

        super().__init__(walk)


class Seq(Sequence):
    """A finite sequence over the given values."""

    def __init__(self, *values):
        self._values = values
        super().__init__(lambda: iter(self._values))


class PureSequence(Seq):
    """A sequence containing exactly one value."""

    def __init__(self, value):
        super().__init__(value)


nil = Seq()


class Range(Track):
    """
    Numbers between two inclusive boundaries.

    The boundaries may be given in any order; they are sorted and the walk goes
    upwards for a positive ``step`` and downwards for a negative one. The end
    value is never exceeded, even when it is not hit exactly::

        Range()           # 0, 1, 2, ... up to ALL
        Range(3)          # 0, 1, 2, 3
        Range(5, 3)       # 3, 4, 5
        Range(1, 5, -2)   # 5, 3, 1
    """

    def __init__(self, first_boundary=ALL, second_boundary=0, step=1):
        if step == 0:
            raise IllegalArgumentError(ZERO_STEP)
        low, high = sorted((first_boundary, second_boundary))
        if step < 0:
            start, end = high, low
            proceed = lambda value: value >= end
        else:
            start, end = low, high
            proceed = lambda value: value <= end
        super().__init__(start, proceed, lambda value: value + step)


def unfold(initial_state, next_fn: Callable[[Any], Optional[Tuple[Any, Any]]]) -> Sequence:
    """
    Generate values from a running state.

    ``next_fn(state)`` returns ``None`` to stop, or a ``(value, next_state)``
    pair.
    """
    def unfolding():
        state = initial_state
        while True:
            result = next_fn(state)
            if result is None:
                return
            value, state = result
            yield value

    return Sequence(unfolding)


def repeat(value) -> Sequence:
    """An infinite sequence of ``value``."""
    return Sequence(lambda: itertools.repeat(value))


def replicate(count: int) -> Callable[[Any], Sequence]:
    """``replicate(n)(x)`` is the first ``n`` elements of ``repeat(x)``."""
    return lambda value: operators.take(count)(repeat(value))


def to_seq(iterable) -> Sequence:
    """Lift any iterable into a Sequence. Sequences are returned unchanged."""
    if isinstance(iterable, Sequence):
        return iterable
    return Sequence(lambda: iter(iterable))


# Imported last: both modules build on Sequence.
import operators  # noqa: E402
import terminals  # noqa: E402
