"""
Query comprehensions over sequences.

A small LINQ-style layer built only from ``bind``, ``fmap``, ``pure`` and
``empty``::

    from_(Range(3)).where(lambda x: x % 2 == 0).select(lambda x: x * 10).result()
    # 0, 20
"""

from typing import Any, Callable, Iterable

from sequence import Sequence, to_seq


class Query:
    """A chainable query over a monadic sequence."""

    def __init__(self, monad: Sequence):
        self._monad = monad

    def where(self, predicate: Callable[[Any], bool]) -> "Query":
        monad = self._monad
        return Query(monad.bind(lambda a: monad.pure(a) if predicate(a) else monad.empty()))

    def select(self, mapper: Callable[[Any], Any]) -> "Query":
        return Query(self._monad.fmap(mapper))

    map = select

    def pair_with(self, other: Iterable) -> "Query":
        """Cartesian product with another sequence, as ``(x, y)`` tuples."""
        other = to_seq(other)
        return Query(self._monad.bind(lambda x: other.fmap(lambda y: (x, y))))

    def combine(self, constructor: Callable[[Any], Iterable]) -> "Query":
        """Pair each element ``x`` with every element of ``constructor(x)``."""
        return Query(self._monad.bind(lambda x: to_seq(constructor(x)).fmap(lambda y: (x, y))))

    def inside(self, bind_fn: Callable[[Any], Iterable]) -> "Query":
        return Query(self._monad.bind(bind_fn))

    def result(self) -> Sequence:
        return self._monad


def from_(iterable: Iterable) -> Query:
    """Start a query."""
    return Query(to_seq(iterable))
