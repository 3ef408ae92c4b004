"""
Terminal operations.

These consume an iterable and return a plain value. Operations that read the
whole source (``reduce_``, ``foldr``, ``max_``, ``eq``, ``count`` ...) must only
be applied to finite iterables.
"""

import operator
from typing import Any, Callable, Iterable, Optional, Tuple

import operators
from errors import IllegalArgumentError, ILLEGAL_ARGUMENT_EMPTY_ITERABLE
from maybe import Just, Maybe, Nothing
from models import get_settings

_EMPTY = object()


def reduce_(accumulation_fn: Callable[[Any, Any], Any], start: Any) -> Callable[[Iterable], Any]:
    """Strict left fold: ``reduce_(f, start)(iterable)``."""
    def run(iterable):
        accumulator = start
        for current in iterable:
            accumulator = accumulation_fn(accumulator, current)
        return accumulator

    return run


foldl = reduce_


def foldr(accumulation_fn: Callable[[Any, Any], Any], start: Any) -> Callable[[Iterable], Any]:
    """
    Right fold.

    The source is reversed first (buffering all of it) and then folded with
    ``accumulation_fn(accumulator, current)``.
    """
    return lambda iterable: reduce_(accumulation_fn, start)(operators.reverse_(iterable))


def for_each(callback: Callable[[Any], Any]) -> Callable[[Iterable], None]:
    """Call ``callback`` once per element, for its side effects."""
    def run(iterable):
        for current in iterable:
            callback(current)

    return run


def head(iterable: Iterable) -> Any:
    """The first element, or ``None`` for an empty iterable."""
    return next(iter(iterable), None)


def is_empty(iterable: Iterable) -> bool:
    return next(iter(iterable), _EMPTY) is _EMPTY


def safe_max(iterable: Iterable, comparator: Optional[Callable[[Any, Any], bool]] = None) -> Maybe:
    """
    The largest element wrapped in ``Just``, or ``Nothing`` if empty.

    ``comparator(current, candidate)`` returns True when ``candidate`` should
    replace the current maximum; it defaults to ``<``.
    """
    if comparator is None:
        comparator = operator.lt
    iterator = iter(iterable)
    current_max = next(iterator, _EMPTY)
    if current_max is _EMPTY:
        return Nothing
    for candidate in iterator:
        if comparator(current_max, candidate):
            current_max = candidate
    return Just(current_max)


def safe_min(iterable: Iterable, comparator: Optional[Callable[[Any, Any], bool]] = None) -> Maybe:
    """The smallest element wrapped in ``Just``, or ``Nothing`` if empty."""
    if comparator is None:
        comparator = operator.lt
    return safe_max(iterable, lambda current, candidate: not comparator(current, candidate))


def max_(iterable: Iterable, comparator: Optional[Callable[[Any, Any], bool]] = None) -> Any:
    """
    The largest element of a non-empty finite iterable.

    Raises ``IllegalArgumentError`` when the iterable is empty.
    """
    return safe_max(iterable, comparator).fold(_raise_empty, lambda value: value)


def min_(iterable: Iterable, comparator: Optional[Callable[[Any, Any], bool]] = None) -> Any:
    """
    The smallest element of a non-empty finite iterable.

    Raises ``IllegalArgumentError`` when the iterable is empty.
    """
    return safe_min(iterable, comparator).fold(_raise_empty, lambda value: value)


def _raise_empty():
    raise IllegalArgumentError(ILLEGAL_ARGUMENT_EMPTY_ITERABLE)


def eq(first: Iterable) -> Callable[[Iterable], bool]:
    """Elementwise equality of two iterables, at least one of them finite."""
    return lambda second: list(first) == list(second)


def count(iterable: Iterable) -> int:
    return reduce_(lambda accumulator, _current: accumulator + 1, 0)(iterable)


def show(iterable: Iterable, max_values: Optional[int] = None) -> str:
    """
    Render at most ``max_values`` elements as ``"[a,b,c]"``.

    Defaults to the configured ``show_max_values``.
    """
    if max_values is None:
        max_values = get_settings().show_max_values
    return "[" + ",".join(str(value) for value in operators.take(max_values)(iterable)) + "]"


def uncons(iterable: Iterable) -> Tuple[Any, Any]:
    """Split into ``(head, tail)``; the tail is a restartable sequence."""
    return head(iterable), operators.drop(1)(iterable)
