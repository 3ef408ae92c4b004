"""
Lazy sequence operators.

Every operator is a curried factory: calling it with its parameters returns a
function from an iterable to a new ``Sequence``. Nothing is pulled from the
source until the resulting sequence is iterated, and each iteration starts
from scratch, so the result is as restartable as its source::

    take(2)(drop(3)(Range(10)))            # [3, 4]
    pipe(drop(3), take(2))(Range(10))      # same thing
"""

from typing import Any, Callable, Iterable

from maybe import Just
from sequence import PureSequence, Seq, Sequence, to_seq


# --------- generators backing the operators ----------

def _map(mapper, iterable):
    for value in iterable:
        yield mapper(value)


def _mconcat(iterable):
    for inner in iterable:
        yield from inner


def _cat_maybes(iterable):
    for maybe in iterable:
        if isinstance(maybe, Just):
            yield maybe.value


def _cycle(iterable):
    while True:
        produced = False
        for value in iterable:
            produced = True
            yield value
        # an empty pass means there is nothing to repeat
        if not produced:
            return


def _drop(count, iterable):
    skipped = 0
    for value in iterable:
        if skipped < count:
            skipped += 1
            continue
        yield value


def _drop_while(predicate, iterable):
    iterator = iter(iterable)
    for value in iterator:
        if not predicate(value):
            yield value
            break
    yield from iterator


def _take(count, iterable):
    if count <= 0:
        return
    for taken, value in enumerate(iterable, start=1):
        yield value
        if taken >= count:
            return


def _take_while(predicate, iterable):
    for value in iterable:
        if not predicate(value):
            return
        yield value


def _take_where(predicate, iterable):
    for value in iterable:
        if predicate(value):
            yield value


def _reverse(iterable):
    values = list(iterable)
    yield from reversed(values)


def _zip_with(zipper, first, second):
    for left, right in zip(first, second):
        yield zipper(left, right)


def _tap(callback, iterable):
    for value in iterable:
        callback(value)
        yield value


# --------- operators ----------

def map_(mapper: Callable[[Any], Any]) -> Callable[[Iterable], Sequence]:
    """Transform each element with ``mapper``."""
    return lambda iterable: Sequence(lambda: _map(mapper, iterable))


def mconcat(iterable: Iterable[Iterable]) -> Sequence:
    """
    Flatten an iterable of iterables.

    Each inner iterable is drained completely before the outer one advances,
    so infinite inner or outer iterables are fine as long as the consumer
    stops pulling::

        mconcat(map_(Range)(Range(1)))     # 0, 0, 1
    """
    return Sequence(lambda: _mconcat(iterable))


def bind(bind_fn: Callable[[Any], Iterable]) -> Callable[[Iterable], Sequence]:
    """Monadic bind: map each element to an iterable and flatten."""
    return lambda iterable: mconcat(map_(bind_fn)(iterable))


def cat_maybes(iterable: Iterable) -> Sequence:
    """Keep the values of ``Just`` elements and skip every ``Nothing``."""
    return Sequence(lambda: _cat_maybes(iterable))


def append(first: Iterable) -> Callable[[Iterable], Sequence]:
    """Concatenate two iterables: ``append(first)(second)``."""
    return lambda second: mconcat(Seq(first, second))


concat = append


def cons(element) -> Callable[[Iterable], Sequence]:
    """Prepend ``element``."""
    return append(PureSequence(element))


def snoc(element) -> Callable[[Iterable], Sequence]:
    """Append ``element`` after the last element of a finite iterable."""
    return lambda iterable: mconcat(Seq(iterable, PureSequence(element)))


def cycle(iterable: Iterable) -> Sequence:
    """
    Repeat a finite iterable forever.

    The source is restarted every time it runs out. Cycling an empty
    iterable gives an empty sequence.
    """
    return Sequence(lambda: _cycle(iterable))


def drop(count: int) -> Callable[[Iterable], Sequence]:
    """Skip the first ``count`` elements. Negative counts skip nothing."""
    return lambda iterable: Sequence(lambda: _drop(count, iterable))


def drop_while(predicate: Callable[[Any], bool]) -> Callable[[Iterable], Sequence]:
    """Skip elements until the first one for which ``predicate`` is false."""
    return lambda iterable: Sequence(lambda: _drop_while(predicate, iterable))


def take(count: int) -> Callable[[Iterable], Sequence]:
    """
    Keep only the first ``count`` elements.

    The source is never pulled past the ``count``-th element. Negative counts
    behave like zero.
    """
    return lambda iterable: Sequence(lambda: _take(count, iterable))


def take_while(predicate: Callable[[Any], bool]) -> Callable[[Iterable], Sequence]:
    return lambda iterable: Sequence(lambda: _take_while(predicate, iterable))


def take_where(predicate: Callable[[Any], bool]) -> Callable[[Iterable], Sequence]:
    """Keep only the elements satisfying ``predicate``."""
    return lambda iterable: Sequence(lambda: _take_where(predicate, iterable))


def drop_where(predicate: Callable[[Any], bool]) -> Callable[[Iterable], Sequence]:
    """Keep only the elements failing ``predicate``."""
    return take_where(lambda element: not predicate(element))


retain_all = take_where
reject_all = drop_where


def reverse_(iterable: Iterable) -> Sequence:
    """
    Yield a finite iterable back to front.

    The whole source is buffered when iteration starts; it must be finite.
    """
    return Sequence(lambda: _reverse(iterable))


def zip_with(zipper: Callable[[Any, Any], Any]):
    """
    Combine two iterables pairwise: ``zip_with(f)(first)(second)``.

    Stops as soon as either side is exhausted.
    """
    return lambda first: lambda second: Sequence(lambda: _zip_with(zipper, first, second))


def zip_(first: Iterable) -> Callable[[Iterable], Sequence]:
    """Pair up the elements of two iterables as tuples."""
    return zip_with(lambda left, right: (left, right))(first)


def tap(callback: Callable[[Any], None]) -> Callable[[Iterable], Sequence]:
    """Call ``callback`` with each element as it passes through."""
    return lambda iterable: Sequence(lambda: _tap(callback, iterable))


def pipe(*transformers: Callable[[Any], Any]) -> Callable[[Iterable], Any]:
    """
    Apply ``transformers`` left to right to an iterable.

    The last transformer may be a terminal operation, in which case its
    result is returned. Without transformers the iterable comes back as a
    sequence unchanged.
    """
    def run(iterable):
        result = to_seq(iterable)
        for transformer in transformers:
            result = transformer(result)
        return result

    return run
