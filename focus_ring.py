"""
Focus ring: a cyclic cursor over a sequence.

The ring is split into ``pre`` (the elements left of the focus, nearest first)
and ``post`` (the focus followed by the elements right of it). Moving returns a
new ring; a ring is never changed in place.

``pre`` only ever holds elements the ring has already walked over, so it is
kept as a tuple. ``post`` is a tuple of elements pushed back by ``left()``
followed by the source with its first ``offset`` elements skipped. Moving back
and forth only shifts elements between the two tuples, so the cost of a move
does not grow with the number of moves made.
"""

import logging
from typing import Any, Iterable, Tuple

from errors import EMPTY_FOCUS_RING, IllegalArgumentError
from operators import append, drop
from sequence import Seq, Sequence, nil, to_seq
from terminals import head, is_empty

logger = logging.getLogger(__name__)


class FocusRing:
    """
    Immutable cyclic cursor.

    The source must be non-empty and re-iterable. It may be infinite as long as
    ``left()`` is never asked to go further left than the starting point plus
    the number of ``right()`` moves made so far.
    """

    __slots__ = ("_pre", "_pushed", "_source", "_offset")

    def __init__(self, non_empty_iterable: Iterable[Any]):
        source = to_seq(non_empty_iterable)
        if is_empty(source):
            raise IllegalArgumentError(EMPTY_FOCUS_RING)
        self._pre: Tuple[Any, ...] = ()
        self._pushed: Tuple[Any, ...] = ()
        self._source: Sequence = source
        self._offset = 0

    @classmethod
    def _of(cls, pre: Tuple[Any, ...], pushed: Tuple[Any, ...], source: Sequence, offset: int) -> "FocusRing":
        ring = cls.__new__(cls)
        ring._pre = pre
        ring._pushed = pushed
        ring._source = source
        ring._offset = offset
        return ring

    def _rest(self) -> Sequence:
        return drop(self._offset)(self._source) if self._offset else self._source

    @property
    def pre(self) -> Sequence:
        return Seq(*self._pre)

    @property
    def post(self) -> Sequence:
        if not self._pushed:
            return self._rest()
        return append(Seq(*self._pushed))(self._rest())

    def focus(self) -> Any:
        if self._pushed:
            return self._pushed[0]
        return head(self._rest())

    def right(self) -> "FocusRing":
        """Move the focus one element to the right, wrapping to the start."""
        current_focus = self.focus()
        if self._pushed:
            pushed, offset = self._pushed[1:], self._offset
        else:
            pushed, offset = (), self._offset + 1

        tail_is_empty = not pushed and is_empty(drop(offset)(self._source))
        if tail_is_empty:
            if not self._pre:
                # a single element ring does not move
                return FocusRing._of(self._pre, self._pushed, self._source, self._offset)
            logger.debug("FocusRing wraps around to the first element")
            return FocusRing._of((current_focus,), tuple(reversed(self._pre)), nil, 0)

        return FocusRing._of((current_focus,) + self._pre, pushed, self._source, offset)

    def left(self) -> "FocusRing":
        """Move the focus one element to the left, wrapping to the end."""
        if not self._pre:
            logger.debug("FocusRing wraps around to the last element")
            post_reversed = tuple(reversed(tuple(self.post)))
            return FocusRing._of(post_reversed[1:], post_reversed[:1], nil, 0)

        return FocusRing._of(self._pre[1:], (self._pre[0],) + self._pushed, self._source, self._offset)

    def __repr__(self):
        return f"FocusRing(pre={self.pre.show()}, post={self.post.show()})"
