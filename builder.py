"""
Sequence builder.

Collects values and nested iterables over time and freezes them into a lazy
``Sequence``. A builder goes from *building* to *built* exactly once; every
call after ``build()`` raises ``IllegalStateError``.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List

from errors import ALREADY_BUILT, IllegalStateError
from sequence import Sequence, is_iterable, nil

logger = logging.getLogger(__name__)


class ElementKind(str, Enum):
    """How a builder element is emitted"""
    VALUE = "value"
    NESTED = "nested"


@dataclass(frozen=True)
class Element:
    """A raw value or a nested iterable, classified when it is added."""
    kind: ElementKind
    payload: Any

    @classmethod
    def of(cls, item: Any) -> "Element":
        # strings and bytes are kept whole rather than split into characters
        if is_iterable(item) and not isinstance(item, (str, bytes)):
            return cls(ElementKind.NESTED, item)
        return cls(ElementKind.VALUE, item)


def _flatten(elements: Iterable[Element]):
    for element in elements:
        if element.kind is ElementKind.NESTED:
            yield from element.payload
        else:
            yield element.payload


class SequenceBuilder:
    """
    Mutable staging area for a Sequence.

    Example:
        SequenceBuilder().append(Range(2)).append(4).build()   # 0, 1, 2, 4
    """

    def __init__(self, start: Any = nil):
        self._elements: List[Element] = [Element.of(start)]
        self._built = False

    @property
    def built(self) -> bool:
        return self._built

    def append(self, *items) -> "SequenceBuilder":
        """Add values or iterables at the end."""
        self._check_not_built()
        self._elements.extend(Element.of(item) for item in items)
        return self

    def prepend(self, *items) -> "SequenceBuilder":
        """Add values or iterables at the front, keeping their given order."""
        self._check_not_built()
        self._elements[:0] = [Element.of(item) for item in items]
        return self

    def build(self) -> Sequence:
        """Freeze the builder and return the lazily flattened sequence."""
        self._check_not_built()
        self._built = True
        elements = tuple(self._elements)
        logger.debug(f"Built sequence from {len(elements)} builder elements")
        return Sequence(lambda: _flatten(elements))

    def _check_not_built(self) -> None:
        if self._built:
            raise IllegalStateError(ALREADY_BUILT)
