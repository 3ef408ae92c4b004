import logging

import pytest

from builder import Element, ElementKind, SequenceBuilder
from errors import ALREADY_BUILT, IllegalStateError
from sequence import Range, Sequence, nil, repeat
from operators import take, tap


class TestSequenceBuilder:
    """Test collecting values and iterables into a sequence"""

    def test_basic(self):
        built = SequenceBuilder().append(1).append(2, 3).build()
        assert isinstance(built, Sequence)
        assert built == [1, 2, 3]

    def test_no_elements(self):
        assert SequenceBuilder().build() == []

    def test_values_and_iterables(self):
        built = SequenceBuilder().append(0).append(Range(1, 3)).append(4).build()
        assert built == [0, 1, 2, 3, 4]

    def test_varargs(self):
        built = (
            SequenceBuilder()
            .append(0, 1, 2)
            .append(Range(3, 5), 6, 7, 8)
            .append(9, 10, 11)
            .build()
        )
        assert built == list(range(12))

    def test_none_is_a_value(self):
        built = SequenceBuilder().append(None).append(None).build()
        assert built == [None, None]

    def test_strings_are_values(self):
        """Strings and bytes are kept whole"""
        built = SequenceBuilder().append("ab", b"cd").append(["e", "f"]).build()
        assert built == ["ab", b"cd", "e", "f"]

    def test_start_sequence(self):
        assert SequenceBuilder(Range(3, 5)).prepend(0, 1, 2).build() == list(range(6))

    def test_prepend_keeps_argument_order(self):
        built = SequenceBuilder().append(3).prepend(1, 2).prepend(0).build()
        assert built == [0, 1, 2, 3]

    def test_built_sequence_is_restartable(self):
        built = SequenceBuilder().append([1, 2, 3]).build()
        assert list(built) == [1, 2, 3]
        assert list(built) == [1, 2, 3]

    def test_infinite_element(self):
        effects = []
        built = SequenceBuilder().append(repeat(0), tap(effects.append)([1])).build()
        assert take(11)(built) == [0] * 11
        assert effects == []


class TestBuilderLifecycle:
    """Test the building -> built transition"""

    def test_built_flag(self):
        builder = SequenceBuilder()
        assert not builder.built
        builder.build()
        assert builder.built

    def test_build_twice(self):
        builder = SequenceBuilder(Range(3))
        first = builder.build()
        with pytest.raises(IllegalStateError) as exc_info:
            builder.build()
        assert str(exc_info.value) == ALREADY_BUILT
        assert first == [0, 1, 2, 3]

    @pytest.mark.parametrize("method", ["append", "prepend"])
    def test_modify_after_build(self, method):
        builder = SequenceBuilder(Range(3))
        first = builder.build()
        with pytest.raises(IllegalStateError, match="already been built"):
            getattr(builder, method)(4, 5, 6)
        assert first == [0, 1, 2, 3], "built sequence must not change"

    def test_already_built_is_a_runtime_error(self):
        builder = SequenceBuilder()
        builder.build()
        with pytest.raises(RuntimeError):
            builder.append(1)

    def test_build_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="builder"):
            SequenceBuilder().append(1, 2).build()
        assert "3 builder elements" in caplog.text


class TestElement:
    """Test element classification"""

    @pytest.mark.parametrize("item,kind", [
        (1, ElementKind.VALUE),
        (None, ElementKind.VALUE),
        ("text", ElementKind.VALUE),
        (b"raw", ElementKind.VALUE),
        ([1], ElementKind.NESTED),
        ((), ElementKind.NESTED),
        (nil, ElementKind.NESTED),
        (Range(2), ElementKind.NESTED),
    ])
    def test_classification(self, item, kind):
        assert Element.of(item).kind is kind
