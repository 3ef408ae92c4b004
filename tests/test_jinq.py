from jinq import Query, from_
from sequence import Range, Seq, Sequence, nil


class TestQuery:
    """Test query comprehensions over sequences"""

    def test_where_and_select(self):
        result = from_(Range(5)).where(lambda x: x % 2 == 0).select(lambda x: x * 10).result()
        assert isinstance(result, Sequence)
        assert result == [0, 20, 40]

    def test_map_alias(self):
        assert from_([1, 2]).map(str).result() == ["1", "2"]
        assert Query.map is Query.select

    def test_pair_with(self):
        result = from_(Range(1)).pair_with("ab").result()
        assert result == [(0, "a"), (0, "b"), (1, "a"), (1, "b")]

    def test_pair_with_filter(self):
        result = (
            from_(Range(1, 3))
            .pair_with(["a", "b"])
            .where(lambda pair: pair[0] != 2)
            .result()
        )
        assert result == [(1, "a"), (1, "b"), (3, "a"), (3, "b")]

    def test_combine(self):
        result = from_(Range(1, 2)).combine(Range).result()
        assert result == [(1, 0), (1, 1), (2, 0), (2, 1), (2, 2)]

    def test_inside(self):
        result = from_(Range(2)).inside(lambda x: Seq(x, -x)).result()
        assert result == [0, 0, 1, -1, 2, -2]

    def test_empty_source(self):
        assert from_(nil).where(lambda _: True).select(lambda x: x).result() == []

    def test_query_is_restartable(self):
        query = from_(Range(3)).where(lambda x: x > 1).result()
        assert list(query) == list(query) == [2, 3]
