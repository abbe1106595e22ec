"""Tests for partition, groupby and subsets."""

import more_itertools as mit
import pytest

import pyoseq as ps


class TestPartition:
    """Tests for `partition`."""

    def test_back_to_back(self) -> None:
        """By default windows do not overlap."""
        seq = ps.partition(ps.take(ps.count(1), 6), 2)
        assert seq.collect() == [(1, 2), (3, 4), (5, 6)]
        assert seq.eltype() == (int, int)

    def test_overlapping(self) -> None:
        """A step smaller than the size makes windows overlap."""
        assert ps.partition(ps.take(ps.count(1), 4), 2, 1).collect() == [
            (1, 2),
            (2, 3),
            (3, 4),
        ]

    def test_gaps(self) -> None:
        """A step larger than the size skips elements between windows."""
        assert ps.partition(ps.take(ps.count(1), 8), 2, 3).collect() == [
            (1, 2),
            (4, 5),
            (7, 8),
        ]

    @pytest.mark.parametrize("size", range(10))
    @pytest.mark.parametrize(("n", "step"), [(1, 1), (2, 1), (3, 1), (3, 2), (3, 3), (2, 5)])
    def test_matches_windowed(self, size: int, n: int, step: int) -> None:
        """Full windows match more_itertools.windowed, and the length hint is exact."""
        expected = [
            w for w in mit.windowed(range(size), n, step=step) if None not in w
        ]
        seq = ps.partition(range(size), n, step)
        assert seq.collect() == expected
        assert seq.length() == ps.Some(len(expected))

    def test_short_source(self) -> None:
        """A source shorter than one window yields nothing."""
        assert ps.partition([1, 2], 3).collect() == []

    def test_infinite_source(self) -> None:
        """Windows are produced lazily from an infinite source."""
        seq = ps.count(1).partition(3, 1)
        assert seq.take(2).collect() == [(1, 2, 3), (2, 3, 4)]
        assert seq.length().is_none()

    @pytest.mark.parametrize(("n", "step"), [(2, 0), (2, -1), (0, 1)])
    def test_invalid_arguments(self, n: int, step: int) -> None:
        """Invalid sizes fail when the descriptor is built."""
        with pytest.raises(ValueError, match="at least 1"):
            ps.partition(ps.count(), n, step)


class TestGroupBy:
    """Tests for `groupby`."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ([], []),
            (["xxx"], [["xxx"]]),
            (
                ["face", "foo", "bar", "book", "baz"],
                [["face", "foo"], ["bar", "book", "baz"]],
            ),
            (
                ["face", "foo", "bar", "book", "baz", "xxx"],
                [["face", "foo"], ["bar", "book", "baz"], ["xxx"]],
            ),
            (
                ["xxx", "face", "foo", "bar", "book", "baz"],
                [["xxx"], ["face", "foo"], ["bar", "book", "baz"]],
            ),
            (
                ["face", "foo", "xxx", "bar", "book", "baz"],
                [["face", "foo"], ["xxx"], ["bar", "book", "baz"]],
            ),
        ],
    )
    def test_consecutive_runs(self, data: list[str], expected: list[list[str]]) -> None:
        """Consecutive elements with the same first letter are grouped."""
        assert ps.groupby(data, lambda s: s[0]).collect() == expected

    def test_non_consecutive_keys_make_new_groups(self) -> None:
        """Only consecutive runs are merged."""
        assert ps.groupby([1, 3, 2, 5], lambda n: n % 2).collect() == [[1, 3], [2], [5]]

    def test_none_is_a_valid_key(self) -> None:
        """A key function may return None without confusing the grouping."""
        data = [None, None, 0, 0, None]
        assert ps.groupby(data, lambda x: x).collect() == [[None, None], [0, 0], [None]]

    def test_last_group_after_source_end(self) -> None:
        """The last run is emitted by a step taken after the source ended."""
        seq = ps.groupby("aab", str.upper)
        first, state = seq.next(seq.start())
        assert first == ["a", "a"]
        assert not seq.done(state)
        second, state = seq.next(state)
        assert second == ["b"]
        assert seq.done(state)

    def test_key_errors_propagate(self) -> None:
        """Exceptions from the key function reach the caller."""
        with pytest.raises(IndexError):
            ps.groupby(["a", ""], lambda s: s[0]).collect()

    def test_infinite_source(self) -> None:
        """Groups are produced lazily."""
        seq = ps.count().groupby(lambda n: n // 3)
        assert seq.take(2).collect() == [[0, 1, 2], [3, 4, 5]]
        assert seq.eltype() is list


class TestSubsets:
    """Tests for `subsets`."""

    def test_empty(self) -> None:
        """The empty collection has one subset."""
        assert ps.subsets([]).collect() == [[]]

    def test_singleton(self) -> None:
        """A single element gives the empty set and itself."""
        assert ps.subsets(["a"]).collect() == [[], ["a"]]

    def test_binary_counting_order(self) -> None:
        """Subsets follow binary counting, bit i standing for element i."""
        assert ps.subsets(["a", "b", "c"]).collect() == [
            [],
            ["a"],
            ["b"],
            ["a", "b"],
            ["c"],
            ["a", "c"],
            ["b", "c"],
            ["a", "b", "c"],
        ]

    def test_each_subset_once(self) -> None:
        """Every subset appears exactly once, matching more_itertools.powerset."""
        data = range(6)
        seq = ps.subsets(data)
        found = seq.collect()
        assert seq.length() == ps.Some(64)
        assert len(found) == 64
        assert sorted(map(tuple, found)) == sorted(mit.powerset(data))

    def test_sentinel_bit_marks_the_end(self) -> None:
        """The traversal ends once the carry reaches the extra bit."""
        seq = ps.subsets([1, 2])
        state = seq.start()
        assert state == (False, False, False)
        for _ in range(4):
            _, state = seq.next(state)
        assert state == (False, False, True)
        assert seq.done(state)

    def test_non_sequence_input(self) -> None:
        """Other finite iterables are materialized first."""
        assert ps.subsets(iter("ab")).collect() == [[], ["a"], ["b"], ["a", "b"]]
        assert ps.subsets(ps.count().take(2)).length() == ps.Some(4)

    def test_mapping_input_uses_keys(self) -> None:
        """A mapping contributes its keys, like any other iterable."""
        assert ps.subsets({"a": 1, "b": 2}).collect() == [[], ["a"], ["b"], ["a", "b"]]
