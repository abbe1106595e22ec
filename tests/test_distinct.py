"""Tests for distinct and its shared memo."""

import pytest

import pyoseq as ps

DATA = [5, 2, 2, 1, 2, 1, 1, 2, 4, 2]


def test_first_occurrences_in_order() -> None:
    """Only first occurrences remain, in their original order."""
    seq = ps.distinct(DATA)
    assert seq.collect() == list(dict.fromkeys(DATA))
    assert seq.eltype() is int


def test_second_traversal_is_empty() -> None:
    """The memo outlives a traversal, so a second one finds everything seen."""
    seq = ps.distinct(DATA)
    assert seq.collect() == [5, 2, 1, 4]
    assert seq.collect() == []


def test_memo_records_first_positions() -> None:
    """The memo maps each element to the source position it was emitted from."""
    seq = ps.distinct(DATA)
    seq.collect()
    assert seq.memo.positions == {5: 0, 2: 1, 1: 3, 4: 8}
    assert len(seq.memo) == 4
    assert 4 in seq.memo


def test_clear_restores_a_fresh_traversal() -> None:
    """Clearing the memo makes the descriptor usable again."""
    seq = ps.distinct("mississippi")
    assert seq.collect() == ["m", "i", "s", "p"]
    seq.memo.clear()
    assert seq.collect() == ["m", "i", "s", "p"]


def test_concurrent_traversals_share_the_memo() -> None:
    """Interleaved traversals split the distinct elements between them."""
    seq = ps.distinct([1, 2, 3])
    left = seq.start()
    value, left = seq.next(left)
    assert value == 1
    right = seq.start()
    value, right = seq.next(right)
    assert value == 2
    assert seq.next(left)[0] == 2


def test_shared_memo_between_descriptors() -> None:
    """An explicit memo can be handed to several descriptors."""
    memo: ps.SeenMemo[str] = ps.SeenMemo()
    assert ps.distinct("abc", memo=memo).collect() == ["a", "b", "c"]
    assert ps.distinct("bcde", memo=memo).collect() == ["d", "e"]


def test_length_is_unknown() -> None:
    """Deduplication changes the length in a data-dependent way."""
    assert ps.distinct([1, 1]).length().is_none()


def test_infinite_source_is_lazy() -> None:
    """Distinct works on infinite sources when bounded afterwards."""
    seq = ps.imap(lambda n: n // 2, ps.count()).distinct()
    assert seq.take(3).collect() == [0, 1, 2]


def test_unhashable_elements_fail() -> None:
    """Elements have to be hashable."""
    with pytest.raises(TypeError):
        ps.distinct([[1], [1]]).collect()


def test_descriptor_equality_ignores_memo() -> None:
    """Two descriptors over equal sources compare equal whatever they have seen."""
    source = ps.into_seq([1, 2])
    seen = ps.distinct(source)
    seen.collect()
    assert seen == ps.distinct(source)


def test_each_source_element_is_pulled_once() -> None:
    """A generating source is called once per element, and its first value is kept."""
    values = iter([1, 2, 1, 3, 4, 5, 6, 7])
    calls: list[int] = []

    def generate() -> int:
        value = next(values)
        calls.append(value)
        return value

    assert ps.distinct(ps.repeatedly(generate, 4)).collect() == [1, 2, 3]
    assert calls == [1, 2, 1, 3]


def test_mapped_source_calls_func_once_per_element() -> None:
    """The mapping function of an `imap` source runs once per element."""
    calls: list[int] = []

    def record(n: int) -> int:
        calls.append(n)
        return n % 2

    assert ps.imap(record, [1, 2, 3]).distinct().collect() == [1, 0]
    assert calls == [1, 2, 3]


def test_emitted_value_is_the_checked_one() -> None:
    """Stepping yields exactly the element that was checked against the memo."""
    seq = ps.distinct(ps.iterate(lambda n: n + 1, 0))
    state = seq.start()
    for expected in range(3):
        value, state = seq.next(state)
        assert value == expected
    assert seq.memo.positions == {0: 0, 1: 1, 2: 2}
