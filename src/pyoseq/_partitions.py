from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from ._core import ElType
from ._protocol import LazySeq
from ._results import NONE, Option, Some

type _Carry[T] = Option[tuple[Any, T]]


@dataclass(slots=True, frozen=True)
class Partition[T](LazySeq[tuple[T, ...]]):
    """Windows of `n` consecutive elements of `seq`, the start of each window `step` elements after the previous one.

    - `step == n` gives back-to-back windows.
    - `step < n` gives overlapping windows.
    - `step > n` skips `step - n` elements between windows.

    A trailing window with fewer than `n` elements is dropped.

    State is `(inner_state, prefix)`, where `prefix` holds the first `n - 1` elements of the next window.
    """

    seq: LazySeq[T]
    n: int
    step: int

    def __post_init__(self) -> None:
        if self.n < 1:
            msg = f"Partition size must be at least 1, got {self.n}"
            raise ValueError(msg)
        if self.step < 1:
            msg = f"Partition step must be at least 1, got {self.step}"
            raise ValueError(msg)

    def _fill(self, state: Any, prefix: list[T]) -> tuple[Any, tuple[T, ...]]:
        while len(prefix) < self.n - 1 and not self.seq.done(state):
            value, state = self.seq.next(state)
            prefix.append(value)
        return state, tuple(prefix)

    def start(self) -> tuple[Any, tuple[T, ...]]:
        return self._fill(self.seq.start(), [])

    def done(self, state: tuple[Any, tuple[T, ...]]) -> bool:
        return self.seq.done(state[0])

    def _next(
        self, state: tuple[Any, tuple[T, ...]]
    ) -> tuple[tuple[T, ...], tuple[Any, tuple[T, ...]]]:
        inner, prefix = state
        last, inner = self.seq.next(inner)
        window = (*prefix, last)
        for _ in range(self.step - self.n):
            if self.seq.done(inner):
                break
            _, inner = self.seq.next(inner)
        return window, self._fill(inner, list(window[self.step :]))

    def length(self) -> Option[int]:
        def _windows(size: int) -> int:
            return max(-(-(size - (self.n - 1)) // self.step), 0)

        return self.seq.length().map(_windows)

    def eltype(self) -> ElType:
        return (self.seq.eltype(),) * self.n


@dataclass(slots=True, frozen=True)
class GroupBy[T](LazySeq[list[T]]):
    """Runs of consecutive elements of `seq` sharing the same `key`, as lists.

    Finding the end of a run means reading the first element of the next one. That element and its key are carried over in the state, which is `(inner_state, carry)`.

    The traversal ends only once the carry is empty **and** `seq` is exhausted, so the last run is emitted even though the source already ended.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.groupby(["face", "foo", "bar", "book", "baz", "xxx"], lambda s: s[0]).collect()
    [['face', 'foo'], ['bar', 'book', 'baz'], ['xxx']]

    ```
    """

    seq: LazySeq[T]
    key: Callable[[T], Any]

    def start(self) -> tuple[Any, _Carry[T]]:
        return self.seq.start(), NONE

    def done(self, state: tuple[Any, _Carry[T]]) -> bool:
        inner, carry = state
        return carry.is_none() and self.seq.done(inner)

    def _next(
        self, state: tuple[Any, _Carry[T]]
    ) -> tuple[list[T], tuple[Any, _Carry[T]]]:
        inner, carry = state
        group: list[T] = []
        group_key: Any = None
        if carry.is_some():
            group_key, first = carry.unwrap()
            group.append(first)
        while not self.seq.done(inner):
            value, inner = self.seq.next(inner)
            value_key = self.key(value)
            if group and value_key != group_key:
                return group, (inner, Some((value_key, value)))
            group_key = value_key
            group.append(value)
        return group, (inner, NONE)

    def eltype(self) -> ElType:
        return list


@dataclass(slots=True, frozen=True)
class Subsets[T](LazySeq[list[T]]):
    """Every subset of `data`, each exactly once, as lists keeping the order of `data`.

    Subsets come in binary counting order: element `i` belongs to the `k`-th subset when bit `i` of `k` is set.

    State is a tuple of `len(data) + 1` flags. The extra, most significant flag is only set by the carry out of the last increment, and marks the end.
    """

    data: Sequence[T]

    def start(self) -> tuple[bool, ...]:
        return (False,) * (len(self.data) + 1)

    def done(self, state: tuple[bool, ...]) -> bool:
        return state[-1]

    def _next(self, state: tuple[bool, ...]) -> tuple[list[T], tuple[bool, ...]]:
        subset = [item for item, included in zip(self.data, state, strict=False) if included]
        bits = list(state)
        for idx, bit in enumerate(bits):
            bits[idx] = not bit
            if not bit:
                break
        return subset, tuple(bits)

    def length(self) -> Option[int]:
        return Some(1 << len(self.data))

    def eltype(self) -> ElType:
        return list
