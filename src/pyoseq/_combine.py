"""Adapters over several sequences at once."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, cast

from ._core import ElType, typejoin
from ._protocol import LazySeq
from ._results import NONE, Option, Some

type _ChainState = tuple[int, Any]
type _ProductState = tuple[tuple[Any, ...], tuple[Any, ...] | None]


def _all_lengths(seqs: tuple[LazySeq[Any], ...]) -> Option[tuple[int, ...]]:
    lengths = tuple(seq.length() for seq in seqs)
    if all(size.is_some() for size in lengths):
        return Some(tuple(size.unwrap() for size in lengths))
    return NONE


@dataclass(slots=True, frozen=True)
class Chain[T](LazySeq[T]):
    """The elements of each sequence of `seqs`, one sequence after the other.

    State is `(index, inner_state)`, always positioned on a sequence that still has an element, or with `index == len(seqs)` once everything is consumed.
    """

    seqs: tuple[LazySeq[Any], ...]

    def _settle(self, index: int, state: Any) -> _ChainState:
        while index < len(self.seqs) and self.seqs[index].done(state):
            index += 1
            if index < len(self.seqs):
                state = self.seqs[index].start()
        return index, state

    def start(self) -> _ChainState:
        if not self.seqs:
            return 0, None
        return self._settle(0, self.seqs[0].start())

    def done(self, state: _ChainState) -> bool:
        return state[0] >= len(self.seqs)

    def _next(self, state: _ChainState) -> tuple[T, _ChainState]:
        index, inner = state
        value, inner = self.seqs[index].next(inner)
        return value, self._settle(index, inner)

    def length(self) -> Option[int]:
        return _all_lengths(self.seqs).map(sum)

    def eltype(self) -> ElType:
        return typejoin(*(seq.eltype() for seq in self.seqs))


@dataclass(slots=True, frozen=True)
class Product(LazySeq[tuple[Any, ...]]):
    """Cartesian product of `seqs`, as tuples.

    The **first** sequence varies fastest and the last one slowest:

    `product([1, 2], "ab")` yields `(1, 'a'), (2, 'a'), (1, 'b'), (2, 'b')`.

    State is `(inner_states, values)`, where `values` holds the tuple to emit next, or `None` once every combination was produced.

    An empty sequence anywhere makes the whole product empty, while a product of no sequences holds a single empty tuple.
    """

    seqs: tuple[LazySeq[Any], ...]

    def start(self) -> _ProductState:
        states = [seq.start() for seq in self.seqs]
        if any(seq.done(state) for seq, state in zip(self.seqs, states, strict=True)):
            return tuple(states), None
        values: list[Any] = []
        for idx, seq in enumerate(self.seqs):
            value, states[idx] = seq.next(states[idx])
            values.append(value)
        return tuple(states), tuple(values)

    def done(self, state: _ProductState) -> bool:
        return state[1] is None

    def _next(self, state: _ProductState) -> tuple[tuple[Any, ...], _ProductState]:
        current = cast("tuple[Any, ...]", state[1])
        states, values = list(state[0]), list(current)
        for idx, seq in enumerate(self.seqs):
            if not seq.done(states[idx]):
                values[idx], states[idx] = seq.next(states[idx])
                return current, (tuple(states), tuple(values))
            if idx == len(self.seqs) - 1:
                break
            values[idx], states[idx] = seq.next(seq.start())
        return current, (tuple(states), None)

    def length(self) -> Option[int]:
        return _all_lengths(self.seqs).map(math.prod)

    def eltype(self) -> ElType:
        return tuple(seq.eltype() for seq in self.seqs)


@dataclass(slots=True, frozen=True)
class IMap[R](LazySeq[R]):
    """`func` applied to the elements of `seqs` taken in lockstep.

    Every step advances each sequence exactly once. The traversal ends as soon as any sequence is exhausted, without advancing the others any further.
    """

    func: Callable[..., R]
    seqs: tuple[LazySeq[Any], ...]

    def __post_init__(self) -> None:
        if not self.seqs:
            msg = "imap requires at least one sequence"
            raise ValueError(msg)

    def start(self) -> tuple[Any, ...]:
        return tuple(seq.start() for seq in self.seqs)

    def done(self, state: tuple[Any, ...]) -> bool:
        return any(seq.done(inner) for seq, inner in zip(self.seqs, state, strict=True))

    def _next(self, state: tuple[Any, ...]) -> tuple[R, tuple[Any, ...]]:
        values, states = zip(
            *(seq.next(inner) for seq, inner in zip(self.seqs, state, strict=True)),
            strict=True,
        )
        return self.func(*values), states

    def length(self) -> Option[int]:
        return _all_lengths(self.seqs).map(min)

    def eltype(self) -> ElType:
        return object
