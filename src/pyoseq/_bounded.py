from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ._core import ElType
from ._errors import EmptyCycleError, ShortSequenceError
from ._protocol import LazySeq
from ._results import Option, Some


@dataclass(slots=True, frozen=True)
class Take[T](LazySeq[T]):
    """At most the first `n` elements of `seq`.

    State is `(remaining, inner_state)`.
    """

    seq: LazySeq[T]
    n: int

    def start(self) -> tuple[int, Any]:
        return self.n, self.seq.start()

    def done(self, state: tuple[int, Any]) -> bool:
        remaining, inner = state
        return remaining <= 0 or self.seq.done(inner)

    def _next(self, state: tuple[int, Any]) -> tuple[T, tuple[int, Any]]:
        remaining, inner = state
        value, inner = self.seq.next(inner)
        return value, (remaining - 1, inner)

    def length(self) -> Option[int]:
        return self.seq.length().map(lambda size: max(min(self.n, size), 0))

    def eltype(self) -> ElType:
        return self.seq.eltype()


@dataclass(slots=True, frozen=True)
class TakeStrict[T](LazySeq[T]):
    """Exactly the first `n` elements of `seq`.

    Reaching the end of `seq` before `n` elements were produced raises `ShortSequenceError`.
    """

    seq: LazySeq[T]
    n: int

    def start(self) -> tuple[int, Any]:
        return self.n, self.seq.start()

    def done(self, state: tuple[int, Any]) -> bool:
        remaining, inner = state
        if remaining <= 0:
            return True
        if self.seq.done(inner):
            msg = f"expected {self.n} elements, source ended {remaining} short"
            raise ShortSequenceError(msg)
        return False

    def _next(self, state: tuple[int, Any]) -> tuple[T, tuple[int, Any]]:
        remaining, inner = state
        value, inner = self.seq.next(inner)
        return value, (remaining - 1, inner)

    def length(self) -> Option[int]:
        return Some(max(self.n, 0))

    def eltype(self) -> ElType:
        return self.seq.eltype()


@dataclass(slots=True, frozen=True)
class Drop[T](LazySeq[T]):
    """Every element of `seq` but the first `n`.

    The skipped elements are consumed eagerly by `start()`, after which the state is the inner state itself.
    """

    seq: LazySeq[T]
    n: int

    def start(self) -> Any:
        state = self.seq.start()
        for _ in range(self.n):
            if self.seq.done(state):
                break
            _, state = self.seq.next(state)
        return state

    def done(self, state: Any) -> bool:
        return self.seq.done(state)

    def _next(self, state: Any) -> tuple[T, Any]:
        return self.seq.next(state)

    def length(self) -> Option[int]:
        return self.seq.length().map(lambda size: max(size - max(self.n, 0), 0))

    def eltype(self) -> ElType:
        return self.seq.eltype()


@dataclass(slots=True, frozen=True)
class Cycle[T](LazySeq[T]):
    """The elements of `seq`, over and over, forever.

    State is the inner state, restarted once `seq` is exhausted. An empty source is rejected: both the first traversal and any restart that finds `seq` empty raise `EmptyCycleError` instead of spinning forever.
    """

    seq: LazySeq[T]

    def start(self) -> Any:
        state = self.seq.start()
        if self.seq.done(state):
            msg = f"cannot cycle over an empty {self.seq.__class__.__name__}"
            raise EmptyCycleError(msg)
        return state

    def done(self, state: Any) -> bool:
        return False

    def _next(self, state: Any) -> tuple[T, Any]:
        if self.seq.done(state):
            state = self.start()
        return self.seq.next(state)

    def eltype(self) -> ElType:
        return self.seq.eltype()
