"""Sources: sequences that do not wrap another sequence."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

import more_itertools as mit

from ._core import ElType, eltype_of
from ._protocol import LazySeq
from ._results import Option, Some


@dataclass(slots=True, frozen=True)
class Count[T](LazySeq[T]):
    """Infinite arithmetic progression `start_at, start_at + step_by, start_at + 2 * step_by, ...`.

    State is the next value to emit.
    """

    start_at: T
    step_by: T

    def start(self) -> T:
        return self.start_at

    def done(self, state: T) -> bool:
        return False

    def _next(self, state: T) -> tuple[T, T]:
        return state, state + self.step_by  # type: ignore[operator]

    def eltype(self) -> ElType:
        return type(self.start_at + self.step_by)  # type: ignore[operator]


@dataclass(slots=True, frozen=True)
class Repeat[T](LazySeq[T]):
    """`value`, **n** times. State is the number of repetitions left."""

    value: T
    n: int

    def start(self) -> int:
        return self.n

    def done(self, state: int) -> bool:
        return state <= 0

    def _next(self, state: int) -> tuple[T, int]:
        return self.value, state - 1

    def length(self) -> Option[int]:
        return Some(max(self.n, 0))

    def eltype(self) -> ElType:
        return type(self.value)


@dataclass(slots=True, frozen=True)
class RepeatForever[T](LazySeq[T]):
    """`value`, forever. The state carries no information."""

    value: T

    def start(self) -> None:
        return None

    def done(self, state: None) -> bool:
        return False

    def _next(self, state: None) -> tuple[T, None]:
        return self.value, None

    def eltype(self) -> ElType:
        return type(self.value)


@dataclass(slots=True, frozen=True)
class Repeatedly[T](LazySeq[T]):
    """The results of **n** successive calls to `func`."""

    func: Callable[[], T]
    n: int

    def start(self) -> int:
        return self.n

    def done(self, state: int) -> bool:
        return state <= 0

    def _next(self, state: int) -> tuple[T, int]:
        return self.func(), state - 1

    def length(self) -> Option[int]:
        return Some(max(self.n, 0))

    def eltype(self) -> ElType:
        return object


@dataclass(slots=True, frozen=True)
class RepeatedlyForever[T](LazySeq[T]):
    """The results of calling `func`, forever."""

    func: Callable[[], T]

    def start(self) -> None:
        return None

    def done(self, state: None) -> bool:
        return False

    def _next(self, state: None) -> tuple[T, None]:
        return self.func(), None

    def eltype(self) -> ElType:
        return object


@dataclass(slots=True, frozen=True)
class Iterate[T](LazySeq[T]):
    """Unfold `seed, func(seed), func(func(seed)), ...`, forever.

    The state holds the last emitted value and whether `func` still has to be applied to it, so `func` only runs when an element is requested.

    Stopping is up to the caller, through `take` or any other bounding adapter.
    """

    func: Callable[[T], T]
    seed: T

    def start(self) -> tuple[T, bool]:
        return self.seed, False

    def done(self, state: tuple[T, bool]) -> bool:
        return False

    def _next(self, state: tuple[T, bool]) -> tuple[T, tuple[T, bool]]:
        value, pending = state
        if pending:
            value = self.func(value)
        return value, (value, True)

    def eltype(self) -> ElType:
        return type(self.seed)


@dataclass(slots=True, frozen=True)
class Items[T](LazySeq[T]):
    """A sized, indexable collection (`list`, `tuple`, `range`, `str`...). State is the position."""

    data: Sequence[T]

    def start(self) -> int:
        return 0

    def done(self, state: int) -> bool:
        return state >= len(self.data)

    def _next(self, state: int) -> tuple[T, int]:
        return self.data[state], state + 1

    def length(self) -> Option[int]:
        return Some(len(self.data))

    def eltype(self) -> ElType:
        match self.data:
            case range():
                return int
            case str():
                return str
            case _:
                return eltype_of(self.data)


@dataclass(slots=True, frozen=True)
class Stream[T](LazySeq[T]):
    """A one-shot iterable, cached as it is consumed so it can be traversed again.

    State is a position in the cache. Elements are pulled from the source only when a traversal first reaches them.

    Nothing is known about the elements before they are pulled, so the element type is `object`.
    """

    source: Iterable[T] = field(repr=False)
    _cache: mit.seekable[T] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_cache", mit.seekable(self.source))

    def start(self) -> int:
        return 0

    def done(self, state: int) -> bool:
        self._cache.seek(state)
        return not self._cache

    def _next(self, state: int) -> tuple[T, int]:
        self._cache.seek(state)
        return next(self._cache), state + 1

    def eltype(self) -> ElType:
        return object
