from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any

from ._core import ElType
from ._protocol import LazySeq
from ._results import NONE, Option, Some

type _DistinctState[H] = tuple[Any, int, Option[H]]


@dataclass(slots=True)
class SeenMemo[H: Hashable]:
    """Mutable record of the elements a `Distinct` already emitted, with the source position of their first emission.

    One memo is shared by every traversal of the `Distinct` that owns it, and may be handed to several `Distinct` on purpose.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> memo = ps.SeenMemo()
    >>> ps.distinct("abba", memo=memo).collect()
    ['a', 'b']
    >>> memo.positions
    {'a': 0, 'b': 1}
    >>> ps.distinct("abcd", memo=memo).collect()
    ['c', 'd']

    ```
    """

    positions: dict[H, int] = field(default_factory=dict)

    def __contains__(self, value: object) -> bool:
        return value in self.positions

    def __len__(self) -> int:
        return len(self.positions)

    def record(self, value: H, position: int) -> None:
        self.positions.setdefault(value, position)

    def clear(self) -> None:
        """Forget every element, so the next traversal starts afresh."""
        self.positions.clear()


@dataclass(slots=True, frozen=True)
class Distinct[H: Hashable](LazySeq[H]):
    """First occurrences of the elements of `seq`, in their original order.

    **Warning** ⚠️
        Unlike every other sequence, `Distinct` is **not** reentrant: its `memo` belongs to the descriptor, and all traversals read and write it.
        Once a traversal ran to the end, later traversals yield nothing until `memo.clear()` is called.

    State is `(inner_state, position, pending)`. `pending` holds the next element to emit, already pulled from `seq` and missing from the memo at that time, and `position` its index in `seq`.
    Each source element is pulled exactly once, so side effects of `seq` run once per element.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> unique = ps.distinct([5, 2, 2, 1, 2, 1, 1, 2, 4, 2])
    >>> unique.collect()
    [5, 2, 1, 4]
    >>> unique.collect()
    []
    >>> unique.memo.clear()
    >>> unique.collect()
    [5, 2, 1, 4]

    ```
    """

    seq: LazySeq[H]
    memo: SeenMemo[H] = field(default_factory=SeenMemo, compare=False)

    def _skip_seen(self, state: Any, position: int) -> _DistinctState[H]:
        while not self.seq.done(state):
            value, state = self.seq.next(state)
            if value not in self.memo:
                return state, position, Some(value)
            position += 1
        return state, position, NONE

    def start(self) -> _DistinctState[H]:
        return self._skip_seen(self.seq.start(), 0)

    def done(self, state: _DistinctState[H]) -> bool:
        return state[2].is_none()

    def _next(self, state: _DistinctState[H]) -> tuple[H, _DistinctState[H]]:
        inner, position, pending = state
        value = pending.unwrap()
        self.memo.record(value, position)
        return value, self._skip_seen(inner, position + 1)

    def eltype(self) -> ElType:
        return self.seq.eltype()
