from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, overload

import cytoolz as cz

from ._core import ElType, Pipeable, get_config, seq_repr
from ._errors import SequenceExhaustedError
from ._results import NONE, Option, Some

if TYPE_CHECKING:
    from ._bounded import Cycle, Drop, Take, TakeStrict
    from ._combine import Chain, IMap, Product
    from ._filters import Distinct
    from ._partitions import GroupBy, Partition


class LazySeq[T](ABC, Pipeable):
    """A lazy, reusable description of a stream of elements.

    A `LazySeq` holds configuration only. Progress lives in an external, opaque traversal state threaded through the protocol:

    - `start()` returns the initial state.
    - `done(state)` tells whether a state is exhausted.
    - `next(state)` returns the next element together with the successor state.
    - `step(state)` fuses the two above into a single `Option`.
    - `length()` returns the exact number of elements when it is known without traversing.

    Since states are plain data, a sequence can be traversed any number of times, and two traversals never interfere with each other.

    The single exception is `Distinct`, whose memo of already-seen elements belongs to the descriptor.

    Iterating with a `for` loop, `list()` or any other Python consumer drives the protocol from a fresh state each time.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> evens = ps.count(0, 2).take(3)
    >>> state = evens.start()
    >>> value, state = evens.next(state)
    >>> value
    0
    >>> evens.step(state)
    Some(value=(2, (1, 4)))
    >>> list(evens), list(evens)
    ([0, 2, 4], [0, 2, 4])

    ```
    """

    __slots__ = ()

    @abstractmethod
    def start(self) -> Any:
        """Return the initial traversal state."""
        ...

    @abstractmethod
    def done(self, state: Any) -> bool:
        """Return `True` if no element is left for **state**."""
        ...

    @abstractmethod
    def _next(self, state: Any) -> tuple[T, Any]: ...

    def next(self, state: Any) -> tuple[T, Any]:
        """Return the element at **state** and the successor state.

        Args:
            state (Any): A state obtained from `start()` or a previous `next()` call.

        Returns:
            tuple[T, Any]: The element and the state to resume from.

        Raises:
            SequenceExhaustedError: If **state** is already exhausted.
        """
        if self.done(state):
            msg = f"called `next` on an exhausted {self.__class__.__name__}"
            raise SequenceExhaustedError(msg)
        return self._next(state)

    def step(self, state: Any) -> Option[tuple[T, Any]]:
        """Advance **state** once.

        Returns:
            Option[tuple[T, Any]]: `Some((element, successor))`, or `NONE` once exhausted.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> seq = ps.repeated("x", 1)
        >>> seq.step(seq.start())
        Some(value=('x', 0))
        >>> seq.step(0)
        NONE

        ```
        """
        if self.done(state):
            return NONE
        return Some(self._next(state))

    def length(self) -> Option[int]:
        """Return the exact number of elements, or `NONE` when it is not known without traversing."""
        return NONE

    @abstractmethod
    def eltype(self) -> ElType:
        """Return the logical type of the yielded elements."""
        ...

    def __iter__(self) -> Iterator[T]:
        state = self.start()
        while not self.done(state):
            value, state = self._next(state)
            yield value

    def __length_hint__(self) -> int:
        return self.length().unwrap_or(NotImplemented)

    # terminal operations

    @overload
    def collect(self) -> list[T]: ...
    @overload
    def collect[R](self, factory: Callable[[Iterable[T]], R]) -> R: ...
    def collect(self, factory: Callable[[Iterable[T]], Any] = list) -> Any:
        """Materialize every element into an ordered container.

        **Warning** ⚠️
            Never returns on an infinite sequence.

        Args:
            factory (Callable[[Iterable[T]], R]): Container constructor. Defaults to `list`.

        Returns:
            R: The container holding all the elements, in traversal order.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.count(1).take(3).collect()
        [1, 2, 3]
        >>> ps.count(1).take(3).collect(tuple)
        (1, 2, 3)

        ```
        """
        return factory(self)

    def first(self) -> T:
        """Return the first element.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.count(5).first()
        5

        ```
        """
        return cz.itertoolz.first(self)

    def nth(self, index: int) -> T:
        """Return the element at position **index**, counting from 0.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.count(0, 3).nth(4)
        12

        ```
        """
        return cz.itertoolz.nth(index, self)

    def last(self) -> T:
        """Return the last element of a finite sequence."""
        return cz.itertoolz.last(self)

    def preview(self) -> str:
        """Format the first elements, as many as `get_config().preview_items` allows.

        Safe on infinite sequences.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.count().preview()
        '[0, 1, 2, 3, 4, 5, 6, 7, 8, 9, ...]'
        >>> ps.repeated(1, 2).preview()
        '[1, 1]'

        ```
        """
        config = get_config()
        head = tuple(cz.itertoolz.take(config.preview_items + 1, self))
        return seq_repr(
            head[: config.preview_items],
            truncated=len(head) > config.preview_items,
            depth=config.preview_depth,
            width=config.preview_width,
        )

    # fluent adapters

    def take(self, n: int) -> Take[T]:
        """Keep at most the first **n** elements. See `pyoseq.take`."""
        from ._bounded import Take

        return Take(self, n)

    def takestrict(self, n: int) -> TakeStrict[T]:
        """Keep exactly the first **n** elements. See `pyoseq.takestrict`."""
        from ._bounded import TakeStrict

        return TakeStrict(self, n)

    def drop(self, n: int) -> Drop[T]:
        """Skip the first **n** elements. See `pyoseq.drop`."""
        from ._bounded import Drop

        return Drop(self, n)

    def cycle(self) -> Cycle[T]:
        """Repeat the elements forever. See `pyoseq.cycle`."""
        from ._bounded import Cycle

        return Cycle(self)

    def chain(self, *others: Iterable[Any]) -> Chain[Any]:
        """Append **others** after this sequence. See `pyoseq.chain`."""
        from ._factories import chain

        return chain(self, *others)

    def product(self, *others: Iterable[Any]) -> Product:
        """Cartesian product with **others**, this sequence varying fastest. See `pyoseq.product`."""
        from ._factories import product

        return product(self, *others)

    def distinct[H: Hashable](self: LazySeq[H]) -> Distinct[H]:
        """Keep first occurrences only. See `pyoseq.distinct`."""
        from ._filters import Distinct

        return Distinct(self)

    def partition(self, n: int, step: int | None = None) -> Partition[T]:
        """Group into windows of **n** elements. See `pyoseq.partition`."""
        from ._factories import partition

        return partition(self, n, step)

    def groupby(self, key: Callable[[T], Any]) -> GroupBy[T]:
        """Group consecutive elements sharing a key. See `pyoseq.groupby`."""
        from ._partitions import GroupBy

        return GroupBy(self, key)

    def imap[R](self, func: Callable[..., R], *others: Iterable[Any]) -> IMap[R]:
        """Combine with **others** element-wise through **func**. See `pyoseq.imap`."""
        from ._factories import imap

        return imap(func, self, *others)
