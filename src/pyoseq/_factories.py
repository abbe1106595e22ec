"""Public constructors for every sequence.

Wherever a sequence is expected, any Python iterable is accepted and converted with `into_seq`.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import TYPE_CHECKING, Any, overload

import cytoolz as cz

from ._bounded import Cycle, Drop, Take, TakeStrict
from ._combine import Chain, IMap, Product
from ._core import deprecated
from ._filters import Distinct, SeenMemo
from ._partitions import GroupBy, Partition, Subsets
from ._protocol import LazySeq
from ._sources import (
    Count,
    Items,
    Iterate,
    Repeat,
    Repeatedly,
    RepeatedlyForever,
    RepeatForever,
    Stream,
)

if TYPE_CHECKING:
    from typing import TypeIs


def _is_sequence[T](data: Iterable[T]) -> TypeIs[Sequence[T]]:
    return isinstance(data, Sequence)


@overload
def into_seq[T](data: Iterable[T]) -> LazySeq[T]: ...
@overload
def into_seq[T](data: T, *more_data: T) -> LazySeq[T]: ...
def into_seq[T](data: Iterable[T] | T, *more_data: T) -> LazySeq[T]:
    """Convert any iterable, or unpacked values, into a `LazySeq`.

    - A `LazySeq` is returned as is.
    - A `Sequence` (list, tuple, range, str...) becomes an `Items`, traversed by position.
    - Any other iterable, mappings included, becomes a `Stream`, caching the elements it pulls so it can be traversed again.
    - A non-iterable value, optionally followed by more values, becomes an `Items` over those values.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.into_seq([1, 2])
    Items(data=[1, 2])
    >>> ps.into_seq(4)
    Items(data=(4,))
    >>> ps.into_seq(1, 2, 3).collect()
    [1, 2, 3]
    >>> numbers = ps.into_seq(n * n for n in range(3))
    >>> numbers.collect(), numbers.collect()
    ([0, 1, 4], [0, 1, 4])

    ```
    """
    match data:
        case LazySeq():
            return data
        case _ if not cz.itertoolz.isiterable(data):
            return Items((data, *more_data))
        case _ if _is_sequence(data):
            return Items(data)
        case _:
            return Stream(data)


def count[N: (int, float)](start: N = 0, step: N = 1) -> Count[N]:
    """Count from **start** onwards, by **step**.

    **Warning** ⚠️
        This creates an infinite sequence.
        Be sure to use `take()` or any other bounding adapter before collecting it.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.count(10, 2).take(3).collect()
    [10, 12, 14]
    >>> ps.count(0, 0.5).eltype()
    <class 'float'>

    ```
    """
    return Count(start, step)


def take[T](seq: Iterable[T], n: int) -> Take[T]:
    """Keep at most the first **n** elements of **seq**.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.take(range(0, 9, 2), 10).collect()
    [0, 2, 4, 6, 8]
    >>> ps.take(range(0, 9, 2), 10).length()
    Some(value=5)
    >>> ps.take(ps.count(), 3).length()
    NONE

    ```
    """
    return Take(into_seq(seq), n)


def takestrict[T](seq: Iterable[T], n: int) -> TakeStrict[T]:
    """Keep exactly the first **n** elements of **seq**.

    Traversal raises `ShortSequenceError` upon reaching the end of **seq** before **n** elements.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.takestrict("abc", 2).collect()
    ['a', 'b']
    >>> ps.takestrict("abc", 4).collect()
    Traceback (most recent call last):
        ...
    pyoseq._errors.ShortSequenceError: expected 4 elements, source ended 1 short

    ```
    """
    return TakeStrict(into_seq(seq), n)


def drop[T](seq: Iterable[T], n: int) -> Drop[T]:
    """Skip the first **n** elements of **seq**.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.drop(range(0, 11, 2), 2).collect()
    [4, 6, 8, 10]
    >>> ps.drop([1, 2], 5).length()
    Some(value=0)

    ```
    """
    return Drop(into_seq(seq), n)


def cycle[T](seq: Iterable[T]) -> Cycle[T]:
    """Repeat the elements of **seq** forever.

    Traversing the cycle of an empty sequence raises `EmptyCycleError`.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.cycle(range(3)).take(7).collect()
    [0, 1, 2, 0, 1, 2, 0]
    >>> ps.cycle([]).first()
    Traceback (most recent call last):
        ...
    pyoseq._errors.EmptyCycleError: cannot cycle over an empty Items

    ```
    """
    return Cycle(into_seq(seq))


@overload
def repeated[T](value: T) -> RepeatForever[T]: ...
@overload
def repeated[T](value: T, n: int) -> Repeat[T]: ...
def repeated[T](value: T, n: int | None = None) -> Repeat[T] | RepeatForever[T]:
    """Yield **value**, **n** times or forever when **n** is omitted.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.repeated(1, 3).collect()
    [1, 1, 1]
    >>> ps.repeated("x").take(2).collect()
    ['x', 'x']

    ```
    """
    if n is None:
        return RepeatForever(value)
    return Repeat(value, n)


@deprecated("repeated")
def repeat[T](value: T, n: int | None = None) -> Repeat[T] | RepeatForever[T]:
    return repeated(value, n)


@overload
def repeatedly[T](func: Callable[[], T]) -> RepeatedlyForever[T]: ...
@overload
def repeatedly[T](func: Callable[[], T], n: int) -> Repeatedly[T]: ...
def repeatedly[T](
    func: Callable[[], T], n: int | None = None
) -> Repeatedly[T] | RepeatedlyForever[T]:
    """Call **func** once per element, **n** times or forever when **n** is omitted.

    Example:
    ```python
    >>> import itertools
    >>> import pyoseq as ps
    >>> ticket = itertools.count(100)
    >>> ps.repeatedly(lambda: next(ticket), 3).collect()
    [100, 101, 102]

    ```
    """
    if n is None:
        return RepeatedlyForever(func)
    return Repeatedly(func, n)


def chain(*seqs: Iterable[Any]) -> Chain[Any]:
    """Concatenate **seqs**, one after the other.

    The element type is the closest common supertype of the element types of **seqs**.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> mixed = ps.chain(range(1, 6, 2), [0.5, 1.5])
    >>> mixed.collect()
    [1, 3, 5, 0.5, 1.5]
    >>> mixed.eltype(), mixed.length()
    (<class 'object'>, Some(value=5))
    >>> ps.chain([True], range(2)).eltype()
    <class 'int'>

    ```
    """
    return Chain(tuple(into_seq(seq) for seq in seqs))


def product(*seqs: Iterable[Any]) -> Product:
    """Cartesian product of **seqs**, the first one varying fastest.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.product(range(1, 10, 2), range(1, 6)).take(7).collect()
    [(1, 1), (3, 1), (5, 1), (7, 1), (9, 1), (1, 2), (3, 2)]
    >>> ps.product(range(1, 10, 2), range(1, 6)).length()
    Some(value=25)
    >>> ps.product().collect()
    [()]

    ```
    """
    return Product(tuple(into_seq(seq) for seq in seqs))


def distinct[H: Hashable](seq: Iterable[H], memo: SeenMemo[H] | None = None) -> Distinct[H]:
    """Keep the first occurrence of each element of **seq**, in order.

    The memo of seen elements belongs to the returned descriptor, see `Distinct`. Pass **memo** to share one between several descriptors.
    """
    return Distinct(into_seq(seq), SeenMemo() if memo is None else memo)


def partition[T](seq: Iterable[T], n: int, step: int | None = None) -> Partition[T]:
    """Split **seq** into tuples of **n** elements, each starting **step** elements after the previous one.

    **step** defaults to **n**, giving back-to-back windows. Invalid sizes raise `ValueError` right away.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.partition(ps.count(1).take(6), 2).collect()
    [(1, 2), (3, 4), (5, 6)]
    >>> ps.partition(ps.count(1).take(4), 2, 1).collect()
    [(1, 2), (2, 3), (3, 4)]
    >>> ps.partition(ps.count(1).take(8), 2, 3).collect()
    [(1, 2), (4, 5), (7, 8)]
    >>> ps.partition(range(8), 2, 0)
    Traceback (most recent call last):
        ...
    ValueError: Partition step must be at least 1, got 0

    ```
    """
    return Partition(into_seq(seq), n, n if step is None else step)


def groupby[T](seq: Iterable[T], key: Callable[[T], Any]) -> GroupBy[T]:
    """Group consecutive elements of **seq** with equal **key** into lists.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.groupby(["face", "foo", "bar", "book", "baz"], lambda s: s[0]).collect()
    [['face', 'foo'], ['bar', 'book', 'baz']]
    >>> ps.groupby([], len).collect()
    []

    ```
    """
    return GroupBy(into_seq(seq), key)


def imap[R](func: Callable[..., R], *seqs: Iterable[Any]) -> IMap[R]:
    """Apply **func** to the elements of **seqs** taken in lockstep, stopping with the shortest.

    Example:
    ```python
    >>> import operator
    >>> import pyoseq as ps
    >>> ps.imap(operator.add, ps.count(1), [1, 2, 3]).collect()
    [2, 4, 6]

    ```
    """
    return IMap(func, tuple(into_seq(seq) for seq in seqs))


def subsets[T](data: Iterable[T]) -> Subsets[T]:
    """Every subset of **data**, in binary counting order, starting with the empty one.

    **data** must be finite, and is materialized when it is not already a `Sequence`.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.subsets("abc").collect()
    [[], ['a'], ['b'], ['a', 'b'], ['c'], ['a', 'c'], ['b', 'c'], ['a', 'b', 'c']]

    ```
    """
    return Subsets(data if _is_sequence(data) else tuple(data))


def iterate[T](func: Callable[[T], T], seed: T) -> Iterate[T]:
    """Unfold **seed**: `seed, func(seed), func(func(seed)), ...`.

    **Warning** ⚠️
        This creates an infinite sequence.
        Be sure to use `take()` or any other bounding adapter before collecting it.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.iterate(lambda n: n * 2, 1).take(5).collect()
    [1, 2, 4, 8, 16]

    ```
    """
    return Iterate(func, seed)


@overload
def collect[T](seq: Iterable[T]) -> list[T]: ...
@overload
def collect[T, R](seq: Iterable[T], factory: Callable[[Iterable[T]], R]) -> R: ...
def collect(seq: Iterable[Any], factory: Callable[[Iterable[Any]], Any] = list) -> Any:
    """Materialize **seq** into an ordered container, a `list` by default."""
    return into_seq(seq).collect(factory)
