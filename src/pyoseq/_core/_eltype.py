from __future__ import annotations

from collections.abc import Iterable
from typing import Any

type ElType = type | tuple[ElType, ...]
"""Logical element type: a class, or a tuple of element types for tuple-valued sequences."""


def typejoin(*types: ElType) -> ElType:
    """Return the most specific common supertype of **types**.

    Tuple element types of equal arity are joined position-wise, anything else involving a tuple joins to `tuple`.

    Example:
    ```python
    >>> from pyoseq._core import typejoin
    >>> typejoin(bool, int)
    <class 'int'>
    >>> typejoin(int, float)
    <class 'object'>
    >>> typejoin((int, str), (bool, str))
    (<class 'int'>, <class 'str'>)
    >>> typejoin()
    <class 'object'>

    ```
    """
    if not types:
        return object
    first, *rest = types
    if isinstance(first, tuple):
        if all(isinstance(t, tuple) and len(t) == len(first) for t in rest):
            return tuple(typejoin(*column) for column in zip(first, *rest, strict=True))
        return tuple
    classes = [t if isinstance(t, type) else tuple for t in rest]
    for candidate in first.__mro__:
        if all(issubclass(cls, candidate) for cls in classes):
            return candidate
    return object


def eltype_of(values: Iterable[Any]) -> ElType:
    """Join the runtime types of **values**, `object` when there are none."""
    return typejoin(*dict.fromkeys(type(v) for v in values))
