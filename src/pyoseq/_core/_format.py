from __future__ import annotations

from collections.abc import Sequence
from pprint import pformat
from typing import Any


def seq_repr(
    values: Sequence[Any],
    *,
    truncated: bool,
    depth: int = 3,
    width: int = 80,
    compact: bool = True,
) -> str:
    """Format **values** as a list, ending with `...` when more elements were left out.

    Args:
        values (Sequence[Any]): The elements to show.
        truncated (bool): Whether the source holds more elements than **values**.
        depth (int): Nesting depth after which containers are elided.
        width (int): Target line width, see `pprint.pformat`.
        compact (bool): Pack as many elements as fit on each line.

    Returns:
        str: The formatted preview.

    Example:
    ```python
    >>> from pyoseq._core import seq_repr
    >>> seq_repr([1, 2], truncated=True)
    '[1, 2, ...]'
    >>> seq_repr([], truncated=False)
    '[]'

    ```
    """
    body = pformat(list(values), depth=depth, width=width, compact=compact)[1:-1]
    match (body, truncated):
        case ("", True):
            return "[...]"
        case (_, True):
            return f"[{body}, ...]"
        case _:
            return f"[{body}]"
