from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide display settings.

    Args:
        preview_items (int): Number of elements shown by `LazySeq.preview()`.
        preview_width (int): Line width handed to `pprint.pformat`.
        preview_depth (int): Nesting depth handed to `pprint.pformat`.
    """

    preview_items: int = 10
    preview_width: int = 80
    preview_depth: int = 3

    def __post_init__(self) -> None:
        for name in ("preview_items", "preview_width", "preview_depth"):
            if getattr(self, name) < 0:
                msg = f"`{name}` must be non-negative, got {getattr(self, name)}"
                raise ValueError(msg)


_CONFIG = Config()


def get_config() -> Config:
    """Return the active `Config`.

    Example:
    ```python
    >>> from pyoseq._core import get_config
    >>> get_config().preview_items
    10

    ```
    """
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace fields of the active `Config` and return the previous one.

    Unknown field names raise `TypeError`, invalid values raise `ValueError`; the active config is left untouched in both cases.

    Args:
        **changes (Any): Field names and their new values.

    Returns:
        Config: The configuration that was active before the call.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> from pyoseq._core import set_config
    >>> previous = set_config(preview_items=3)
    >>> ps.count().preview()
    '[0, 1, 2, ...]'
    >>> _ = set_config(preview_items=previous.preview_items)

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = _CONFIG
    _CONFIG = replace(previous, **changes)
    return previous
