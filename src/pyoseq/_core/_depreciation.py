from __future__ import annotations

import warnings
from collections.abc import Callable
from functools import wraps


def deprecated[**P, R](alternative: str):
    """Flag a public entry point as deprecated in favour of **alternative**."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        msg = f"`{func.__name__}` is deprecated, use `{alternative}` instead."

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            warnings.warn(msg, DeprecationWarning, stacklevel=2)
            return func(*args, **kwargs)

        return wrapper

    return decorator
