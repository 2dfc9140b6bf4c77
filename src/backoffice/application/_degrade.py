"""Read-side degradation when storage is unreachable.

Query handlers decorated here answer with an empty result instead of
failing.  Commands are never decorated: a write that cannot reach
storage must fail loudly.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TypeVar

from backoffice.domain.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def degrade_on_unavailable(
    fallback: Callable[[], T],
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except StorageUnavailableError as exc:
                logger.warning("%s degraded to an empty result: %s", func.__qualname__, exc)
                return fallback()
        return wrapper
    return decorator
