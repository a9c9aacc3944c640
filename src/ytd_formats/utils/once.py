"""Synchronized once-initialization for process-wide immutable values.

:class:`Lazy` defers building a value until first use and guarantees the
factory runs exactly once, no matter how many threads race on the first
:meth:`Lazy.get`.  After that, reads are a plain attribute check with no
locking.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

_UNSET: object = object()


class Lazy(Generic[T]):
    """Compute-once holder around a zero-argument *factory*.

    If the factory raises, the exception propagates to the caller and the
    holder stays uninitialized; the next :meth:`get` retries.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory: Callable[[], T] = factory
        self._value: object = _UNSET
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        value = self._value
        if value is _UNSET:
            with self._lock:
                value = self._value
                if value is _UNSET:
                    value = self._factory()
                    self._value = value
        return value  # type: ignore[return-value]

    def reset(self) -> None:
        """Drop the cached value so the next :meth:`get` rebuilds it.

        Intended for tests; production code never invalidates.
        """
        with self._lock:
            self._value = _UNSET
