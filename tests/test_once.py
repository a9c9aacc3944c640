"""Tests for synchronized once-initialization (utils/once.py)."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from ytd_formats.utils.once import Lazy


class TestLazy:
    def test_not_built_until_first_get(self) -> None:
        calls: list[int] = []
        lazy = Lazy(lambda: calls.append(1) or "value")
        assert not lazy.initialized
        assert calls == []
        assert lazy.get() == "value"
        assert lazy.initialized

    def test_factory_runs_once(self) -> None:
        calls: list[int] = []
        lazy = Lazy(lambda: calls.append(1) or object())
        first = lazy.get()
        assert lazy.get() is first
        assert len(calls) == 1

    def test_none_is_a_valid_value(self) -> None:
        calls: list[int] = []

        def factory() -> None:
            calls.append(1)

        lazy: Lazy[None] = Lazy(factory)
        assert lazy.get() is None
        assert lazy.get() is None
        assert len(calls) == 1

    def test_factory_error_propagates_and_retries(self) -> None:
        attempts: list[int] = []

        def factory() -> str:
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("boom")
            return "ok"

        lazy = Lazy(factory)
        with pytest.raises(RuntimeError, match="boom"):
            lazy.get()
        assert not lazy.initialized
        assert lazy.get() == "ok"

    def test_reset(self) -> None:
        lazy = Lazy(object)
        first = lazy.get()
        lazy.reset()
        assert not lazy.initialized
        assert lazy.get() is not first

    def test_concurrent_first_access(self) -> None:
        workers = 12
        calls: list[int] = []
        barrier = threading.Barrier(workers)

        def slow_factory() -> object:
            calls.append(1)
            time.sleep(0.05)
            return object()

        lazy = Lazy(slow_factory)

        def first_access(_: int) -> object:
            barrier.wait()
            return lazy.get()

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(first_access, range(workers)))

        assert len(calls) == 1
        assert all(r is results[0] for r in results)
