"""
Ambient values scoped to an asynchronous call tree.

``EnvironmentVariable`` wraps a ``contextvars.ContextVar`` with a push/pop
discipline: a value set through ``with_value`` is visible to everything the
wrapped callable runs, including tasks it spawns and code resumed after an
``await``, and is restored once the callable finishes.
"""

from __future__ import annotations

import contextvars
import inspect
from contextlib import contextmanager
from typing import Any, Awaitable, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class EnvironmentVariable(Generic[T]):
    def __init__(self, name: str):
        self._var: contextvars.ContextVar[Optional[T]] = contextvars.ContextVar(name, default=None)

    @property
    def name(self) -> str:
        return self._var.name

    def get(self) -> Optional[T]:
        return self._var.get()

    @contextmanager
    def scope(self, value: Optional[T]) -> Iterator[None]:
        token = self._var.set(value)
        try:
            yield
        finally:
            self._var.reset(token)

    def with_value(self, value: Optional[T], fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """
        Run ``fn`` with this variable bound to ``value``.

        When ``fn`` returns an awaitable (coroutine functions, lambdas or
        objects wrapping one), a coroutine is returned instead; the value is
        bound again for the whole await, not just until the first suspension.
        """
        with self.scope(value):
            result = fn(*args, **kwargs)
        if inspect.isawaitable(result):
            return self._await_with_value(value, result)
        return result

    async def _await_with_value(self, value: Optional[T], awaitable: Awaitable[Any]) -> Any:
        with self.scope(value):
            return await awaitable

    def __repr__(self) -> str:
        return f"EnvironmentVariable({self.name!r})"
