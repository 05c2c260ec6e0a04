"""@optional decorator for catching Propagate exceptions."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar

import wrapt

from klaw_option.option import Option
from klaw_option.propagate import Propagate

__all__ = ['optional']

P = ParamSpec('P')
T = TypeVar('T')


def optional(
    func: Callable[P, Option[T]] | Callable[P, Awaitable[Option[T]]],
) -> Callable[P, Option[T]] | Callable[P, Awaitable[Option[T]]]:
    """Decorator that catches Propagate exceptions for .bail() support.

    When a function decorated with @optional calls .bail() on an absent
    Option, the Propagate exception is caught and Absent is returned.
    This enables Rust-like ? operator semantics.

    Automatically detects async functions and handles them appropriately.

    Args:
        func: The function to wrap. Must return an Option.

    Returns:
        A wrapped function that catches Propagate and returns the carried Option.

    Example:
        ```python
        @optional
        def greeting(user_id: int) -> Option[str]:
            name = find_name(user_id).bail()  # Returns Absent early if not found
            return Present(f"hello {name}")

        @optional
        async def async_greeting(user_id: int) -> Option[str]:
            name = (await fetch_name(user_id)).bail()
            return Present(f"hello {name}")
        ```
    """
    if inspect.iscoroutinefunction(func):

        @wrapt.decorator
        async def async_wrapper(
            wrapped: Callable[P, Awaitable[Option[T]]],
            instance: Any,
            args: tuple[Any, ...],
            kwargs: dict[str, Any],
        ) -> Option[T]:
            try:
                return await wrapped(*args, **kwargs)
            except Propagate as p:
                return p.value

        return async_wrapper(func)  # type: ignore[return-value]

    @wrapt.decorator
    def sync_wrapper(
        wrapped: Callable[P, Option[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Option[T]:
        try:
            return wrapped(*args, **kwargs)
        except Propagate as p:
            return p.value

    return sync_wrapper(func)  # type: ignore[return-value]
