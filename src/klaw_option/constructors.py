"""Free-standing constructors and match helpers.

These are ordinary exports; nothing is injected into builtins or any other
namespace. ``Present``/``Absent`` read like the variants they build:

    ```python
    from klaw_option import Absent, Present, match

    match(Present(1), lambda m: m.on_present(lambda v: v + 10).on_absent(lambda: 0))  # 11
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from klaw_option.matching import MatchBuilder
from klaw_option.option import Option

__all__ = [
    'Absent',
    'Present',
    'absent',
    'from_nullable',
    'lmatch',
    'match',
    'present',
]

T = TypeVar('T')


def present(value: T) -> Option[T]:
    """Wrap a value in a present Option."""
    return Option.present(value)


def absent() -> Option[Any]:
    """Return a new absent Option."""
    return Option.absent()


def from_nullable(value: T | None) -> Option[T]:
    """Convert a nullable value to an Option.

    Args:
        value: The value that may be None.

    Returns:
        Present(value) if value is not None, otherwise Absent.
    """
    return Option.from_nullable(value)


def Present(value: T) -> Option[T]:  # noqa: N802
    """Alias of present(), spelled like the variant."""
    return Option.present(value)


def Absent() -> Option[Any]:  # noqa: N802
    """Alias of absent(), spelled like the variant."""
    return Option.absent()


def match(
    option: Option[T],
    block: Callable[[MatchBuilder], object],
    *,
    exhaustive: bool | None = None,
) -> Any:
    """Same as option.match(block, exhaustive=exhaustive)."""
    return option.match(block, exhaustive=exhaustive)


def lmatch(option: Option[T], block: Callable[[MatchBuilder], object]) -> Any:
    """Same as option.lmatch(block)."""
    return option.lmatch(block)
