"""Option type: a container that is either Present(value) or Absent.

One class carries both variants behind a Variant tag, so an Option can be
mutated in place by take(), replace() and the get_or_insert helpers. Every
other operation leaves the receiver untouched.

Example:
    ```python
    from klaw_option import Option

    Option.present(1).map(lambda x: x + 10).unwrap()  # 11
    Option.absent().unwrap_or(42)  # 42
    Option.from_nullable(None)  # Absent

    Option.present(3).match(lambda m: m.on_present(str).on_absent(lambda: '-'))  # '3'
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, Final, Generic, TypeVar

from klaw_option.errors import InvalidArgumentError, UnwrapError
from klaw_option.matching import MatchBuilder, run_match
from klaw_option.propagate import Propagate

__all__ = ['Option', 'Variant']

T = TypeVar('T')
U = TypeVar('U')


class Variant(Enum):
    """Tag of an Option."""

    PRESENT = 'Present'
    ABSENT = 'Absent'


class _Empty:
    __slots__ = ()

    def __repr__(self) -> str:
        return '<empty>'


_EMPTY: Final = _Empty()
"""Marks the value slot of an absent Option; never visible to callers."""


def _require_callable(f: object, operation: str) -> None:
    if not callable(f):
        raise InvalidArgumentError(operation, 'a callable is required')


def _require_option(value: object, operation: str) -> Option[Any]:
    if not isinstance(value, Option):
        raise InvalidArgumentError(operation, f'expected an Option, got {type(value).__name__}')
    return value


class Option(Generic[T]):
    """An optional value: either Present(value) or Absent.

    Construct through Option.present(), Option.absent(), Option.from_nullable()
    or the module-level helpers in klaw_option.constructors. Two Options are
    equal when both are absent, or both are present with equal values.

    Options are mutable (see take() and replace()) and therefore unhashable.
    """

    __slots__ = ('_value', '_variant')

    def __init__(self, variant: Variant, value: Any = _EMPTY) -> None:
        """Create an Option with an explicit tag.

        Raises:
            InvalidArgumentError: If a present Option gets no value, or an
                absent Option gets one.
        """
        if variant is Variant.PRESENT and value is _EMPTY:
            raise InvalidArgumentError('Option', 'a present Option needs a value')
        if variant is Variant.ABSENT and value is not _EMPTY:
            raise InvalidArgumentError('Option', 'an absent Option cannot hold a value')
        self._variant = variant
        self._value = value

    # -----------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------

    @classmethod
    def present(cls, value: T) -> Option[T]:
        """Wrap a value."""
        return cls(Variant.PRESENT, value)

    @classmethod
    def absent(cls) -> Option[Any]:
        """Return a new absent Option."""
        return cls(Variant.ABSENT)

    @classmethod
    def from_nullable(cls, value: T | None) -> Option[T]:
        """Return Absent for None, Present(value) for anything else."""
        if value is None:
            return cls(Variant.ABSENT)
        return cls(Variant.PRESENT, value)

    def _snapshot(self) -> Option[T]:
        return Option(self._variant, self._value)

    # -----------------------------------------------------------------
    # Querying
    # -----------------------------------------------------------------

    @property
    def variant(self) -> Variant:
        """The tag of this Option."""
        return self._variant

    def is_present(self) -> bool:
        """Return True if the Option holds a value."""
        return self._variant is Variant.PRESENT

    def is_absent(self) -> bool:
        """Return True if the Option holds no value."""
        return self._variant is Variant.ABSENT

    def is_present_and(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the Option holds a value that satisfies pred.

        pred is only called on a present Option.
        """
        _require_callable(pred, 'is_present_and')
        return self.is_present() and bool(pred(self._value))

    def contains(self, x: object) -> bool:
        """Return True if the Option holds a value equal to x."""
        return self.is_present() and self._value == x

    def __contains__(self, x: object) -> bool:
        return self.contains(x)

    # -----------------------------------------------------------------
    # Extracting
    # -----------------------------------------------------------------

    def unwrap(self) -> T:
        """Return the contained value.

        Raises:
            UnwrapError: If the Option is absent.
        """
        if self.is_absent():
            raise UnwrapError
        return self._value

    def expect(self, msg: str) -> T:
        """Return the contained value, failing with msg if there is none.

        Raises:
            UnwrapError: Carrying msg, if the Option is absent.
        """
        if self.is_absent():
            raise UnwrapError(msg)
        return self._value

    def unwrap_or(self, default: T) -> T:
        """Return the contained value or default."""
        if self.is_absent():
            return default
        return self._value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Return the contained value or compute one with f.

        f is only called when the Option is absent.
        """
        _require_callable(f, 'unwrap_or_else')
        if self.is_absent():
            return f()
        return self._value

    def bail(self) -> T:
        """Return the contained value, or propagate Absent out of the caller.

        This is the equivalent of Rust's ? operator. Inside a function
        decorated with @optional, an absent Option makes that function
        return Absent immediately.

        Raises:
            Propagate: Carrying a snapshot of this Option, if it is absent.
        """
        if self.is_absent():
            raise Propagate(self._snapshot())
        return self._value

    # -----------------------------------------------------------------
    # Transforming
    # -----------------------------------------------------------------

    def map(self, f: Callable[[T], U]) -> Option[U]:
        """Apply f to the contained value, wrapping the result.

        Returns:
            Present(f(value)), or Absent if there is no value.
        """
        _require_callable(f, 'map')
        if self.is_absent():
            return Option(Variant.ABSENT)
        return Option(Variant.PRESENT, f(self._value))

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """Return f(value), or default if there is no value."""
        _require_callable(f, 'map_or')
        if self.is_absent():
            return default
        return f(self._value)

    def map_or_else(self, default: Callable[[], U], f: Callable[[T], U]) -> U:
        """Return f(value), or default() if there is no value.

        Exactly one of the two functions is called.
        """
        _require_callable(default, 'map_or_else')
        _require_callable(f, 'map_or_else')
        if self.is_absent():
            return default()
        return f(self._value)

    def inspect(self, f: Callable[[T], Any]) -> Option[T]:
        """Call f with the contained value, if any, and return self."""
        _require_callable(f, 'inspect')
        if self.is_present():
            f(self._value)
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if predicate(value) is true.

        Returns:
            self if present and the predicate holds, otherwise a new Absent.
        """
        _require_callable(predicate, 'filter')
        if self.is_present() and predicate(self._value):
            return self
        return Option(Variant.ABSENT)

    def flatten(self) -> Option[Any]:
        """Remove one level of nesting from Option[Option[U]].

        Raises:
            InvalidArgumentError: If the contained value is not an Option.
        """
        if self.is_absent():
            return self
        return _require_option(self._value, 'flatten')

    # -----------------------------------------------------------------
    # Combining
    # -----------------------------------------------------------------

    def and_(self, other: Option[U]) -> Option[U]:
        """Return other if self is present, else self."""
        if self.is_absent():
            return self
        return other

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Chain a computation that returns an Option.

        Also known as flatmap or bind. f is only called on a present Option.

        Raises:
            InvalidArgumentError: If f does not return an Option.
        """
        _require_callable(f, 'and_then')
        if self.is_absent():
            return self
        return _require_option(f(self._value), 'and_then')

    def or_(self, other: Option[T]) -> Option[T]:
        """Return self if present, else other."""
        if self.is_present():
            return self
        return other

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Return self if present, else the Option computed by f.

        Raises:
            InvalidArgumentError: If f does not return an Option.
        """
        _require_callable(f, 'or_else')
        if self.is_present():
            return self
        return _require_option(f(), 'or_else')

    def xor(self, other: Option[T]) -> Option[T]:
        """Return whichever of self and other is present, if exactly one is.

        Returns:
            Absent if both are present; other if only other is present;
            self otherwise.
        """
        _require_option(other, 'xor')
        if other.is_present():
            if self.is_present():
                return Option(Variant.ABSENT)
            return other
        return self

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        """Pair the values of two present Options.

        Returns:
            Present((value, other_value)) if both are present, otherwise Absent.
        """
        _require_option(other, 'zip')
        if self.is_present() and other.is_present():
            return Option(Variant.PRESENT, (self._value, other._value))
        return Option(Variant.ABSENT)

    # -----------------------------------------------------------------
    # In-place mutation
    # -----------------------------------------------------------------

    def get_or_insert(self, default: T) -> T:
        """Return the contained value, first storing default if there is none."""
        if self.is_absent():
            self._variant, self._value = Variant.PRESENT, default
        return self._value

    def get_or_insert_with(self, f: Callable[[], T]) -> T:
        """Return the contained value, first storing f() if there is none.

        f is only called when the Option is absent.
        """
        _require_callable(f, 'get_or_insert_with')
        if self.is_absent():
            value = f()
            self._variant, self._value = Variant.PRESENT, value
        return self._value

    def replace(self, value: T) -> Option[T]:
        """Store value in this Option and return what it held before."""
        previous = self._snapshot()
        self._variant, self._value = Variant.PRESENT, value
        return previous

    def take(self) -> Option[T]:
        """Empty this Option and return what it held before."""
        previous = self._snapshot()
        self._variant, self._value = Variant.ABSENT, _EMPTY
        return previous

    # -----------------------------------------------------------------
    # Matching
    # -----------------------------------------------------------------

    def match(self, block: Callable[[MatchBuilder], object], *, exhaustive: bool | None = None) -> Any:
        """Dispatch on the variant with handlers registered by block.

        See klaw_option.matching.run_match for the full contract.
        """
        return run_match(self, block, exhaustive=exhaustive)

    def lmatch(self, block: Callable[[MatchBuilder], object]) -> Any:
        """Loose match: like match() but arms may be left out."""
        return run_match(self, block, exhaustive=False)

    # -----------------------------------------------------------------
    # Dunder methods
    # -----------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self.is_absent() or other.is_absent():
            return self.is_absent() and other.is_absent()
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if self.is_absent():
            return 'Absent'
        return f'Present({self._value})'

    def __repr__(self) -> str:
        if self.is_absent():
            return 'Absent'
        return f'Present({self._value!r})'

