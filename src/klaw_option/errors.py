"""Error types raised by Option operations and the match engine."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    'DuplicateArmError',
    'InvalidArgumentError',
    'MatchError',
    'NonExhaustiveMatchError',
    'OptionError',
    'UnwrapError',
]


class OptionError(Exception):
    """Base class for every error raised by klaw-option."""


# --- Unwrapping ---


class UnwrapError(OptionError):
    """An absent Option was forced with unwrap() or expect()."""

    DEFAULT_MESSAGE = 'called unwrap on an absent value'

    def __init__(self, message: str = DEFAULT_MESSAGE) -> None:
        self.message = message
        super().__init__(message)


# --- Arguments ---


class InvalidArgumentError(OptionError, TypeError):
    """A required function was missing, or a callback returned the wrong kind of value."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f'{operation}: {reason}')


# --- Matching ---


class MatchError(OptionError):
    """Base class for malformed match blocks."""


class DuplicateArmError(MatchError):
    """The same arm was registered twice inside one match block."""

    def __init__(self, arm: str) -> None:
        self.arm = arm
        super().__init__(f'{arm} arm already registered')


class NonExhaustiveMatchError(MatchError):
    """An exhaustive match block left at least one arm unregistered."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(f'non-exhaustive match: {" and ".join(self.missing)} not covered')
