"""Propagate exception for the .bail() mechanism."""

from typing import Any


class Propagate(Exception):  # noqa: N818
    """Exception raised by Option.bail() to carry an absent Option up the call stack.

    It is caught by the @optional decorator, which returns the carried value.
    The name intentionally doesn't end with "Error": it is a control-flow
    signal, not a failure, and it is not an OptionError.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any) -> None:
        """Initialize Propagate with the Option being propagated.

        Args:
            value: The absent Option raised by bail().
        """
        self._value = value
        super().__init__(f'Propagate({value!r})')

    @property
    def value(self) -> Any:
        """The Option being propagated."""
        return self._value
