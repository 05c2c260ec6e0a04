"""Exhaustiveness-checked matching over the variant of an Option.

A match runs a caller-supplied block against a fresh MatchBuilder. The block
registers at most one handler per arm; the engine then checks coverage and
calls the handler for the Option's variant:

    ```python
    opt.match(lambda m: m.on_present(lambda v: v + 10).on_absent(lambda: 0))

    def arms(m: MatchBuilder) -> None:
        m.on_present(render)
        m.on_absent(render_placeholder)

    opt.match(arms)
    ```

A loose match (``exhaustive=False``) may leave arms out; if the Option's
variant has no handler the match returns None.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

import msgspec

from klaw_option._config import get_config
from klaw_option._logging import get_logger
from klaw_option.errors import DuplicateArmError, InvalidArgumentError, NonExhaustiveMatchError

if TYPE_CHECKING:
    from klaw_option.option import Option

__all__ = ['Arm', 'MatchArms', 'MatchBuilder', 'run_match']

F = TypeVar('F')

logger = get_logger(__name__)


class Arm(Enum):
    """The two arms of a match, named after the variant they handle."""

    PRESENT = 'Present'
    ABSENT = 'Absent'


class MatchArms(msgspec.Struct):
    """Handlers registered during one match call."""

    present: Callable[[Any], Any] | None = None
    absent: Callable[[], Any] | None = None


class MatchBuilder:
    """Registration surface handed to a match block.

    Each arm may be registered once. Both methods return the builder so a
    block can be a single chained expression.
    """

    __slots__ = ('_arms',)

    def __init__(self) -> None:
        self._arms = MatchArms()

    @property
    def arms(self) -> MatchArms:
        """The handlers registered so far."""
        return self._arms

    def on_present(self, handler: Callable[[Any], Any]) -> MatchBuilder:
        """Register the handler called with the value of a present Option.

        Raises:
            DuplicateArmError: If a present handler is already registered.
            InvalidArgumentError: If handler is not callable.
        """
        self._arms.present = self._checked(Arm.PRESENT, self._arms.present, handler)
        return self

    def on_absent(self, handler: Callable[[], Any]) -> MatchBuilder:
        """Register the handler called, without arguments, for an absent Option.

        Raises:
            DuplicateArmError: If an absent handler is already registered.
            InvalidArgumentError: If handler is not callable.
        """
        self._arms.absent = self._checked(Arm.ABSENT, self._arms.absent, handler)
        return self

    def missing(self) -> list[Arm]:
        """Arms that have no handler, in declaration order."""
        missing = []
        if self._arms.present is None:
            missing.append(Arm.PRESENT)
        if self._arms.absent is None:
            missing.append(Arm.ABSENT)
        return missing

    @staticmethod
    def _checked(arm: Arm, current: F | None, handler: F) -> F:
        debug = logger.isEnabledFor(logging.DEBUG)
        if current is not None:
            if debug:
                logger.debug('option.match.duplicate_arm', arm=arm.value)
            raise DuplicateArmError(arm.value)
        if not callable(handler):
            raise InvalidArgumentError(f'on_{arm.name.lower()}', 'handler must be callable')
        if debug:
            logger.debug('option.match.register', arm=arm.value)
        return handler


def run_match(
    option: Option[Any],
    block: Callable[[MatchBuilder], object],
    *,
    exhaustive: bool | None = None,
) -> Any:
    """Run a match block against an Option and dispatch to the matching arm.

    Args:
        option: The Option to inspect.
        block: Callable receiving a fresh MatchBuilder; its return value is ignored.
        exhaustive: Require both arms. None uses the configured default
            (exhaustive unless configured otherwise).

    Returns:
        The selected handler's result, or None when a loose match has no
        handler for the Option's variant.

    Raises:
        InvalidArgumentError: If block is not callable.
        DuplicateArmError: If the block registers an arm twice.
        NonExhaustiveMatchError: If exhaustive and an arm is missing.
    """
    if not callable(block):
        raise InvalidArgumentError('match', 'block must be callable')
    if exhaustive is None:
        exhaustive = get_config().exhaustive
    debug = logger.isEnabledFor(logging.DEBUG)

    builder = MatchBuilder()
    block(builder)

    if exhaustive:
        missing = builder.missing()
        if missing:
            if debug:
                logger.debug('option.match.non_exhaustive', missing=[arm.value for arm in missing])
            raise NonExhaustiveMatchError(arm.value for arm in missing)

    arms = builder.arms
    if option.is_present():
        handler = arms.present
        if debug:
            logger.debug('option.match.dispatch', variant='Present', handled=handler is not None, exhaustive=exhaustive)
        return handler(option.unwrap()) if handler is not None else None

    handler = arms.absent
    if debug:
        logger.debug('option.match.dispatch', variant='Absent', handled=handler is not None, exhaustive=exhaustive)
    return handler() if handler is not None else None
