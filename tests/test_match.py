"""Tests for the match engine: registration, exhaustiveness and dispatch."""

import pytest
from hypothesis import given
from klaw_option import (
    Absent,
    Arm,
    DuplicateArmError,
    InvalidArgumentError,
    MatchBuilder,
    MatchError,
    NonExhaustiveMatchError,
    Present,
)
from klaw_option._config import get_config
from klaw_option.matching import MatchArms, run_match

from tests.strategies import options


@pytest.fixture(autouse=True, scope='module')
def _isolated(isolated_config) -> None:
    """Run against the default configuration, whatever the environment says."""


def both_arms(m: MatchBuilder) -> None:
    m.on_present(lambda value: value + 10)
    m.on_absent(lambda: 0)


class TestMatchBuilder:
    """Tests for arm registration."""

    def test_starts_empty(self):
        """A new builder has no handlers."""
        builder = MatchBuilder()
        assert builder.arms == MatchArms()
        assert builder.missing() == [Arm.PRESENT, Arm.ABSENT]

    def test_registration_is_chainable(self):
        """on_present/on_absent return the builder."""
        builder = MatchBuilder()
        assert builder.on_present(str).on_absent(lambda: '') is builder
        assert builder.missing() == []

    def test_missing_reports_unregistered_arms(self):
        """missing() lists only the arms without a handler."""
        assert MatchBuilder().on_present(str).missing() == [Arm.ABSENT]
        assert MatchBuilder().on_absent(str).missing() == [Arm.PRESENT]

    def test_duplicate_present(self):
        """Registering the present arm twice fails immediately."""
        builder = MatchBuilder().on_present(str)
        with pytest.raises(DuplicateArmError) as exc_info:
            builder.on_present(repr)
        assert exc_info.value.arm == 'Present'
        assert builder.arms.present is str

    def test_duplicate_absent(self):
        """Registering the absent arm twice fails immediately."""
        builder = MatchBuilder().on_absent(list)
        with pytest.raises(DuplicateArmError, match='Absent arm already registered'):
            builder.on_absent(dict)

    def test_handler_must_be_callable(self):
        """Non-callable handlers are rejected."""
        with pytest.raises(InvalidArgumentError, match='on_present'):
            MatchBuilder().on_present(None)
        with pytest.raises(InvalidArgumentError, match='on_absent'):
            MatchBuilder().on_absent(42)


class TestExhaustiveMatch:
    """Tests for match() in exhaustive mode (the default)."""

    def test_present_dispatch(self):
        """The present handler receives the value."""
        assert Present(1).match(both_arms) == 11

    def test_absent_dispatch(self):
        """The absent handler is called without arguments."""
        assert Absent().match(both_arms) == 0

    def test_chained_lambda_block(self):
        """A block may be a single chained expression."""
        block = lambda m: m.on_present(str).on_absent(lambda: '-')  # noqa: E731
        assert Present(3).match(block) == '3'
        assert Absent().match(block) == '-'

    def test_registration_order_is_irrelevant(self):
        """Arms may be registered in any order."""

        def absent_first(m: MatchBuilder) -> None:
            m.on_absent(lambda: 'none')
            m.on_present(lambda v: f'some {v}')

        assert Present(1).match(absent_first) == 'some 1'
        assert Absent().match(absent_first) == 'none'

    def test_missing_absent_arm(self):
        """Leaving out the absent arm fails even on a present Option."""
        with pytest.raises(NonExhaustiveMatchError, match='Absent not covered') as exc_info:
            Present(1).match(lambda m: m.on_present(str))
        assert exc_info.value.missing == ('Absent',)

    def test_missing_present_arm(self):
        """Leaving out the present arm fails even on an absent Option."""
        with pytest.raises(NonExhaustiveMatchError, match='Present not covered'):
            Absent().match(lambda m: m.on_absent(lambda: 0))

    def test_missing_both_arms(self):
        """Missing arm names are joined for readability."""
        with pytest.raises(NonExhaustiveMatchError) as exc_info:
            Present(1).match(lambda m: None)
        assert str(exc_info.value) == 'non-exhaustive match: Present and Absent not covered'
        assert exc_info.value.missing == ('Present', 'Absent')

    def test_default_mode_comes_from_config(self):
        """With exhaustive left unset, the configured default applies."""
        assert get_config().exhaustive is True
        with pytest.raises(NonExhaustiveMatchError):
            run_match(Absent(), lambda m: m.on_absent(lambda: 0))

    def test_present_only_on_absent_fails(self):
        """A present-only block on Absent fails under exhaustive mode."""
        with pytest.raises(NonExhaustiveMatchError):
            Absent().match(lambda m: m.on_present(str), exhaustive=True)

    def test_handlers_not_called_when_not_exhaustive(self):
        """Exhaustiveness is checked before dispatch."""
        calls = []
        with pytest.raises(NonExhaustiveMatchError):
            Present(1).match(lambda m: m.on_present(calls.append))
        assert calls == []

    def test_duplicate_arm_aborts_before_dispatch(self):
        """A duplicate arm aborts the block before any handler runs."""
        calls = []

        def block(m: MatchBuilder) -> None:
            m.on_present(calls.append)
            m.on_present(calls.append)
            m.on_absent(lambda: calls.append('absent'))

        with pytest.raises(DuplicateArmError):
            Present(1).match(block)
        assert calls == []

    def test_handler_exceptions_propagate(self):
        """Errors raised by a handler reach the caller untouched."""

        def boom(_value):
            raise ValueError('boom')

        with pytest.raises(ValueError, match='boom'):
            Present(1).match(lambda m: m.on_present(boom).on_absent(lambda: None))

    def test_block_must_be_callable(self):
        """match() needs a callable block."""
        with pytest.raises(InvalidArgumentError, match='match'):
            Present(1).match(None)

    def test_errors_share_a_base(self):
        """Both match errors derive from MatchError."""
        assert issubclass(DuplicateArmError, MatchError)
        assert issubclass(NonExhaustiveMatchError, MatchError)


class TestLooseMatch:
    """Tests for lmatch() and match(exhaustive=False)."""

    def test_present_only_on_absent_yields_none(self):
        """A loose match with no handler for the variant returns None."""
        assert Absent().lmatch(lambda m: m.on_present(str)) is None
        assert Absent().match(lambda m: m.on_present(str), exhaustive=False) is None

    def test_absent_only_on_present_yields_none(self):
        """The absent handler is not called for a present Option."""
        calls = []
        assert Present(1).lmatch(lambda m: m.on_absent(lambda: calls.append(1))) is None
        assert calls == []

    def test_empty_block(self):
        """A loose match may register nothing at all."""
        assert Present(1).lmatch(lambda m: None) is None

    def test_handler_runs_when_registered(self):
        """A loose match still dispatches to a registered handler."""
        assert Present(2).lmatch(lambda m: m.on_present(lambda v: v * 2)) == 4

    def test_duplicate_arm_still_fails(self):
        """Duplicate detection applies regardless of mode."""
        with pytest.raises(DuplicateArmError):
            Present(1).lmatch(lambda m: m.on_present(str).on_present(str))


class TestMatchState:
    """Registration state never outlives a single match call."""

    def test_repeated_matches_are_independent(self):
        """Matching the same Option twice starts from a clean slate."""
        option = Present(1)
        assert option.match(both_arms) == 11
        # Would be a DuplicateArmError if the previous arms were kept.
        assert option.match(both_arms) == 11
        # Would pass the exhaustive check if the previous arms were kept.
        with pytest.raises(NonExhaustiveMatchError):
            option.match(lambda m: m.on_present(str))

    def test_builder_is_fresh_per_call(self):
        """Each call receives a new builder."""
        builders = []

        def block(m: MatchBuilder) -> None:
            builders.append(m)
            both_arms(m)

        option = Absent()
        option.match(block)
        option.match(block)
        assert builders[0] is not builders[1]

    def test_match_follows_mutation(self):
        """Dispatch reflects the variant at call time."""
        option = Present(1)
        option.take()
        assert option.match(both_arms) == 0
        option.replace(5)
        assert option.match(both_arms) == 15

    @given(options)
    def test_dispatch_agrees_with_variant(self, option):
        """Exactly the handler for the Option's variant runs."""
        result = run_match(option, lambda m: m.on_present(lambda v: ('present', v)).on_absent(lambda: ('absent',)))
        if option.is_present():
            assert result == ('present', option.unwrap())
        else:
            assert result == ('absent',)
