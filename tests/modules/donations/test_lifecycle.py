"""
Tests for the donation lifecycle state machine.
"""

import pytest

from modules.donations import (
    Actor,
    DonationStatus,
    RejectionReason,
    TransitionAccepted,
    TransitionRejected,
    lifecycle,
)

ACTIVE = DonationStatus.ACTIVE
REQUESTED = DonationStatus.REQUESTED
DONATED = DonationStatus.DONATED
INACTIVE = DonationStatus.INACTIVE


class TestDonationStatus:
    def test_wire_values(self):
        assert [s.value for s in DonationStatus] == ["ATIVO", "SOLICITADO", "DOADO", "INATIVO"]

    def test_terminal_states(self):
        assert {s for s in DonationStatus if s.is_terminal} == {DONATED, INACTIVE}


class TestTransition:
    @pytest.mark.parametrize("current,target,actor", [
        (ACTIVE, REQUESTED, Actor.BENEFICIARY),
        (ACTIVE, REQUESTED, Actor.SYSTEM),
        (REQUESTED, DONATED, Actor.BENEFICIARY),
        (ACTIVE, INACTIVE, Actor.DONOR),
        (REQUESTED, INACTIVE, Actor.DONOR),
    ])
    def test_legal_edges(self, current, target, actor):
        result = lifecycle.transition(current, target, actor)
        assert isinstance(result, TransitionAccepted)
        assert result.ok is True
        assert result.previous == current
        assert result.status == target

    @pytest.mark.parametrize("current", [DONATED, INACTIVE])
    @pytest.mark.parametrize("target", list(DonationStatus))
    def test_nothing_leaves_terminal_states(self, current, target):
        for actor in Actor:
            result = lifecycle.transition(current, target, actor)
            assert isinstance(result, TransitionRejected)
            assert result.reason == RejectionReason.TERMINAL_STATE
            assert result.current == current

    @pytest.mark.parametrize("current,target", [
        (ACTIVE, DONATED),
        (ACTIVE, ACTIVE),
        (REQUESTED, ACTIVE),
        (REQUESTED, REQUESTED),
    ])
    def test_illegal_edges(self, current, target):
        result = lifecycle.transition(current, target, Actor.BENEFICIARY)
        assert result.ok is False
        assert result.reason == RejectionReason.ILLEGAL_TRANSITION

    @pytest.mark.parametrize("current,target,actor", [
        (REQUESTED, DONATED, Actor.DONOR),
        (REQUESTED, DONATED, Actor.SYSTEM),
        (ACTIVE, INACTIVE, Actor.BENEFICIARY),
        (REQUESTED, INACTIVE, Actor.SYSTEM),
        (ACTIVE, REQUESTED, Actor.DONOR),
    ])
    def test_wrong_actor(self, current, target, actor):
        result = lifecycle.transition(current, target, actor)
        assert result.ok is False
        assert result.reason == RejectionReason.ACTOR_NOT_ALLOWED


class TestNamedTransitions:
    def test_request(self):
        assert lifecycle.request(ACTIVE).status == REQUESTED
        assert lifecycle.request(REQUESTED).ok is False

    def test_confirm_donation(self):
        assert lifecycle.confirm_donation(REQUESTED).status == DONATED
        assert lifecycle.confirm_donation(ACTIVE).ok is False

    def test_withdraw(self):
        assert lifecycle.withdraw(ACTIVE).status == INACTIVE
        assert lifecycle.withdraw(REQUESTED).status == INACTIVE
        assert lifecycle.withdraw(DONATED).reason == RejectionReason.TERMINAL_STATE


class TestAllowedActions:
    def test_donor(self):
        assert lifecycle.allowed_actions(ACTIVE, Actor.DONOR) == [INACTIVE]
        assert lifecycle.allowed_actions(REQUESTED, Actor.DONOR) == [INACTIVE]
        assert lifecycle.allowed_actions(DONATED, Actor.DONOR) == []

    def test_beneficiary(self):
        assert lifecycle.allowed_actions(ACTIVE, Actor.BENEFICIARY) == [REQUESTED]
        assert lifecycle.allowed_actions(REQUESTED, Actor.BENEFICIARY) == [DONATED]
        assert lifecycle.allowed_actions(INACTIVE, Actor.BENEFICIARY) == []


class TestCanEdit:
    def test_only_active(self):
        assert lifecycle.can_edit(ACTIVE) is True
        for status in (REQUESTED, DONATED, INACTIVE):
            assert lifecycle.can_edit(status) is False
