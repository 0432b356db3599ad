"""
Tests for the DonationBoard.
"""

import pytest

from modules.donations import (
    Actor,
    BoardView,
    DonationBoard,
    DonationNotFoundError,
    DonationStatus,
    InvalidTransitionError,
    RejectionReason,
    StaleDonationStatusError,
)
from shared.session import SessionRequiredError
from tests.conftest import FakeDonationService, make_donation


@pytest.fixture
def donation_service() -> FakeDonationService:
    return FakeDonationService([
        make_donation("don-1"),
        make_donation("don-2", status=DonationStatus.REQUESTED),
        make_donation("don-3", status=DonationStatus.DONATED),
        make_donation("don-9", owner_id="person-2"),
    ])


@pytest.fixture
def board(donation_service, session) -> DonationBoard:
    return DonationBoard(donation_service, session)


class TestRefresh:
    @pytest.mark.asyncio
    async def test_loads_owned_donations(self, board):
        await board.refresh()
        assert [d.id for d in board.items] == ["don-1", "don-2", "don-3"]

    @pytest.mark.asyncio
    async def test_loads_requested_donations(self, donation_service, session):
        donation_service.requested_by["person-1"] = ["don-9"]
        board = DonationBoard(donation_service, session, view=BoardView.REQUESTED)

        items = await board.refresh()

        assert [d.id for d in items] == ["don-9"]

    @pytest.mark.asyncio
    async def test_requires_session(self, donation_service, anonymous_session):
        board = DonationBoard(donation_service, anonymous_session)
        with pytest.raises(SessionRequiredError):
            await board.refresh()

    @pytest.mark.asyncio
    async def test_items_is_a_copy(self, board):
        await board.refresh()
        board.items.clear()
        assert len(board.items) == 3


class TestChangeStatus:
    @pytest.mark.asyncio
    async def test_withdraw(self, board, donation_service):
        """Should call the backend then update the local list."""
        await board.refresh()
        updated = await board.withdraw("don-1")

        assert updated.status == DonationStatus.INACTIVE
        assert board.get("don-1").status == DonationStatus.INACTIVE
        assert donation_service.status_calls == [("don-1", DonationStatus.INACTIVE)]

    @pytest.mark.asyncio
    async def test_terminal_rejected_without_network(self, board, donation_service):
        """A DONATED donation should be refused locally."""
        await board.refresh()
        with pytest.raises(InvalidTransitionError) as exc_info:
            await board.withdraw("don-3")

        assert exc_info.value.rejection.reason == RejectionReason.TERMINAL_STATE
        assert donation_service.status_calls == []
        assert board.get("don-3").status == DonationStatus.DONATED

    @pytest.mark.asyncio
    async def test_remote_failure_leaves_list_unchanged(self, board, donation_service):
        """A failed set_status should not touch the local list."""
        await board.refresh()
        donation_service.fail_set_status = StaleDonationStatusError("don-1")
        before = board.items

        with pytest.raises(StaleDonationStatusError):
            await board.withdraw("don-1")

        assert board.items == before
        assert board.get("don-1").status == DonationStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_confirm_pickup(self, board):
        await board.refresh()
        updated = await board.confirm_pickup("don-2")
        assert updated.status == DonationStatus.DONATED

    @pytest.mark.asyncio
    async def test_mark_requested(self, board):
        await board.refresh()
        updated = await board.mark_requested("don-1")
        assert updated.status == DonationStatus.REQUESTED

    @pytest.mark.asyncio
    async def test_donor_must_own_donation(self, donation_service, session):
        """A donor cannot withdraw someone else's listing."""
        donation_service.requested_by["person-1"] = ["don-9"]
        board = DonationBoard(donation_service, session, view=BoardView.REQUESTED)
        await board.refresh()

        with pytest.raises(InvalidTransitionError) as exc_info:
            await board.withdraw("don-9")

        assert exc_info.value.rejection.reason == RejectionReason.ACTOR_NOT_ALLOWED
        assert donation_service.status_calls == []

    @pytest.mark.asyncio
    async def test_unknown_donation(self, board):
        await board.refresh()
        with pytest.raises(DonationNotFoundError):
            await board.withdraw("missing")


class TestAllowedActions:
    @pytest.mark.asyncio
    async def test_owner(self, board):
        await board.refresh()
        assert board.allowed_actions("don-1", Actor.DONOR) == [DonationStatus.INACTIVE]
        assert board.allowed_actions("don-3", Actor.DONOR) == []

    @pytest.mark.asyncio
    async def test_not_owner(self, donation_service, session):
        donation_service.requested_by["person-1"] = ["don-9"]
        board = DonationBoard(donation_service, session, view=BoardView.REQUESTED)
        await board.refresh()

        assert board.allowed_actions("don-9", Actor.DONOR) == []
        assert board.allowed_actions("don-9", Actor.BENEFICIARY) == [DonationStatus.REQUESTED]
