"""
Donation board: the local list a screen renders, kept in step with the backend.

The list is replaced on refresh and patched only after the backend
confirms a status change. A change refused locally or remotely leaves it
untouched.
"""

import logging
from enum import Enum

from shared.session import SessionContext

from . import lifecycle
from .exceptions import DonationNotFoundError, InvalidTransitionError
from .interfaces import IDonationService
from .models import (
    Actor,
    Donation,
    DonationStatus,
    RejectionReason,
    TransitionRejected,
)

logger = logging.getLogger(__name__)


class BoardView(str, Enum):
    """Which donations the board lists for the session person."""

    OWNED = "owned"          # Listed by me as donor
    REQUESTED = "requested"  # Requested by me as beneficiary


class DonationBoard:
    """
    Local donation list for the current session person.

    Uses the explicitly passed SessionContext to know whose list to load
    and who is acting.
    """

    def __init__(
        self,
        donations: IDonationService,
        session: SessionContext,
        view: BoardView = BoardView.OWNED,
    ):
        self._service = donations
        self._session = session
        self._view = view
        self._items: list[Donation] = []

    @property
    def view(self) -> BoardView:
        return self._view

    @property
    def items(self) -> list[Donation]:
        """A copy of the current list."""
        return list(self._items)

    async def refresh(self) -> list[Donation]:
        """
        Reload the list from the backend (called when the screen regains focus).

        Raises:
            SessionRequiredError: If nobody is logged in
        """
        person_id = self._session.require_person_id()

        if self._view == BoardView.OWNED:
            items = await self._service.list_by_owner(person_id)
        else:
            items = await self._service.list_requested_by_beneficiary(person_id)

        self._items = list(items)
        logger.debug("Loaded %d donations (%s) for %s", len(items), self._view.value, person_id)
        return self.items

    def get(self, donation_id: str) -> Donation:
        """
        Get a donation from the local list.

        Raises:
            DonationNotFoundError: If it is not on the board
        """
        for donation in self._items:
            if donation.id == donation_id:
                return donation
        raise DonationNotFoundError(donation_id)

    def allowed_actions(self, donation_id: str, actor: Actor) -> list[DonationStatus]:
        """Status changes the UI may offer for a donation."""
        donation = self.get(donation_id)
        if actor == Actor.DONOR and not self._is_owner(donation):
            return []
        return lifecycle.allowed_actions(donation.status, actor)

    async def change_status(
        self,
        donation_id: str,
        target: DonationStatus,
        actor: Actor,
    ) -> Donation:
        """
        Move a donation to `target` and reflect it locally.

        The legality check runs first and an illegal request never reaches
        the network. The local list is updated only after the backend
        accepts the change.

        Raises:
            DonationNotFoundError: If the donation is not on the board
            InvalidTransitionError: If the change is illegal (local guard)
            StaleDonationStatusError: If the backend reports a conflict
        """
        donation = self.get(donation_id)

        if actor == Actor.DONOR and not self._is_owner(donation):
            raise InvalidTransitionError(
                donation_id,
                TransitionRejected(
                    current=donation.status,
                    target=target,
                    reason=RejectionReason.ACTOR_NOT_ALLOWED,
                    message="Apenas o doador pode alterar esta doação.",
                ),
            )

        result = lifecycle.transition(donation.status, target, actor)
        if not result.ok:
            logger.info(
                "Refused %s -> %s for donation %s: %s",
                donation.status.value,
                target.value,
                donation_id,
                result.reason.value,
            )
            raise InvalidTransitionError(donation_id, result)

        await self._service.set_status(donation_id, result.status)

        updated = donation.model_copy(update={"status": result.status})
        self._replace(updated)
        logger.info(
            "Donation %s moved %s -> %s",
            donation_id,
            result.previous.value,
            result.status.value,
        )
        return updated

    async def withdraw(self, donation_id: str) -> Donation:
        """Donor removes the listing (ACTIVE | REQUESTED -> INACTIVE)."""
        return await self.change_status(donation_id, DonationStatus.INACTIVE, Actor.DONOR)

    async def confirm_pickup(self, donation_id: str) -> Donation:
        """Beneficiary confirms the handoff (REQUESTED -> DONATED)."""
        return await self.change_status(donation_id, DonationStatus.DONATED, Actor.BENEFICIARY)

    async def mark_requested(
        self,
        donation_id: str,
        actor: Actor = Actor.SYSTEM,
    ) -> Donation:
        """Record a beneficiary's interest (ACTIVE -> REQUESTED)."""
        return await self.change_status(donation_id, DonationStatus.REQUESTED, actor)

    def _is_owner(self, donation: Donation) -> bool:
        record = self._session.current
        return record is not None and record.person_id == donation.owner_id

    def _replace(self, updated: Donation) -> None:
        self._items = [updated if d.id == updated.id else d for d in self._items]
