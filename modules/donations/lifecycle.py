"""
Donation lifecycle state machine.

    ACTIVE ──request──> REQUESTED ──confirm──> DONATED
       │                    │
       └──────withdraw──────┴──────────────> INACTIVE

DONATED and INACTIVE are terminal. Transition functions never mutate a
donation; they return a TransitionResult the caller applies after the
backend confirms the change.
"""

from .models import (
    Actor,
    DonationStatus,
    RejectionReason,
    TransitionAccepted,
    TransitionRejected,
    TransitionResult,
)

# (source, target) -> actors allowed to request it
TRANSITIONS: dict[tuple[DonationStatus, DonationStatus], frozenset[Actor]] = {
    (DonationStatus.ACTIVE, DonationStatus.REQUESTED): frozenset(
        {Actor.BENEFICIARY, Actor.SYSTEM}
    ),
    (DonationStatus.REQUESTED, DonationStatus.DONATED): frozenset({Actor.BENEFICIARY}),
    (DonationStatus.ACTIVE, DonationStatus.INACTIVE): frozenset({Actor.DONOR}),
    (DonationStatus.REQUESTED, DonationStatus.INACTIVE): frozenset({Actor.DONOR}),
}


def transition(
    current: DonationStatus,
    target: DonationStatus,
    actor: Actor,
) -> TransitionResult:
    """
    Check a requested status change.

    Args:
        current: Status the donation is in now
        target: Status being requested
        actor: Who is requesting it

    Returns:
        TransitionAccepted if the edge exists and the actor may use it,
        TransitionRejected otherwise
    """
    if current.is_terminal:
        return TransitionRejected(
            current=current,
            target=target,
            reason=RejectionReason.TERMINAL_STATE,
            message=f"Doação já finalizada ({current.value}).",
        )

    actors = TRANSITIONS.get((current, target))
    if actors is None:
        return TransitionRejected(
            current=current,
            target=target,
            reason=RejectionReason.ILLEGAL_TRANSITION,
            message=f"Transição de {current.value} para {target.value} não é permitida.",
        )

    if actor not in actors:
        return TransitionRejected(
            current=current,
            target=target,
            reason=RejectionReason.ACTOR_NOT_ALLOWED,
            message="Você não tem permissão para esta ação.",
        )

    return TransitionAccepted(previous=current, status=target)


def request(current: DonationStatus, actor: Actor = Actor.BENEFICIARY) -> TransitionResult:
    """ACTIVE -> REQUESTED."""
    return transition(current, DonationStatus.REQUESTED, actor)


def confirm_donation(current: DonationStatus) -> TransitionResult:
    """REQUESTED -> DONATED, by the beneficiary confirming pickup."""
    return transition(current, DonationStatus.DONATED, Actor.BENEFICIARY)


def withdraw(current: DonationStatus) -> TransitionResult:
    """ACTIVE | REQUESTED -> INACTIVE, by the donor."""
    return transition(current, DonationStatus.INACTIVE, Actor.DONOR)


def allowed_actions(current: DonationStatus, actor: Actor) -> list[DonationStatus]:
    """Targets the given actor may request from `current`, in enum order."""
    return [
        target
        for target in DonationStatus
        if actor in TRANSITIONS.get((current, target), frozenset())
    ]


def can_edit(current: DonationStatus) -> bool:
    """A donor may edit the listing only while nobody has claimed it."""
    return current == DonationStatus.ACTIVE
