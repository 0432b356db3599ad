"""
Submission orchestration.

A submission is: validate, then perform the remote call(s), then report.
The orchestrator owns the busy latch and the feedback state; the flows
below plug their validation and remote steps into it.
"""

import inspect
import logging
from typing import Awaitable, Callable, Optional, Union

from modules.accounts.interfaces import IAccountService, IPersonService
from modules.accounts.models import NewAccount, PersonFields
from modules.donations import lifecycle
from modules.donations.exceptions import DonationNotEditableError
from modules.donations.interfaces import ICategoryService, IDonationService
from modules.donations.models import Category, Donation, DonationFields
from modules.validation import DonationForm, SignUpForm, SubmissionValidator, ValidationFailure
from shared.exceptions import MaterialShareError
from shared.session import SessionContext

from .exceptions import AccountCreationError, ProfileIncompleteError
from .models import OutcomeStatus, SubmissionOutcome, SubmissionState

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Não foi possível concluir a operação. Tente novamente."

Listener = Callable[[SubmissionState, Optional[SubmissionOutcome]], None]
ValidateStep = Callable[
    [], Union[Optional[ValidationFailure], Awaitable[Optional[ValidationFailure]]]
]
PerformStep = Callable[[], Awaitable[Optional[str]]]


class SubmissionOrchestrator:
    """
    Runs one submission at a time for a form.

    The latch is taken before validation starts and released on every exit
    path, so a second submit while one is in flight returns BUSY without
    doing any work. The state never stays SUBMITTING after submit returns
    or raises.
    """

    def __init__(self, listener: Optional[Listener] = None):
        self._busy = False
        self._state = SubmissionState.IDLE
        self._outcome: Optional[SubmissionOutcome] = None
        self._listener = listener

    @property
    def is_busy(self) -> bool:
        return self._busy

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def last_outcome(self) -> Optional[SubmissionOutcome]:
        return self._outcome

    def attach(self, listener: Listener) -> None:
        self._listener = listener

    def detach(self) -> None:
        """Stop notifying the listener. Safe to call more than once."""
        self._listener = None

    async def submit(
        self,
        perform: PerformStep,
        validate: Optional[ValidateStep] = None,
        success_message: str = "",
    ) -> SubmissionOutcome:
        """
        Validate, then perform.

        Args:
            perform: Remote step; returns the affected resource ID
            validate: Returns the first failure or None; may be async
            success_message: Message reported on success

        Returns:
            The outcome, also kept as `last_outcome` unless it is BUSY
        """
        if self._busy:
            logger.debug("Submit ignored, another submission is in flight")
            return SubmissionOutcome.busy()

        self._busy = True
        self._outcome = None
        try:
            self._set_state(SubmissionState.SUBMITTING)

            # Validation may call remote services too (CEP lookup, categories)
            try:
                if validate is not None:
                    failure = validate()
                    if inspect.isawaitable(failure):
                        failure = await failure
                    if failure is not None:
                        logger.debug("Submission rejected: %s", failure.code.value)
                        return self._finish(SubmissionOutcome.invalid(failure))

                resource_id = await perform()
            except MaterialShareError as e:
                logger.warning("Submission failed: %s", e.to_dict(), exc_info=True)
                return self._finish(
                    SubmissionOutcome(
                        status=OutcomeStatus.FAILED,
                        message=e.user_message or GENERIC_FAILURE_MESSAGE,
                        error_code=e.code,
                    )
                )

            return self._finish(
                SubmissionOutcome(
                    status=OutcomeStatus.SUCCESS,
                    message=success_message,
                    resource_id=resource_id,
                )
            )
        finally:
            self._busy = False
            if self._state == SubmissionState.SUBMITTING:
                # An unexpected exception is propagating
                self._set_state(SubmissionState.ERROR)

    def reset(self) -> None:
        """Back to IDLE, e.g. when the form is reopened."""
        if self._busy:
            return
        self._outcome = None
        self._set_state(SubmissionState.IDLE)

    def _finish(self, outcome: SubmissionOutcome) -> SubmissionOutcome:
        self._outcome = outcome
        state = SubmissionState.SUCCESS if outcome.ok else SubmissionState.ERROR
        self._set_state(state)
        return outcome

    def _set_state(self, state: SubmissionState) -> None:
        self._state = state
        if self._listener is not None:
            self._listener(state, self._outcome)


class SignUpSubmission:
    """
    Two-phase sign-up: create the account, then the person linked to it.

    If the second phase fails the account ID is kept, and the next submit
    goes straight to creating the person.
    """

    def __init__(
        self,
        validator: SubmissionValidator,
        accounts: IAccountService,
        persons: IPersonService,
        orchestrator: Optional[SubmissionOrchestrator] = None,
    ):
        self._validator = validator
        self._accounts = accounts
        self._persons = persons
        self.orchestrator = orchestrator or SubmissionOrchestrator()
        self._account_id: Optional[str] = None

    @property
    def pending_account_id(self) -> Optional[str]:
        """Account created by a sign-up whose profile step has not succeeded."""
        return self._account_id

    async def submit(self, form: SignUpForm) -> SubmissionOutcome:
        name = form.name.strip()
        return await self.orchestrator.submit(
            lambda: self._perform(form),
            validate=lambda: self._validator.validate_sign_up(form),
            success_message=f"Bem-vindo(a), {name}! Conta criada. Faça o login para continuar.",
        )

    async def _perform(self, form: SignUpForm) -> str:
        fields = PersonFields.from_sign_up(form)

        account_id = self._account_id
        if account_id is None:
            account_id = await self._create_account(form)
        else:
            logger.info("Resuming sign-up for account %s", account_id)

        try:
            person_id = await self._persons.create_person(fields, account_id)
        except MaterialShareError as e:
            raise ProfileIncompleteError(account_id, details={"cause": e.to_dict()}) from e

        self._account_id = None
        logger.info("Signed up account %s with person %s", account_id, person_id)
        return account_id

    async def _create_account(self, form: SignUpForm) -> str:
        account = NewAccount(
            name=form.name.strip(),
            email=form.email.strip(),
            password=form.password,
        )
        try:
            account_id = await self._accounts.create_account(account)
        except MaterialShareError as e:
            raise AccountCreationError(details={"cause": e.to_dict()}) from e

        if not account_id:
            raise AccountCreationError("account creation returned no id")

        self._account_id = account_id
        return account_id


class DonationSubmission:
    """Create and edit donations for the session person."""

    def __init__(
        self,
        validator: SubmissionValidator,
        donations: IDonationService,
        categories: ICategoryService,
        session: SessionContext,
        orchestrator: Optional[SubmissionOrchestrator] = None,
    ):
        self._validator = validator
        self._donations = donations
        self._categories = categories
        self._session = session
        self.orchestrator = orchestrator or SubmissionOrchestrator()
        self._active_categories: Optional[list[Category]] = None

    @property
    def active_categories(self) -> list[Category]:
        return list(self._active_categories or [])

    async def load_categories(self) -> list[Category]:
        """Fetch the categories offered for new donations."""
        categories = await self._categories.list_active_categories()
        self._active_categories = [c for c in categories if c.is_active]
        return self.active_categories

    async def create(self, form: DonationForm) -> SubmissionOutcome:
        """Create a donation owned by the session person, with status ACTIVE."""
        return await self.orchestrator.submit(
            lambda: self._create(form),
            validate=lambda: self._validate_new(form),
            success_message="Doação cadastrada com sucesso!",
        )

    async def update(self, donation: Donation, form: DonationForm) -> SubmissionOutcome:
        """Edit a donation that is still ACTIVE."""
        return await self.orchestrator.submit(
            lambda: self._update(donation, form),
            validate=lambda: self._validator.validate_donation(form),
            success_message="Doação atualizada com sucesso!",
        )

    async def _validate_new(self, form: DonationForm) -> Optional[ValidationFailure]:
        if self._active_categories is None:
            await self.load_categories()
        active_ids = {c.id for c in self._active_categories}
        return self._validator.validate_donation(form, active_category_ids=active_ids)

    async def _create(self, form: DonationForm) -> str:
        owner_id = self._session.require_person_id()
        fields = DonationFields.from_form(form, owner_id=owner_id)
        donation_id = await self._donations.create_donation(fields)
        logger.info("Created donation %s for %s", donation_id, owner_id)
        return donation_id

    async def _update(self, donation: Donation, form: DonationForm) -> str:
        self._session.require_person_id()
        if not lifecycle.can_edit(donation.status):
            raise DonationNotEditableError(donation.id, donation.status.value)

        fields = DonationFields.from_form(form, owner_id=donation.owner_id)
        await self._donations.update_donation(donation.id, fields)
        logger.info("Updated donation %s", donation.id)
        return donation.id
