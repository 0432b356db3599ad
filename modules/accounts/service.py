"""
Account flows for the current device.

These are the only writers of the session: login starts it, profile edits
rewrite it, logout and deactivation end it.
"""

import logging

from modules.validation import LoginForm
from modules.validation.rules import check_credentials_present
from shared.exceptions import ValidationError
from shared.models import SessionRecord
from shared.session import SessionContext

from .exceptions import PersonNotFoundError
from .interfaces import IAccountService, IPersonService
from .models import Person, ProfileChanges

logger = logging.getLogger(__name__)


class AccountSession:
    """
    Login, logout, profile edit and deactivation over an explicit session.
    """

    def __init__(
        self,
        accounts: IAccountService,
        persons: IPersonService,
        session: SessionContext,
    ):
        self._accounts = accounts
        self._persons = persons
        self._session = session

    @property
    def session(self) -> SessionContext:
        return self._session

    async def login(self, email: str, password: str) -> SessionRecord:
        """
        Authenticate and start a session.

        Raises:
            ValidationError: If a field is missing (no network call is made)
            InvalidCredentialsError: If the backend refuses the credentials
            ServiceUnavailableError: If the backend cannot be reached
            PersonNotFoundError: If the account has no profile
        """
        form = LoginForm(email=email.strip(), password=password)
        failure = check_credentials_present(form.email, form.password)
        if failure:
            raise ValidationError(
                failure.message,
                code=failure.code.value,
                details={"field": failure.field},
            )

        account = await self._accounts.authenticate(form.email, form.password)
        person = await self._persons.find_person_by_account(account.account_id)
        if person is None:
            raise PersonNotFoundError(account.account_id)

        record = _session_record(account, person)
        self._session.start(record)
        logger.info("Logged in account %s as person %s", record.account_id, person.id)
        return record

    def logout(self) -> None:
        self._session.end()

    async def update_profile(self, changes: ProfileChanges) -> SessionRecord:
        """
        Send profile changes and refresh the cached session.

        Raises:
            SessionRequiredError: If nobody is logged in
        """
        current = self._session.require()
        person_id = self._session.require_person_id()

        await self._persons.update_person(person_id, changes)

        record = current
        if changes.name:
            record = current.model_copy(update={"name": changes.name.strip()})
        self._session.start(record)
        return record

    async def deactivate(self) -> None:
        """
        Invalidate the logged-in account and end the session.

        The session is kept if the backend call fails, so the user can
        retry.
        """
        current = self._session.require()
        await self._accounts.invalidate_account(current.account_id)
        logger.info("Account %s deactivated", current.account_id)
        self._session.end()


def _session_record(account: SessionRecord, person: Person) -> SessionRecord:
    return SessionRecord(
        account_id=account.account_id,
        email=account.email,
        name=person.name or account.name,
        person_id=person.id,
        user_type=person.user_type,
    )
