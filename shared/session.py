"""
Local session cache.

The session is the one piece of state shared across screens. It is held by
an explicit SessionContext that callers pass to the flows that need it,
backed by a store that survives restarts.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol, Union, runtime_checkable

from pydantic import ValidationError as PydanticValidationError

from .exceptions import AuthenticationError
from .models import SessionRecord

logger = logging.getLogger(__name__)


class SessionRequiredError(AuthenticationError):
    """Raised when an operation needs a logged-in session and there is none."""

    def __init__(self, message: str = "Sessão inválida. Faça login novamente."):
        super().__init__(message, code="SESSION_REQUIRED")
        self.user_message = message


@runtime_checkable
class ISessionStore(Protocol):
    """Persistence contract for the current session record."""

    def get(self) -> Optional[SessionRecord]:
        """Return the stored session, or None if logged out."""
        ...

    def set(self, record: SessionRecord) -> None:
        """Replace the stored session."""
        ...

    def clear(self) -> None:
        """Remove the stored session."""
        ...


class InMemorySessionStore:
    """Session store kept in memory. For testing and ephemeral use."""

    def __init__(self, record: Optional[SessionRecord] = None):
        self._record = record

    def get(self) -> Optional[SessionRecord]:
        return self._record

    def set(self, record: SessionRecord) -> None:
        self._record = record

    def clear(self) -> None:
        self._record = None


class FileSessionStore:
    """
    Session store backed by a JSON file.

    Writes go to a temporary file in the same directory and are moved into
    place with os.replace, so a concurrent reader sees either the old record
    or the new one.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> Optional[SessionRecord]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

        try:
            return SessionRecord.model_validate_json(raw)
        except PydanticValidationError:
            logger.warning("Discarding unreadable session file at %s", self._path)
            return None

    def set(self, record: SessionRecord) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent,
            prefix=".session-",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(record.model_dump_json())
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)


class SessionContext:
    """
    Explicit handle on the current session.

    Read at screen-focus time; written only by the account flows
    (login, logout, profile edit, deactivation).
    """

    def __init__(self, store: Optional[ISessionStore] = None):
        self._store = store or InMemorySessionStore()

    @property
    def current(self) -> Optional[SessionRecord]:
        """The stored session record, or None when logged out."""
        return self._store.get()

    @property
    def is_authenticated(self) -> bool:
        return self.current is not None

    def require(self) -> SessionRecord:
        """
        Return the current session or fail.

        Raises:
            SessionRequiredError: If nobody is logged in
        """
        record = self.current
        if record is None:
            raise SessionRequiredError()
        return record

    def require_person_id(self) -> str:
        """
        Return the person ID of the current session.

        Raises:
            SessionRequiredError: If nobody is logged in or the account
                has no profile yet
        """
        record = self.require()
        if record.person_id is None:
            raise SessionRequiredError("Perfil não encontrado. Faça login novamente.")
        return record.person_id

    def start(self, record: SessionRecord) -> None:
        logger.info("Session started for account %s", record.account_id)
        self._store.set(record)

    def end(self) -> None:
        logger.info("Session ended")
        self._store.clear()
