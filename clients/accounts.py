"""
Account service client (`usuario/*`).
"""

from typing import Any

from modules.accounts.exceptions import InvalidCredentialsError
from modules.accounts.models import NewAccount
from shared.exceptions import AuthenticationError
from shared.models import SessionRecord

from .base import BackendClient


def parse_login(data: dict[str, Any], email: str) -> SessionRecord:
    """Session record from the `usuario/login` answer, before the person is known."""
    return SessionRecord(
        account_id=str(data["id"]),
        email=data.get("email") or email,
        name=data.get("nome") or "",
    )


class AccountClient(BackendClient):
    """HTTP implementation of IAccountService."""

    service = "usuario"

    async def create_account(self, account: NewAccount) -> str:
        response = await self._send(
            "POST",
            "usuario/save",
            json={"nome": account.name, "email": account.email, "senha": account.password},
        )
        return self._id(self._json(response))

    async def authenticate(self, email: str, password: str) -> SessionRecord:
        try:
            response = await self._send(
                "POST",
                "usuario/login",
                json={"email": email, "senha": password},
            )
        except AuthenticationError as e:
            # Only the login endpoint reads a 401 as wrong email or password
            raise InvalidCredentialsError() from e

        data = self._json(response) or {}
        self._id(data)
        return self._parse(parse_login, data, email)

    async def invalidate_account(self, account_id: str) -> None:
        await self._send("PUT", f"usuario/inativar/{account_id}")
