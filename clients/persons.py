"""
Person service client (`pessoa/*`).

Maps between Person models and the backend's Portuguese field names.
"""

from typing import Any, Optional

from modules.accounts.models import Person, PersonFields, ProfileChanges
from shared.exceptions import NotFoundError

from .base import BackendClient


def person_payload(fields: PersonFields, account_id: str) -> dict[str, Any]:
    """Body for `pessoa/save`. Optional fields are omitted when blank."""
    payload: dict[str, Any] = {
        "nome": fields.name,
        "cpf_cnpj": fields.document,
        "tipo": fields.user_type.value,
        "usuario": {"id": account_id},
    }
    if fields.birth_date:
        payload["dataNascimento"] = fields.birth_date.isoformat()
    if fields.phone:
        payload["celular"] = fields.phone
    if fields.postal_code:
        payload["cep"] = fields.postal_code
    return payload


def changes_payload(changes: ProfileChanges) -> dict[str, Any]:
    """Body for `pessoa/editar`, only the fields that changed."""
    names = {
        "name": "nome",
        "birth_date": "dataNascimento",
        "phone": "celular",
        "postal_code": "cep",
    }
    data = changes.model_dump(mode="json", exclude_none=True)
    return {names[key]: value for key, value in data.items()}


def parse_person(data: dict[str, Any], account_id: Optional[str] = None) -> Person:
    account = data.get("usuario") or {}
    return Person(
        id=data["id"],
        account_id=account.get("id") or account_id or "",
        name=data.get("nome") or "",
        document=data.get("cpf_cnpj") or "",
        user_type=data.get("tipo"),
        birth_date=data.get("dataNascimento"),
        phone=data.get("celular"),
        postal_code=data.get("cep"),
    )


class PersonClient(BackendClient):
    """HTTP implementation of IPersonService."""

    service = "pessoa"

    async def create_person(self, fields: PersonFields, account_id: str) -> str:
        response = await self._send(
            "POST", "pessoa/save", json=person_payload(fields, account_id)
        )
        return self._id(self._json(response))

    async def update_person(self, person_id: str, changes: ProfileChanges) -> None:
        await self._send("PUT", f"pessoa/editar/{person_id}", json=changes_payload(changes))

    async def find_person(self, person_id: str) -> Optional[Person]:
        return await self._find(f"pessoa/findById/{person_id}")

    async def find_person_by_account(self, account_id: str) -> Optional[Person]:
        return await self._find(f"pessoa/findByUsuarioId/{account_id}", account_id)

    async def _find(self, url: str, account_id: Optional[str] = None) -> Optional[Person]:
        try:
            response = await self._send("GET", url)
        except NotFoundError:
            return None
        data = self._json(response)
        if not data:
            return None
        return self._parse(parse_person, data, account_id)
