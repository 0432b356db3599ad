"""
Donation service client (`doacao/*`).

Writes go out as multipart form fields, which is what the backend's
donation endpoints accept.
"""

from typing import Any, Optional

from modules.donations.exceptions import DonationNotFoundError, StaleDonationStatusError
from modules.donations.models import Donation, DonationFields, DonationStatus
from shared.exceptions import ConflictError, NotFoundError

from .base import BackendClient


def donation_form_fields(fields: DonationFields) -> dict[str, tuple[None, str]]:
    """Multipart body for `doacao/save` and `doacao/editar`."""
    values = {
        "nome": fields.name,
        "descricao": fields.description,
        "quantidade": str(fields.quantity),
        "cep": fields.postal_code,
        "numeroResidencia": fields.house_number,
        "complemento": fields.complement,
        "statusDoacao": fields.status.value,
        "categoria.id": fields.category_id,
        "doador.id": fields.owner_id,
    }
    # (None, value) makes httpx send a plain form field, not a file
    return {name: (None, value) for name, value in values.items()}


def parse_donation(data: dict[str, Any]) -> Donation:
    category = data.get("categoria") or {}
    owner = data.get("doador") or {}
    return Donation(
        id=data["id"],
        name=data.get("nome") or "",
        description=data.get("descricao") or "",
        quantity=data.get("quantidade"),
        category_id=category.get("id") or "",
        category_name=category.get("nome"),
        postal_code=data.get("cep") or "",
        house_number=data.get("numeroResidencia") or "",
        complement=data.get("complemento"),
        owner_id=owner.get("id") or "",
        status=data.get("statusDoacao") or DonationStatus.ACTIVE,
    )


class DonationClient(BackendClient):
    """HTTP implementation of IDonationService."""

    service = "doacao"

    async def create_donation(self, fields: DonationFields) -> str:
        response = await self._send("POST", "doacao/save", files=donation_form_fields(fields))
        return self._id(self._json(response))

    async def update_donation(self, donation_id: str, fields: DonationFields) -> None:
        try:
            await self._send(
                "PUT", f"doacao/editar/{donation_id}", files=donation_form_fields(fields)
            )
        except NotFoundError as e:
            raise DonationNotFoundError(donation_id) from e

    async def set_status(self, donation_id: str, status: DonationStatus) -> None:
        try:
            await self._send("PUT", f"doacao/inativar/{donation_id}/{status.value}")
        except NotFoundError as e:
            raise DonationNotFoundError(donation_id) from e
        except ConflictError as e:
            raise StaleDonationStatusError(donation_id, e.message) from e

    async def find_donation(self, donation_id: str) -> Optional[Donation]:
        try:
            response = await self._send("GET", f"doacao/findById/{donation_id}")
        except NotFoundError:
            return None
        data = self._json(response)
        return self._parse(parse_donation, data) if data else None

    async def list_by_owner(self, person_id: str) -> list[Donation]:
        return await self._list(f"doacao/findByDoador/{person_id}")

    async def list_requested_by_beneficiary(self, person_id: str) -> list[Donation]:
        return await self._list(f"doacao/findSolicitadasByBeneficiario/{person_id}")

    async def _list(self, url: str) -> list[Donation]:
        try:
            response = await self._send("GET", url)
        except NotFoundError:
            return []
        return [self._parse(parse_donation, item) for item in self._json(response) or []]
