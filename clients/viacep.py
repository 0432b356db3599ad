"""
ViaCEP postal-code lookup.

https://viacep.com.br/ws/{cep}/json/ answers 200 with {"erro": true} for a
well-formed CEP that does not exist, and 400 for a malformed one.
"""

import logging
from typing import Optional
import httpx

from modules.formatting import strip_non_digits
from modules.validation.exceptions import PostalCodeLookupError
from modules.validation.models import PostalAddress
from shared.http_client import get_lookup_client

logger = logging.getLogger(__name__)


class ViaCepLookup:
    """HTTP implementation of IPostalCodeLookup."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        """
        Args:
            client: HTTP client to use; by default a short-lived client
                is opened per lookup
        """
        self._client = client

    async def resolve(self, postal_code: str) -> Optional[PostalAddress]:
        digits = strip_non_digits(postal_code)
        if self._client is not None:
            return await self._resolve(self._client, digits)
        async with get_lookup_client() as client:
            return await self._resolve(client, digits)

    async def _resolve(self, client: httpx.AsyncClient, digits: str) -> Optional[PostalAddress]:
        try:
            response = await client.get(f"{digits}/json/")
        except httpx.HTTPError as e:
            logger.warning("ViaCEP unreachable for %s: %s", digits, e)
            raise PostalCodeLookupError(digits, str(e)) from e

        if response.status_code == 400:
            return None
        try:
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise PostalCodeLookupError(digits, f"HTTP {response.status_code}") from e
        except ValueError as e:
            raise PostalCodeLookupError(digits, f"Invalid JSON response: {e}") from e

        if not isinstance(data, dict) or data.get("erro"):
            return None

        return PostalAddress(
            postal_code=digits,
            street=data.get("logradouro") or "",
            complement=data.get("complemento") or "",
            neighborhood=data.get("bairro") or "",
            city=data.get("localidade") or "",
            state=data.get("uf") or "",
        )
