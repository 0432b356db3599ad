"""
Base class for the Material Share REST API clients.

Translates transport failures, HTTP status codes and malformed records into
the exception hierarchy, so callers never see httpx or pydantic exceptions.
"""

import logging
from typing import Any, Callable, Optional, TypeVar
import httpx
from pydantic import ValidationError as PydanticValidationError

from modules.accounts.exceptions import ServiceUnavailableError
from shared.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from shared.http_client import get_api_client

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BackendClient:
    """
    Shared request plumbing for the backend services.

    Status mapping:
        401 -> AuthenticationError
        404 -> NotFoundError
        409 -> ConflictError
        other 4xx -> ValidationError (request refused)
        5xx, transport errors, bad JSON, malformed records -> ServiceUnavailableError
    """

    service = "backend"

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        """
        Args:
            client: HTTP client to use; defaults to the shared API client
        """
        self._client = client

    @property
    def http(self) -> httpx.AsyncClient:
        return self._client or get_api_client()

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self.http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ServiceUnavailableError(self.service, str(e)) from e

        status = response.status_code
        if not response.is_error:
            return response

        message = _server_message(response)
        details = {"status_code": status, "url": url, "error": message}
        logger.debug("%s %s answered %d: %s", method, url, status, message)

        if status == 401:
            raise AuthenticationError(
                message or f"Not authorized: {url}",
                code="UNAUTHORIZED",
                details=details,
            )
        if status == 404:
            raise NotFoundError(f"Not found: {url}", details=details)
        if status == 409:
            raise ConflictError(message or f"Conflict: {url}", details=details)
        if status < 500:
            raise ValidationError(
                message or f"Request refused: {url}",
                code="REQUEST_REFUSED",
                details=details,
            )
        raise ServiceUnavailableError(self.service, f"HTTP {status}: {message}")

    def _json(self, response: httpx.Response) -> Any:
        """Decode a JSON body. An empty body decodes to None."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ServiceUnavailableError(self.service, f"Invalid JSON response: {e}") from e

    def _id(self, data: Any) -> str:
        """Extract the `id` of a created resource."""
        if not isinstance(data, dict) or data.get("id") in (None, ""):
            raise ServiceUnavailableError(self.service, "Response has no id")
        return str(data["id"])

    def _parse(self, parser: Callable[..., T], data: Any, *args: Any) -> T:
        """Build a model from a backend record; a record that does not fit is a backend fault."""
        try:
            return parser(data, *args)
        except (PydanticValidationError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Malformed %s record: %s", self.service, e)
            raise ServiceUnavailableError(self.service, f"Malformed record: {e}") from e


def _server_message(response: httpx.Response) -> str:
    """The backend puts a human-readable reason in `message` when it has one."""
    try:
        data = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(data, dict):
        return str(data.get("message") or data.get("error") or "")
    return ""
