"""
HTTP client factory for the Material Share backend.

Provides a cached httpx.AsyncClient bound to the configured API base URL,
plus a separate client for the public postal-code lookup.
"""

from typing import Optional
import httpx

from .config import get_settings

# Module-level client cache
_api_client: Optional[httpx.AsyncClient] = None


def get_api_client() -> httpx.AsyncClient:
    """
    Get the HTTP client for the Material Share REST API.

    Returns:
        httpx.AsyncClient configured with the API base URL and timeout
    """
    global _api_client

    if _api_client is None:
        settings = get_settings()
        if not settings.api_base_url:
            raise RuntimeError(
                "API configuration missing. "
                "Set the MATERIALSHARE_API_BASE_URL environment variable."
            )
        _api_client = httpx.AsyncClient(
            base_url=settings.api_base_url,
            timeout=settings.http_timeout,
            headers={"Accept": "application/json"},
        )

    return _api_client


def get_lookup_client() -> httpx.AsyncClient:
    """
    Get a client for the postal-code lookup service.

    The lookup is a public third-party API, so it gets its own client
    without the backend base URL.
    """
    settings = get_settings()
    return httpx.AsyncClient(
        base_url=settings.postal_code_lookup_url,
        timeout=settings.http_timeout,
    )


async def close_api_client() -> None:
    """Close and forget the cached API client."""
    global _api_client
    if _api_client is not None:
        await _api_client.aclose()
    _api_client = None


def reset_client_cache() -> None:
    """
    Reset the cached API client without closing it.

    Useful for testing or when configuration changes.
    """
    global _api_client
    _api_client = None
