"""
Category service client (`categoria/*`).
"""

from typing import Any

from modules.donations.models import Category

from .base import BackendClient


def parse_category(data: dict[str, Any]) -> Category:
    return Category(id=data["id"], name=data.get("nome") or "", status=data["statusCategoria"])


class CategoryClient(BackendClient):
    """HTTP implementation of ICategoryService."""

    service = "categoria"

    async def list_active_categories(self) -> list[Category]:
        response = await self._send("GET", "categoria/findAll")
        categories = [self._parse(parse_category, item) for item in self._json(response) or []]
        return [c for c in categories if c.is_active]
