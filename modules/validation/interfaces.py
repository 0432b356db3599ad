"""
Validation module interface.

The postal-code lookup is the only remote dependency of the validator.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import PostalAddress


@runtime_checkable
class IPostalCodeLookup(Protocol):
    """Resolves a CEP to an address."""

    async def resolve(self, postal_code: str) -> Optional[PostalAddress]:
        """
        Resolve a postal code.

        Args:
            postal_code: 8-digit CEP (non-digits are ignored)

        Returns:
            PostalAddress if the CEP exists, None if it was not found

        Raises:
            PostalCodeLookupError: If the lookup service could not be reached
        """
        ...
