"""
HTTP clients for the Material Share backend and the ViaCEP lookup.

Each client implements one of the module interfaces:
- AccountClient: IAccountService
- PersonClient: IPersonService
- DonationClient: IDonationService
- CategoryClient: ICategoryService
- ViaCepLookup: IPostalCodeLookup
"""

from .base import BackendClient
from .accounts import AccountClient
from .persons import PersonClient
from .donations import DonationClient
from .categories import CategoryClient
from .viacep import ViaCepLookup

__all__ = [
    "BackendClient",
    "AccountClient",
    "PersonClient",
    "DonationClient",
    "CategoryClient",
    "ViaCepLookup",
]
