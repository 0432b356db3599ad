"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory fakes for the remote service interfaces and a logged-in session.
"""

from typing import Optional

import pytest

from modules.accounts.models import NewAccount, Person, PersonFields, ProfileChanges
from modules.donations.models import Category, Donation, DonationFields, DonationStatus
from modules.validation.exceptions import PostalCodeLookupError
from modules.validation.models import PostalAddress
from shared.config import get_settings
from shared.http_client import reset_client_cache
from shared.models import SessionRecord, UserType
from shared.session import InMemorySessionStore, SessionContext

VALID_CPF = "111.444.777-35"
VALID_CNPJ = "11.222.333/0001-81"
KNOWN_CEP = "01001000"


class FakePostalCodeLookup:
    """IPostalCodeLookup that knows a fixed set of CEPs."""

    def __init__(self, known: Optional[set[str]] = None, unreachable: bool = False):
        self.known = known if known is not None else {KNOWN_CEP}
        self.unreachable = unreachable
        self.calls: list[str] = []

    async def resolve(self, postal_code: str) -> Optional[PostalAddress]:
        self.calls.append(postal_code)
        if self.unreachable:
            raise PostalCodeLookupError(postal_code, "connection refused")
        if postal_code in self.known:
            return PostalAddress(postal_code=postal_code, city="São Paulo", state="SP")
        return None


class FakeAccountService:
    """IAccountService keeping accounts in memory."""

    def __init__(self):
        self.created: list[NewAccount] = []
        self.invalidated: list[str] = []
        self.fail_create: Optional[Exception] = None
        self.fail_authenticate: Optional[Exception] = None
        self.fail_invalidate: Optional[Exception] = None

    async def create_account(self, account: NewAccount) -> str:
        if self.fail_create:
            raise self.fail_create
        self.created.append(account)
        return f"acc-{len(self.created)}"

    async def authenticate(self, email: str, password: str) -> SessionRecord:
        if self.fail_authenticate:
            raise self.fail_authenticate
        return SessionRecord(account_id="acc-1", email=email, name="Maria")

    async def invalidate_account(self, account_id: str) -> None:
        if self.fail_invalidate:
            raise self.fail_invalidate
        self.invalidated.append(account_id)


class FakePersonService:
    """IPersonService keeping persons in memory."""

    def __init__(self):
        self.persons: dict[str, Person] = {}
        self.created: list[tuple[PersonFields, str]] = []
        self.updates: list[tuple[str, ProfileChanges]] = []
        self.fail_create: Optional[Exception] = None

    def add(self, person: Person) -> Person:
        self.persons[person.id] = person
        return person

    async def create_person(self, fields: PersonFields, account_id: str) -> str:
        if self.fail_create:
            raise self.fail_create
        self.created.append((fields, account_id))
        person_id = f"person-{len(self.created)}"
        self.persons[person_id] = Person(
            id=person_id,
            account_id=account_id,
            name=fields.name,
            document=fields.document,
            user_type=fields.user_type,
        )
        return person_id

    async def update_person(self, person_id: str, changes: ProfileChanges) -> None:
        self.updates.append((person_id, changes))

    async def find_person(self, person_id: str) -> Optional[Person]:
        return self.persons.get(person_id)

    async def find_person_by_account(self, account_id: str) -> Optional[Person]:
        for person in self.persons.values():
            if person.account_id == account_id:
                return person
        return None


class FakeDonationService:
    """IDonationService keeping donations in memory and recording calls."""

    def __init__(self, donations: Optional[list[Donation]] = None):
        self.donations: dict[str, Donation] = {d.id: d for d in donations or []}
        self.requested_by: dict[str, list[str]] = {}
        self.created: list[DonationFields] = []
        self.updated: list[tuple[str, DonationFields]] = []
        self.status_calls: list[tuple[str, DonationStatus]] = []
        self.fail_set_status: Optional[Exception] = None

    def add(self, donation: Donation) -> Donation:
        self.donations[donation.id] = donation
        return donation

    async def create_donation(self, fields: DonationFields) -> str:
        self.created.append(fields)
        donation_id = f"don-{len(self.created)}"
        self.donations[donation_id] = Donation(
            id=donation_id,
            **fields.model_dump(exclude={"status"}),
            status=fields.status,
        )
        return donation_id

    async def update_donation(self, donation_id: str, fields: DonationFields) -> None:
        self.updated.append((donation_id, fields))

    async def set_status(self, donation_id: str, status: DonationStatus) -> None:
        self.status_calls.append((donation_id, status))
        if self.fail_set_status:
            raise self.fail_set_status
        self.donations[donation_id] = self.donations[donation_id].model_copy(
            update={"status": status}
        )

    async def find_donation(self, donation_id: str) -> Optional[Donation]:
        return self.donations.get(donation_id)

    async def list_by_owner(self, person_id: str) -> list[Donation]:
        return [d for d in self.donations.values() if d.owner_id == person_id]

    async def list_requested_by_beneficiary(self, person_id: str) -> list[Donation]:
        ids = self.requested_by.get(person_id, [])
        return [self.donations[i] for i in ids]


class FakeCategoryService:
    """ICategoryService returning a fixed catalogue."""

    def __init__(self, categories: Optional[list[Category]] = None):
        self.categories = categories if categories is not None else [
            Category(id="1", name="Tijolos"),
            Category(id="2", name="Cimento"),
        ]
        self.calls = 0

    async def list_active_categories(self) -> list[Category]:
        self.calls += 1
        return list(self.categories)


def make_donation(
    donation_id: str = "don-1",
    owner_id: str = "person-1",
    status: DonationStatus = DonationStatus.ACTIVE,
    **overrides,
) -> Donation:
    data = {
        "id": donation_id,
        "name": "Tijolos",
        "description": "Sobra de obra",
        "quantity": 100,
        "category_id": "1",
        "postal_code": KNOWN_CEP,
        "house_number": "42",
        "owner_id": owner_id,
        "status": status,
    }
    data.update(overrides)
    return Donation(**data)


@pytest.fixture(autouse=True)
def reset_caches():
    """Reset cached settings and HTTP clients before and after each test."""
    get_settings.cache_clear()
    reset_client_cache()
    yield
    get_settings.cache_clear()
    reset_client_cache()


@pytest.fixture
def session_record() -> SessionRecord:
    return SessionRecord(
        account_id="acc-1",
        email="maria@example.com",
        name="Maria",
        person_id="person-1",
        user_type=UserType.DONOR,
    )


@pytest.fixture
def session(session_record: SessionRecord) -> SessionContext:
    """A logged-in session for person-1."""
    return SessionContext(InMemorySessionStore(session_record))


@pytest.fixture
def anonymous_session() -> SessionContext:
    return SessionContext(InMemorySessionStore())


@pytest.fixture
def postal_lookup() -> FakePostalCodeLookup:
    return FakePostalCodeLookup()


@pytest.fixture
def account_service() -> FakeAccountService:
    return FakeAccountService()


@pytest.fixture
def person_service() -> FakePersonService:
    return FakePersonService()


@pytest.fixture
def category_service() -> FakeCategoryService:
    return FakeCategoryService()
