"""
Tests for donation create and edit submissions.
"""

import asyncio
import pytest

from modules.accounts import ServiceUnavailableError
from modules.donations import Category, CategoryStatus, DonationStatus
from modules.submission import GENERIC_FAILURE_MESSAGE, DonationSubmission, OutcomeStatus
from modules.validation import DonationForm, FailureCode, SubmissionValidator
from tests.conftest import FakeDonationService, make_donation


@pytest.fixture
def donation_service() -> FakeDonationService:
    return FakeDonationService()


@pytest.fixture
def form() -> DonationForm:
    return DonationForm(
        name=" Tijolos ",
        description="Sobra de obra",
        quantity="100",
        category_id="1",
        postal_code="01001-000",
        house_number="42",
    )


@pytest.fixture
def submission(postal_lookup, donation_service, category_service, session) -> DonationSubmission:
    return DonationSubmission(
        SubmissionValidator(postal_lookup),
        donation_service,
        category_service,
        session,
    )


class TestCreate:
    @pytest.mark.asyncio
    async def test_creates_active_donation_for_session_person(self, submission, form, donation_service):
        outcome = await submission.create(form)

        assert outcome.ok is True
        assert outcome.message == "Doação cadastrada com sucesso!"
        fields = donation_service.created[0]
        assert fields.owner_id == "person-1"
        assert fields.status == DonationStatus.ACTIVE
        assert fields.name == "Tijolos"
        assert fields.quantity == 100
        assert fields.postal_code == "01001000"

    @pytest.mark.asyncio
    async def test_two_rapid_submits_create_once(self, submission, form, donation_service):
        """The second submit is refused while the first is in flight."""
        release = asyncio.Event()
        create = donation_service.create_donation

        async def slow_create(fields):
            await release.wait()
            return await create(fields)

        donation_service.create_donation = slow_create

        first = asyncio.create_task(submission.create(form))
        await asyncio.sleep(0)
        second = await submission.create(form)
        release.set()
        await first

        assert second.status == OutcomeStatus.BUSY
        assert len(donation_service.created) == 1

    @pytest.mark.asyncio
    async def test_loads_categories_once(self, submission, form, category_service):
        await submission.create(form)
        await submission.create(form)
        assert category_service.calls == 1

    @pytest.mark.asyncio
    async def test_inactive_category_rejected(self, submission, form, donation_service):
        outcome = await submission.create(form.model_copy(update={"category_id": "99"}))

        assert outcome.status == OutcomeStatus.INVALID
        assert outcome.failure.code == FailureCode.CATEGORY_INACTIVE
        assert donation_service.created == []

    @pytest.mark.asyncio
    async def test_category_fetch_failure_reported(self, submission, form, category_service,
                                                  donation_service):
        """An unreachable category service should end in a FAILED outcome."""

        async def unreachable():
            raise ServiceUnavailableError("categoria", "connection refused")

        category_service.list_active_categories = unreachable

        outcome = await submission.create(form)

        assert outcome.status == OutcomeStatus.FAILED
        assert outcome.message == GENERIC_FAILURE_MESSAGE
        assert outcome.error_code == "SERVICE_UNAVAILABLE"
        assert submission.orchestrator.is_busy is False
        assert donation_service.created == []

    @pytest.mark.asyncio
    async def test_load_categories_drops_inactive(self, submission, category_service):
        category_service.categories.append(
            Category(id="3", name="Telhas", status=CategoryStatus.INACTIVE)
        )
        categories = await submission.load_categories()
        assert [c.id for c in categories] == ["1", "2"]

    @pytest.mark.asyncio
    async def test_requires_session(self, postal_lookup, donation_service, category_service,
                                    anonymous_session, form):
        submission = DonationSubmission(
            SubmissionValidator(postal_lookup),
            donation_service,
            category_service,
            anonymous_session,
        )

        outcome = await submission.create(form)

        assert outcome.status == OutcomeStatus.FAILED
        assert outcome.message == "Sessão inválida. Faça login novamente."
        assert donation_service.created == []


class TestUpdate:
    @pytest.mark.asyncio
    async def test_updates_active_donation(self, submission, form, donation_service):
        donation = make_donation("don-1")

        outcome = await submission.update(donation, form)

        assert outcome.ok is True
        assert outcome.resource_id == "don-1"
        donation_id, fields = donation_service.updated[0]
        assert donation_id == "don-1"
        assert fields.status == DonationStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_claimed_donation_not_editable(self, submission, form, donation_service):
        donation = make_donation("don-1", status=DonationStatus.REQUESTED)

        outcome = await submission.update(donation, form)

        assert outcome.status == OutcomeStatus.FAILED
        assert outcome.error_code == "DONATION_NOT_EDITABLE"
        assert donation_service.updated == []

    @pytest.mark.asyncio
    async def test_does_not_check_category_status(self, submission, form, category_service):
        """Editing keeps whatever category the donation was filed under."""
        donation = make_donation("don-1", category_id="99")

        outcome = await submission.update(donation, form.model_copy(update={"category_id": "99"}))

        assert outcome.ok is True
        assert category_service.calls == 0
