"""
Submission validation pipelines.

Each pipeline runs its rules in a fixed order and stops at the first
failure, so the reported reason is reproducible. Only the sign-up pipeline
touches the network (postal-code lookup), which is why it is async.
"""

import logging
from datetime import date
from typing import Callable, Collection, Optional

from modules.formatting import strip_non_digits

from . import rules
from .exceptions import PostalCodeLookupError
from .interfaces import IPostalCodeLookup
from .models import (
    DonationForm,
    FailureCode,
    LoginForm,
    SignUpForm,
    ValidationFailure,
)

logger = logging.getLogger(__name__)


class SubmissionValidator:
    """
    Validates sign-up, donation and login submissions.

    Sign-up order:
        1. name
        2. birth date (if provided)
        3. phone (if provided)
        4. postal code length (if provided)
        5. postal code exists (remote lookup, if provided)
        6. CPF/CNPJ checksum
        7. email
        8. password length
        9. user type
    """

    def __init__(
        self,
        postal_code_lookup: IPostalCodeLookup,
        today: Optional[Callable[[], date]] = None,
    ):
        """
        Args:
            postal_code_lookup: Remote CEP resolver
            today: Clock for the birth-date rule (defaults to date.today)
        """
        self._lookup = postal_code_lookup
        self._today = today or date.today

    async def validate_sign_up(self, form: SignUpForm) -> Optional[ValidationFailure]:
        """
        Validate a sign-up form.

        Returns:
            None if the form is acceptable, otherwise the first failure
        """
        failure = (
            rules.check_name(form.name)
            or rules.check_birth_date(form.birth_date, today=self._today())
            or rules.check_phone(form.phone)
            or rules.check_postal_code_length(form.postal_code)
        )
        if failure:
            return failure

        if form.postal_code:
            failure = await self.check_postal_code_exists(form.postal_code)
            if failure:
                return failure

        return (
            rules.check_document(form.document)
            or rules.check_email(form.email)
            or rules.check_password(form.password)
            or rules.check_user_type(form.user_type)
        )

    async def check_postal_code_exists(self, postal_code: str) -> Optional[ValidationFailure]:
        """
        Resolve the CEP remotely.

        Not found and unreachable are reported with different codes so the
        caller can tell bad input from a connectivity problem.
        """
        digits = strip_non_digits(postal_code)
        try:
            address = await self._lookup.resolve(digits)
        except PostalCodeLookupError as e:
            logger.warning("Postal code lookup unavailable: %s", e.to_dict())
            return rules.failure(FailureCode.POSTAL_CODE_LOOKUP_FAILED, "postal_code")

        if address is None:
            return rules.failure(FailureCode.POSTAL_CODE_NOT_FOUND, "postal_code")
        return None

    def validate_donation(
        self,
        form: DonationForm,
        active_category_ids: Optional[Collection[str]] = None,
    ) -> Optional[ValidationFailure]:
        """
        Validate a donation form. Purely local.

        Args:
            form: Raw donation input
            active_category_ids: IDs of categories currently active; pass
                when creating, so an inactive category is refused
        """
        return (
            rules.check_name(form.name)
            or rules.check_description(form.description)
            or rules.check_quantity(form.quantity)
            or rules.check_category(form.category_id, active_category_ids)
            or rules.check_required_postal_code(form.postal_code)
            or rules.check_house_number(form.house_number)
        )

    def validate_login(self, form: LoginForm) -> Optional[ValidationFailure]:
        """Validate a login form. Purely local."""
        return rules.check_credentials_present(form.email, form.password)
