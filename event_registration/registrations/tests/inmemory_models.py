"""In-memory models for testing - no database required."""

import dataclasses
from collections.abc import Callable
from datetime import UTC, datetime
from uuid import UUID, uuid4

from event_registration.email_service.base import EmailServiceBase
from event_registration.registrations.dtos import (
    Language,
    NewRegistrationDTO,
    RegistrationChangesDTO,
    RegistrationDTO,
    RegistrationStatus,
)
from event_registration.registrations.errors import (
    DuplicateRegistrationError,
    EmailProviderError,
    RegistrationStoreError,
    TokenNotFoundError,
)
from event_registration.registrations.repository.read_models import RegistrationReadModel
from event_registration.registrations.repository.write_models import RegistrationWriteModel
from event_registration.registrations.service import RegistrationConfig, RegistrationService
from event_registration.registrations.tokens import generate_token, token_expiry

EVENT_START = datetime(2026, 11, 20, 19, 0, tzinfo=UTC)
LOCK_AT = datetime(2026, 11, 19, 19, 0, tzinfo=UTC)
TOKEN_EXPIRES_AT = datetime(2026, 12, 31, tzinfo=UTC)
SENDER = "Superbrands <no-reply@example.com>"


# =============================================================================
# In-Memory Storage
# =============================================================================


class InMemoryRegistrationStore(RegistrationReadModel, RegistrationWriteModel):
    """Read and write model over a dict, keyed by registration id."""

    def __init__(self, token_factory: Callable[[], str] = generate_token):
        self.registrations: dict[UUID, RegistrationDTO] = {}
        self.token_factory = token_factory
        self.fail_writes = False

    async def get_by_token(self, token: str) -> RegistrationDTO | None:
        for registration in self.registrations.values():
            if registration.edit_token == token:
                return registration
        return None

    async def get_by_email(self, email: str) -> RegistrationDTO | None:
        normalized = email.strip().lower()
        for registration in self.registrations.values():
            if registration.email == normalized:
                return registration
        return None

    async def create_registration(
        self,
        registration: NewRegistrationDTO,
        now: datetime,
    ) -> RegistrationDTO:
        if self.fail_writes:
            raise RegistrationStoreError()
        if await self.get_by_email(registration.email):
            raise DuplicateRegistrationError(registration.email)

        attendance = registration.attendance
        created = RegistrationDTO(
            id=uuid4(),
            full_name=registration.full_name,
            email=registration.email,
            phone=registration.phone,
            company=registration.company,
            status=RegistrationStatus.SUBMITTED,
            edit_token=self.token_factory(),
            edit_token_expires_at=token_expiry(now),
            guests=attendance.guests,
            plus_one=attendance.plus_one,
            plus_one_full_name=attendance.plus_one_full_name,
        )
        self.registrations[created.id] = created
        return created

    async def update_registration(
        self,
        registration_id: UUID,
        changes: RegistrationChangesDTO,
        now: datetime,
    ) -> RegistrationDTO:
        if self.fail_writes:
            raise RegistrationStoreError()
        existing = self.registrations.get(registration_id)
        if existing is None:
            raise TokenNotFoundError()

        attendance = changes.attendance
        updated = dataclasses.replace(
            existing,
            full_name=changes.full_name,
            phone=changes.phone,
            company=changes.company,
            guests=attendance.guests,
            plus_one=attendance.plus_one,
            plus_one_full_name=attendance.plus_one_full_name,
            status=RegistrationStatus.UPDATED,
            edit_token=self.token_factory(),
            edit_token_expires_at=token_expiry(now),
        )
        self.registrations[registration_id] = updated
        return updated

    def add(self, **fields) -> RegistrationDTO:
        """Seed a registration directly."""
        defaults = {
            "id": uuid4(),
            "full_name": "Ana Anić",
            "email": "ana@example.com",
            "status": RegistrationStatus.SUBMITTED,
            "edit_token": generate_token(),
            "edit_token_expires_at": TOKEN_EXPIRES_AT,
        }
        registration = RegistrationDTO(**{**defaults, **fields})
        self.registrations[registration.id] = registration
        return registration


class InMemoryEmailService(EmailServiceBase):
    """Records rendered emails instead of sending them."""

    def __init__(self, should_fail: bool = False):
        self.sent_emails: list[dict] = []
        self.should_fail = should_fail

    async def _send(
        self,
        to_address: str,
        from_address: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> str | None:
        if self.should_fail:
            raise EmailProviderError()
        self.sent_emails.append(
            {
                "to_address": to_address,
                "from_address": from_address,
                "subject": subject,
                "html_body": html_body,
                "text_body": text_body,
            }
        )
        return f"email-{len(self.sent_emails)}"


class FixedClock:
    """Clock that only moves when a test moves it."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


# =============================================================================
# Factories
# =============================================================================


def create_test_config(
    event_start: datetime | None = EVENT_START,
    emails_from: str = SENDER,
    email_language: Language = Language.HR,
) -> RegistrationConfig:
    return RegistrationConfig(
        public_app_url="https://gala.example.com",
        event_name="Superbrands Gala 2026",
        event_start=event_start,
        emails_from=emails_from,
        email_language=email_language,
    )


def create_test_service(
    store: InMemoryRegistrationStore,
    email_service: InMemoryEmailService,
    clock: FixedClock,
    config: RegistrationConfig | None = None,
) -> RegistrationService:
    return RegistrationService(
        read_model=store,
        write_model=store,
        email_service=email_service,
        config=config or create_test_config(),
        clock=clock,
    )
