"""Registration use cases: register, view, edit and resend the edit link.

The store write is the durable step. Emails are sent after it and are never
rolled back into it: on registration a failed email becomes a warning in the
response.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from event_registration.email_service.base import EmailServiceBase
from event_registration.registrations.dtos import (
    Language,
    NewRegistrationDTO,
    RegisterResultDTO,
    RegistrationChangesDTO,
    RegistrationDTO,
    RegistrationViewDTO,
)
from event_registration.registrations.errors import (
    EditingLockedError,
    EmailProviderError,
    SenderNotConfiguredError,
    TokenExpiredError,
    TokenNotFoundError,
)
from event_registration.registrations.lock import is_locked, lock_status
from event_registration.registrations.repository.read_models import RegistrationReadModel
from event_registration.registrations.repository.write_models import RegistrationWriteModel
from event_registration.registrations.tokens import is_expired

if TYPE_CHECKING:
    from event_registration.config.settings import Settings

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

SENDER_MISSING_WARNING = "Confirmation email was not sent: no sender address is configured."
EMAIL_FAILED_WARNING = "Registration saved, but the confirmation email could not be sent."


def utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class RegistrationConfig:
    """Settings the registration flows read at request time."""

    public_app_url: str
    event_name: str
    event_start: datetime | None = None
    emails_from: str = ""
    email_language: Language = Language.HR

    @classmethod
    def from_settings(cls, settings: "Settings") -> "RegistrationConfig":
        return cls(
            public_app_url=settings.public_app_url,
            event_name=settings.event_name,
            event_start=settings.event_start_iso,
            emails_from=settings.emails_from,
            email_language=settings.email_language,
        )

    def edit_url(self, token: str) -> str:
        return f"{self.public_app_url.rstrip('/')}/edit?{urlencode({'token': token})}"


class RegistrationService:
    def __init__(
        self,
        read_model: RegistrationReadModel,
        write_model: RegistrationWriteModel,
        email_service: EmailServiceBase,
        config: RegistrationConfig,
        clock: Clock = utcnow,
    ) -> None:
        self._read_model = read_model
        self._write_model = write_model
        self._email_service = email_service
        self._config = config
        self._clock = clock

    async def register(self, registration: NewRegistrationDTO) -> RegisterResultDTO:
        """Store a registration and email its edit link.

        Registration is allowed during the lock window.
        """
        created = await self._write_model.create_registration(registration, now=self._clock())

        warning = None
        if not self._config.emails_from:
            logger.warning("EMAIL_FROM not set, skipping confirmation for %s", created.id)
            warning = SENDER_MISSING_WARNING
        else:
            try:
                await self._send_edit_link(created)
            except EmailProviderError:
                logger.warning("Confirmation email for %s failed", created.id)
                warning = EMAIL_FAILED_WARNING

        return RegisterResultDTO(edit_token=created.edit_token, warning=warning)

    async def get_registration(self, token: str) -> RegistrationViewDTO:
        now = self._clock()
        registration = await self._get_valid_registration(token, now)
        status = lock_status(now, self._config.event_start)
        return RegistrationViewDTO(
            registration=registration,
            locked=status.locked,
            lock_reason=status.reason,
        )

    async def edit_registration(
        self,
        token: str,
        changes: RegistrationChangesDTO,
    ) -> RegistrationDTO:
        """Apply an edit and return the registration with its rotated token."""
        now = self._clock()
        registration = await self._get_valid_registration(token, now)
        self._ensure_unlocked(now)
        return await self._write_model.update_registration(registration.id, changes, now=now)

    async def resend_edit_link(self, token: str) -> None:
        """Email the current edit link again. The token is not rotated."""
        now = self._clock()
        registration = await self._get_valid_registration(token, now)
        self._ensure_unlocked(now)
        if not self._config.emails_from:
            raise SenderNotConfiguredError()
        await self._send_edit_link(registration)

    async def _get_valid_registration(self, token: str, now: datetime) -> RegistrationDTO:
        # Runs before the lock check: an expired link is reported as expired
        registration = await self._read_model.get_by_token(token)
        if registration is None:
            raise TokenNotFoundError()
        if is_expired(registration.edit_token_expires_at, now):
            raise TokenExpiredError()
        return registration

    def _ensure_unlocked(self, now: datetime) -> None:
        if is_locked(now, self._config.event_start):
            raise EditingLockedError()

    async def _send_edit_link(self, registration: RegistrationDTO) -> None:
        await self._email_service.send_edit_link(
            to_address=registration.email,
            from_address=self._config.emails_from,
            full_name=registration.full_name,
            edit_url=self._config.edit_url(registration.edit_token),
            event_name=self._config.event_name,
            language=self._config.email_language,
        )
