"""Registration write models. They return DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime
from functools import partial
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from event_registration.config.database import async_session_manager
from event_registration.registrations.dtos import (
    NewRegistrationDTO,
    RegistrationChangesDTO,
    RegistrationDTO,
    RegistrationStatus,
)
from event_registration.registrations.errors import (
    DuplicateRegistrationError,
    RegistrationError,
    RegistrationStoreError,
    TokenNotFoundError,
)
from event_registration.registrations.repository.orm_models import Registration
from event_registration.registrations.tokens import generate_token, token_expiry

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


def is_duplicate_email(error: IntegrityError) -> bool:
    """True when the integrity error comes from the unique email index."""
    orig = error.orig
    message = str(orig)
    unique = (
        getattr(orig, "sqlstate", None) == UNIQUE_VIOLATION
        or getattr(orig, "pgcode", None) == UNIQUE_VIOLATION
        or "UNIQUE constraint failed" in message
        or "duplicate key value" in message
    )
    return unique and "email" in message


class RegistrationWriteModel(ABC):
    @abstractmethod
    async def create_registration(
        self,
        registration: NewRegistrationDTO,
        now: datetime,
    ) -> RegistrationDTO:
        """
        Store a new registration with a freshly issued edit token.

        Raises:
            DuplicateRegistrationError: the email is already registered
            RegistrationStoreError: any other persistence failure
        """
        raise NotImplementedError

    @abstractmethod
    async def update_registration(
        self,
        registration_id: UUID,
        changes: RegistrationChangesDTO,
        now: datetime,
    ) -> RegistrationDTO:
        """
        Apply an edit, mark the registration updated and rotate its edit token.

        The previous token stops resolving once this returns.
        """
        raise NotImplementedError


class SqlRegistrationWriteModel(RegistrationWriteModel):
    """SQL implementation of registration write operations."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        token_factory: Callable[[], str] = generate_token,
    ) -> None:
        self.session_overwrite = session_overwrite
        self.token_factory = token_factory

    async def create_registration(
        self,
        registration: NewRegistrationDTO,
        now: datetime,
    ) -> RegistrationDTO:
        attendance = registration.attendance
        row = Registration(
            email=registration.email,
            full_name=registration.full_name,
            phone=registration.phone,
            company=registration.company,
            guests=attendance.guests,
            extra_metadata=attendance.as_metadata(),
            status=RegistrationStatus.SUBMITTED,
            edit_token=self.token_factory(),
            edit_token_expires_at=token_expiry(now),
        )

        try:
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                session.add(row)
                try:
                    await session.flush()
                except IntegrityError as e:
                    if is_duplicate_email(e):
                        raise DuplicateRegistrationError(registration.email) from e
                    raise
                created = RegistrationDTO.from_registration(row)
        except RegistrationError:
            raise
        except SQLAlchemyError as e:
            logger.exception("Could not store registration")
            raise RegistrationStoreError() from e

        logger.info("Registration %s created", created.id)
        return created

    async def update_registration(
        self,
        registration_id: UUID,
        changes: RegistrationChangesDTO,
        now: datetime,
    ) -> RegistrationDTO:
        attendance = changes.attendance

        try:
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                row = await session.get(Registration, registration_id)
                if row is None:
                    raise TokenNotFoundError()

                row.full_name = changes.full_name
                row.phone = changes.phone
                row.company = changes.company
                row.guests = attendance.guests
                row.extra_metadata = {**(row.extra_metadata or {}), **attendance.as_metadata()}
                row.status = RegistrationStatus.UPDATED
                row.edit_token = self.token_factory()
                row.edit_token_expires_at = token_expiry(now)

                await session.flush()
                updated = RegistrationDTO.from_registration(row)
        except RegistrationError:
            raise
        except SQLAlchemyError as e:
            logger.exception("Could not update registration %s", registration_id)
            raise RegistrationStoreError() from e

        logger.info("Registration %s updated, edit token rotated", registration_id)
        return updated
