import abc
import logging
from functools import partial

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from event_registration.config.database import async_session_manager
from event_registration.registrations.dtos import RegistrationDTO
from event_registration.registrations.errors import RegistrationStoreError
from event_registration.registrations.repository.orm_models import Registration

logger = logging.getLogger(__name__)


class RegistrationReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_by_token(self, token: str) -> RegistrationDTO | None:
        """
        Get a registration by its edit token.
        The DTO carries the token expiry so callers can check it without another query.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def get_by_email(self, email: str) -> RegistrationDTO | None:
        """Get a registration by its (normalised) email."""
        raise NotImplementedError


class SqlRegistrationReadModel(RegistrationReadModel):
    """SQL implementation of the registration read model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_by_token(self, token: str) -> RegistrationDTO | None:
        return await self._get_one(select(Registration).where(Registration.edit_token == token))

    async def get_by_email(self, email: str) -> RegistrationDTO | None:
        normalized = email.strip().lower()
        return await self._get_one(select(Registration).where(Registration.email == normalized))

    async def _get_one(self, stmt) -> RegistrationDTO | None:
        try:
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                result = await session.execute(stmt)
                registration = result.scalar_one_or_none()
                if registration is None:
                    return None
                return RegistrationDTO.from_registration(registration)
        except SQLAlchemyError as e:
            logger.exception("Registration lookup failed")
            raise RegistrationStoreError() from e
