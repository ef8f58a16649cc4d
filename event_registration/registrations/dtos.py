from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from event_registration.registrations.repository.orm_models import Registration


class RegistrationStatus(str, Enum):
    SUBMITTED = "submitted"
    UPDATED = "updated"


class Language(str, Enum):
    HR = "hr"
    EN = "en"


def as_utc(value: datetime | None) -> datetime | None:
    """SQLite hands back naive datetimes; everything stored is UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def resolve_plus_one(metadata: dict | None, guests: int | None) -> bool:
    """Read plus-one from metadata, falling back to the legacy guest count."""
    plus_one = (metadata or {}).get("plus_one")
    if plus_one is None:
        return (guests or 0) > 0
    return bool(plus_one)


@dataclass(frozen=True)
class Attendance:
    """Resolved attendance: the plus-one flag and name plus the synced guest count."""

    plus_one: bool
    plus_one_full_name: str | None
    guests: int

    def as_metadata(self) -> dict:
        return {
            "plus_one": self.plus_one,
            "plus_one_full_name": self.plus_one_full_name if self.plus_one else None,
        }


@dataclass(frozen=True)
class NewRegistrationDTO:
    """Normalised registration ready to be stored."""

    full_name: str
    email: str
    attendance: Attendance
    phone: str | None = None
    company: str | None = None


@dataclass(frozen=True)
class RegistrationChangesDTO:
    """Normalised edit applied to an existing registration."""

    full_name: str
    attendance: Attendance
    phone: str | None = None
    company: str | None = None


@dataclass(frozen=True)
class RegistrationDTO:
    """A stored registration. Returned by read and write models, never the ORM row."""

    id: UUID
    full_name: str
    email: str
    status: RegistrationStatus
    edit_token: str
    edit_token_expires_at: datetime | None
    guests: int = 0
    plus_one: bool = False
    plus_one_full_name: str | None = None
    phone: str | None = None
    company: str | None = None

    @classmethod
    def from_registration(cls, registration: "Registration") -> "RegistrationDTO":
        metadata = registration.extra_metadata or {}
        plus_one = resolve_plus_one(metadata, registration.guests)
        return cls(
            id=registration.uuid,
            full_name=registration.full_name,
            email=registration.email,
            status=RegistrationStatus(registration.status),
            edit_token=registration.edit_token,
            edit_token_expires_at=as_utc(registration.edit_token_expires_at),
            guests=registration.guests or 0,
            plus_one=plus_one,
            plus_one_full_name=metadata.get("plus_one_full_name") if plus_one else None,
            phone=registration.phone,
            company=registration.company,
        )


@dataclass(frozen=True)
class RegisterResultDTO:
    edit_token: str
    warning: str | None = None


@dataclass(frozen=True)
class RegistrationViewDTO:
    """Registration together with the lock state for the edit page."""

    registration: RegistrationDTO
    locked: bool
    lock_reason: str | None = None
