"""DTOs for the get registration feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from event_registration.registrations.dtos import RegistrationDTO, RegistrationStatus


class RegistrationDetails(BaseModel):
    """Registration fields shown on the edit page. The token itself is not echoed."""

    full_name: str
    email: str
    phone: str | None = None
    company: str | None = None
    guests: int = 0
    plus_one: bool = False
    plus_one_full_name: str | None = None
    status: RegistrationStatus
    edit_token_expires_at: datetime | None = None

    @classmethod
    def from_dto(cls, registration: RegistrationDTO) -> "RegistrationDetails":
        return cls(
            full_name=registration.full_name,
            email=registration.email,
            phone=registration.phone,
            company=registration.company,
            guests=registration.guests,
            plus_one=registration.plus_one,
            plus_one_full_name=registration.plus_one_full_name,
            status=registration.status,
            edit_token_expires_at=registration.edit_token_expires_at,
        )


class RegistrationResponse(BaseModel):
    ok: bool = True
    locked: bool
    lock_reason: str | None = Field(default=None, serialization_alias="lockReason")
    registration: RegistrationDetails
