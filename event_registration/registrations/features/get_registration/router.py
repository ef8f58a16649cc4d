from fastapi import APIRouter, Depends

from event_registration.registrations.dependencies import get_registration_service
from event_registration.registrations.errors import MissingTokenError
from event_registration.registrations.features.get_registration.dtos import (
    RegistrationDetails,
    RegistrationResponse,
)
from event_registration.registrations.service import RegistrationService
from event_registration.registrations.urls import GET_REGISTRATION_URL

router = APIRouter()


@router.get(GET_REGISTRATION_URL, response_model=RegistrationResponse)
async def get_registration(
    token: str | None = None,
    service: RegistrationService = Depends(get_registration_service),
) -> RegistrationResponse:
    """
    Get a registration by edit token for prefilling the edit form.
    Reports whether editing is currently locked; fetching works while locked.
    """
    if not token or not token.strip():
        raise MissingTokenError()

    view = await service.get_registration(token.strip())

    return RegistrationResponse(
        locked=view.locked,
        lock_reason=view.lock_reason,
        registration=RegistrationDetails.from_dto(view.registration),
    )
