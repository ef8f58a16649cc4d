from fastapi import APIRouter, Depends

from event_registration.registrations.dependencies import get_registration_service
from event_registration.registrations.features.register.dtos import RegisterResponse
from event_registration.registrations.service import RegistrationService
from event_registration.registrations.urls import REGISTER_URL
from event_registration.registrations.validation import RegistrationForm

router = APIRouter()


@router.post(
    REGISTER_URL,
    response_model=RegisterResponse,
    response_model_exclude_none=True,
)
async def register(
    form: RegistrationForm,
    service: RegistrationService = Depends(get_registration_service),
) -> RegisterResponse:
    """
    Register an attendee and email them their edit link.

    Required: full_name, email.
    Optional: phone, company, plus_one with plus_one_full_name (or the legacy guests count).
    """
    result = await service.register(form.to_dto())
    return RegisterResponse(edit_token=result.edit_token, warning=result.warning)
