from fastapi import APIRouter, Depends

from event_registration.registrations.dependencies import get_registration_service
from event_registration.registrations.features.edit_registration.dtos import (
    EditRegistrationResponse,
)
from event_registration.registrations.service import RegistrationService
from event_registration.registrations.urls import EDIT_REGISTRATION_URL
from event_registration.registrations.validation import EditForm

router = APIRouter()


@router.post(EDIT_REGISTRATION_URL, response_model=EditRegistrationResponse)
async def edit_registration(
    form: EditForm,
    service: RegistrationService = Depends(get_registration_service),
) -> EditRegistrationResponse:
    """
    Update a registration through its edit token.

    Rejected once editing locks (24h before the event). A successful edit rotates
    the token: the client must use new_token from here on.
    """
    updated = await service.edit_registration(form.token, form.to_dto())
    return EditRegistrationResponse(new_token=updated.edit_token)
