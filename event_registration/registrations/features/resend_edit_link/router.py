from fastapi import APIRouter, Depends

from event_registration.registrations.dependencies import get_registration_service
from event_registration.registrations.features.resend_edit_link.dtos import (
    ResendEditLinkResponse,
)
from event_registration.registrations.service import RegistrationService
from event_registration.registrations.urls import RESEND_EDIT_LINK_URL
from event_registration.registrations.validation import ResendEditLinkForm

router = APIRouter()


@router.post(RESEND_EDIT_LINK_URL, response_model=ResendEditLinkResponse)
async def resend_edit_link(
    form: ResendEditLinkForm,
    service: RegistrationService = Depends(get_registration_service),
) -> ResendEditLinkResponse:
    """Email the current edit link again. Unavailable once editing locks."""
    await service.resend_edit_link(form.token)
    return ResendEditLinkResponse()
