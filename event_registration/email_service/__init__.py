from event_registration.config.settings import settings
from event_registration.email_service.base import EmailServiceBase, normalize_sender
from event_registration.email_service.resend_service import ResendEmailService
from event_registration.email_service.smtp_service import SMTPEmailService
from event_registration.email_service.templates import EmailTemplates


def get_email_service() -> EmailServiceBase:
    if settings.resend_api_key:
        return ResendEmailService(config=settings)
    return SMTPEmailService(config=settings)


__all__ = [
    "EmailServiceBase",
    "EmailTemplates",
    "get_email_service",
    "normalize_sender",
]
