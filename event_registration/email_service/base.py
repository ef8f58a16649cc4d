from abc import ABC, abstractmethod

from event_registration.email_service.templates import EmailTemplates
from event_registration.registrations.dtos import Language


def normalize_sender(raw: str) -> str:
    """Clean up a sender copied into .env with extra quoting.

    ``"\\"Gala <no-reply@example.com>\\""`` becomes ``Gala <no-reply@example.com>``.
    """
    sender = raw.strip()
    while len(sender) >= 2 and sender[0] == sender[-1] and sender[0] in "\"'":
        sender = sender[1:-1].strip()
    return sender.replace('\\"', '"').strip()


class EmailServiceBase(ABC):
    @abstractmethod
    async def _send(
        self,
        to_address: str,
        from_address: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> str | None:
        """Hand a rendered email to the provider. Returns the provider message id if any."""
        pass

    async def send_edit_link(
        self,
        to_address: str,
        from_address: str,
        full_name: str,
        edit_url: str,
        event_name: str,
        language: Language = Language.HR,
    ) -> str | None:
        """Send the registration confirmation with the edit link.

        Raises:
            EmailProviderError: the provider rejected or could not take the email
        """
        subject, html_body, text_body = EmailTemplates.render_edit_link(
            language=language,
            full_name=full_name,
            edit_url=edit_url,
            event_name=event_name,
        )
        return await self._send(
            to_address=to_address,
            from_address=normalize_sender(from_address),
            subject=subject,
            html_body=html_body,
            text_body=text_body,
        )
