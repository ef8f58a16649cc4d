import logging
from typing import Protocol

import httpx

from event_registration.email_service.base import EmailServiceBase
from event_registration.registrations.errors import EmailProviderError

logger = logging.getLogger(__name__)

RESEND_EMAILS_URL = "https://api.resend.com/emails"


class ResendEmailConfig(Protocol):
    resend_api_key: str


class ResendEmailService(EmailServiceBase):
    def __init__(
        self,
        config: ResendEmailConfig,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._config = config
        self._http_client_class = http_client_class

    async def _send(
        self,
        to_address: str,
        from_address: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> str | None:
        """Send email via Resend and return the Resend email id."""
        try:
            async with self._http_client_class() as client:
                response = await client.post(
                    RESEND_EMAILS_URL,
                    headers={
                        "Authorization": f"Bearer {self._config.resend_api_key}",
                        "Content-Type": "application/json",
                    },
                    json={
                        "from": from_address,
                        "to": [to_address],
                        "subject": subject,
                        "html": html_body,
                        "text": text_body,
                    },
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Resend rejected email to %s: %s %s",
                to_address,
                e.response.status_code,
                e.response.text,
            )
            raise EmailProviderError() from e
        except httpx.HTTPError as e:
            logger.exception("Could not reach Resend")
            raise EmailProviderError() from e

        resend_email_id = response.json().get("id")
        logger.info("Email %s sent to %s", resend_email_id, to_address)
        return resend_email_id
