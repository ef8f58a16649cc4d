"""DTOs for the resend edit link feature."""

from pydantic import BaseModel


class ResendEditLinkResponse(BaseModel):
    ok: bool = True
