"""DTOs for the register feature."""

from pydantic import BaseModel


class RegisterResponse(BaseModel):
    """Response for a stored registration."""

    ok: bool = True
    edit_token: str
    # Set when the registration was stored but the confirmation email was not sent
    warning: str | None = None
