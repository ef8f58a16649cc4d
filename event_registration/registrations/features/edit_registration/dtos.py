"""DTOs for the edit registration feature."""

from pydantic import BaseModel


class EditRegistrationResponse(BaseModel):
    ok: bool = True
    # The token used for this edit no longer works
    new_token: str
