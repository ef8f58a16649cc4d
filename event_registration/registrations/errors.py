"""Errors raised by registration operations.

Each error carries the HTTP status it maps to and a message that is safe to show
to the client. Infrastructure errors keep their details out of the message; the
cause is logged where the error is raised.
"""


class RegistrationError(Exception):
    status_code: int = 500
    message: str = "Unexpected error."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingTokenError(RegistrationError):
    status_code = 400
    message = "Missing token."


class TokenNotFoundError(RegistrationError):
    status_code = 404
    message = "Invalid token."


class TokenExpiredError(RegistrationError):
    status_code = 410
    message = "Token expired."


class EditingLockedError(RegistrationError):
    status_code = 423
    message = "Editing is locked 24 hours before the event."


class DuplicateRegistrationError(RegistrationError):
    """Raised when the email is already registered."""

    status_code = 409
    message = "This email is already registered."

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__()


class RegistrationStoreError(RegistrationError):
    status_code = 500
    message = "Could not save registration."


class SenderNotConfiguredError(RegistrationError):
    status_code = 500
    message = "EMAIL_FROM not set; cannot send."


class EmailProviderError(RegistrationError):
    status_code = 500
    message = "Email provider error."
