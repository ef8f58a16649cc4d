"""Form validation for registration payloads.

Forms trim every string, turn blank optional values into ``None`` and coerce the
textual booleans and numbers that HTML forms send. Field errors are collected by
pydantic and reported together through :func:`issues_from_errors`.
"""

from collections.abc import Iterable
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

from event_registration.registrations.dtos import (
    Attendance,
    NewRegistrationDTO,
    RegistrationChangesDTO,
)

TRUE_VALUES = {"true", "1", "yes", "on"}
FALSE_VALUES = {"false", "0", "no", "off"}

MAX_GUESTS = 10
MAX_EMAIL_LENGTH = 200

PLUS_ONE_NAME_MESSAGE = "Please enter the first and last name for your +1."


def empty_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def strip(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()
    return value


def to_bool(value: Any) -> Any:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if not normalized:
            return False
        if normalized in TRUE_VALUES:
            return True
        if normalized in FALSE_VALUES:
            return False
    return value


def to_int(value: Any) -> Any:
    if isinstance(value, str):
        normalized = value.strip()
        if not normalized:
            return None
        try:
            return int(normalized)
        except ValueError:
            return value
    return value


OptionalText = Annotated[str | None, BeforeValidator(empty_to_none)]
FlexibleBool = Annotated[bool, BeforeValidator(to_bool), Field(strict=True)]
GuestCount = Annotated[int | None, BeforeValidator(to_int)]


class AttendanceForm(BaseModel):
    """Plus-one fields shared by the registration and edit forms.

    ``guests`` is the legacy representation. It is only used on its own when the
    payload does not carry ``plus_one``.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    plus_one: FlexibleBool = False
    plus_one_full_name: OptionalText = Field(default=None, max_length=120, validate_default=True)
    guests: GuestCount = None

    @field_validator("plus_one_full_name")
    @classmethod
    def plus_one_needs_full_name(cls, v: str | None, info: ValidationInfo) -> str | None:
        if not info.data.get("plus_one"):
            return None
        name = (v or "").strip()
        if len(name) < 2 or len(name.split()) < 2:
            raise PydanticCustomError("plus_one_full_name", PLUS_ONE_NAME_MESSAGE)
        return name

    @field_validator("guests")
    @classmethod
    def clamp_guests(cls, v: int | None) -> int | None:
        if v is None:
            return None
        return max(0, min(MAX_GUESTS, v))

    def attendance(self) -> Attendance:
        if "plus_one" in self.model_fields_set or self.guests is None:
            return Attendance(
                plus_one=self.plus_one,
                plus_one_full_name=self.plus_one_full_name if self.plus_one else None,
                guests=1 if self.plus_one else 0,
            )
        return Attendance(plus_one=self.guests > 0, plus_one_full_name=None, guests=self.guests)


class RegistrationForm(AttendanceForm):
    full_name: str = Field(min_length=2, max_length=120)
    email: Annotated[EmailStr, BeforeValidator(strip)]
    phone: OptionalText = Field(default=None, max_length=50)
    company: OptionalText = Field(default=None, max_length=120)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        if len(v) > MAX_EMAIL_LENGTH:
            raise PydanticCustomError(
                "email_too_long",
                "Email should have at most {max_length} characters.",
                {"max_length": MAX_EMAIL_LENGTH},
            )
        return v.lower()

    def to_dto(self) -> NewRegistrationDTO:
        return NewRegistrationDTO(
            full_name=self.full_name,
            email=self.email,
            phone=self.phone,
            company=self.company,
            attendance=self.attendance(),
        )


class EditForm(AttendanceForm):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    token: str = Field(min_length=10)
    full_name: str = Field(min_length=2, max_length=120)
    phone: OptionalText = Field(default=None, max_length=50)
    company: OptionalText = Field(default=None, max_length=120)

    def to_dto(self) -> RegistrationChangesDTO:
        return RegistrationChangesDTO(
            full_name=self.full_name,
            phone=self.phone,
            company=self.company,
            attendance=self.attendance(),
        )


class ResendEditLinkForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    token: str = Field(min_length=10)


def issues_from_errors(errors: Iterable[dict]) -> list[dict]:
    """Flatten pydantic errors into ``{path, message, code}`` issues.

    The request location (``body``, ``query``) is dropped from the path so the
    client can match issues to its form inputs.
    """
    issues = []
    for error in errors:
        path = list(error.get("loc", ()))
        if path and path[0] in ("body", "query"):
            path = path[1:]
        issues.append(
            {
                "path": path,
                "message": error.get("msg", ""),
                "code": error.get("type", ""),
            }
        )
    return issues
