from datetime import datetime

from sqlalchemy import JSON, DateTime, Enum, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from event_registration.config.table_names import TableNames
from event_registration.models.base import Base, TimeStamp
from event_registration.registrations.dtos import RegistrationStatus


class Registration(Base, TimeStamp):
    __tablename__ = TableNames.REGISTRATIONS.value

    # Stored lowercased and trimmed, so the unique index is case-insensitive
    email: Mapped[str] = mapped_column(String(200), unique=True, nullable=False, index=True)
    full_name: Mapped[str] = mapped_column(String(120), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    company: Mapped[str | None] = mapped_column(String(120), nullable=True)

    # Legacy attendance count, kept in sync with metadata.plus_one (1/0)
    guests: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    # Newer attendance fields: plus_one, plus_one_full_name
    extra_metadata: Mapped[dict | None] = mapped_column(
        "metadata",
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=True,
    )

    status: Mapped[str] = mapped_column(
        Enum(
            RegistrationStatus,
            name="registration_status_enum",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=RegistrationStatus.SUBMITTED,
        nullable=False,
    )

    edit_token: Mapped[str] = mapped_column(String(128), nullable=False, unique=True, index=True)
    edit_token_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    def __repr__(self) -> str:
        return f"<Registration {self.email} - {self.status}>"
