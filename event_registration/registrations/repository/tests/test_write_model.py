"""Tests for SqlRegistrationWriteModel."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from sqlalchemy import select

from event_registration.registrations.dtos import (
    Attendance,
    NewRegistrationDTO,
    RegistrationChangesDTO,
    RegistrationStatus,
)
from event_registration.registrations.errors import (
    DuplicateRegistrationError,
    TokenNotFoundError,
)
from event_registration.registrations.repository.orm_models import Registration
from event_registration.registrations.repository.read_models import SqlRegistrationReadModel
from event_registration.registrations.repository.write_models import SqlRegistrationWriteModel

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


def new_registration(**fields) -> NewRegistrationDTO:
    defaults = {
        "full_name": "Ana Anić",
        "email": "ana@example.com",
        "phone": "+385 91 123 4567",
        "attendance": Attendance(plus_one=True, plus_one_full_name="Marko Marić", guests=1),
    }
    return NewRegistrationDTO(**{**defaults, **fields})


@pytest.mark.asyncio
async def test_create_registration(async_session):
    """Test a new registration gets a token, an expiry and its attendance metadata."""
    write_model = SqlRegistrationWriteModel(session_overwrite=async_session)

    created = await write_model.create_registration(new_registration(), now=NOW)
    await async_session.commit()

    assert created.status == RegistrationStatus.SUBMITTED
    assert len(created.edit_token) == 64
    assert created.edit_token_expires_at == NOW + timedelta(days=14)
    assert created.plus_one is True
    assert created.plus_one_full_name == "Marko Marić"

    result = await async_session.execute(select(Registration))
    row = result.scalar_one()
    assert row.email == "ana@example.com"
    assert row.guests == 1
    assert row.extra_metadata == {"plus_one": True, "plus_one_full_name": "Marko Marić"}


@pytest.mark.asyncio
async def test_create_registration_duplicate_email(async_session):
    write_model = SqlRegistrationWriteModel(session_overwrite=async_session)
    await write_model.create_registration(new_registration(), now=NOW)
    await async_session.commit()

    with pytest.raises(DuplicateRegistrationError) as exc_info:
        await write_model.create_registration(new_registration(full_name="Ana Druga"), now=NOW)
    await async_session.rollback()

    assert exc_info.value.email == "ana@example.com"
    read_model = SqlRegistrationReadModel(session_overwrite=async_session)
    existing = await read_model.get_by_email("ana@example.com")
    assert existing.full_name == "Ana Anić"


@pytest.mark.asyncio
async def test_update_registration_rotates_token(async_session):
    """Test an update stores the changes, marks it updated and issues a new token."""
    write_model = SqlRegistrationWriteModel(session_overwrite=async_session)
    read_model = SqlRegistrationReadModel(session_overwrite=async_session)
    created = await write_model.create_registration(new_registration(), now=NOW)
    await async_session.commit()

    later = NOW + timedelta(days=3)
    updated = await write_model.update_registration(
        created.id,
        RegistrationChangesDTO(
            full_name="Ana Horvat",
            company="Superbrands",
            attendance=Attendance(plus_one=False, plus_one_full_name=None, guests=0),
        ),
        now=later,
    )
    await async_session.commit()

    assert updated.status == RegistrationStatus.UPDATED
    assert updated.edit_token != created.edit_token
    assert updated.edit_token_expires_at == later + timedelta(days=14)
    assert updated.full_name == "Ana Horvat"
    assert updated.phone is None
    assert updated.email == "ana@example.com"
    assert updated.plus_one is False
    assert updated.plus_one_full_name is None
    assert updated.guests == 0

    assert await read_model.get_by_token(created.edit_token) is None
    fetched = await read_model.get_by_token(updated.edit_token)
    assert fetched.full_name == "Ana Horvat"


@pytest.mark.asyncio
async def test_update_registration_keeps_other_metadata(async_session):
    row = Registration(
        email="ana@example.com",
        full_name="Ana Anić",
        guests=0,
        extra_metadata={"source": "import", "plus_one": False},
        status=RegistrationStatus.SUBMITTED,
        edit_token="a" * 64,
        edit_token_expires_at=NOW + timedelta(days=14),
    )
    async_session.add(row)
    await async_session.commit()

    write_model = SqlRegistrationWriteModel(session_overwrite=async_session)
    await write_model.update_registration(
        row.uuid,
        RegistrationChangesDTO(
            full_name="Ana Anić",
            attendance=Attendance(plus_one=True, plus_one_full_name="Marko Marić", guests=1),
        ),
        now=NOW,
    )
    await async_session.commit()

    result = await async_session.execute(select(Registration))
    assert result.scalar_one().extra_metadata == {
        "source": "import",
        "plus_one": True,
        "plus_one_full_name": "Marko Marić",
    }


@pytest.mark.asyncio
async def test_update_missing_registration(async_session):
    write_model = SqlRegistrationWriteModel(session_overwrite=async_session)

    with pytest.raises(TokenNotFoundError):
        await write_model.update_registration(
            uuid4(),
            RegistrationChangesDTO(
                full_name="Ana Anić",
                attendance=Attendance(plus_one=False, plus_one_full_name=None, guests=0),
            ),
            now=NOW,
        )


@pytest.mark.asyncio
async def test_token_factory_is_used(async_session):
    tokens = iter(["first-token-0001", "second-token-0002"])
    write_model = SqlRegistrationWriteModel(
        session_overwrite=async_session, token_factory=lambda: next(tokens)
    )

    created = await write_model.create_registration(new_registration(), now=NOW)
    updated = await write_model.update_registration(
        created.id,
        RegistrationChangesDTO(
            full_name="Ana Anić",
            attendance=Attendance(plus_one=False, plus_one_full_name=None, guests=0),
        ),
        now=NOW,
    )

    assert created.edit_token == "first-token-0001"
    assert updated.edit_token == "second-token-0002"
