from datetime import UTC, datetime

import pytest

from event_registration.email_service import get_email_service
from event_registration.registrations.dependencies import (
    get_clock,
    get_registration_config,
    get_registration_read_model,
    get_registration_write_model,
)
from event_registration.registrations.tests.inmemory_models import (
    FixedClock,
    InMemoryEmailService,
    InMemoryRegistrationStore,
    create_test_config,
)


@pytest.fixture
def store():
    """Create a fresh in-memory registration store for each test."""
    return InMemoryRegistrationStore()


@pytest.fixture
def email_service():
    """Create a fresh in-memory email service for each test."""
    return InMemoryEmailService()


@pytest.fixture
def clock():
    """A clock a month before the event, well outside the lock window."""
    return FixedClock(datetime(2026, 10, 19, 12, 0, tzinfo=UTC))


@pytest.fixture
def config():
    return create_test_config()


@pytest.fixture
def overrides(store, email_service, clock, config):
    """Dependency overrides wiring the in-memory models into the app."""
    return {
        get_registration_read_model: lambda: store,
        get_registration_write_model: lambda: store,
        get_email_service: lambda: email_service,
        get_registration_config: lambda: config,
        get_clock: lambda: clock,
    }
