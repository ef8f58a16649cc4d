from fastapi import Depends

from event_registration.config.settings import settings
from event_registration.email_service import EmailServiceBase, get_email_service
from event_registration.registrations.repository.read_models import (
    RegistrationReadModel,
    SqlRegistrationReadModel,
)
from event_registration.registrations.repository.write_models import (
    RegistrationWriteModel,
    SqlRegistrationWriteModel,
)
from event_registration.registrations.service import (
    Clock,
    RegistrationConfig,
    RegistrationService,
    utcnow,
)


def get_registration_read_model() -> RegistrationReadModel:
    """Dependency to get registration read model instance."""
    return SqlRegistrationReadModel()


def get_registration_write_model() -> RegistrationWriteModel:
    """Dependency to get registration write model instance."""
    return SqlRegistrationWriteModel()


def get_registration_config() -> RegistrationConfig:
    return RegistrationConfig.from_settings(settings)


def get_clock() -> Clock:
    return utcnow


def get_registration_service(
    read_model: RegistrationReadModel = Depends(get_registration_read_model),
    write_model: RegistrationWriteModel = Depends(get_registration_write_model),
    email_service: EmailServiceBase = Depends(get_email_service),
    config: RegistrationConfig = Depends(get_registration_config),
    clock: Clock = Depends(get_clock),
) -> RegistrationService:
    return RegistrationService(
        read_model=read_model,
        write_model=write_model,
        email_service=email_service,
        config=config,
        clock=clock,
    )
