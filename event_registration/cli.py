"""CLI commands for event registration management."""

import asyncio

import typer

from event_registration.config.settings import settings
from event_registration.email_service import get_email_service
from event_registration.registrations.dtos import RegistrationDTO
from event_registration.registrations.errors import RegistrationError
from event_registration.registrations.lock import lock_status
from event_registration.registrations.repository.read_models import SqlRegistrationReadModel
from event_registration.registrations.repository.write_models import SqlRegistrationWriteModel
from event_registration.registrations.service import (
    RegistrationConfig,
    RegistrationService,
    utcnow,
)

app = typer.Typer(help="CLI commands for event registration management")


def _build_service() -> RegistrationService:
    return RegistrationService(
        read_model=SqlRegistrationReadModel(),
        write_model=SqlRegistrationWriteModel(),
        email_service=get_email_service(),
        config=RegistrationConfig.from_settings(settings),
    )


async def _get_registration(email: str) -> RegistrationDTO | None:
    return await SqlRegistrationReadModel().get_by_email(email)


@app.command()
def show(
    email: str = typer.Argument(..., help="Email the attendee registered with"),
):
    """Show a registration and its current edit link."""
    registration = asyncio.run(_get_registration(email))
    if registration is None:
        typer.secho(f"No registration for {email}", fg=typer.colors.RED)
        raise typer.Exit(1)

    config = RegistrationConfig.from_settings(settings)
    typer.secho(f"{registration.full_name} <{registration.email}>", fg=typer.colors.GREEN)
    typer.secho(f"  Status: {registration.status.value}", fg=typer.colors.BLUE)
    if registration.phone:
        typer.secho(f"  Phone: {registration.phone}", fg=typer.colors.BLUE)
    if registration.company:
        typer.secho(f"  Company: {registration.company}", fg=typer.colors.BLUE)
    if registration.plus_one:
        plus_one = registration.plus_one_full_name or "(name not given)"
        typer.secho(f"  +1: {plus_one}", fg=typer.colors.BLUE)
    typer.secho(f"  Edit URL: {config.edit_url(registration.edit_token)}", fg=typer.colors.CYAN)
    if registration.edit_token_expires_at:
        expires = registration.edit_token_expires_at.isoformat()
        typer.secho(f"  Token expires: {expires}", fg=typer.colors.CYAN)


@app.command()
def resend_link(
    email: str = typer.Argument(..., help="Email the attendee registered with"),
):
    """Email the current edit link to a registered attendee again."""

    async def _resend():
        registration = await _get_registration(email)
        if registration is None:
            return None
        await _build_service().resend_edit_link(registration.edit_token)
        return registration

    try:
        registration = asyncio.run(_resend())
    except RegistrationError as e:
        typer.secho(e.message, fg=typer.colors.RED)
        raise typer.Exit(1)

    if registration is None:
        typer.secho(f"No registration for {email}", fg=typer.colors.RED)
        raise typer.Exit(1)
    typer.secho(f"Edit link sent to {registration.email}", fg=typer.colors.GREEN)


@app.command("lock-status")
def show_lock_status():
    """Show whether editing is currently locked."""
    event_start = settings.event_start_iso
    if event_start is None:
        typer.secho("EVENT_START_ISO not set; editing never locks.", fg=typer.colors.YELLOW)
        return

    status = lock_status(utcnow(), event_start)
    typer.secho(f"Event starts: {event_start.isoformat()}", fg=typer.colors.BLUE)
    typer.secho(f"Editing locks: {status.lock_at.isoformat()}", fg=typer.colors.BLUE)
    if status.locked:
        typer.secho(status.reason, fg=typer.colors.RED)
    else:
        typer.secho("Editing is open.", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
