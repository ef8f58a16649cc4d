from datetime import UTC, datetime

from typer.testing import CliRunner

from event_registration import cli
from event_registration.config.settings import settings
from event_registration.registrations.tests.inmemory_models import EVENT_START, LOCK_AT

runner = CliRunner()


def test_lock_status_without_event_start(monkeypatch):
    monkeypatch.setattr(settings, "event_start_iso", None)

    result = runner.invoke(cli.app, ["lock-status"])

    assert result.exit_code == 0
    assert "editing never locks" in result.output


def test_lock_status_open(monkeypatch):
    monkeypatch.setattr(settings, "event_start_iso", EVENT_START)
    monkeypatch.setattr(cli, "utcnow", lambda: datetime(2026, 10, 19, 12, 0, tzinfo=UTC))

    result = runner.invoke(cli.app, ["lock-status"])

    assert result.exit_code == 0
    assert f"Editing locks: {LOCK_AT.isoformat()}" in result.output
    assert "Editing is open." in result.output


def test_lock_status_locked(monkeypatch):
    monkeypatch.setattr(settings, "event_start_iso", EVENT_START)
    monkeypatch.setattr(cli, "utcnow", lambda: LOCK_AT)

    result = runner.invoke(cli.app, ["lock-status"])

    assert result.exit_code == 0
    assert "Editing is locked 24h before the event" in result.output
