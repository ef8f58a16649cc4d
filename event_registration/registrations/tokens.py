import secrets
from datetime import datetime, timedelta

TOKEN_BYTES = 32
TOKEN_TTL = timedelta(days=14)


def generate_token(byte_length: int = TOKEN_BYTES) -> str:
    """Random hex edit token, two characters per byte."""
    return secrets.token_hex(byte_length)


def token_expiry(now: datetime, ttl: timedelta = TOKEN_TTL) -> datetime:
    return now + ttl


def is_expired(expires_at: datetime | None, now: datetime) -> bool:
    """Tokens without an expiry never expire."""
    return expires_at is not None and expires_at < now
