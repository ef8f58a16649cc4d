"""Edit lock window.

Editing and resending links close 24 hours before the event starts. Without a
configured start time the window never closes.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

LOCK_BEFORE_EVENT = timedelta(hours=24)


@dataclass(frozen=True)
class LockStatus:
    locked: bool
    lock_at: datetime | None = None

    @property
    def reason(self) -> str | None:
        if not self.locked:
            return None
        return (
            "Editing is locked 24h before the event "
            f"(locked since {self.lock_at.isoformat()})."
        )


def lock_threshold(event_start: datetime | None) -> datetime | None:
    if event_start is None:
        return None
    return event_start - LOCK_BEFORE_EVENT


def is_locked(now: datetime, event_start: datetime | None) -> bool:
    threshold = lock_threshold(event_start)
    return threshold is not None and now >= threshold


def lock_status(now: datetime, event_start: datetime | None) -> LockStatus:
    return LockStatus(
        locked=is_locked(now, event_start),
        lock_at=lock_threshold(event_start),
    )
