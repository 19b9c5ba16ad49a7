"""Time sources for token issuance."""

from datetime import datetime, UTC
from typing import Protocol


class Clock(Protocol):
    """Anything that can tell the current time."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall clock, timezone-aware UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedClock:
    """Clock stopped at a single instant."""

    def __init__(self, at: datetime | int | float) -> None:
        if isinstance(at, (int, float)):
            at = datetime.fromtimestamp(at, tz=UTC)
        elif at.tzinfo is None:
            # Naive datetimes are UTC
            at = at.replace(tzinfo=UTC)
        self._at = at

    def now(self) -> datetime:
        return self._at
