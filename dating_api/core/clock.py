"""Clock — the single injectable time source for age derivation and timestamps.

Invariants:
    - Core logic never calls datetime.now() / date.today() directly
    - now() is timezone-aware (UTC); today() is now().date()

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass a FixedClock
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...
    def today(self) -> date: ...


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def today(self) -> date:
        return self.now().date()


@dataclass
class FixedClock:
    """Frozen clock for tests and replays."""
    instant: datetime

    def now(self) -> datetime:
        return self.instant

    def today(self) -> date:
        return self.instant.date()
