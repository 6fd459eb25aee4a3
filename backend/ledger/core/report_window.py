"""Report Window — the half-open [start, end) payment-date range for admin reports.

Invariants:
    - start < end, otherwise InvalidWindowError
    - A payment exactly at `start` is inside; exactly at `end` is outside
      (applied as SQL predicates in services/reporting_engine.py)
    - Naive datetimes are read as UTC; aware datetimes are converted to UTC

Design Decisions:
    - Half-open over closed: adjacent windows (one day, the next day) never
      double-count a payment sitting on the boundary
    - Frozen dataclass: a window is a value, safe to pass to concurrent queries
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from ledger.core.errors import InvalidWindowError


def as_utc(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


@dataclass(frozen=True)
class PaymentWindow:
    """Half-open [start, end) range over job payment dates."""
    start: datetime
    end: datetime

    @classmethod
    def of(cls, start: datetime, end: datetime) -> "PaymentWindow":
        """Normalize to UTC and validate ordering."""
        start, end = as_utc(start), as_utc(end)
        if start >= end:
            raise InvalidWindowError(
                f"Window start {start.isoformat()} must be before end {end.isoformat()}",
            )
        return cls(start=start, end=end)
