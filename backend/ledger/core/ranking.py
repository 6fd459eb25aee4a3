"""Ranking — deterministic ordering of aggregated totals.

Invariants:
    - PURE and deterministic: same totals in, same ranking out
    - Higher total first; ties broken by ascending key (profession name or client id)

Design Decisions:
    - Ordering happens in Python over Decimal totals rather than in SQL: SQLite
      sums NUMERIC as REAL, and exact Decimal comparison keeps ties honest
"""

from decimal import Decimal
from typing import Hashable, TypeVar

K = TypeVar("K", bound=Hashable)


def rank_totals(
    totals: dict[K, Decimal], limit: int | None = None,
) -> list[tuple[K, Decimal]]:
    """Sort (key, total) pairs: total desc, key asc. Truncate to `limit` when given."""
    ranked = sorted(totals.items(), key=lambda kv: kv[0])
    ranked.sort(key=lambda kv: kv[1], reverse=True)
    return ranked if limit is None else ranked[:limit]
