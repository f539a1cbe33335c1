"""Dashboard statistics computed by a full rescan of the record set."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, Optional

from .field_normalizer import normalize_enum, parse_instant
from .models import DEFAULT_TYPE, DashboardStats, Equipment, EquipmentStatus

EXPIRY_WINDOW_DAYS = 30

_BREAKDOWN = EquipmentStatus.BREAKDOWN.value.lower()
_MAINTENANCE = EquipmentStatus.MAINTENANCE.value.lower()


def compute_stats(
    records: Iterable[Equipment],
    *,
    now: Optional[datetime] = None,
    window_days: int = EXPIRY_WINDOW_DAYS,
) -> DashboardStats:
    """Count records per type and status, and those due within ``window_days``.

    The due window has no lower bound: overdue records count as expiring.
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    horizon = now + timedelta(days=window_days)

    by_type: Dict[str, int] = {}
    total = expired = breakdown = maintenance = 0
    for record in records:
        total += 1
        # Same case folding as import so "laptop" and "LAPTOP" share a bucket.
        label = normalize_enum(record.type, DEFAULT_TYPE)
        by_type[label] = by_type.get(label, 0) + 1

        status = (record.status or "").strip().lower()
        if status == _BREAKDOWN:
            breakdown += 1
        elif status == _MAINTENANCE:
            maintenance += 1

        if record.due_date:
            due = parse_instant(record.due_date)
            if due is not None and due <= horizon:
                expired += 1

    return DashboardStats(
        by_type=by_type,
        expired=expired,
        breakdown=breakdown,
        maintenance=maintenance,
        total=total,
    )


__all__ = ["EXPIRY_WINDOW_DAYS", "compute_stats"]
