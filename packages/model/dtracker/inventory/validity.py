"""Due-date validity and the payload encoded into asset label QR codes."""

from __future__ import annotations

import json
import math
from datetime import datetime, timezone
from typing import Optional

from .field_normalizer import parse_instant
from .models import Equipment

_SECONDS_PER_DAY = 24 * 60 * 60


def days_remaining(due_date: str, now: Optional[datetime] = None) -> Optional[int]:
    """Whole days until ``due_date`` rounded up, or ``None`` if it is not a valid date."""
    if not due_date:
        return None
    due = parse_instant(due_date)
    if due is None:
        return None
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return math.ceil((due - now).total_seconds() / _SECONDS_PER_DAY)


def validity_label(record: Equipment, now: Optional[datetime] = None) -> str:
    remaining = days_remaining(record.due_date, now)
    if remaining is None:
        return "No Date"
    if remaining > 0:
        return f"{remaining} Days Remaining"
    return "Expired"


def qr_payload(record: Equipment) -> str:
    return json.dumps(
        {"id": record.id, "sn": record.serial_number, "assignedTo": record.assignee_name},
        separators=(",", ":"),
        ensure_ascii=False,
    )


__all__ = ["days_remaining", "qr_payload", "validity_label"]
