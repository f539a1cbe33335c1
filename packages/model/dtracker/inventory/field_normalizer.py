"""
Field Normalizer

Pure coercion helpers used while ingesting loosely structured equipment
records. Every function here returns a usable value for any input and never
raises: malformed values collapse to the field's default instead.

Instants are rendered as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC, the same shape
browser exports produce, so a rendered value always re-parses to the same
instant.
"""

from __future__ import annotations

import json
import math
import secrets
import string
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_LENGTH = 9
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Non-ISO layouts seen in spreadsheet and database exports.
_TEXT_FORMATS = (
    "%Y",
    "%Y-%m",
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%B %d, %Y",
    "%a %b %d %Y",
    "%a, %d %b %Y %H:%M:%S GMT",
)


def is_falsy(value: Any) -> bool:
    """Return True for the values an exported JSON document treats as "not set".

    ``None``, ``False``, numeric zero, NaN and the empty string are falsy.
    Empty lists and objects are not.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or value != value
    return False


def to_text(value: Any) -> str:
    """Render ``value`` as text the way a JSON consumer would display it."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def normalize_enum(value: Any, fallback: str) -> str:
    """Title-case ``value`` (``"BREAKDOWN"`` -> ``"Breakdown"``) or return ``fallback`` when empty.

    Membership in a fixed label set is not checked.
    """
    text = "" if is_falsy(value) else to_text(value).strip()
    if not text:
        return fallback
    return text[:1].upper() + text[1:].lower()


def _parse_text(text: str) -> Optional[datetime]:
    text = text.strip()
    if not text:
        return None
    iso_text = text[:-1] + "+00:00" if text[-1] in "zZ" else text
    try:
        return datetime.fromisoformat(iso_text)
    except ValueError:
        pass
    for fmt in _TEXT_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def parse_instant(value: Any) -> Optional[datetime]:
    """Parse ``value`` into an aware UTC datetime, or return ``None``.

    Numbers are epoch milliseconds. Naive datetimes and date-only text are
    taken as UTC.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime(value.year, value.month, value.day)
        elif isinstance(value, (int, float)):
            if not math.isfinite(value):
                return None
            return _EPOCH + timedelta(milliseconds=value)
        elif isinstance(value, str):
            parsed = _parse_text(value)
        else:
            return None
        if parsed is None:
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        return None


def format_instant(instant: datetime) -> str:
    """Render an aware datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    utc = instant.astimezone(timezone.utc)
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}.{utc.microsecond // 1000:03d}Z"
    )


def safe_date(value: Any) -> str:
    """Return the ISO form of ``value`` or ``""`` when it is empty or unparseable."""
    if is_falsy(value):
        return ""
    instant = parse_instant(value)
    if instant is None:
        return ""
    try:
        return format_instant(instant)
    except (OverflowError, ValueError):
        return ""


def now_iso() -> str:
    return format_instant(datetime.now(timezone.utc))


def generate_id() -> str:
    """Return a short random base-36 identifier. Collisions are not checked."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


__all__ = [
    "format_instant",
    "generate_id",
    "is_falsy",
    "normalize_enum",
    "now_iso",
    "parse_instant",
    "safe_date",
    "to_text",
]
