"""
Bulk Importer

Parses an import document and maps every element through ``RecordMapper``.
Records are never dropped: a malformed element becomes a record built from
defaults. Identifiers are not de-duplicated against the store.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Mapping, Optional

from .errors import ImportFormatError, ImportParseError
from .field_normalizer import is_falsy
from .models import Equipment
from .record_mapper import RecordMapper

logger = logging.getLogger(__name__)


def parse_import_payload(text: str | bytes) -> List[Any]:
    """Decode an import file. The root must be a JSON array."""
    try:
        payload = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise ImportParseError(f"Invalid JSON file: {exc}") from exc
    if not isinstance(payload, list):
        raise ImportFormatError("Invalid file format: Root must be an array.")
    return payload


class BulkImporter:
    def __init__(self, mapper: Optional[RecordMapper] = None) -> None:
        self._mapper = mapper or RecordMapper()

    def prepare(self, items: Any) -> List[Equipment]:
        if not isinstance(items, (list, tuple)):
            raise ImportFormatError("Invalid file format: Root must be an array.")
        batch = [self._mapper.map(item) for item in items]
        generated = sum(1 for item in items if not _has_id(item))
        logger.info("Mapped %d import records (%d assigned new ids)", len(batch), generated)
        return batch


def _has_id(item: Any) -> bool:
    return isinstance(item, Mapping) and not is_falsy(item.get("id"))


__all__ = ["BulkImporter", "parse_import_payload"]
