"""
Equipment Store

Persists the whole equipment collection as one JSON document under a single
storage key. Every operation reads the full document, changes it in memory
and writes it back while holding the store's lock, so operations issued
against one store run one after another.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence

from pydantic import ValidationError

from .bulk_importer import BulkImporter
from .errors import EquipmentNotFoundError
from .field_normalizer import generate_id, now_iso, to_text
from .models import Equipment

logger = logging.getLogger(__name__)

STORAGE_KEY = "dtracker_equipment_data"

# Fields that are set once at creation and ignored in updates.
IMMUTABLE_KEYS = frozenset({"id", "createdAt", "created_at"})

# Attribute name -> persisted key, for schema fields whose names differ.
FIELD_ALIASES = {name: info.alias for name, info in Equipment.model_fields.items() if info.alias}


class StorageBackend(Protocol):
    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    """Dict-backed storage for tests and dry runs."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


class JsonFileStorage:
    """Stores each key as ``<root>/<key>.json``."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        # Readers never see a partially written document.
        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self.root)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fp:
                fp.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class EquipmentStore:
    """Async CRUD and bulk import over one persisted equipment collection."""

    def __init__(
        self,
        backend: StorageBackend,
        *,
        key: str = STORAGE_KEY,
        importer: Optional[BulkImporter] = None,
    ) -> None:
        self._backend = backend
        self._key = key
        self._importer = importer or BulkImporter()
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def lock(self) -> asyncio.Lock:
        """Lock bound to the running event loop, recreated when the loop changes."""
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    @staticmethod
    def _canonical(fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Rename attribute-style keys (``serial_number``) to their persisted aliases."""
        data = {FIELD_ALIASES.get(key, key): value for key, value in fields.items()}
        return {key: value for key, value in data.items() if key not in IMMUTABLE_KEYS}

    async def _read(self) -> List[Equipment]:
        stored = await asyncio.to_thread(self._backend.get_item, self._key)
        if not stored:
            return []
        try:
            raw_items = json.loads(stored)
        except ValueError as exc:
            logger.warning("Failed to parse equipment data under %s, treating as empty: %s", self._key, exc)
            return []
        if not isinstance(raw_items, list):
            logger.warning(
                "Equipment data under %s is a %s, not an array; treating as empty",
                self._key,
                type(raw_items).__name__,
            )
            return []

        items: List[Equipment] = []
        for position, raw in enumerate(raw_items):
            if not isinstance(raw, Mapping):
                logger.warning("Skipping non-object entry #%d under %s: %r", position, self._key, raw)
                continue
            try:
                items.append(Equipment.model_validate(raw))
            except ValidationError as exc:
                logger.warning("Skipping invalid entry #%d under %s: %s", position, self._key, exc)
        return items

    async def get(self, item_id: Any) -> Equipment:
        """Return the first record with ``item_id``."""
        target = to_text(item_id)
        async with self.lock:
            items = await self._read()
        for item in items:
            if item.id == target:
                return item
        raise EquipmentNotFoundError(target)

    async def _write(self, items: Sequence[Equipment]) -> None:
        document = json.dumps([item.to_record() for item in items], ensure_ascii=False)
        await asyncio.to_thread(self._backend.set_item, self._key, document)

    async def get_all(self) -> List[Equipment]:
        async with self.lock:
            return await self._read()

    async def add(self, fields: Mapping[str, Any]) -> Equipment:
        """Create a record from ``fields``; ``id`` and ``createdAt`` are always assigned here."""
        data = self._canonical(fields)
        data["id"] = generate_id()
        data["createdAt"] = now_iso()
        item = Equipment.model_validate(data)
        async with self.lock:
            items = await self._read()
            items.append(item)
            await self._write(items)
        logger.info("Added equipment id=%s name=%s", item.id, item.name)
        return item

    async def update(self, item_id: Any, updates: Mapping[str, Any]) -> Equipment:
        """Overwrite the supplied fields of the first record with ``item_id``."""
        target = to_text(item_id)
        changes = self._canonical(updates)
        async with self.lock:
            items = await self._read()
            index = next((idx for idx, item in enumerate(items) if item.id == target), None)
            if index is None:
                raise EquipmentNotFoundError(target)
            updated = Equipment.model_validate({**items[index].to_record(), **changes})
            items[index] = updated
            await self._write(items)
        logger.info("Updated equipment id=%s fields=%s", target, sorted(changes))
        return updated

    async def delete(self, item_id: Any) -> None:
        """Remove every record with ``item_id``."""
        target = to_text(item_id)
        async with self.lock:
            items = await self._read()
            remaining = [item for item in items if item.id != target]
            if len(remaining) == len(items):
                raise EquipmentNotFoundError(target)
            await self._write(remaining)
        logger.info("Deleted %d equipment record(s) with id=%s", len(items) - len(remaining), target)

    async def import_bulk(self, items: Any) -> List[Equipment]:
        """Map ``items`` and append them to the stored collection."""
        batch = self._importer.prepare(items)
        async with self.lock:
            current = await self._read()
            await self._write([*current, *batch])
        logger.info("Imported %d equipment records (store now holds %d)", len(batch), len(current) + len(batch))
        return batch


__all__ = [
    "EquipmentStore",
    "FIELD_ALIASES",
    "IMMUTABLE_KEYS",
    "JsonFileStorage",
    "MemoryStorage",
    "STORAGE_KEY",
    "StorageBackend",
]
