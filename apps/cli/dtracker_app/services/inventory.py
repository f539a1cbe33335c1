"""Inventory service.

Binds the equipment store to the configured data directory and exposes the
operator actions: list, add, update, delete, import, export, dashboard
statistics, department listing and QR label payloads.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from dtracker.inventory import (
    DashboardStats,
    Equipment,
    EquipmentQuery,
    EquipmentStore,
    JsonFileStorage,
    compute_stats,
    export_csv,
    list_departments,
    parse_import_payload,
    qr_payload,
)

from ..core.config import settings
from ..core.logger import get_logger

logger = get_logger("inventory_service")


class InventoryService:
    """Operator-facing inventory actions over one equipment store."""

    def __init__(self, store: Optional[EquipmentStore] = None) -> None:
        self._store = store

    @property
    def store(self) -> EquipmentStore:
        if self._store is None:
            logger.info("Opening equipment store in %s", settings.data_dir_path)
            self._store = EquipmentStore(
                JsonFileStorage(settings.data_dir_path),
                key=settings.STORAGE_KEY,
            )
        return self._store

    async def list_equipment(self, query: Optional[EquipmentQuery] = None) -> List[Equipment]:
        items = await self.store.get_all()
        return query.apply(items) if query else items

    async def departments(self) -> List[str]:
        return list_departments(await self.store.get_all())

    async def qr_label(self, item_id: str) -> str:
        """Payload printed into the asset label QR code of one record."""
        return qr_payload(await self.store.get(item_id))

    async def add_equipment(self, fields: Mapping[str, Any]) -> Equipment:
        return await self.store.add(fields)

    async def update_equipment(self, item_id: str, fields: Mapping[str, Any]) -> Equipment:
        return await self.store.update(item_id, fields)

    async def delete_equipment(self, item_id: str) -> None:
        await self.store.delete(item_id)

    async def import_text(self, text: str | bytes) -> List[Equipment]:
        items = parse_import_payload(text)
        return await self.store.import_bulk(items)

    async def import_file(self, path: Path | str) -> List[Equipment]:
        path = Path(path)
        logger.info("Importing equipment from %s", path)
        batch = await self.import_text(path.read_bytes())
        logger.info("Import successful: %d records from %s", len(batch), path.name)
        return batch

    async def export_file(self, path: Optional[Path | str] = None, query: Optional[EquipmentQuery] = None) -> Dict[str, object]:
        target = Path(path) if path else Path(settings.EXPORT_FILENAME)
        items = await self.list_equipment(query)
        target.write_text(export_csv(items), encoding="utf-8")
        logger.info("Exported %d records to %s", len(items), target)
        return {"path": str(target), "rows": len(items)}

    async def dashboard_stats(self) -> DashboardStats:
        items = await self.store.get_all()
        return compute_stats(items, window_days=settings.EXPIRY_WINDOW_DAYS)


inventory_service = InventoryService()
