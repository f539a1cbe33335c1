"""Equipment inventory core: normalization, import, storage, statistics."""

from .bulk_importer import BulkImporter, parse_import_payload
from .errors import (
    EquipmentNotFoundError,
    ImportFormatError,
    ImportParseError,
    ImportPayloadError,
    InventoryError,
)
from .export import EXPORT_HEADER, export_csv
from .field_normalizer import generate_id, normalize_enum, safe_date
from .filters import EquipmentQuery, list_departments
from .models import DashboardStats, Equipment, EquipmentStatus, EquipmentType
from .record_mapper import RecordMapper, map_record
from .stats import compute_stats
from .store import EquipmentStore, JsonFileStorage, MemoryStorage, StorageBackend
from .validity import days_remaining, qr_payload, validity_label

__all__ = [
    "BulkImporter",
    "DashboardStats",
    "EXPORT_HEADER",
    "Equipment",
    "EquipmentNotFoundError",
    "EquipmentQuery",
    "EquipmentStatus",
    "EquipmentStore",
    "EquipmentType",
    "ImportFormatError",
    "ImportParseError",
    "ImportPayloadError",
    "InventoryError",
    "JsonFileStorage",
    "MemoryStorage",
    "RecordMapper",
    "StorageBackend",
    "compute_stats",
    "days_remaining",
    "export_csv",
    "generate_id",
    "list_departments",
    "map_record",
    "normalize_enum",
    "parse_import_payload",
    "qr_payload",
    "safe_date",
    "validity_label",
]
