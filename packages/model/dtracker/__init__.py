"""
dtracker package exposing the equipment inventory core.

The modules are organized under ``dtracker.inventory`` so callers can import
the store, the import pipeline and the statistics helpers directly from this
namespace.
"""

from .inventory import (
    BulkImporter,
    DashboardStats,
    Equipment,
    EquipmentQuery,
    EquipmentStore,
    JsonFileStorage,
    MemoryStorage,
    RecordMapper,
    compute_stats,
    export_csv,
)

__all__ = [
    "BulkImporter",
    "DashboardStats",
    "Equipment",
    "EquipmentQuery",
    "EquipmentStore",
    "JsonFileStorage",
    "MemoryStorage",
    "RecordMapper",
    "compute_stats",
    "export_csv",
]
