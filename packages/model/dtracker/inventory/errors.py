"""Exception types raised by the inventory core."""

from __future__ import annotations


class InventoryError(Exception):
    """Base class for inventory failures surfaced to callers."""


class EquipmentNotFoundError(InventoryError, KeyError):
    """Raised when an update or delete references an unknown identifier."""

    def __init__(self, item_id: str) -> None:
        super().__init__(item_id)
        self.item_id = item_id

    def __str__(self) -> str:
        return f"Item not found: {self.item_id}"


class ImportPayloadError(InventoryError, ValueError):
    """Raised when an import payload is rejected as a whole."""


class ImportParseError(ImportPayloadError):
    """The import text is not valid JSON."""


class ImportFormatError(ImportPayloadError):
    """The import document is valid JSON but its root is not an array."""


__all__ = [
    "EquipmentNotFoundError",
    "ImportFormatError",
    "ImportParseError",
    "ImportPayloadError",
    "InventoryError",
]
