"""Pydantic models for equipment records and dashboard statistics."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .field_normalizer import generate_id, now_iso, safe_date, to_text


class EquipmentStatus(str, Enum):
    AVAILABLE = "Available"
    ASSIGNED = "Assigned"
    MAINTENANCE = "Maintenance"
    BREAKDOWN = "Breakdown"
    DISPOSED = "Disposed"


class EquipmentType(str, Enum):
    ANDT = "ANDT"
    NA = "NA"
    OCTG = "OCTG"
    MARINE = "MARINE"
    ACCESSORY = "Accessory"
    OTHER = "Other"


DEFAULT_STATUS = EquipmentStatus.AVAILABLE.value
DEFAULT_TYPE = EquipmentType.OTHER.value
DEFAULT_NAME = "Unknown Equipment"
DEFAULT_SERIAL = "N/A"

_TEXT_FIELDS = (
    "id",
    "type",
    "service",
    "department",
    "status",
    "name",
    "serial_number",
    "emp_id",
    "assignee_name",
    "location",
    "remarks",
    "created_at",
)


class Equipment(BaseModel):
    """One tracked asset.

    Attributes are snake_case; the persisted form uses the camelCase aliases.
    Keys outside the schema are kept as extra fields and persisted unchanged.
    ``status`` and ``type`` are plain strings because imported labels are only
    case-normalized, not validated against the enums above.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(default_factory=generate_id, description="Opaque identifier")
    type: str = Field(DEFAULT_TYPE, description="Equipment type label")
    service: str = Field("", description="Owning service line")
    department: str = Field("", description="Owning department")
    status: str = Field(DEFAULT_STATUS, description="Lifecycle status label")
    name: str = Field(DEFAULT_NAME, description="Model or display name of the asset")
    serial_number: str = Field(DEFAULT_SERIAL, alias="serialNumber")
    due_date: str = Field("", alias="dueDate", description="ISO instant or empty")
    issue_date: str = Field("", alias="issueDate", description="ISO instant or empty")
    emp_id: str = Field("", alias="empId", description="Assignee employee id")
    assignee_name: str = Field("", alias="assigneeName")
    location: str = ""
    remarks: str = ""
    created_at: str = Field(default_factory=now_iso, alias="createdAt")

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return to_text(value)

    @field_validator("due_date", "issue_date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> str:
        return safe_date(value)

    def to_record(self) -> Dict[str, Any]:
        """Return the persisted (camelCase) form, extra keys included."""
        return self.model_dump(by_alias=True)


class DashboardStats(BaseModel):
    """Aggregate counts shown on the dashboard."""

    by_type: Dict[str, int] = Field(default_factory=dict)
    expired: int = Field(0, ge=0, description="Due within the window, overdue included")
    breakdown: int = Field(0, ge=0)
    maintenance: int = Field(0, ge=0)
    total: int = Field(0, ge=0)

    def type_shares(self) -> Dict[str, float]:
        """Percentage of the total per type, rounded to one decimal."""
        if self.total <= 0:
            return {label: 0.0 for label in self.by_type}
        return {label: round(count * 100.0 / self.total, 1) for label, count in self.by_type.items()}


__all__ = [
    "DEFAULT_NAME",
    "DEFAULT_SERIAL",
    "DEFAULT_STATUS",
    "DEFAULT_TYPE",
    "DashboardStats",
    "Equipment",
    "EquipmentStatus",
    "EquipmentType",
]
