"""
Record Mapper

Maps one externally sourced equipment record (hand-edited JSON, database
dumps with snake_case keys, spreadsheet conversions) onto the ``Equipment``
schema. Every schema field is always produced; per-field problems resolve to
defaults and never raise.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .field_normalizer import generate_id, is_falsy, normalize_enum, now_iso, safe_date, to_text
from .models import DEFAULT_NAME, DEFAULT_SERIAL, DEFAULT_STATUS, DEFAULT_TYPE, Equipment

# Source keys tried in order for each target key; the first truthy value wins.
SERIAL_KEYS = ("serialNumber", "serial_number", "SerialNumber")
DUE_DATE_KEYS = ("dueDate", "due_date")
ISSUE_DATE_KEYS = ("issueDate", "issue_date")
EMP_ID_KEYS = ("empId", "emp_id", "employee_id")
ASSIGNEE_KEYS = ("assigneeName", "assignee_name")
SERVICE_KEYS = ("service", "services")


def first_truthy(source: Mapping[str, Any], keys, default: Any = None) -> Any:
    for key in keys:
        value = source.get(key)
        if not is_falsy(value):
            return value
    return default


class RecordMapper:
    """Coerce arbitrary mappings into ``Equipment`` records."""

    def map(self, source: Any) -> Equipment:
        if not isinstance(source, Mapping):
            source = {}
        return Equipment.model_validate(self.map_fields(source))

    def map_fields(self, source: Mapping[str, Any]) -> Dict[str, Any]:
        """Return the camelCase field dict for ``source``, extra keys included."""
        mapped: Dict[str, Any] = {str(key): value for key, value in source.items()}

        name, assignee = self._resolve_names(source)
        raw_id = source.get("id")
        created_at = source.get("createdAt")

        mapped.update(
            {
                "id": generate_id() if is_falsy(raw_id) else to_text(raw_id),
                "createdAt": now_iso() if is_falsy(created_at) else created_at,
                "serialNumber": to_text(first_truthy(source, SERIAL_KEYS, DEFAULT_SERIAL)),
                "dueDate": safe_date(first_truthy(source, DUE_DATE_KEYS)),
                "issueDate": safe_date(first_truthy(source, ISSUE_DATE_KEYS)),
                "empId": to_text(first_truthy(source, EMP_ID_KEYS, "")),
                "name": to_text(name),
                "assigneeName": to_text(assignee),
                "status": normalize_enum(source.get("status"), DEFAULT_STATUS),
                "type": normalize_enum(source.get("type"), DEFAULT_TYPE),
                "location": self._text_or_empty(source.get("location")),
                "remarks": self._text_or_empty(source.get("remarks")),
                "service": to_text(first_truthy(source, SERVICE_KEYS, "")),
                "department": self._text_or_empty(source.get("department")),
            }
        )
        return mapped

    @staticmethod
    def _resolve_names(source: Mapping[str, Any]) -> tuple[Any, Any]:
        # Some exports use ``name`` for the asset, others for the person holding
        # it. A present ``equipment_name`` means ``name`` is the person.
        name: Any = first_truthy(source, ("name", "equipment_name"), DEFAULT_NAME)
        assignee: Optional[Any] = first_truthy(source, ASSIGNEE_KEYS, "")

        equipment_name = source.get("equipment_name")
        if not is_falsy(equipment_name):
            name = equipment_name
            person = source.get("name")
            if not is_falsy(person) and is_falsy(assignee):
                assignee = person
        return name, assignee

    @staticmethod
    def _text_or_empty(value: Any) -> str:
        return "" if is_falsy(value) else to_text(value)


_default_mapper = RecordMapper()


def map_record(source: Any) -> Equipment:
    return _default_mapper.map(source)


__all__ = ["RecordMapper", "first_truthy", "map_record"]
