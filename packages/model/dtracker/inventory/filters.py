"""List-view filtering: status, free-text search and department."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .models import Equipment

ALL_DEPARTMENTS = "All"


@dataclass(frozen=True)
class EquipmentQuery:
    status: Optional[str] = None
    search: str = ""
    department: str = ALL_DEPARTMENTS

    def matches(self, record: Equipment) -> bool:
        if self.status and (record.status or "").lower() != self.status.lower():
            return False

        if self.search:
            needle = self.search.lower()
            haystack = (record.name, record.serial_number, record.assignee_name, record.emp_id)
            if not any(needle in (value or "").lower() for value in haystack):
                return False

        if self.department != ALL_DEPARTMENTS:
            if (record.department or "").lower() != self.department.lower():
                return False
        return True

    def apply(self, records: Iterable[Equipment]) -> List[Equipment]:
        return [record for record in records if self.matches(record)]


def list_departments(records: Iterable[Equipment]) -> List[str]:
    """Sorted unique departments, blanks skipped."""
    return sorted({record.department for record in records if (record.department or "").strip()})


__all__ = ["ALL_DEPARTMENTS", "EquipmentQuery", "list_departments"]
