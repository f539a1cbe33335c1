"""CSV export of the (filtered) equipment list."""

from __future__ import annotations

import csv
import io
from typing import Iterable, List

from .models import Equipment

EXPORT_HEADER = (
    "Type",
    "Service",
    "Dept",
    "Status",
    "Name",
    "Serial",
    "Due Date",
    "Issue Date",
    "EmpID",
    "Assignee",
    "Location",
    "Remarks",
)


def _row(record: Equipment) -> List[str]:
    return [
        record.type,
        record.service,
        record.department,
        record.status,
        record.name,
        record.serial_number,
        record.due_date,
        record.issue_date,
        record.emp_id,
        record.assignee_name,
        record.location,
        record.remarks,
    ]


def export_csv(records: Iterable[Equipment]) -> str:
    """Render records as CSV: plain header line, every data field double-quoted."""
    buffer = io.StringIO()
    buffer.write(",".join(EXPORT_HEADER) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(_row(record) for record in records)
    # No terminator after the last line.
    return buffer.getvalue()[:-1]


__all__ = ["EXPORT_HEADER", "export_csv"]
