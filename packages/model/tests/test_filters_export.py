from __future__ import annotations

from dtracker.inventory.export import EXPORT_HEADER, export_csv
from dtracker.inventory.filters import EquipmentQuery, list_departments
from dtracker.inventory.models import Equipment


def _record(**fields) -> Equipment:
    return Equipment.model_validate(fields)


RECORDS = [
    _record(id="1", name="Drill Press", serialNumber="DP-01", department="Drilling", status="Breakdown"),
    _record(id="2", name="Gauge", assigneeName="Alice Smith", empId="E-77", department="drilling", status="Available"),
    _record(id="3", name="Crane", department="Marine Ops", status="breakdown"),
    _record(id="4", name="Spare", department="  "),
]


def test_query_filters_status_case_insensitively():
    assert [r.id for r in EquipmentQuery(status="BREAKDOWN").apply(RECORDS)] == ["1", "3"]


def test_query_search_spans_name_serial_assignee_and_emp_id():
    assert [r.id for r in EquipmentQuery(search="dp-0").apply(RECORDS)] == ["1"]
    assert [r.id for r in EquipmentQuery(search="smith").apply(RECORDS)] == ["2"]
    assert [r.id for r in EquipmentQuery(search="e-77").apply(RECORDS)] == ["2"]
    assert EquipmentQuery(search="zzz").apply(RECORDS) == []


def test_query_department_filter():
    assert [r.id for r in EquipmentQuery(department="DRILLING").apply(RECORDS)] == ["1", "2"]
    assert len(EquipmentQuery().apply(RECORDS)) == 4


def test_list_departments_skips_blanks():
    assert list_departments(RECORDS) == ["Drilling", "Marine Ops", "drilling"]


def test_export_csv_layout_and_quoting():
    record = _record(type="ANDT", name='Gauge 6" dial', serialNumber="G-1", remarks="")

    lines = export_csv([record]).split("\n")

    assert lines[0] == ",".join(EXPORT_HEADER)
    assert lines[0].startswith("Type,Service,Dept,Status,Name,Serial,Due Date")
    assert lines[1] == '"ANDT","","","Available","Gauge 6"" dial","G-1","","","","","",""'


def test_export_csv_with_no_records_is_header_only():
    assert export_csv([]) == ",".join(EXPORT_HEADER)


def test_export_csv_quotes_separators_inside_fields():
    record = _record(name="Crane", remarks="bent, see log\nline 2")

    text = export_csv([record, _record(name="Hoist")])

    assert text.endswith('"Hoist","N/A","","","","","",""')
    assert '"bent, see log\nline 2"' in text
