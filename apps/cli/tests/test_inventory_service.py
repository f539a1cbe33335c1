from __future__ import annotations

import asyncio
import json

import pytest

from dtracker.inventory import EquipmentNotFoundError, EquipmentQuery, ImportFormatError, ImportParseError
from dtracker_app.core.config import settings
from dtracker_app.services.inventory import InventoryService


def test_import_file_then_list_and_stats(service, import_file):
    async def scenario():
        batch = await service.import_file(import_file)
        return batch, await service.list_equipment(), await service.dashboard_stats()

    batch, items, stats = asyncio.run(scenario())

    assert len(batch) == 3
    assert [item.id for item in items][:2] == ["101", "102"]
    assert items[0].name == "Ultrasonic Gauge"
    assert items[0].assignee_name == "Alice"
    assert items[1].serial_number == "MP-9"
    assert items[1].service == "Drilling"
    assert items[2].due_date == ""
    assert stats.total == 3
    assert stats.breakdown == 1
    assert stats.maintenance == 1
    assert stats.expired == 1
    assert stats.by_type == {"Andt": 1, "Octg": 1, "Accessory": 1}


def test_import_text_rejects_bad_payloads(service):
    with pytest.raises(ImportFormatError):
        asyncio.run(service.import_text('{"id": 1}'))
    with pytest.raises(ImportParseError):
        asyncio.run(service.import_text("[oops"))

    assert asyncio.run(service.list_equipment()) == []


def test_export_file_writes_filtered_rows(service, import_file, tmp_path):
    target = tmp_path / "out.csv"

    async def scenario():
        await service.import_file(import_file)
        return await service.export_file(target, EquipmentQuery(department="rig 4"))

    result = asyncio.run(scenario())
    lines = target.read_text(encoding="utf-8").split("\n")

    assert result == {"path": str(target), "rows": 1}
    assert len(lines) == 2
    assert '"Mud Pump","MP-9"' in lines[1]


def test_departments_lists_unique_values(service, import_file):
    async def scenario():
        await service.import_file(import_file)
        return await service.departments()

    assert asyncio.run(scenario()) == ["Inspection", "Rig 4"]


def test_dashboard_stats_uses_configured_window(service, monkeypatch):
    async def scenario():
        await service.add_equipment({"name": "Future", "dueDate": "2100-01-01"})
        return await service.dashboard_stats()

    assert asyncio.run(scenario()).expired == 0

    monkeypatch.setattr(settings, "EXPIRY_WINDOW_DAYS", 200 * 365)
    assert asyncio.run(service.dashboard_stats()).expired == 1


def test_store_defaults_to_data_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "DATA_DIR", str(tmp_path))
    monkeypatch.setattr(settings, "STORAGE_KEY", "inventory_test")
    svc = InventoryService()

    asyncio.run(svc.add_equipment({"name": "Winch"}))

    assert (tmp_path / "inventory_test.json").exists()


def test_settings_resolve_relative_paths(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "BASE_DIR", tmp_path)
    monkeypatch.setattr(settings, "DATA_DIR", "store")
    monkeypatch.setattr(settings, "LOG_DIR", "/var/log/dtracker")

    assert settings.data_dir_path == tmp_path / "store"
    assert str(settings.log_dir_path) == "/var/log/dtracker"


def test_qr_label_encodes_id_serial_and_assignee(service, import_file):
    async def scenario():
        await service.import_file(import_file)
        return await service.qr_label(101)

    assert json.loads(asyncio.run(scenario())) == {"id": "101", "sn": "N/A", "assignedTo": "Alice"}

    with pytest.raises(EquipmentNotFoundError):
        asyncio.run(service.qr_label("missing"))
