from __future__ import annotations

import sys
from pathlib import Path

import pytest

APP_ROOT = Path(__file__).resolve().parents[1]
MODEL_ROOT = Path(__file__).resolve().parents[3] / "packages" / "model"
for root in (APP_ROOT, MODEL_ROOT):
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))

from dtracker.inventory.store import EquipmentStore, MemoryStorage  # noqa: E402
from dtracker_app.services.inventory import InventoryService  # noqa: E402


@pytest.fixture
def service() -> InventoryService:
    return InventoryService(EquipmentStore(MemoryStorage()))


@pytest.fixture
def import_file(tmp_path):
    path = tmp_path / "csvjson.json"
    path.write_text(
        """[
          {"id": 101, "equipment_name": "Ultrasonic Gauge", "name": "Alice", "type": "andt",
           "status": "BREAKDOWN", "department": "Inspection", "due_date": "2020-01-01"},
          {"id": "102", "name": "Mud Pump", "type": "OCTG", "status": "maintenance",
           "serial_number": "MP-9", "services": "Drilling", "department": "Rig 4"},
          {"type": "Accessory", "dueDate": "not a date"}
        ]""",
        encoding="utf-8",
    )
    return path
