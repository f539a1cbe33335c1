"""
dtracker command line
=====================

Operator front end for the equipment inventory.

Example
-------
    python -m dtracker_app.main import data/csvjson.json
    python -m dtracker_app.main list --department Drilling
    python -m dtracker_app.main update 4f2k9x1ab status=Maintenance location="Yard 2"
    python -m dtracker_app.main export --output equipment_list.csv
    python -m dtracker_app.main stats
    python -m dtracker_app.main qr 4f2k9x1ab
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Dict, List, Optional, Sequence, Tuple

from dtracker.inventory import Equipment, EquipmentQuery, InventoryError, validity_label
from dtracker.inventory.filters import ALL_DEPARTMENTS

from .core.config import settings
from .core.logger import get_logger
from .services.inventory import InventoryService, inventory_service

# Configure logging for the library namespace as well as the app loggers.
logger = get_logger()


def _field_pair(text: str) -> Tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected key=value, got {text!r}")
    return key.strip(), value


def _query_from_args(args: argparse.Namespace) -> EquipmentQuery:
    return EquipmentQuery(
        status=args.status or None,
        search=args.search or "",
        department=args.department or ALL_DEPARTMENTS,
    )


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--search", default="", help="Match name, serial, assignee or employee id")
    parser.add_argument("--department", default=ALL_DEPARTMENTS, help="Department filter")
    parser.add_argument("--status", default=None, help="Status filter (case-insensitive)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dtracker", description="Equipment inventory tracker")
    parser.add_argument("--version", action="version", version=f"%(prog)s {settings.VERSION}")
    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List equipment records")
    _add_filter_arguments(list_cmd)
    list_cmd.add_argument("--json", action="store_true", help="Print records as JSON")

    add_cmd = sub.add_parser("add", help="Add one equipment record")
    add_cmd.add_argument("fields", nargs="*", type=_field_pair, metavar="KEY=VALUE")

    update_cmd = sub.add_parser("update", help="Overwrite fields of one record")
    update_cmd.add_argument("id")
    update_cmd.add_argument("fields", nargs="+", type=_field_pair, metavar="KEY=VALUE")

    delete_cmd = sub.add_parser("delete", help="Delete a record by id")
    delete_cmd.add_argument("id")

    import_cmd = sub.add_parser("import", help="Import a JSON array of records")
    import_cmd.add_argument("path")

    export_cmd = sub.add_parser("export", help="Export records as CSV")
    _add_filter_arguments(export_cmd)
    export_cmd.add_argument("--output", default=None, help=f"Target file (default {settings.EXPORT_FILENAME})")

    stats_cmd = sub.add_parser("stats", help="Show dashboard statistics")
    stats_cmd.add_argument("--json", action="store_true", help="Print statistics as JSON")

    sub.add_parser("departments", help="List the departments in use")

    qr_cmd = sub.add_parser("qr", help="Print the QR label payload of one record")
    qr_cmd.add_argument("id")

    return parser


def _format_row(item: Equipment) -> str:
    return "\t".join(
        [item.id, item.type, item.status, item.name, item.serial_number, item.assignee_name, validity_label(item)]
    )


async def _dispatch(args: argparse.Namespace, service: InventoryService) -> List[str]:
    command = args.command
    if command == "list":
        items = await service.list_equipment(_query_from_args(args))
        if args.json:
            return [json.dumps([item.to_record() for item in items], indent=2, ensure_ascii=False)]
        return [_format_row(item) for item in items]

    if command == "add":
        fields: Dict[str, str] = dict(args.fields)
        item = await service.add_equipment(fields)
        return [f"Added {item.id}"]

    if command == "update":
        item = await service.update_equipment(args.id, dict(args.fields))
        return [f"Updated {item.id}"]

    if command == "delete":
        await service.delete_equipment(args.id)
        return [f"Deleted {args.id}"]

    if command == "import":
        batch = await service.import_file(args.path)
        return [f"Import successful! {len(batch)} records added."]

    if command == "export":
        result = await service.export_file(args.output, _query_from_args(args))
        return [f"Exported {result['rows']} records to {result['path']}"]

    if command == "stats":
        stats = await service.dashboard_stats()
        if args.json:
            return [stats.model_dump_json(indent=2)]
        lines = [
            f"Total: {stats.total}",
            f"Breakdown: {stats.breakdown}",
            f"Maintenance: {stats.maintenance}",
            f"Expiring soon: {stats.expired}",
        ]
        shares = stats.type_shares()
        for label, count in sorted(stats.by_type.items()):
            lines.append(f"  {label}: {count} ({shares[label]:.1f}%)")
        return lines

    if command == "departments":
        return await service.departments()

    if command == "qr":
        return [await service.qr_label(args.id)]

    raise ValueError(f"Unknown command: {command}")


def main(argv: Optional[Sequence[str]] = None, service: Optional[InventoryService] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        lines = asyncio.run(_dispatch(args, service or inventory_service))
    except (InventoryError, OSError) as exc:
        logger.warning("%s failed: %s", args.command, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
