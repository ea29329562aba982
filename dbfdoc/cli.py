"""Command line view of a table file and of order files."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .definitions import FieldDescriptor
from .document import DbfDocument, DbfError
from .orders import OrderAlgoDocument
from .textgraph import draw_line

DEFAULT_FILENAME = "CancelOrderAlgo_20250424.dbf"

_VERSION_NAMES = {
    0x02: "FoxBase",
    0x03: "FoxBase+/dBASE III+",
    0x04: "dBASE IV",
    0x05: "dBASE 5.0",
    0x83: "FoxBase+/dBASE III+",
    0x8B: "dBASE IV",
    0x30: "Visual FoxPro",
    0xF5: "FoxPro 2.0",
}

_LINE_LENGTH = 73
_CROSSES = (1, 17, 25, 41, 57, 73)

_ORDER_LABELS = (
    "ExternalId", "ClientName", "Symbol", "Side", "OrderQty", "OrdType",
    "EffTime", "ExpTime", "LimAction", "AftAction", "AlgoParam",
)


def version_name(code: int) -> str:
    """Return a readable name for a table version byte."""
    return _VERSION_NAMES.get(code, f"Unknown (code 0x{code:02X})")


def field_table(fields: Sequence[FieldDescriptor]) -> str:
    """Draw a text table describing each column."""
    rule = draw_line(_LINE_LENGTH, _CROSSES)
    lines = [
        rule,
        "| field name\t| type\t| field address\t| length\t| field dec.\t|",
        rule,
    ]
    for field in fields:
        lines.append(
            f"|{field.name[:11]:>13}\t| {field.field_type:>3}\t| {field.address:8x}\t"
            f"| {field.length:3d}\t\t| {field.decimal_count:3d}\t\t|"
        )
    lines.append(rule)
    return "\n".join(lines) + "\n"


def file_info(document: DbfDocument) -> str:
    """Summarise the header of an open table."""
    header = document.header
    version = int(header.version)
    memo = "with memo" if version & 128 else "without memo"
    year, month, day = bytes(header.last_update)
    record_size = header.record_size
    return (
        "\nFile statistics:\n"
        f"dBase version.........: \t {version_name(version)} ({memo})\n"
        f"Date of last update...: \t {2000 + year:04d}-{month:02d}-{day:02d}\n"
        f"Number of records.....: \t {header.num_records} (0x{header.num_records:08x})\n"
        f"Length of header......: \t {header.header_size} (0x{header.header_size:04x})\n"
        f"Record length.........: \t {record_size} (0x{record_size:04x})\n"
        f"Columns in file.......: \t {len(document.fields)} \n"
    )


def format_order_record(record: Sequence[str]) -> str:
    """Render one order record as a single labelled line."""
    if not record:
        return "Empty or deleted record"
    return " | ".join(f"{label}: {value}" for label, value in zip(_ORDER_LABELS, record))


def main(argv: Sequence[str] | None = None) -> int:
    """List the records of an order file, creating it if it is missing."""
    parser = argparse.ArgumentParser(prog="dbfdoc", description="Show a dBASE order file.")
    parser.add_argument("filename", nargs="?", default=DEFAULT_FILENAME)
    parser.add_argument(
        "--info", action="store_true",
        help="write header information and table structure instead of records",
    )
    args = parser.parse_args(argv)

    document = OrderAlgoDocument()
    try:
        document.open(args.filename)
    except FileNotFoundError:
        print(f"File not found, creating {args.filename}")
        try:
            document.create(args.filename)
        except (OSError, DbfError):
            print("Failed to create DBF file", file=sys.stderr)
            return 1
    except (OSError, DbfError) as exc:
        print(f"Could not open dBASE file '{args.filename}': {exc}", file=sys.stderr)
        return 1

    if args.info:
        sys.stdout.write(file_info(document))
        sys.stdout.write(field_table(document.fields))
        return 0

    print("Existing records:")
    for index in range(document.record_count):
        print(f"Record {index}: {format_order_record(document.read_record(index))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())