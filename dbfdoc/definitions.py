"""On-disk structures and helpers of the dBASE (.dbf) table format."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from datetime import date
from enum import Enum, IntEnum

HEADER_SIZE = 32
FIELD_DESCRIPTOR_SIZE = 32
HEADER_TERMINATOR = 0x0D
RECORD_DELETED = 0x2A
RECORD_VALID = 0x20
EOF_MARKER = 0x1A

_HEADER_STRUCT = struct.Struct("<B3sIHHHBB12sBBH")
_FIELD_STRUCT = struct.Struct("<11scIBBHBHB7sB")


class DbfVersion(IntEnum):
    """Version byte found at the start of a table file."""

    FOXBASE_1 = 0x02
    FOXBASE_DBASE3 = 0x03
    VISUAL_FOXPRO = 0x30
    FOXPRO_2 = 0x31
    DBASE4 = 0x43
    DBASE4_MEMO = 0x63
    DBASE5 = 0x83
    DBASE5_MEMO = 0x8B
    DBASE7 = 0x87
    DBASE7_MEMO = 0x8C
    FOXPRO_2_MEMO = 0xF5
    FOXBASE_DBASE3_MEMO = 0xFB


class LanguageDriver(IntEnum):
    """Language driver identifiers stored in the header."""

    NONE = 0x00
    US = 0x01
    INTL = 0x02
    WIN = 0x03
    MAC = 0x04
    EEUROPE = 0x64
    RUSSIAN = 0x65
    NORDIC = 0x66
    ICELAND = 0x67
    CZECH = 0x68
    POLISH = 0x69
    GREEK = 0x6A
    TURKISH = 0x6B
    CYRILLIC = 0x6C
    EEUROPE_WIN = 0x6D
    GREEK_WIN = 0x6E
    CHINESE_GB = 0x78
    KOREAN = 0x79
    JAPANESE = 0x7A
    CHINESE_BIG5 = 0x7B
    THAI = 0x7C
    HEBREW = 0x7D
    ARABIC = 0x7E


class FieldType(str, Enum):
    """Single-character field type codes."""

    CHAR = "C"
    NUMERIC = "N"
    FLOAT = "F"
    DATE = "D"
    LOGICAL = "L"
    MEMO = "M"
    BINARY = "B"
    GENERAL = "G"
    PICTURE = "P"
    CURRENCY = "Y"
    DATETIME = "T"
    INTEGER = "I"
    VARCHAR = "V"
    TIMESTAMP = "@"
    DOUBLE = "O"
    AUTOINC = "+"


_TYPE_NAMES = {
    FieldType.CHAR: "Character",
    FieldType.NUMERIC: "Numeric",
    FieldType.FLOAT: "Float",
    FieldType.DATE: "Date",
    FieldType.LOGICAL: "Logical",
    FieldType.MEMO: "Memo",
    FieldType.BINARY: "Binary",
    FieldType.GENERAL: "General(OLE)",
    FieldType.PICTURE: "Picture",
    FieldType.CURRENCY: "Currency",
    FieldType.DATETIME: "DateTime",
    FieldType.INTEGER: "Integer",
    FieldType.VARCHAR: "VarChar",
    FieldType.TIMESTAMP: "Timestamp",
    FieldType.DOUBLE: "Double",
    FieldType.AUTOINC: "AutoIncrement",
}


@dataclass
class Header:
    """The 32-byte table file header."""

    version: int = 0
    last_update: bytes = bytes(3)
    num_records: int = 0
    header_size: int = 0
    record_size: int = 0
    reserved1: int = 0
    incomplete_transaction: int = 0
    encryption_flag: int = 0
    multi_user_reserved: bytes = bytes(12)
    mdx_flag: int = 0
    language_driver: int = 0
    reserved3: int = 0

    def pack(self) -> bytes:
        """Return the header as it is stored on disk."""
        return _HEADER_STRUCT.pack(
            int(self.version),
            bytes(self.last_update),
            self.num_records,
            self.header_size,
            self.record_size,
            self.reserved1,
            self.incomplete_transaction,
            self.encryption_flag,
            bytes(self.multi_user_reserved),
            self.mdx_flag,
            int(self.language_driver),
            self.reserved3,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "Header":
        """Parse a header from the first 32 bytes of ``data``."""
        if len(data) < HEADER_SIZE:
            raise ValueError(f"header needs {HEADER_SIZE} bytes, got {len(data)}")
        values = _HEADER_STRUCT.unpack_from(data)
        return cls(*values)


@dataclass
class FieldDescriptor:
    """One 32-byte column description following the header."""

    name: str
    field_type: str = FieldType.CHAR.value
    length: int = 0
    decimal_count: int = 0
    address: int = 0
    reserved1: int = 0
    work_area_id: int = 0
    reserved2: int = 0
    set_fields_flag: int = 0
    reserved3: bytes = bytes(7)
    mdx_flag: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.field_type, FieldType):
            self.field_type = self.field_type.value

    def pack(self) -> bytes:
        """Return the descriptor as it is stored on disk."""
        name = self.name.encode("latin-1")[:11].ljust(11, b"\0")
        type_code = self.field_type.encode("latin-1")
        if len(type_code) != 1:
            raise ValueError(f"field type must be one character: {self.field_type!r}")
        return _FIELD_STRUCT.pack(
            name,
            type_code,
            self.address,
            self.length,
            self.decimal_count,
            self.reserved1,
            self.work_area_id,
            self.reserved2,
            self.set_fields_flag,
            bytes(self.reserved3),
            self.mdx_flag,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "FieldDescriptor":
        """Parse a descriptor from the first 32 bytes of ``data``."""
        if len(data) < FIELD_DESCRIPTOR_SIZE:
            raise ValueError(
                f"field descriptor needs {FIELD_DESCRIPTOR_SIZE} bytes, got {len(data)}"
            )
        (raw_name, type_code, address, length, decimals, reserved1, work_area,
         reserved2, set_fields, reserved3, mdx) = _FIELD_STRUCT.unpack_from(data)
        return cls(
            name=raw_name.split(b"\0", 1)[0].decode("latin-1"),
            field_type=type_code.decode("latin-1"),
            length=length,
            decimal_count=decimals,
            address=address,
            reserved1=reserved1,
            work_area_id=work_area,
            reserved2=reserved2,
            set_fields_flag=set_fields,
            reserved3=reserved3,
            mdx_flag=mdx,
        )


def parse_date(raw: bytes) -> date:
    """Turn a three-byte YYMMDD header date into a calendar date."""
    if len(raw) != 3:
        raise ValueError("a header date is exactly three bytes")
    return date(2000 + raw[0], raw[1], raw[2])


def format_date(when: date) -> bytes:
    """Turn a date into the three-byte YYMMDD header form."""
    return bytes([when.year % 100, when.month, when.day])


def field_type_name(code: str | int) -> str:
    """Return a readable name for a field type code."""
    if isinstance(code, int):
        code = chr(code)
    try:
        return _TYPE_NAMES[FieldType(code)]
    except ValueError:
        return "Unknown"