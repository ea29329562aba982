"""Reading, editing and writing whole dBASE tables held in memory."""

from __future__ import annotations

import logging
import os
from datetime import date
from typing import Iterable, Sequence

from .definitions import (
    FIELD_DESCRIPTOR_SIZE,
    HEADER_SIZE,
    HEADER_TERMINATOR,
    RECORD_DELETED,
    RECORD_VALID,
    DbfVersion,
    FieldDescriptor,
    FieldType,
    Header,
    format_date,
)

logger = logging.getLogger(__name__)


class DbfError(Exception):
    """Raised when a table cannot be read, written or changed as asked."""


class DbfDocument:
    """A table file loaded into memory, with its fields and raw records."""

    def __init__(self, encoding: str = "latin-1") -> None:
        self.encoding = encoding
        self.filename: str | None = None
        self.header = Header()
        self.fields: list[FieldDescriptor] = []
        self._data = bytearray()
        self.modified = False

    @property
    def record_count(self) -> int:
        """Number of records, deleted ones included."""
        return self.header.num_records

    def open(self, filename: str | os.PathLike) -> None:
        """Load and check a table file, replacing the current contents."""
        path = os.fspath(filename)
        with open(path, "rb") as stream:
            content = stream.read()

        if len(content) < HEADER_SIZE:
            raise DbfError(f"{path}: file is shorter than a header")
        header = Header.from_bytes(content)
        if header.record_size < 1:
            raise DbfError(f"{path}: record size is zero")
        if header.header_size < HEADER_SIZE:
            raise DbfError(f"{path}: header size {header.header_size} is too small")

        fields = []
        pos = HEADER_SIZE
        while pos < len(content) and content[pos] != HEADER_TERMINATOR:
            chunk = content[pos:pos + FIELD_DESCRIPTOR_SIZE]
            if len(chunk) < FIELD_DESCRIPTOR_SIZE:
                raise DbfError(f"{path}: truncated field descriptor")
            fields.append(FieldDescriptor.from_bytes(chunk))
            pos += FIELD_DESCRIPTOR_SIZE

        expected = HEADER_SIZE + len(fields) * FIELD_DESCRIPTOR_SIZE + 1
        if header.header_size < expected:
            raise DbfError(
                f"{path}: header size {header.header_size} is below {expected}"
            )
        data_size = header.num_records * header.record_size
        if header.header_size + data_size > len(content):
            raise DbfError(f"{path}: file is shorter than its records")

        self.header = header
        self.fields = fields
        self._data = bytearray(content[header.header_size:header.header_size + data_size])
        self.filename = path
        self.modified = False
        logger.debug(
            "opened %s: record length %d, expected %d, %d records, %d fields",
            path, header.record_size, self._record_length() + 1,
            header.num_records, len(fields),
        )

    def save(self) -> None:
        """Write pending changes back to the current file, if any."""
        if not self.modified or not self.filename:
            return
        self.save_as(self.filename)

    def save_as(self, filename: str | os.PathLike) -> None:
        """Write the table to ``filename`` and make it the current file."""
        path = os.fspath(filename)
        self.header.last_update = format_date(date.today())
        parts = [self.header.pack()]
        parts.extend(field.pack() for field in self.fields)
        parts.append(bytes([HEADER_TERMINATOR]))
        parts.append(bytes(self._data))
        with open(path, "wb") as stream:
            stream.write(b"".join(parts))
        self.filename = path
        self.modified = False

    def read_record(self, index: int) -> list[str]:
        """Return the field values of a record; empty if it is deleted.

        Character fields lose their trailing spaces; others are returned whole.
        """
        record = self._record(index)
        if record[0] == RECORD_DELETED:
            return []
        values = []
        offset = 1
        for field in self.fields:
            raw = bytes(record[offset:offset + field.length])
            if field.field_type == FieldType.CHAR.value:
                raw = raw.rstrip(b" ")
            values.append(raw.decode(self.encoding))
            offset += field.length
        return values

    def modify_record(self, index: int, values: Sequence[str]) -> None:
        """Overwrite every field of a live record."""
        self._check_index(index)
        self._check_values(values)
        start = index * self.header.record_size
        if self._data[start] == RECORD_DELETED:
            raise DbfError(f"record {index} is deleted")
        offset = start + 1
        for field, value in zip(self.fields, values):
            self._data[offset:offset + field.length] = self._encode(value, field.length)
            offset += field.length
        self.modified = True

    def add_record(self, values: Sequence[str]) -> None:
        """Append a record built from one value per field."""
        self._check_values(values)
        expected = self._record_length() + 1
        if self.header.record_size != expected:
            logger.warning(
                "record length mismatch: header=%d, expected=%d",
                self.header.record_size, expected,
            )
            self.header.record_size = expected

        record = bytearray([RECORD_VALID])
        for field, value in zip(self.fields, values):
            record += self._encode(value, field.length)
        record = record.ljust(self.header.record_size, b" ")
        self._data += record
        self.header.num_records += 1
        self.modified = True

    def delete_record(self, index: int) -> None:
        """Mark a record as deleted."""
        self._check_index(index)
        start = index * self.header.record_size
        if self._data[start] == RECORD_DELETED:
            return
        self._data[start] = RECORD_DELETED
        self.modified = True

    def create(self, filename: str | os.PathLike, fields: Iterable[FieldDescriptor]) -> None:
        """Start a new empty table with ``fields`` and write it to ``filename``."""
        fields = list(fields)
        if not fields:
            raise DbfError("a table needs at least one field")
        total = sum(field.length for field in fields)
        if total == 0:
            raise DbfError("no field has a length")
        self.header = Header(
            version=DbfVersion.FOXBASE_DBASE3,
            record_size=total + 1,
            header_size=HEADER_SIZE + len(fields) * FIELD_DESCRIPTOR_SIZE + 1,
            num_records=0,
        )
        self.fields = fields
        self._data = bytearray()
        self.filename = os.fspath(filename)
        self.modified = True
        self.save()

    def header_summary(self) -> str:
        """Describe the header values, one per line."""
        h = self.header
        last = "".join(f"{b:02X}" for b in h.last_update)
        return "\n".join([
            "DBF Header:",
            f"Version: {h.version:02X}",
            f"Last Update: {last}",
            f"Number of Records: {h.num_records}",
            f"Header Size: {h.header_size}",
            f"Record Size: {h.record_size}",
            f"Incomplete Transaction: {h.incomplete_transaction:02X}",
            f"Encryption Flag: {h.encryption_flag:02X}",
            f"MDX Flag: {h.mdx_flag:02X}",
            f"Language Driver: {h.language_driver:02X}",
        ])

    def _record_length(self) -> int:
        return sum(field.length for field in self.fields)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.header.num_records:
            raise IndexError(f"record {index} is out of range")

    def _check_values(self, values: Sequence[str]) -> None:
        if len(values) != len(self.fields):
            raise DbfError(f"got {len(values)} values for {len(self.fields)} fields")

    def _record(self, index: int) -> bytearray:
        self._check_index(index)
        start = index * self.header.record_size
        return self._data[start:start + self.header.record_size]

    def _encode(self, value: str, length: int) -> bytes:
        return str(value).encode(self.encoding)[:length].ljust(length, b" ")