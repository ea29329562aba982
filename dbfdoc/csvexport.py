"""Writing table structure and records as comma or tab separated values."""

from __future__ import annotations

import struct
from typing import Sequence, TextIO

from .definitions import DbfVersion, FieldDescriptor, FieldType

_SPACE = 0x20
_NUL = 0x00


class CsvWriter:
    """Writes a header line and one line per record in CSV form."""

    def __init__(self) -> None:
        self.separator = ","
        self.enclosure = '"'
        self.file_type = "C"
        self.table_structure = True

    def set_separator(self, value: str) -> None:
        """Use ``value`` as the separator; a leading ``t`` selects a tab."""
        if not value:
            raise ValueError("separator must be a single character")
        if len(value) > 1 and value[0] != "t":
            raise ValueError(
                f"separator {value!r} is too long -- must be a single character"
            )
        if value[0] == "t":
            self.separator = "\t"
            self.file_type = "T"
        else:
            self.separator = value[0]

    def write_header(self, stream: TextIO, fields: Sequence[FieldDescriptor]) -> None:
        """Write one line naming the columns, with their types and sizes."""
        quote = self.table_structure and self.separator == ","
        columns = []
        for field in fields:
            parts = [field.name]
            if self.table_structure:
                parts.append(field.field_type)
                if field.field_type == FieldType.CHAR.value:
                    parts.append(str(field.length))
                elif field.field_type == FieldType.NUMERIC.value:
                    parts.extend([str(field.length), str(field.decimal_count)])
            text = ",".join(parts)
            columns.append(f'"{text}"' if quote else text)
        stream.write(self.separator.join(columns) + "\n")

    def write_line(
        self,
        stream: TextIO,
        fields: Sequence[FieldDescriptor],
        record: bytes,
        version: int,
    ) -> None:
        """Write one record (without its deletion flag) as a line."""
        record = bytes(record)
        cells = []
        offset = 0
        for field in fields:
            start = offset
            raw = record[start:start + field.length]
            offset += field.length
            cells.append(self._cell(field, raw, record, start, version))
        stream.write(self.separator.join(cells) + "\n")

    def _cell(
        self,
        field: FieldDescriptor,
        raw: bytes,
        record: bytes,
        start: int,
        version: int,
    ) -> str:
        if not raw:
            return ""
        is_float = field.field_type == FieldType.FLOAT.value or (
            field.field_type == FieldType.BINARY.value
            and version == DbfVersion.VISUAL_FOXPRO
        )

        end = len(raw) - 1
        while end > 0 and raw[end] == _NUL:
            end -= 1
        content = raw[:end + 1]

        special = {ord(self.separator), ord(self.enclosure)}
        needs_enclosure = any(byte in special for byte in content)

        begin = 0
        while content[begin] == _SPACE and begin != end:
            begin += 1

        body = ""
        if content[begin] != _SPACE:
            while content[end] == _SPACE:
                end -= 1
            if is_float:
                chunk = record[start + begin:start + begin + 8].ljust(8, b"\0")
                value = struct.unpack("<d", chunk)[0]
                body = f"{value:{field.length}.{field.decimal_count}f}"
            else:
                text = content[begin:end + 1].decode("latin-1")
                body = text.replace(self.enclosure, self.enclosure * 2)

        if needs_enclosure:
            return f"{self.enclosure}{body}{self.enclosure}"
        return body