from datetime import date

import pytest

from dbfdoc.definitions import (
    FIELD_DESCRIPTOR_SIZE,
    HEADER_SIZE,
    DbfVersion,
    FieldDescriptor,
    FieldType,
    Header,
    LanguageDriver,
    field_type_name,
    format_date,
    parse_date,
)


def test_header_round_trip():
    header = Header(
        version=DbfVersion.FOXBASE_DBASE3,
        last_update=bytes([25, 4, 24]),
        num_records=7,
        header_size=97,
        record_size=15,
        incomplete_transaction=1,
        encryption_flag=0,
        multi_user_reserved=bytes(range(12)),
        mdx_flag=1,
        language_driver=LanguageDriver.CHINESE_GB,
        reserved3=0,
    )
    packed = header.pack()
    assert len(packed) == HEADER_SIZE
    assert Header.from_bytes(packed) == header


def test_header_layout_fixed_offsets():
    packed = Header(version=DbfVersion.FOXBASE_DBASE3, num_records=1, language_driver=0x78).pack()
    assert packed[0] == 0x03
    assert packed[4:8] == (1).to_bytes(4, "little")
    assert packed[29] == 0x78


def test_header_from_short_data_raises():
    with pytest.raises(ValueError):
        Header.from_bytes(b"\x03" * (HEADER_SIZE - 1))


def test_field_descriptor_round_trip():
    field = FieldDescriptor("SYMBOL", FieldType.NUMERIC, 40, decimal_count=2, address=31)
    packed = field.pack()
    assert len(packed) == FIELD_DESCRIPTOR_SIZE
    assert FieldDescriptor.from_bytes(packed) == field


def test_field_descriptor_layout():
    packed = FieldDescriptor("SYMBOL", FieldType.CHAR, 40).pack()
    assert packed[:11] == b"SYMBOL".ljust(11, b"\0")
    assert packed[11:12] == b"C"
    assert packed[16] == 40


def test_field_type_enum_is_normalised():
    field = FieldDescriptor("SIDE", FieldType.NUMERIC, 4)
    assert field.field_type == "N"


def test_field_descriptor_from_short_data_raises():
    with pytest.raises(ValueError):
        FieldDescriptor.from_bytes(bytes(FIELD_DESCRIPTOR_SIZE - 1))


def test_field_descriptor_bad_type_raises():
    with pytest.raises(ValueError):
        FieldDescriptor("X", "", 1).pack()


def test_parse_date():
    assert parse_date(bytes([25, 4, 24])) == date(2025, 4, 24)


def test_format_date():
    assert format_date(date(2025, 4, 24)) == bytes([25, 4, 24])


def test_date_round_trip():
    when = date(2031, 12, 31)
    assert parse_date(format_date(when)) == when


def test_parse_date_wrong_length_raises():
    with pytest.raises(ValueError):
        parse_date(b"\x01\x02")


@pytest.mark.parametrize(
    "code, name",
    [
        ("C", "Character"),
        ("N", "Numeric"),
        (ord("D"), "Date"),
        (FieldType.GENERAL, "General(OLE)"),
        ("+", "AutoIncrement"),
        ("Z", "Unknown"),
    ],
)
def test_field_type_name(code, name):
    assert field_type_name(code) == name


def test_version_codes():
    assert DbfVersion(0x03) is DbfVersion.FOXBASE_DBASE3
    assert DbfVersion(0xF5) is DbfVersion.FOXPRO_2_MEMO