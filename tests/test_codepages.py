from dbfdoc.codepages import count_umlauts, cp850_convert


def test_known_mapping_from_table():
    assert cp850_convert(b"\x81") == b"\xfc"
    assert cp850_convert(b"\x94") == b"\xf6"


def test_ascii_is_unchanged():
    text = bytes(range(1, 0x80))
    assert cp850_convert(text) == text


def test_unmapped_and_out_of_table_bytes_are_kept():
    assert cp850_convert(b"\x80\xfe\xff") == b"\x80\xfe\xff"


def test_conversion_stops_at_nul():
    assert cp850_convert(b"\x81\x00\x81") == b"\xfc\x00\x81"


def test_length_is_preserved_for_all_high_bytes():
    data = bytes(range(0x80, 0x100))
    result = cp850_convert(data)
    assert len(result) == len(data)
    assert all(out == src or out >= 0xC0 for src, out in zip(data, result))


def test_count_umlauts():
    assert count_umlauts(b"\xe1\x84\x8e\x94") == 4
    assert count_umlauts(b"plain text") == 0


def test_count_umlauts_stops_at_nul():
    assert count_umlauts(b"\x84\x00\x84\x84") == 1