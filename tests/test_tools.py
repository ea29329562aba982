from datetime import date, datetime

from dbfdoc.tools import split_buffer, strip_spaces, today_string


def test_split_on_several_delimiters():
    assert split_buffer("a,b;c", ",;") == ["a", "b", "c"]


def test_split_skips_empty_pieces():
    assert split_buffer(",,a,,b,", ",") == ["a", "b"]


def test_split_of_only_delimiters_is_empty():
    assert split_buffer(";;;", ";") == []


def test_split_rejoins_to_input_without_delimiters():
    text = "x1|y22|z333"
    assert "".join(split_buffer(text, "|")) == text.replace("|", "")


def test_strip_spaces_removes_all_spaces():
    assert strip_spaces("  a b  c ") == "abc"


def test_strip_spaces_keeps_other_whitespace():
    assert strip_spaces("a\tb") == "a\tb"


def test_today_string_is_today():
    before = date.today()
    value = today_string()
    after = date.today()
    assert len(value) == 8
    assert datetime.strptime(value, "%Y%m%d").date() in {before, after}