import pytest

from config_store.errors import FileError
from config_store.parser import parse_text
from config_store.serializer import format_entries, write_text


def test_sections_are_written_once_with_blank_line_before_header() -> None:
    entries = [("space/N", "256"), ("time/N", "1024"), ("time/dt", "0.1")]
    assert format_entries(entries) == "\n[space]\nN = 256\n\n[time]\nN = 1024\ndt = 0.1\n"


def test_empty_input_produces_empty_text() -> None:
    assert format_entries([]) == ""


def test_keys_without_separator_are_written_under_empty_section() -> None:
    text = format_entries([("N", "256"), ("length", "3.5")])
    assert text == "\n[]\nN = 256\nlength = 3.5\n"
    assert parse_text(text) == [("/N", "256"), ("/length", "3.5")]


def test_formatted_text_parses_back() -> None:
    entries = [("a/x", "1"), ("a/y", "two words"), ("b/z", "3")]
    assert parse_text(format_entries(entries)) == entries


def test_write_text_to_directory_raises_file_error(tmp_path) -> None:
    with pytest.raises(FileError, match="Cannot open output file"):
        write_text(tmp_path, "[a]\nx = 1\n")


def test_each_section_header_is_written_once_for_unsorted_groups() -> None:
    text = format_entries([("/bar", "1"), ("a/x", "2"), ("foo", "3")])
    assert text == "\n[]\nbar = 1\nfoo = 3\n\n[a]\nx = 2\n"
    assert text.count("[]") == 1
    assert parse_text(text) == [("/bar", "1"), ("/foo", "3"), ("a/x", "2")]
