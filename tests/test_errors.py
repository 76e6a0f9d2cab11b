"""Test error positions and context snippets."""

import pytest

from titan.errors import MalformedNumberError, ScanError, UnterminatedLiteralError
from titan.scanner import tokenize


class TestErrorHierarchy:
    def test_unterminated_is_scan_error(self):
        with pytest.raises(ScanError):
            tokenize('"abc')

    def test_malformed_is_scan_error(self):
        with pytest.raises(ScanError):
            tokenize("-1..2")

    def test_attributes(self):
        with pytest.raises(UnterminatedLiteralError) as exc_info:
            tokenize("ab 'c")
        err = exc_info.value
        assert err.position == 3
        assert err.source == "ab 'c"
        assert "'" in err.message


class TestErrorFormatting:
    def test_format_contains_error_prefix(self):
        with pytest.raises(ScanError) as exc_info:
            tokenize('"abc')
        assert exc_info.value.format().startswith("error: no closing \" found")

    def test_format_contains_offset(self):
        with pytest.raises(ScanError) as exc_info:
            tokenize('x = "abc')
        assert "input.titan@4" in exc_info.value.format()

    def test_format_with_custom_filename(self):
        with pytest.raises(ScanError) as exc_info:
            tokenize("-9.9.9")
        assert "main.titan@0" in exc_info.value.format("main.titan")

    def test_format_shows_offending_line(self):
        source = "var a = 'x'\nvar b = \"oops\nmore"
        with pytest.raises(ScanError) as exc_info:
            tokenize(source)
        lines = exc_info.value.format().splitlines()
        assert lines[3] == '  | var b = "oops'
        assert lines[4] == "  |         ^"

    def test_caret_keeps_tabs(self):
        with pytest.raises(ScanError) as exc_info:
            tokenize("\t'x")
        assert exc_info.value.format().endswith("  | \t^")

    def test_str_is_formatted(self):
        with pytest.raises(MalformedNumberError) as exc_info:
            tokenize("-99999999999")
        assert str(exc_info.value) == exc_info.value.format()
        assert "-99999999999" in str(exc_info.value)
