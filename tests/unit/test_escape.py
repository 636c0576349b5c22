"""Tests for C++ string literal escaping and numeric formatting."""

import pytest

from atlascpp.core.escape import escape_cpp_string
from atlascpp.core.numeric import format_int, format_real


def unescape_literal(escaped: bytes) -> bytes:
    """Undo C-style literal escapes (\\\\, \\", \\n, \\r, \\t, \\uXXXX)."""
    return escaped.decode("unicode_escape").encode("latin-1")


class TestEscapeCppString:
    """Tests for escape_cpp_string."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("\\", "\\\\"),
            ('"', '\\"'),
            ("\n", "\\n"),
            ("\r", "\\r"),
            ("\t", "\\t"),
            ("\x00", "\\u0000"),
            ("\x01", "\\u0001"),
            ("\x08", "\\u0008"),
            ("\x0b", "\\u000b"),
            ("\x0c", "\\u000c"),
            ("\x1b", "\\u001b"),
            ("\x1f", "\\u001f"),
        ],
    )
    def test_single_character(self, text: str, expected: str) -> None:
        """Test the escape chosen for each special character."""
        assert escape_cpp_string(text) == expected

    def test_plain_text_unchanged(self) -> None:
        """Test printable ASCII passes through."""
        assert escape_cpp_string("Roboto Mono Bold 700") == "Roboto Mono Bold 700"

    def test_printable_boundary_unchanged(self) -> None:
        """Test space and DEL are not escaped."""
        assert escape_cpp_string(" \x7f") == " \x7f"

    def test_non_ascii_unchanged(self) -> None:
        """Test non-ASCII text is copied verbatim."""
        assert escape_cpp_string("Noto Sans 日本語 Ünïcödé") == "Noto Sans 日本語 Ünïcödé"

    def test_raw_multibyte_bytes_unchanged(self) -> None:
        """Test raw UTF-8 bytes are copied verbatim when escaping bytes."""
        data = "Süß".encode()
        assert escape_cpp_string(data) == data

    def test_bytes_input_returns_bytes(self) -> None:
        """Test bytes in, bytes out."""
        assert escape_cpp_string(b'a"b\n') == b'a\\"b\\n'

    def test_mixed(self) -> None:
        """Test a string with several escapes."""
        assert escape_cpp_string('C:\\fonts\\"x".ttf\r\n') == 'C:\\\\fonts\\\\\\"x\\".ttf\\r\\n'

    def test_empty(self) -> None:
        """Test empty input."""
        assert escape_cpp_string("") == ""

    def test_output_never_shorter(self) -> None:
        """Test escaping never shortens its input."""
        for length in range(0, 40):
            text = "".join(chr(i % 0x30) for i in range(length))
            assert len(escape_cpp_string(text)) >= len(text)

    def test_round_trip_all_control_bytes(self) -> None:
        """Test unescaping reconstructs every byte below 0x20 plus quotes and backslashes."""
        data = bytes(range(0x20)) + b'\\"plain\\\\text"\t\n\r'
        assert unescape_literal(escape_cpp_string(data)) == data

    def test_round_trip_high_bytes(self) -> None:
        """Test unescaping reconstructs raw bytes above 0x7f."""
        data = b"\x00caf\xc3\xa9\x1f\xff"
        assert unescape_literal(escape_cpp_string(data)) == data


class TestNumericFormatting:
    """Tests for the numeric formatting policy."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.0, "0"),
            (-0.0, "-0"),
            (1.0, "1"),
            (32.0, "32"),
            (-0.25, "-0.25"),
            (0.6, "0.59999999999999998"),
            (0.7, "0.69999999999999996"),
            (0.1, "0.10000000000000001"),
            (1e-20, "9.9999999999999995e-21"),
            (float("inf"), "inf"),
        ],
    )
    def test_format_real(self, value: float, expected: str) -> None:
        """Test printf %.17g rendering."""
        assert format_real(value) == expected

    @pytest.mark.parametrize("value", [0.1, 1 / 3, 2.0 / 7.0, 123456.789, 1e300, 5e-324])
    def test_format_real_round_trips(self, value: float) -> None:
        """Test formatted values parse back to the same double."""
        assert float(format_real(value)) == value

    def test_format_int(self) -> None:
        """Test integer rendering."""
        assert format_int(1024) == "1024"
        assert format_int(-3) == "-3"
