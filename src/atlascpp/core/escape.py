"""String escaping for C++ string literals."""

_SIMPLE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape_char(char: str) -> str:
    escaped = _SIMPLE_ESCAPES.get(char)
    if escaped is not None:
        return escaped
    if ord(char) < 0x20:
        return f"\\u{ord(char):04x}"
    return char


def escape_cpp_string(text: str | bytes) -> str | bytes:
    """Escape text for use inside a double-quoted C++ string literal.

    Backslash, double quote, newline, carriage return and tab get their short
    escapes; every other character below 0x20 becomes ``\\u00XX`` with
    lowercase hex digits. Everything else, including non-ASCII text and raw
    multi-byte sequences, is copied unchanged.

    Args:
        text: Text to escape. Bytes are escaped byte by byte.

    Returns:
        Escaped text, of the same type as the input
    """
    if isinstance(text, bytes):
        # latin-1 maps every byte to the code point of the same value
        return escape_cpp_string(text.decode("latin-1")).encode("latin-1")
    return "".join(_escape_char(char) for char in text)
