"""Building blocks for emitting C++ aggregate initializers.

Emitters describe records as lists of designated members (``.name=value``)
and hand the finished text to a SourceWriter. Numeric members are always
formatted through atlascpp.core.numeric.
"""

from collections.abc import Iterable
from typing import TextIO

from atlascpp.core.numeric import format_int, format_real


def designated(name: str, value: str) -> str:
    """Render a designated initializer member ``.name=value``."""
    return f".{name}={value}"


def real_member(name: str, value: float) -> str:
    """Render a floating-point member."""
    return designated(name, format_real(value))


def int_member(name: str, value: int) -> str:
    """Render a signed integer member."""
    return designated(name, format_int(value))


def unsigned_member(name: str, value: int) -> str:
    """Render an unsigned integer member."""
    return designated(name, format_int(value))


def braced(items: Iterable[str], trailing_separator: bool = False) -> str:
    """Wrap items in braces, separated by commas.

    Args:
        items: Rendered members or elements
        trailing_separator: Terminate every item with a comma, including the last

    Returns:
        Brace-enclosed initializer list
    """
    if trailing_separator:
        return "{" + "".join(f"{item}," for item in items) + "}"
    return "{" + ",".join(items) + "}"


def real_record(name: str, members: Iterable[tuple[str, float]]) -> str:
    """Render a nested record member whose fields are all floating-point.

    Args:
        name: Member name of the nested record
        members: (field name, value) pairs in emission order

    Returns:
        ``.name={.a=...,.b=...}``
    """
    return designated(name, braced(real_member(field, value) for field, value in members))


class SourceWriter:
    """Writes emitted source text to an open stream.

    Tracks the number of characters written so callers can report output size
    without reading the stream back.

    Example:
        writer = SourceWriter(stream)
        writer.write("atlas_t atlas = ")
        writer.write(braced([real_member("size", 32.0)], trailing_separator=True))
    """

    def __init__(self, stream: TextIO) -> None:
        """Initialize the writer.

        Args:
            stream: Text stream opened for writing
        """
        self._stream = stream
        self._written = 0

    def write(self, text: str) -> None:
        """Append text to the stream."""
        self._stream.write(text)
        self._written += len(text)

    @property
    def written(self) -> int:
        """Number of characters written so far."""
        return self._written
