"""Writer for exported source files.

This module provides the CppWriter class, which opens the destination for the
duration of an export and makes the file appear only once it is complete.
"""

import errno
import os
import secrets
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from atlascpp.exceptions import OutputError

# Mode passed to os.open; the process umask is applied by the kernel.
_FILE_MODE = 0o666
_TEMP_OPEN_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0)
_TEMP_NAME_ATTEMPTS = 100


class CppWriter:
    """Writes an exported source file.

    With atomic publishing (the default) text goes to a temporary file in the
    destination directory, which replaces the destination only after the
    stream closed without error. On any failure the temporary file is removed
    and the destination is left untouched.

    Example:
        writer = CppWriter(Path("atlas.cpp"))
        with writer.open() as stream:
            stream.write(source)
    """

    def __init__(self, output_path: Path, atomic: bool = True) -> None:
        """Initialize the writer.

        Args:
            output_path: Path of the file to produce
            atomic: Publish through a temporary file
        """
        self._output_path = output_path
        self._atomic = atomic

    @property
    def output_path(self) -> Path:
        return self._output_path

    def _create_temp(self) -> tuple[int, Path]:
        for _ in range(_TEMP_NAME_ATTEMPTS):
            candidate = self._output_path.with_name(
                f".{self._output_path.name}.{secrets.token_hex(4)}.tmp"
            )
            try:
                return os.open(candidate, _TEMP_OPEN_FLAGS, _FILE_MODE), candidate
            except FileExistsError:
                continue
        raise FileExistsError(
            errno.EEXIST, "No usable temporary file name", str(self._output_path.parent)
        )

    def _open_stream(self) -> tuple[TextIO, Path | None]:
        if not self._atomic:
            return open(self._output_path, "w", encoding="utf-8", newline=""), None

        fd, temp_path = self._create_temp()
        return os.fdopen(fd, "w", encoding="utf-8", newline=""), temp_path

    @staticmethod
    def _discard(temp_path: Path | None) -> None:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)

    @contextmanager
    def open(self) -> Iterator[TextIO]:
        """Open the destination for writing.

        Text is written verbatim; no newline translation takes place. An
        OSError raised while the stream is open, written or closed is reported
        as OutputError.

        Yields:
            Text stream for the file contents

        Raises:
            OutputError: If the destination cannot be opened, written or published
        """
        try:
            stream, temp_path = self._open_stream()
        except OSError as e:
            raise OutputError(str(self._output_path), e.strerror or str(e)) from e

        try:
            with stream:
                yield stream
        except OSError as e:
            self._discard(temp_path)
            raise OutputError(str(self._output_path), e.strerror or str(e)) from e
        except BaseException:
            self._discard(temp_path)
            raise

        if temp_path is None:
            return

        try:
            os.replace(temp_path, self._output_path)
        except OSError as e:
            self._discard(temp_path)
            raise OutputError(str(self._output_path), e.strerror or str(e)) from e

    @staticmethod
    def get_output_path(layout_path: Path) -> Path:
        """Generate the default source path for a layout file.

        Converts: atlas.json -> atlas.cpp
                  fonts/ui-atlas.json -> fonts/ui-atlas.cpp

        Args:
            layout_path: Atlas layout file path

        Returns:
            Path with the .cpp extension beside the layout
        """
        return layout_path.with_suffix(".cpp")
