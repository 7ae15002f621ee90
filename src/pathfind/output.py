"""Output destinations shared between matchers.

Provides:
- OutputTarget: A stream guarded by a lock so write+flush is one unit
- SharedOutputFile: A -fprint target opened once and shared by holder count
- OutputFileRegistry: Hands out one SharedOutputFile per destination path

Example:
    ```python
    with OutputFileRegistry() as registry:
        target = registry.open("found.txt")
        with target.locked():
            target.write("./a/b\\n")
            target.flush()
    ```
"""

from __future__ import annotations

import io
import logging
import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any

from .exceptions import OutputFileError

logger = logging.getLogger(__name__)


class OutputTarget:
    """A text or binary stream plus the lock that serializes access to it.

    Paths always go out as UTF-8: binary streams receive encoded bytes and
    text wrappers such as sys.stdout are written through their binary buffer,
    whatever encoding the wrapper was opened with. Callers must hold `locked()`
    around each write+flush pair so concurrent writers never interleave.
    """

    def __init__(
        self,
        stream: IO[Any],
        name: str | None = None,
        binary: bool | None = None,
    ):
        """Wrap a stream.

        Args:
            stream: Any object with write() and flush().
            name: Label used in error messages (defaults to the stream's name).
            binary: Force binary (True) or text (False) mode. Detected from the
                stream type when omitted.
        """
        self._stream = stream
        self._lock = threading.Lock()
        self.name = name or str(getattr(stream, "name", repr(stream)))
        self._buffer: IO[bytes] | None = None
        if binary is None:
            binary = isinstance(stream, (io.RawIOBase, io.BufferedIOBase))
            if isinstance(stream, io.TextIOWrapper):
                self._buffer = stream.buffer
        self.binary = binary

    @property
    def stream(self) -> IO[Any]:
        """Return the wrapped stream."""
        return self._stream

    @contextmanager
    def locked(self) -> Iterator[OutputTarget]:
        """Hold exclusive access to the destination for one write+flush."""
        with self._lock:
            yield self

    @staticmethod
    def _write_all(stream: IO[bytes], data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = stream.write(view)
            if not written:
                raise OSError("failed to write whole buffer")
            view = view[written:]

    def write(self, text: str) -> None:
        """Write the whole string, raising OSError on failure."""
        if self._buffer is not None:
            # Text already queued in the wrapper must precede our bytes
            self._stream.flush()
            self._write_all(self._buffer, text.encode("utf-8"))
        elif self.binary:
            self._write_all(self._stream, text.encode("utf-8"))
        else:
            self._stream.write(text)

    def flush(self) -> None:
        """Flush the wrapped stream."""
        self._stream.flush()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class SharedOutputFile(OutputTarget):
    """A destination file opened once and shared between matchers.

    The file is opened unbuffered so a failed write surfaces at write time.
    Each holder calls `retain()`; the file closes when the last one calls
    `release()`.
    """

    def __init__(self, path: str | Path):
        self.path = str(path)
        try:
            handle = open(self.path, "wb", buffering=0)
        except OSError as e:
            logger.error(f"Failed to open output file {self.path}: {e}")
            raise OutputFileError(self.path, e.strerror or str(e)) from e
        super().__init__(handle, name=self.path, binary=True)
        self._holders = 0
        logger.debug(f"Opened output file {self.path}")

    @property
    def holders(self) -> int:
        """Return the number of holders still using the file."""
        return self._holders

    @property
    def closed(self) -> bool:
        """Return True once the underlying file has been closed."""
        return self._stream.closed

    def retain(self) -> SharedOutputFile:
        """Register one more holder."""
        with self._lock:
            self._holders += 1
        return self

    def release(self) -> None:
        """Drop one holder, closing the file when none remain."""
        with self._lock:
            if self._holders > 0:
                self._holders -= 1
            if self._holders == 0 and not self._stream.closed:
                self._stream.close()
                logger.debug(f"Closed output file {self.path}")


class OutputFileRegistry:
    """Opens each output file once, no matter how many matchers target it.

    Example:
        ```python
        registry = OutputFileRegistry()
        first = registry.open("out.txt")
        second = registry.open("./out.txt")
        assert first is second
        registry.close()
        ```
    """

    def __init__(self) -> None:
        self._files: dict[str, SharedOutputFile] = {}
        self._handed_out: list[SharedOutputFile] = []
        self._lock = threading.Lock()

    @staticmethod
    def _key(path: str | Path) -> str:
        return os.path.realpath(os.fspath(path))

    def open(self, path: str | Path) -> SharedOutputFile:
        """Return the shared file for `path`, opening it on first use.

        Raises:
            OutputFileError: If the file cannot be opened for writing.
        """
        key = self._key(path)
        with self._lock:
            shared = self._files.get(key)
            if shared is None or shared.closed:
                shared = SharedOutputFile(path)
                self._files[key] = shared
            self._handed_out.append(shared.retain())
        return shared

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for shared in self._files.values() if not shared.closed)

    def close(self) -> None:
        """Release every holder handed out by this registry."""
        with self._lock:
            handed_out, self._handed_out = self._handed_out, []
            self._files.clear()
        for shared in handed_out:
            shared.release()

    def __enter__(self) -> OutputFileRegistry:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
