"""Printer matcher: writes each entry's path to an output sink.

Implements -print, -print0, -fprint and -fprint0.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..exceptions import OutputFlushError
from ..models import PrintDelimiter
from .base import EXIT_FAILURE, Matcher, MatcherIO

if TYPE_CHECKING:
    from ..models import WalkEntry
    from ..output import OutputTarget, SharedOutputFile

logger = logging.getLogger(__name__)


class Printer(Matcher):
    """Prints the path of every entry it sees, followed by a delimiter.

    Without an output file the walk's shared default sink is used. A failed
    write to the default sink is reported on the error stream and sets the
    exit code; a failed write to an explicit output file is absorbed
    silently. Flush failures are never absorbed.

    A printer is a holder of its output file: the file stays open until
    `close()` is called on every printer using it, even after the registry
    that opened it has been closed.

    Example:
        ```python
        printer = Printer(PrintDelimiter.NULL)
        printer.matches(WalkEntry(path="./src"), matcher_io)  # writes "./src\\0"
        ```
    """

    def __init__(
        self,
        delimiter: PrintDelimiter = PrintDelimiter.NEWLINE,
        output_file: SharedOutputFile | None = None,
    ):
        self._delimiter = delimiter
        self._output_file = output_file
        self._closed = False
        if output_file is not None:
            output_file.retain()

    @property
    def delimiter(self) -> PrintDelimiter:
        return self._delimiter

    @property
    def output_file(self) -> SharedOutputFile | None:
        return self._output_file

    @property
    def has_side_effects(self) -> bool:
        return True

    def close(self) -> None:
        """Release this printer's hold on its output file, if any."""
        if self._output_file is not None and not self._closed:
            self._closed = True
            self._output_file.release()

    def _print(
        self,
        entry: WalkEntry,
        matcher_io: MatcherIO,
        out: OutputTarget,
        report_errors: bool,
    ) -> None:
        path = entry.path_lossy()
        with out.locked():
            try:
                out.write(f"{path}{self._delimiter.terminator}")
            except OSError as e:
                logger.debug(f"Write to {out.name} failed for {path!r}: {e}")
                if report_errors:
                    matcher_io.report_error(
                        f"Error writing {path!r}: {e.strerror or e}"
                    )
                    matcher_io.set_exit_code(EXIT_FAILURE)
            try:
                out.flush()
            except OSError as e:
                raise OutputFlushError(out.name, e.strerror or str(e)) from e

    def matches(self, entry: WalkEntry, matcher_io: MatcherIO) -> bool:
        """Print the entry's path; always matches."""
        if self._output_file is not None:
            self._print(entry, matcher_io, self._output_file, report_errors=False)
        else:
            self._print(entry, matcher_io, matcher_io.get_output(), report_errors=True)
        return True

    def __repr__(self) -> str:
        target = self._output_file.path if self._output_file else "<stdout>"
        return f"Printer(delimiter={self._delimiter.value}, output={target})"
