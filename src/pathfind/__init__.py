"""pathfind - Matchers for a find(1)-style file selection tool.

Example:
    ```python
    from pathfind import Dependencies, MatcherIO, PrintDelimiter, Printer, WalkEntry

    matcher_io = MatcherIO(Dependencies.from_streams())
    Printer(PrintDelimiter.NEWLINE).matches(WalkEntry(path="./src"), matcher_io)
    ```
"""

from .config import PrinterConfig, WalkConfig
from .exceptions import (
    ConfigError,
    OutputFileError,
    OutputFlushError,
    PathfindError,
    UnknownActionError,
)
from .matchers import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    Dependencies,
    Matcher,
    MatcherIO,
    Printer,
    build_printer,
    build_printers,
    get_print_action,
)
from .models import PrintDelimiter, WalkEntry
from .output import OutputFileRegistry, OutputTarget, SharedOutputFile

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "PrinterConfig",
    "WalkConfig",
    # Core models
    "PrintDelimiter",
    "WalkEntry",
    # Output
    "OutputTarget",
    "SharedOutputFile",
    "OutputFileRegistry",
    # Matchers
    "Matcher",
    "MatcherIO",
    "Dependencies",
    "Printer",
    "build_printer",
    "build_printers",
    "get_print_action",
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
    # Exceptions
    "PathfindError",
    "ConfigError",
    "OutputFileError",
    "OutputFlushError",
    "UnknownActionError",
]
