"""Matcher module.

Provides the matcher interface and the print actions:
- Matcher: Base class for every matcher
- Printer: -print, -print0, -fprint and -fprint0

Example:
    ```python
    from pathfind.matchers import Dependencies, MatcherIO, get_print_action

    printer = get_print_action("print0")
    matcher_io = MatcherIO(Dependencies.from_streams())
    printer.matches(entry, matcher_io)
    ```
"""

from __future__ import annotations

from ..config import PrinterConfig, WalkConfig
from ..exceptions import ConfigError, UnknownActionError
from ..models import PrintDelimiter
from ..output import OutputFileRegistry
from .base import EXIT_FAILURE, EXIT_SUCCESS, Dependencies, Matcher, MatcherIO
from .printer import Printer


def build_printer(
    config: PrinterConfig,
    registry: OutputFileRegistry | None = None,
) -> Printer:
    """Build a Printer from its configuration.

    Args:
        config: The printer configuration.
        registry: Registry used to open `config.output_file`, shared with every
            other printer of the walk so one path is opened only once.

    Returns:
        Printer writing to the configured destination.

    Raises:
        ConfigError: If an output file is configured but no registry is given.
        OutputFileError: If the output file cannot be opened.
    """
    if config.output_file is None:
        return Printer(config.delimiter)
    if registry is None:
        raise ConfigError(
            "an OutputFileRegistry is required to open output files",
            field="output_file",
        )
    return Printer(config.delimiter, registry.open(config.output_file))


def build_printers(
    config: WalkConfig,
    registry: OutputFileRegistry | None = None,
) -> list[Printer]:
    """Build every printer of a walk, in configuration order.

    All printers share `registry`, so printers naming the same output file
    write through one handle.
    """
    return [build_printer(printer, registry) for printer in config.printers]


def get_print_action(
    name: str,
    argument: str | None = None,
    registry: OutputFileRegistry | None = None,
) -> Printer:
    """Factory function to get a print action by its command-line name.

    Args:
        name: Action name without the leading dash. One of:
            - "print": Newline-terminated to standard output
            - "print0": NUL-terminated to standard output
            - "fprint": Newline-terminated to the file given as `argument`
            - "fprint0": NUL-terminated to the file given as `argument`
        argument: Destination file for the fprint actions.
        registry: Registry used to open the destination file.

    Returns:
        Configured Printer.

    Raises:
        UnknownActionError: If the action name is not recognized.
        ConfigError: If a file action is missing its argument.
    """
    actions = {
        "print": (PrintDelimiter.NEWLINE, False),
        "print0": (PrintDelimiter.NULL, False),
        "fprint": (PrintDelimiter.NEWLINE, True),
        "fprint0": (PrintDelimiter.NULL, True),
    }

    if name not in actions:
        raise UnknownActionError(name, list(actions))

    delimiter, takes_file = actions[name]
    if not takes_file:
        return build_printer(PrinterConfig(delimiter=delimiter))

    if not argument:
        raise ConfigError(f"-{name} requires a file argument", field=name)
    return build_printer(
        PrinterConfig(delimiter=delimiter, output_file=argument),
        registry,
    )


__all__ = [
    # Base
    "Matcher",
    "MatcherIO",
    "Dependencies",
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
    # Matchers
    "Printer",
    # Factories
    "build_printer",
    "build_printers",
    "get_print_action",
]
