"""Base matcher interface and the evaluation context.

This module defines the abstract base class that all matchers implement,
plus the capabilities the walk hands to every matcher invocation.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from typing import IO, TYPE_CHECKING, Any, TextIO

from ..output import OutputTarget

if TYPE_CHECKING:
    from ..models import WalkEntry

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class Dependencies:
    """Process-wide capabilities shared by every matcher.

    Attributes:
        output: Default output sink, shared by all matchers without a file target.
        errors: Stream that receives diagnostics, kept apart from normal output.
    """

    def __init__(self, output: OutputTarget, errors: TextIO):
        self.output = output
        self.errors = errors

    @classmethod
    def from_streams(
        cls,
        output: IO[Any] | None = None,
        errors: TextIO | None = None,
    ) -> Dependencies:
        """Build dependencies, defaulting to the process's stdout and stderr."""
        if output is None:
            output = sys.stdout
        if errors is None:
            errors = sys.stderr
        return cls(OutputTarget(output, name="standard output"), errors)


class MatcherIO:
    """Per-run evaluation context passed to every matcher invocation."""

    def __init__(self, deps: Dependencies):
        self.deps = deps
        self._exit_code = EXIT_SUCCESS

    @property
    def exit_code(self) -> int:
        """Return the exit code the process should finish with."""
        return self._exit_code

    def set_exit_code(self, code: int) -> None:
        """Record the exit code the process should finish with."""
        self._exit_code = code

    def get_output(self) -> OutputTarget:
        """Return the shared default output sink."""
        return self.deps.output

    def report_error(self, message: str) -> None:
        """Write a one-line diagnostic to the error stream."""
        logger.debug(message)
        print(message, file=self.deps.errors)


class Matcher(ABC):
    """Abstract base class for matchers.

    A matcher is evaluated once per walked entry as part of a boolean
    expression tree. Filters judge the entry; actions perform side effects
    and must declare so via `has_side_effects`, so an evaluator never drops
    or reorders them while short-circuiting.
    """

    @abstractmethod
    def matches(self, entry: WalkEntry, matcher_io: MatcherIO) -> bool:
        """Evaluate the matcher against one entry.

        Args:
            entry: The filesystem entry being visited.
            matcher_io: The evaluation context for this run.

        Returns:
            True if the entry matches.
        """
        ...

    @property
    def has_side_effects(self) -> bool:
        """Return True if evaluating this matcher changes the outside world."""
        return False
