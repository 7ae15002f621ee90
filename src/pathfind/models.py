"""Core data models for pathfind.

This module defines the value types matchers work with:
- PrintDelimiter: The terminator written after each printed path
- WalkEntry: A filesystem entry discovered during a directory walk
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum


class PrintDelimiter(str, Enum):
    """Terminator appended after each printed path."""

    NEWLINE = "newline"
    NULL = "null"

    @property
    def terminator(self) -> str:
        """Return the single character written after a path."""
        if self is PrintDelimiter.NULL:
            return "\0"
        return "\n"

    @classmethod
    def from_null_flag(cls, null: bool) -> PrintDelimiter:
        """Pick the delimiter for -print0 style (True) or -print style (False)."""
        return cls.NULL if null else cls.NEWLINE


@dataclass(frozen=True)
class WalkEntry:
    """A filesystem entry handed to matchers by the walk.

    Paths are kept exactly as the OS returned them: text possibly carrying
    surrogate escapes, or raw bytes.

    Attributes:
        path: The entry's path, as text or as raw bytes. Any os.PathLike
            is accepted and converted with os.fspath.
        depth: Depth below the starting point (0 for the starting point itself).
    """

    path: str | bytes
    depth: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.path, os.PathLike):
            object.__setattr__(self, "path", os.fspath(self.path))
        if not isinstance(self.path, (str, bytes)):
            raise TypeError(f"path must be str, bytes or os.PathLike, not {type(self.path).__name__}")
        if self.depth < 0:
            raise ValueError(f"depth must be non-negative, got {self.depth}")

    def path_bytes(self) -> bytes:
        """Return the path as raw bytes, the way the OS sees it."""
        if isinstance(self.path, bytes):
            return self.path
        try:
            return os.fsencode(self.path)
        except UnicodeEncodeError:
            # Lone surrogates outside the surrogateescape range
            return self.path.encode("utf-8", "surrogatepass")

    def path_lossy(self) -> str:
        """Render the path as text, replacing undecodable bytes with U+FFFD.

        Never raises: valid UTF-8 survives unchanged and anything else is
        substituted with the replacement character.
        """
        return self.path_bytes().decode("utf-8", errors="replace")

    @property
    def name(self) -> str:
        """Return the final path component, rendered lossily."""
        rendered = self.path_lossy().rstrip("/")
        return rendered.rsplit("/", 1)[-1] or "/"
