"""Shared fixtures for the pathfind test suite."""

import errno
import io

import pytest

from pathfind import Dependencies, MatcherIO, WalkEntry


class FullDevice(io.TextIOBase):
    """Text stream whose writes always fail, like /dev/full."""

    def __init__(self) -> None:
        self.flushes = 0

    def writable(self) -> bool:
        return True

    def write(self, s: str) -> int:
        raise OSError(errno.ENOSPC, "No space left on device")

    def flush(self) -> None:
        self.flushes += 1


class UnflushableStream(io.StringIO):
    """Text stream that accepts writes but refuses to flush."""

    def flush(self) -> None:
        raise OSError(errno.EPIPE, "Broken pipe")


@pytest.fixture
def full_device() -> FullDevice:
    """A default sink or output stream that is always full."""
    return FullDevice()


@pytest.fixture
def unflushable() -> UnflushableStream:
    """A stream whose flush always fails."""
    return UnflushableStream()


@pytest.fixture
def output() -> io.StringIO:
    """Capture of the default output sink."""
    return io.StringIO()


@pytest.fixture
def errors() -> io.StringIO:
    """Capture of the diagnostics stream."""
    return io.StringIO()


@pytest.fixture
def deps(output: io.StringIO, errors: io.StringIO) -> Dependencies:
    """Dependencies writing to in-memory streams."""
    return Dependencies.from_streams(output=output, errors=errors)


@pytest.fixture
def matcher_io(deps: Dependencies) -> MatcherIO:
    """Fresh evaluation context."""
    return MatcherIO(deps)


@pytest.fixture
def abbbc() -> WalkEntry:
    """An ordinary entry below a starting point."""
    return WalkEntry(path="./test_data/simple/abbbc", depth=2)
