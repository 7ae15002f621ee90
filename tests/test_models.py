"""Tests for pathfind data models."""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from pathfind import PrintDelimiter, WalkEntry


class TestPrintDelimiter:
    """Tests for PrintDelimiter enum."""

    def test_terminators(self) -> None:
        """Test each delimiter renders a single character."""
        assert PrintDelimiter.NEWLINE.terminator == "\n"
        assert PrintDelimiter.NULL.terminator == "\0"

    def test_exactly_two_variants(self) -> None:
        """Test the enum is closed over newline and null."""
        assert {d.value for d in PrintDelimiter} == {"newline", "null"}

    def test_from_value(self) -> None:
        """Test delimiters load from configuration strings."""
        assert PrintDelimiter("null") is PrintDelimiter.NULL

    def test_from_null_flag(self) -> None:
        """Test picking the delimiter from a -print0 style flag."""
        assert PrintDelimiter.from_null_flag(True) is PrintDelimiter.NULL
        assert PrintDelimiter.from_null_flag(False) is PrintDelimiter.NEWLINE


class TestWalkEntry:
    """Tests for WalkEntry model."""

    def test_text_path(self) -> None:
        """Test a plain text path renders unchanged."""
        entry = WalkEntry(path="./test_data/simple/abbbc")
        assert entry.path_lossy() == "./test_data/simple/abbbc"
        assert entry.depth == 0

    def test_pathlib_path(self) -> None:
        """Test os.PathLike values are accepted."""
        entry = WalkEntry(path=Path("test_data") / "simple")
        assert entry.path == "test_data/simple"

    def test_bytes_path_kept_as_bytes(self) -> None:
        """Test raw byte paths are not decoded on construction."""
        entry = WalkEntry(path=b"./raw")
        assert entry.path == b"./raw"
        assert entry.path_bytes() == b"./raw"

    def test_utf8_bytes_render_losslessly(self) -> None:
        """Test valid UTF-8 bytes survive rendering."""
        entry = WalkEntry(path="./café".encode())
        assert entry.path_lossy() == "./café"

    def test_invalid_bytes_are_replaced(self) -> None:
        """Test invalid UTF-8 is substituted, never raised."""
        entry = WalkEntry(path=b"./a\x80b")
        assert entry.path_lossy() == "./a�b"

    def test_surrogate_escaped_text_is_replaced(self) -> None:
        """Test undecodable names from os.listdir render lossily."""
        entry = WalkEntry(path="./a\udc80b")
        assert entry.path_lossy() == "./a�b"

    def test_lone_surrogate_is_total(self) -> None:
        """Test even unencodable text produces a non-empty rendering."""
        entry = WalkEntry(path="./a\ud800b")
        rendered = entry.path_lossy()
        assert rendered.startswith("./a")
        assert rendered.endswith("b")
        assert "�" in rendered

    def test_name(self) -> None:
        """Test the final component is extracted."""
        assert WalkEntry(path="./test_data/simple/abbbc").name == "abbbc"
        assert WalkEntry(path="./test_data/simple/").name == "simple"
        assert WalkEntry(path="/").name == "/"

    def test_frozen(self) -> None:
        """Test entries are immutable."""
        entry = WalkEntry(path="./a")
        with pytest.raises(FrozenInstanceError):
            entry.path = "./b"  # type: ignore[misc]

    def test_negative_depth_rejected(self) -> None:
        """Test depth must not be negative."""
        with pytest.raises(ValueError, match="non-negative"):
            WalkEntry(path="./a", depth=-1)

    def test_invalid_path_type_rejected(self) -> None:
        """Test non-path values are rejected."""
        with pytest.raises(TypeError):
            WalkEntry(path=42)  # type: ignore[arg-type]
