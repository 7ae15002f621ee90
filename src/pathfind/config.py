"""Configuration for pathfind.

This module provides the pydantic models describing which print actions a
walk runs, loadable from YAML.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from .models import PrintDelimiter


class PrinterConfig(BaseModel):
    """Configuration for a single print action.

    Attributes:
        delimiter: Terminator written after each path.
        output_file: Destination file (-fprint); None writes to standard output.
    """

    delimiter: PrintDelimiter = PrintDelimiter.NEWLINE
    output_file: str | None = None

    @field_validator("output_file")
    @classmethod
    def validate_output_file(cls, v: str | None) -> str | None:
        """Reject an empty destination path."""
        if v is not None and not v.strip():
            raise ValueError("output_file must not be empty")
        return v

    @classmethod
    def from_action(cls, action: str) -> PrinterConfig:
        """Build from the shorthand action names 'print' and 'print0'."""
        shorthand = {
            "print": PrintDelimiter.NEWLINE,
            "print0": PrintDelimiter.NULL,
        }
        if action not in shorthand:
            raise ValueError(
                f"Invalid printer '{action}'. Must be one of: {', '.join(sorted(shorthand))}"
            )
        return cls(delimiter=shorthand[action])


class WalkConfig(BaseModel):
    """Output configuration for a walk, typically loaded from YAML.

    Attributes:
        printers: Print actions to run for every matched entry.
    """

    printers: list[PrinterConfig] = Field(default_factory=lambda: [PrinterConfig()])

    @classmethod
    def from_yaml(cls, path: str | Path) -> WalkConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            WalkConfig instance.

        Raises:
            FileNotFoundError: If the config file doesn't exist.
            ValueError: If the YAML is invalid.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Invalid config file: expected dict, got {type(data).__name__}")

        # Printers can be shorthand strings or full mappings
        if "printers" in data:
            printers: list[Any] = []
            for printer in data["printers"] or []:
                if isinstance(printer, str):
                    printers.append(PrinterConfig.from_action(printer))
                elif isinstance(printer, dict):
                    printers.append(PrinterConfig(**printer))
                else:
                    raise ValueError(f"Invalid printer entry: {printer}")
            data["printers"] = printers

        return cls(**data)
