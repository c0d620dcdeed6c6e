"""Tabular, JSON and YAML output."""

from __future__ import annotations

import dataclasses
import json
import sys
from enum import Enum
from typing import Any, Optional, TextIO

import yaml

_COLUMN_GAP = 2


class KafkactlError(Exception):
    """An error reported to the user of the command line."""


class TableWriter:
    """Collects rows and writes them as whitespace-aligned columns."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._rows: list[list[str]] = []

    def initialize(self) -> None:
        """Discard all buffered rows."""
        self._rows = []

    def write_header(self, *args: str) -> None:
        """Start a new table with the given column headers."""
        self.initialize()
        self._rows.append([str(a) for a in args])

    def write(self, *args: str) -> None:
        """Append one row."""
        self._rows.append([str(a) for a in args])

    def flush(self) -> None:
        """Write the buffered rows aligned in columns and clear the buffer."""
        stream = self._stream if self._stream is not None else sys.stdout
        widths: dict[int, int] = {}
        for row in self._rows:
            for index, cell in enumerate(row):
                widths[index] = max(widths.get(index, 0), len(cell))
        for row in self._rows:
            cells = [
                cell if index == len(row) - 1 else cell.ljust(widths[index] + _COLUMN_GAP)
                for index, cell in enumerate(row)
            ]
            stream.write("".join(cells).rstrip() + "\n")
        stream.flush()
        self.initialize()


def _to_plain(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return _to_plain(to_dict())
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _to_plain(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {str(k): _to_plain(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_plain(item) for item in obj]
    return obj


def print_object(obj: Any, output_format: str, stream: Optional[TextIO] = None) -> None:
    """Write obj to the stream as "json" or "yaml"."""
    stream = stream if stream is not None else sys.stdout
    plain = _to_plain(obj)
    if output_format == "json":
        stream.write(json.dumps(plain, indent=2) + "\n")
    elif output_format == "yaml":
        stream.write(yaml.safe_dump(plain, sort_keys=False, default_flow_style=False))
    else:
        raise KafkactlError(f"unknown format: {output_format}")
    stream.flush()