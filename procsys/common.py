"""Errors and file helpers shared by the collectors."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

U64_MAX = 2**64 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

_DECIMAL = re.compile(r"[+-]?[0-9]+")

_UNIT_FACTORS = {
    "b": 1,
    "kb": 1024,
    "mb": 1024**2,
    "gb": 1024**3,
    "tb": 1024**4,
}


class MetricError(Exception):
    """Base class of every error raised while collecting metrics."""


class DmiSupportError(MetricError):
    """The platform offers no Desktop Management Interface information."""

    def __init__(self) -> None:
        super().__init__(
            "platform does not support Desktop Management Interface (DMI) information"
        )


class ReadError(MetricError):
    """A file or directory could not be read."""

    def __init__(self, path: PathLike, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"cannot read sysfs {str(self.path)!r}: {cause}")


class ParseError(MetricError):
    """A value could not be parsed as a number."""

    def __init__(self, item: str, text: str) -> None:
        self.item = item
        self.text = text
        super().__init__(f"{item} parse {text!r} error")


class ByteConvertError(MetricError):
    """A size carried a unit that is not known."""

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(f"invalid unit: {unit}")


class InvalidFieldNumberError(MetricError):
    """A line held the wrong number of fields."""

    def __init__(self, title: str, count: int, line: str) -> None:
        self.title = title
        self.count = count
        self.line = line
        super().__init__(f"invalid {title} fields number {count}: {line!r}")


class ProcessNotFoundError(MetricError):
    """No process with the given id exists."""

    def __init__(self, pid: int) -> None:
        self.pid = pid
        super().__init__(f"process (pid={pid}) not found")


class PathNotFoundError(MetricError):
    """A path does not exist."""

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)
        super().__init__(f"path ({str(self.path)!r}) not found")


def read_lines(path: PathLike) -> list[str]:
    """Return the lines of a file, without line endings."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read().splitlines()
    except OSError as err:
        raise ReadError(path, err) from err


def read_value(path: PathLike) -> str | None:
    """Return the whole content of a file, or None when it does not exist."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except FileNotFoundError:
        return None
    except OSError as err:
        raise ReadError(path, err) from err


def list_dir(path: PathLike) -> list[str]:
    """Return the sorted entry names of a directory; empty if it cannot be read."""
    try:
        return sorted(entry.name for entry in os.scandir(path))
    except OSError:
        return []


def convert_to_bytes(value: int, unit: str) -> int:
    """Convert a value given in B, kB, MB, GB or TB into bytes."""
    try:
        factor = _UNIT_FACTORS[unit.lower()]
    except KeyError:
        raise ByteConvertError(unit) from None
    return value * factor


def _parse_decimal(text: str, item: str, low: int, high: int) -> int:
    if not _DECIMAL.fullmatch(text):
        raise ParseError(item, text)
    value = int(text)
    if not low <= value <= high:
        raise ParseError(item, text)
    return value


def parse_u64(text: str) -> int:
    """Parse an unsigned 64-bit decimal integer."""
    if text.startswith("-"):
        raise ParseError("u64", text)
    return _parse_decimal(text, "u64", 0, U64_MAX)


def parse_i64(text: str) -> int:
    """Parse a signed 64-bit decimal integer."""
    return _parse_decimal(text, "i64", I64_MIN, I64_MAX)