"""Input and output counters of a process from /proc/<pid>/io."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .common import (
    InvalidFieldNumberError,
    ParseError,
    PathLike,
    parse_i64,
    parse_u64,
    read_lines,
)


@dataclass
class ProcessIO:
    """Content of /proc/<pid>/io."""

    rchar: int = 0
    wchar: int = 0
    syscr: int = 0
    syscw: int = 0
    read_bytes: int = 0
    write_bytes: int = 0
    cancelled_write_bytes: int = 0


_UNSIGNED = {"rchar", "wchar", "syscr", "syscw", "read_bytes", "write_bytes"}
_SIGNED = {"cancelled_write_bytes"}


def _or_zero(parse, text: str) -> int:
    try:
        return parse(text)
    except ParseError:
        return 0


def collect(proc_dir: PathLike) -> ProcessIO:
    """Read the IO counters of the process whose directory is given."""
    proc_io = ProcessIO()
    for line in read_lines(Path(proc_dir) / "io"):
        fields = [part for part in line.strip().split(":") if part]
        if len(fields) != 2:
            raise InvalidFieldNumberError("process io", len(fields), line)
        name, value = fields[0], fields[1].strip()
        if name in _UNSIGNED:
            setattr(proc_io, name, _or_zero(parse_u64, value))
        elif name in _SIGNED:
            setattr(proc_io, name, _or_zero(parse_i64, value))
    return proc_io