"""System load averages from /proc/loadavg."""

from __future__ import annotations

from dataclasses import dataclass

from .common import InvalidFieldNumberError, PathLike, read_value


@dataclass
class LoadAvg:
    """Load averages over one, five and fifteen minutes."""

    load1: float = 0.0
    load5: float = 0.0
    load15: float = 0.0


def _float_or_zero(text: str) -> float:
    if "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


def collect(path: PathLike = "/proc/loadavg") -> LoadAvg:
    """Read the load averages; all zero when the file does not exist."""
    content = read_value(path)
    if content is None:
        return LoadAvg()
    fields = content.split()
    if len(fields) < 3:
        raise InvalidFieldNumberError("load average", len(fields), content)
    return LoadAvg(
        load1=_float_or_zero(fields[0]),
        load5=_float_or_zero(fields[1]),
        load15=_float_or_zero(fields[2]),
    )