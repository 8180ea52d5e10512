"""Free memory fragments per node and zone from /proc/buddyinfo."""

from __future__ import annotations

from dataclasses import dataclass, field

from .common import InvalidFieldNumberError, ParseError, PathLike, parse_u64, read_lines


@dataclass
class BuddyInfo:
    """Free fragment counts of one zone; entry n counts blocks of 2^n pages."""

    node: str = ""
    zone: str = ""
    sizes: list[int] = field(default_factory=list)


def _u64_or_zero(text: str) -> int:
    try:
        return parse_u64(text)
    except ParseError:
        return 0


def collect(path: PathLike = "/proc/buddyinfo") -> list[BuddyInfo]:
    """Read the buddy allocator statistics."""
    result = []
    for line in read_lines(path):
        fields = line.split()
        if len(fields) < 4:
            raise InvalidFieldNumberError("buddyinfo", len(fields), line)
        result.append(
            BuddyInfo(
                node=fields[1].replace(",", ""),
                zone=fields[3].replace(",", ""),
                sizes=[_u64_or_zero(item) for item in fields[4:]],
            )
        )
    return result