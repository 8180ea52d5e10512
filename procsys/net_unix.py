"""Unix domain sockets from /proc/net/unix."""

from __future__ import annotations

from dataclasses import dataclass

from .common import InvalidFieldNumberError, ParseError, PathLike, parse_u64, read_lines


@dataclass
class NetUnix:
    """One line of /proc/net/unix."""

    kernel_ptr: str = ""
    ref_count: int = 0
    flags: int = 0
    ntype: int = 0
    state: int = 0
    inode: int = 0
    path: str | None = None


def _hex_or_zero(text: str) -> int:
    try:
        value = int(text, 16)
    except ValueError:
        return 0
    return value if 0 <= value < 2**64 and not text.startswith(("-", "0x", "0X")) else 0


def _u64_or_zero(text: str) -> int:
    try:
        return parse_u64(text)
    except ParseError:
        return 0


def collect(path: PathLike = "/proc/net/unix") -> list[NetUnix]:
    """Read the unix socket table, skipping its header line."""
    sockets = []
    for line in read_lines(path)[1:]:
        fields = line.split()
        if len(fields) < 7:
            raise InvalidFieldNumberError("net unix", len(fields), line)
        sockets.append(
            NetUnix(
                kernel_ptr=fields[0].strip(":"),
                ref_count=_hex_or_zero(fields[1]),
                flags=_hex_or_zero(fields[3]),
                ntype=_hex_or_zero(fields[4]),
                state=_hex_or_zero(fields[5]),
                inode=_u64_or_zero(fields[6]),
                path=fields[7] if len(fields) > 7 and fields[7] else None,
            )
        )
    return sockets