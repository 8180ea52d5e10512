"""Wireless interface statistics from /proc/net/wireless."""

from __future__ import annotations

from dataclasses import dataclass

from .common import InvalidFieldNumberError, ParseError, PathLike, parse_i64, read_lines


@dataclass
class Wireless:
    """Statistics of one wireless interface."""

    name: str = ""
    status: int = 0
    quality_link: int = 0
    quality_level: int = 0
    quality_noise: int = 0
    discarded_nwid: int = 0
    discarded_crypt: int = 0
    discarded_frag: int = 0
    discarded_retry: int = 0
    discarded_misc: int = 0
    missed_beacon: int = 0


def _hex_or_zero(text: str) -> int:
    try:
        value = int(text, 16)
    except ValueError:
        return 0
    return value if 0 <= value < 2**64 and not text.startswith(("-", "0x", "0X")) else 0


def _i64_or_zero(text: str) -> int:
    try:
        return parse_i64(text)
    except ParseError:
        return 0


def collect(path: PathLike = "/proc/net/wireless") -> list[Wireless]:
    """Read the wireless statistics, skipping the two header lines."""
    devices = []
    for line in read_lines(path)[2:]:
        fields = line.split()
        if len(fields) < 11:
            raise InvalidFieldNumberError("wireless", len(fields), line)
        devices.append(
            Wireless(
                name=fields[0].strip(":"),
                status=_hex_or_zero(fields[1]),
                quality_link=_i64_or_zero(fields[2].rstrip(".")),
                quality_level=_i64_or_zero(fields[3].rstrip(".")),
                quality_noise=_i64_or_zero(fields[4].rstrip(".")),
                discarded_nwid=_i64_or_zero(fields[5]),
                discarded_crypt=_i64_or_zero(fields[6]),
                discarded_frag=_i64_or_zero(fields[7]),
                discarded_retry=_i64_or_zero(fields[8]),
                discarded_misc=_i64_or_zero(fields[9]),
                missed_beacon=_i64_or_zero(fields[10]),
            )
        )
    return devices