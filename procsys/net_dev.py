"""Network device counters from /proc/net/dev."""

from __future__ import annotations

from dataclasses import dataclass

from .common import InvalidFieldNumberError, ParseError, PathLike, parse_u64, read_lines

_COUNTERS = (
    "rx_bytes",
    "rx_packets",
    "rx_errors",
    "rx_dropped",
    "rx_fifo",
    "rx_frame",
    "rx_compressed",
    "rx_multicast",
    "tx_bytes",
    "tx_packets",
    "tx_errors",
    "tx_dropped",
    "tx_fifo",
    "tx_collisions",
    "tx_carrier",
    "tx_compressed",
)


@dataclass
class NetDev:
    """Receive and transmit counters of one network device."""

    name: str = ""
    rx_bytes: int = 0
    rx_packets: int = 0
    rx_errors: int = 0
    rx_dropped: int = 0
    rx_fifo: int = 0
    rx_frame: int = 0
    rx_compressed: int = 0
    rx_multicast: int = 0
    tx_bytes: int = 0
    tx_packets: int = 0
    tx_errors: int = 0
    tx_dropped: int = 0
    tx_fifo: int = 0
    tx_collisions: int = 0
    tx_carrier: int = 0
    tx_compressed: int = 0


def _u64_or_zero(text: str) -> int:
    try:
        return parse_u64(text)
    except ParseError:
        return 0


def collect(path: PathLike = "/proc/net/dev") -> list[NetDev]:
    """Read the counters of every network device, skipping the two header lines."""
    devices = []
    for line in read_lines(path)[2:]:
        fields = line.split()
        if len(fields) != 17:
            raise InvalidFieldNumberError("network", len(fields), line)
        counters = {name: _u64_or_zero(text) for name, text in zip(_COUNTERS, fields[1:])}
        devices.append(NetDev(name=fields[0].strip(":"), **counters))
    return devices