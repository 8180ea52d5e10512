"""Network protocol details from /proc/net/protocols."""

from __future__ import annotations

from dataclasses import dataclass, field

from .common import (
    InvalidFieldNumberError,
    ParseError,
    PathLike,
    parse_i64,
    parse_u64,
    read_lines,
)

_LEADING_CAPABILITIES = (
    "close",
    "connect",
    "disconnect",
    "accept",
    "ioctl",
    "init",
    "destroy",
    "shutdown",
    "set_socketopt",
    "get_socketopt",
    "send_msg",
    "recv_msg",
)

_TRAILING_CAPABILITIES = (
    "bind",
    "backlog_rcv",
    "hash",
    "unhash",
    "get_port",
    "entry_memory_pressure",
)

_FIRST_CAPABILITY = 8
_SEND_PAGE_COLUMN = 20


@dataclass
class NetProtocolCapabilities:
    """Which operations a protocol implements."""

    close: bool = False
    connect: bool = False
    disconnect: bool = False
    accept: bool = False
    ioctl: bool = False
    init: bool = False
    destroy: bool = False
    shutdown: bool = False
    set_socketopt: bool = False
    get_socketopt: bool = False
    send_msg: bool = False
    recv_msg: bool = False
    # Newer kernels no longer report the send page column.
    send_page: bool | None = None
    bind: bool = False
    backlog_rcv: bool = False
    hash: bool = False
    unhash: bool = False
    get_port: bool = False
    entry_memory_pressure: bool = False


@dataclass
class NetProtocol:
    """One line of /proc/net/protocols."""

    name: str = ""
    size: int = 0
    sockets: int = 0
    memory: int = 0
    pressure: bool | None = None
    max_header: int = 0
    slab: bool = False
    module_name: str = ""
    capabilities: NetProtocolCapabilities = field(default_factory=NetProtocolCapabilities)


def _u64_or_zero(text: str) -> int:
    try:
        return parse_u64(text)
    except ParseError:
        return 0


def _i64_or_zero(text: str) -> int:
    try:
        return parse_i64(text)
    except ParseError:
        return 0


def _capabilities(columns: list[str], with_send_page: bool) -> NetProtocolCapabilities:
    flags = [column == "y" for column in columns]
    send_page = flags.pop(len(_LEADING_CAPABILITIES)) if with_send_page else None
    names = _LEADING_CAPABILITIES + _TRAILING_CAPABILITIES
    return NetProtocolCapabilities(send_page=send_page, **dict(zip(names, flags)))


def collect(path: PathLike = "/proc/net/protocols") -> list[NetProtocol]:
    """Read the table of network protocols known to the kernel."""
    lines = read_lines(path)
    if not lines:
        raise InvalidFieldNumberError("net protocols header", 0, "")
    header = lines[0].split()
    if len(header) <= _SEND_PAGE_COLUMN:
        raise InvalidFieldNumberError("net protocols header", len(header), lines[0])
    with_send_page = header[_SEND_PAGE_COLUMN] == "sp"
    expected = 27 if with_send_page else 26

    protocols = []
    for line in lines[1:]:
        fields = line.split()
        if len(fields) < expected:
            raise InvalidFieldNumberError("net protocols", len(fields), line)
        protocols.append(
            NetProtocol(
                name=fields[0],
                size=_u64_or_zero(fields[1]),
                sockets=_i64_or_zero(fields[2]),
                memory=_i64_or_zero(fields[3]),
                pressure=None if fields[4] == "NI" else fields[4] == "yes",
                max_header=_u64_or_zero(fields[5]),
                slab=fields[6] == "yes",
                module_name=fields[7],
                capabilities=_capabilities(
                    fields[_FIRST_CAPABILITY:expected], with_send_page
                ),
            )
        )
    return protocols