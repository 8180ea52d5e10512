"""Cryptographic algorithms registered with the kernel, from /proc/crypto."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Callable

from .common import MetricError, PathLike, parse_i64, parse_u64, read_lines


@dataclass
class Crypto:
    """One algorithm entry of /proc/crypto."""

    alignmask: int | None = None
    cryptoasync: bool = False
    blocksize: int | None = None
    chunksize: int | None = None
    ctzsize: int | None = None
    digestsize: int | None = None
    driver: str = ""
    geniv: str = ""
    internal: str = ""
    ivsize: int | None = None
    max_authsize: int | None = None
    max_keysize: int | None = None
    min_keysize: int | None = None
    module: str = ""
    name: str = ""
    priority: int | None = None
    refcnt: int | None = None
    seedsize: int | None = None
    statesize: int | None = None
    selftest: str = ""
    cryptotype: str = ""
    walksize: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the fields as a dict, leaving out numeric fields that are unset."""
        return {key: value for key, value in asdict(self).items() if value is not None}


def _text(value: str) -> str:
    return value


def _is_yes(value: str) -> bool:
    return value == "yes"


_FIELDS: dict[str, tuple[str, Callable[[str], object]]] = {
    "async": ("cryptoasync", _is_yes),
    "blocksize": ("blocksize", parse_u64),
    "chunksize": ("chunksize", parse_u64),
    "digestsize": ("digestsize", parse_u64),
    "driver": ("driver", _text),
    "geniv": ("geniv", _text),
    "internal": ("internal", _text),
    "ivsize": ("ivsize", parse_u64),
    "maxauthsize": ("max_authsize", parse_u64),
    "max keysize": ("max_keysize", parse_u64),
    "min keysize": ("min_keysize", parse_u64),
    "module": ("module", _text),
    "priority": ("priority", parse_i64),
    "refcnt": ("refcnt", parse_i64),
    "seedsize": ("seedsize", parse_u64),
    "statesize": ("statesize", parse_u64),
    "selftest": ("selftest", _text),
    "type": ("cryptotype", _text),
    "walksize": ("walksize", parse_u64),
}

# Reported by the kernel but deliberately not collected.
_IGNORED = {"alignmask", "ctxsize"}


def collect(path: PathLike = "/proc/crypto") -> list[Crypto]:
    """Read every algorithm entry of the kernel crypto table."""
    entries: list[Crypto] = []
    for line in read_lines(path):
        stripped = line.strip()
        if not stripped:
            continue
        parts = [part for part in stripped.split(":") if part]
        if len(parts) < 2:
            continue
        metric = parts[0].strip()
        value = parts[1].strip()

        if metric == "name":
            entries.append(Crypto(name=value))
            continue
        if metric in _IGNORED:
            continue
        handler = _FIELDS.get(metric)
        if handler is None:
            continue
        if not entries:
            raise MetricError(f"crypto field {metric!r} found before any name entry")
        attribute, convert = handler
        setattr(entries[-1], attribute, convert(value))
    return entries