"""Kernel random number generator state from /proc/sys/kernel/random."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .common import PathLike, list_dir, parse_u64, read_value

_FIELDS = {
    "entropy_avail": "entropy_available",
    "poolsize": "pool_size",
    "urandom_min_reseed_secs": "urandom_min_reseed_secs",
    "write_wakeup_threshold": "write_wakeup_threshold",
    "read_wakeup_threshold": "read_wakeup_threshold",
}


@dataclass
class KernelRandom:
    """Settings and state of the kernel's random number generator."""

    entropy_available: int | None = None
    pool_size: int | None = None
    urandom_min_reseed_secs: int | None = None
    write_wakeup_threshold: int | None = None
    read_wakeup_threshold: int | None = None


def _read_u64(path: Path) -> int | None:
    content = read_value(path)
    if content is None:
        return None
    return parse_u64(content.strip())


def collect(path: PathLike = "/proc/sys/kernel/random") -> KernelRandom:
    """Read the random number generator information of the kernel."""
    base = Path(path)
    krandom = KernelRandom()
    for name in list_dir(base):
        attribute = _FIELDS.get(name)
        if attribute is not None:
            setattr(krandom, attribute, _read_u64(base / name))
    return krandom