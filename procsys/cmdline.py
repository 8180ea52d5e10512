"""Kernel boot command line from /proc/cmdline."""

from __future__ import annotations

from .common import PathLike, read_value


def collect(path: PathLike = "/proc/cmdline") -> list[str]:
    """Return the boot command line split into its arguments."""
    content = read_value(path)
    if content is None:
        return []
    return content.split()