"""Control group membership of a process from /proc/<pid>/cgroup."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .common import InvalidFieldNumberError, ParseError, PathLike, parse_u64, read_lines


@dataclass
class ProcessCgroup:
    """One line of /proc/<pid>/cgroup."""

    hierarchy_id: int = 0
    controllers: list[str] = field(default_factory=list)
    path: str = ""


def collect(proc_dir: PathLike) -> list[ProcessCgroup]:
    """Read the control groups of the process whose directory is given."""
    cgroups = []
    for line in read_lines(Path(proc_dir) / "cgroup"):
        fields = line.strip().split(":")
        if len(fields) != 3:
            raise InvalidFieldNumberError("process cgroup", len(fields), line)
        hierarchy, controllers, path = fields
        try:
            hierarchy_id = parse_u64(hierarchy)
        except ParseError:
            raise ParseError("process cgroup hierarchy id", hierarchy) from None
        controllers = controllers.strip()
        cgroups.append(
            ProcessCgroup(
                hierarchy_id=hierarchy_id,
                controllers=controllers.split(",") if controllers else [],
                path=path.strip(),
            )
        )
    return cgroups