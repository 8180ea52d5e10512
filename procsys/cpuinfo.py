"""Processor details from /proc/cpuinfo."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .common import (
    MetricError,
    ParseError,
    PathLike,
    convert_to_bytes,
    parse_u64,
    read_lines,
)

_U32_MAX = 2**32 - 1


@dataclass
class CpuInfo:
    """General information about one logical CPU."""

    processor: int = 0
    vendor_id: str = ""
    cpu_family: int = 0
    model: int = 0
    model_name: str = ""
    stepping: int = 0
    microcode: str = ""
    cpu_mhz: float = 0.0
    cache_size_bytes: int = 0
    physical_id: int = 0
    siblings: int = 0
    core_id: int = 0
    cpu_cores: int = 0
    apic_id: int = 0
    initial_apic_id: int = 0
    fpu: str = ""
    fpu_exception: str = ""
    cpu_id_level: int = 0
    wp: str = ""
    flags: list[str] = field(default_factory=list)
    vmx_flags: list[str] = field(default_factory=list)
    bugs: list[str] = field(default_factory=list)
    bogomips: float = 0.0
    clflush_size: int = 0
    cache_alignment: int = 0
    address_sizes: str = ""
    power_management: str = ""


def _parse_u32(text: str, item: str) -> int:
    try:
        value = parse_u64(text)
    except ParseError:
        raise ParseError(item, text) from None
    if value > _U32_MAX:
        raise ParseError(item, text)
    return value


def _parse_f64(text: str, item: str) -> float:
    if "_" in text or text != text.strip():
        raise ParseError(item, text)
    try:
        return float(text)
    except ValueError:
        raise ParseError(item, text) from None


def _u32_or_zero(text: str) -> int:
    try:
        return _parse_u32(text, "cpu processor")
    except ParseError:
        return 0


def _cache_bytes(text: str) -> int:
    fields = text.split()
    try:
        amount = parse_u64(fields[0]) if fields else 0
    except ParseError:
        amount = 0
    unit = fields[1] if len(fields) == 2 else "B"
    return convert_to_bytes(amount, unit)


def _u32(item: str) -> Callable[[str], int]:
    return lambda text: _parse_u32(text, item)


def _f64(item: str) -> Callable[[str], float]:
    return lambda text: _parse_f64(text, item)


def _text(text: str) -> str:
    return text


def _words(text: str) -> list[str]:
    return text.strip().split(" ")


_FIELDS: dict[str, tuple[str, Callable[[str], object]]] = {
    "vendor_id": ("vendor_id", _text),
    "cpu family": ("cpu_family", _u32("cpu family")),
    "model": ("model", _u32("cpu model")),
    "model name": ("model_name", _text),
    "stepping": ("stepping", _u32("cpu stepping")),
    "microcode": ("microcode", _text),
    "cpu MHz": ("cpu_mhz", _f64("cpu mhz")),
    "cache size": ("cache_size_bytes", _cache_bytes),
    "physical id": ("physical_id", _u32("cpu physical id")),
    "siblings": ("siblings", _u32("cpu siblings")),
    "core id": ("core_id", _u32("cpu core id")),
    "cpu cores": ("cpu_cores", _u32("cpu cores")),
    "apicid": ("apic_id", _u32("cpu apic id")),
    "initial apicid": ("initial_apic_id", _u32("cpu initial apic id")),
    "fpu": ("fpu", _text),
    "fpu_exception": ("fpu_exception", _text),
    "cpuid level": ("cpu_id_level", _u32("cpu id level")),
    "wp": ("wp", _text),
    "flags": ("flags", _words),
    "vmx flags": ("vmx_flags", _words),
    "bugs": ("bugs", _words),
    "bogomips": ("bogomips", _f64("cpu bogomips")),
    "clflush size": ("clflush_size", _u32("cpu clflush size")),
    "cache_alignment": ("cache_alignment", _u32("cpu cache alignment")),
    "address sizes": ("address_sizes", _text),
    "power management": ("power_management", _text),
}

_LIST_FIELDS = {"flags", "vmx_flags", "bugs"}


def collect(path: PathLike = "/proc/cpuinfo") -> list[CpuInfo]:
    """Read the description of every logical CPU of the system."""
    cpus: list[CpuInfo] = []
    for line in read_lines(path):
        stripped = line.strip()
        if not stripped:
            continue
        parts = [part for part in stripped.split(":") if part]
        if len(parts) != 2:
            continue
        metric = parts[0].strip()
        value = parts[1].strip()

        if metric == "processor":
            cpus.append(CpuInfo(processor=_u32_or_zero(value)))
            continue

        handler = _FIELDS.get(metric)
        if handler is None:
            continue
        if not cpus:
            raise MetricError(f"cpuinfo field {metric!r} found before any processor entry")

        attribute, convert = handler
        converted = convert(value)
        if attribute in _LIST_FIELDS:
            getattr(cpus[-1], attribute).extend(converted)
        else:
            setattr(cpus[-1], attribute, converted)
    return cpus