"""Memory statistics, in bytes, from /proc/meminfo."""

from __future__ import annotations

from dataclasses import dataclass

from .common import (
    InvalidFieldNumberError,
    ParseError,
    PathLike,
    convert_to_bytes,
    parse_u64,
    read_lines,
)

_FIELDS = {
    "MemTotal": "mem_total",
    "MemFree": "mem_free",
    "MemAvailable": "mem_available",
    "Buffers": "buffers",
    "Cached": "cached",
    "SwapCached": "swap_cached",
    "Active": "active",
    "Inactive": "inactive",
    "Active(anon)": "active_anon",
    "Inactive(anon)": "inactive_anon",
    "Active(file)": "active_file",
    "Inactive(file)": "inactive_file",
    "Unevictable": "unevictable",
    "Mlocked": "mlocked",
    "SwapTotal": "swap_total",
    "SwapFree": "swap_free",
    "Zswap": "z_swap",
    "Zswapped": "z_swapped",
    "Dirty": "dirty",
    "Writeback": "writeback",
    "AnonPages": "annon_pages",
    "Mapped": "mapped",
    "Shmem": "shmem",
    "KReclaimable": "k_reclaimable",
    "Slab": "slap",
    "SReclaimable": "s_reclaimable",
    "SUnreclaim": "s_unreclaim",
    "KernelStack": "kernel_stack",
    "PageTables": "page_tables",
    "SecPageTables": "sec_page_tables",
    "NFS_Unstable": "nfs_unstable",
    "Bounce": "bounce",
    "WritebackTmp": "writeback_tmp",
    "CommitLimit": "commit_limit",
    "Committed_AS": "committed_as",
    "VmallocTotal": "vmalloc_total",
    "VmallocUsed": "vmalloc_used",
    "VmallocChunk": "vmalloc_chunk",
    "Percpu": "per_cpu",
    "HardwareCorrupted": "hardware_corrupted",
    "AnonHugePages": "annon_huge_pages",
    "ShmemHugePages": "shmem_huge_pages",
    "ShmemPmdMapped": "shmem_pmd_mapped",
    "FileHugePages": "file_huge_pages",
    "FilePmdMapped": "file_pmd_mapped",
    "CmaTotal": "cma_total",
    "CmaFree": "cma_free",
    "Unaccepted": "unaccepted",
    "HugePages_Total": "huge_pages_total",
    "HugePages_Free": "huge_pages_free",
    "HugePages_Rsvd": "huge_pages_rsvd",
    "HugePages_Surp": "huge_pages_surp",
    "Hugepagesize": "huge_page_size",
    "Hugetlb": "huge_tlb",
    "DirectMap4k": "direct_map_4k",
    "DirectMap2M": "direct_map_2m",
    "DirectMap1G": "direct_map_1g",
}


@dataclass
class Meminfo:
    """Memory statistics in bytes; None where the kernel does not report a field."""

    mem_total: int | None = None
    mem_free: int | None = None
    mem_available: int | None = None
    buffers: int | None = None
    cached: int | None = None
    swap_cached: int | None = None
    active: int | None = None
    inactive: int | None = None
    active_anon: int | None = None
    inactive_anon: int | None = None
    active_file: int | None = None
    inactive_file: int | None = None
    unevictable: int | None = None
    mlocked: int | None = None
    swap_total: int | None = None
    swap_free: int | None = None
    z_swap: int | None = None
    z_swapped: int | None = None
    dirty: int | None = None
    writeback: int | None = None
    annon_pages: int | None = None
    mapped: int | None = None
    shmem: int | None = None
    k_reclaimable: int | None = None
    slap: int | None = None
    s_reclaimable: int | None = None
    s_unreclaim: int | None = None
    kernel_stack: int | None = None
    page_tables: int | None = None
    sec_page_tables: int | None = None
    nfs_unstable: int | None = None
    bounce: int | None = None
    writeback_tmp: int | None = None
    commit_limit: int | None = None
    committed_as: int | None = None
    vmalloc_total: int | None = None
    vmalloc_used: int | None = None
    vmalloc_chunk: int | None = None
    per_cpu: int | None = None
    hardware_corrupted: int | None = None
    annon_huge_pages: int | None = None
    shmem_huge_pages: int | None = None
    shmem_pmd_mapped: int | None = None
    file_huge_pages: int | None = None
    file_pmd_mapped: int | None = None
    cma_total: int | None = None
    cma_free: int | None = None
    unaccepted: int | None = None
    huge_pages_total: int | None = None
    huge_pages_free: int | None = None
    huge_pages_rsvd: int | None = None
    huge_pages_surp: int | None = None
    huge_page_size: int | None = None
    huge_tlb: int | None = None
    direct_map_4k: int | None = None
    direct_map_2m: int | None = None
    direct_map_1g: int | None = None


def _bytes(text: str) -> int:
    fields = text.split()
    try:
        amount = parse_u64(fields[0]) if fields else 0
    except ParseError:
        amount = 0
    unit = fields[1] if len(fields) == 2 else "B"
    return convert_to_bytes(amount, unit)


def collect(path: PathLike = "/proc/meminfo") -> Meminfo:
    """Read the memory statistics of the system, converted to bytes."""
    meminfo = Meminfo()
    for line in read_lines(path):
        parts = [part for part in line.strip().split(":") if part]
        if len(parts) != 2:
            raise InvalidFieldNumberError("meminfo", len(parts), line)
        name, value = parts
        amount = _bytes(value)
        attribute = _FIELDS.get(name)
        if attribute is not None:
            setattr(meminfo, attribute, amount)
    return meminfo