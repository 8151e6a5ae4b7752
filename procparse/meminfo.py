"""Reader for ``/proc/meminfo``."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from procparse.net_ip import _parse_uint


@dataclass
class MemInfo:
    """Memory statistics; sizes are in kilobytes except the huge page counts."""

    mem_total: int = 0
    mem_free: int = 0
    mem_available: int = 0
    buffers: int = 0
    cached: int = 0
    swap_cached: int = 0
    active: int = 0
    inactive: int = 0
    active_anon: int = 0
    inactive_anon: int = 0
    active_file: int = 0
    inactive_file: int = 0
    unevictable: int = 0
    mlocked: int = 0
    swap_total: int = 0
    swap_free: int = 0
    dirty: int = 0
    writeback: int = 0
    anon_pages: int = 0
    mapped: int = 0
    shmem: int = 0
    slab: int = 0
    s_reclaimable: int = 0
    s_unreclaim: int = 0
    kernel_stack: int = 0
    page_tables: int = 0
    nfs_unstable: int = 0
    bounce: int = 0
    writeback_tmp: int = 0
    commit_limit: int = 0
    committed_as: int = 0
    vmalloc_total: int = 0
    vmalloc_used: int = 0
    vmalloc_chunk: int = 0
    hardware_corrupted: int = 0
    anon_huge_pages: int = 0
    huge_pages_total: int = 0
    huge_pages_free: int = 0
    huge_pages_rsvd: int = 0
    huge_pages_surp: int = 0
    hugepagesize: int = 0
    direct_map_4k: int = 0
    direct_map_2m: int = 0
    direct_map_1g: int = 0


_KEYS = {
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
    "Dirty": "dirty",
    "Writeback": "writeback",
    "AnonPages": "anon_pages",
    "Mapped": "mapped",
    "Shmem": "shmem",
    "Slab": "slab",
    "SReclaimable": "s_reclaimable",
    "SUnreclaim": "s_unreclaim",
    "KernelStack": "kernel_stack",
    "PageTables": "page_tables",
    "NFS_Unstable": "nfs_unstable",
    "Bounce": "bounce",
    "WritebackTmp": "writeback_tmp",
    "CommitLimit": "commit_limit",
    "Committed_AS": "committed_as",
    "VmallocTotal": "vmalloc_total",
    "VmallocUsed": "vmalloc_used",
    "VmallocChunk": "vmalloc_chunk",
    "HardwareCorrupted": "hardware_corrupted",
    "AnonHugePages": "anon_huge_pages",
    "HugePages_Total": "huge_pages_total",
    "HugePages_Free": "huge_pages_free",
    "HugePages_Rsvd": "huge_pages_rsvd",
    "HugePages_Surp": "huge_pages_surp",
    "Hugepagesize": "hugepagesize",
    "DirectMap4k": "direct_map_4k",
    "DirectMap2M": "direct_map_2m",
    "DirectMap1G": "direct_map_1g",
}


def _uint_or_zero(text: str) -> int:
    try:
        return _parse_uint(text)
    except ValueError:
        return 0


def read_meminfo(path: str | os.PathLike) -> MemInfo:
    """Parse ``Key: value [kB]`` lines; unknown keys are ignored and bad numbers read as 0."""
    text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    values = {}
    for line in text.split("\n"):
        key, colon, rest = line.partition(":")
        if not colon:
            continue
        parts = rest.split()
        if not parts:
            raise ValueError(f"Cannot parse meminfo line: {line!r}")
        if key in _KEYS:
            values[_KEYS[key]] = _uint_or_zero(parts[0])
    return MemInfo(**values)