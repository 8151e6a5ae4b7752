"""Reader for ``/proc/vmstat``."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path

from procparse.net_ip import _parse_uint


def _counter(key: str):
    """A counter filled from the kernel line called ``key``."""
    return field(default=0, metadata={"key": key})


@dataclass
class VMStat:
    """Virtual memory statistics; counts are in pages or events."""

    nr_free_pages: int = _counter("nr_free_pages")
    nr_alloc_batch: int = _counter("nr_alloc_batch")
    nr_inactive_anon: int = _counter("nr_inactive_anon")
    nr_active_anon: int = _counter("nr_active_anon")
    nr_inactive_file: int = _counter("nr_inactive_file")
    nr_active_file: int = _counter("nr_active_file")
    nr_unevictable: int = _counter("nr_unevictable")
    nr_mlock: int = _counter("nr_mlock")
    nr_anon_pages: int = _counter("nr_anon_pages")
    nr_mapped: int = _counter("nr_mapped")
    nr_file_pages: int = _counter("nr_file_pages")
    nr_dirty: int = _counter("nr_dirty")
    nr_writeback: int = _counter("nr_writeback")
    nr_slab_reclaimable: int = _counter("nr_slab_reclaimable")
    nr_slab_unreclaimable: int = _counter("nr_slab_unreclaimable")
    nr_page_table_pages: int = _counter("nr_page_table_pages")
    nr_kernel_stack: int = _counter("nr_kernel_stack")
    nr_unstable: int = _counter("nr_unstable")
    nr_bounce: int = _counter("nr_bounce")
    nr_vmscan_write: int = _counter("nr_vmscan_write")
    nr_vmscan_immediate_reclaim: int = _counter("nr_vmscan_immediate_reclaim")
    nr_writeback_temp: int = _counter("nr_writeback_temp")
    nr_isolated_anon: int = _counter("nr_isolated_anon")
    nr_isolated_file: int = _counter("nr_isolated_file")
    nr_shmem: int = _counter("nr_shmem")
    nr_dirtied: int = _counter("nr_dirtied")
    nr_written: int = _counter("nr_written")
    numa_hit: int = _counter("numa_hit")
    numa_miss: int = _counter("numa_miss")
    numa_foreign: int = _counter("numa_foreign")
    numa_interleave: int = _counter("numa_interleave")
    numa_local: int = _counter("numa_local")
    numa_other: int = _counter("numa_other")
    workingset_refault: int = _counter("workingset_refault")
    workingset_activate: int = _counter("workingset_activate")
    workingset_nodereclaim: int = _counter("workingset_nodereclaim")
    nr_anon_transparent_hugepages: int = _counter("nr_anon_transparent_hugepages")
    nr_free_cma: int = _counter("nr_free_cma")
    nr_dirty_threshold: int = _counter("nr_dirty_threshold")
    nr_dirty_background_threshold: int = _counter("nr_dirty_background_threshold")
    page_pagein: int = _counter("pgpgin")
    page_pageout: int = _counter("pgpgout")
    page_swapin: int = _counter("pswpin")
    page_swapout: int = _counter("pswpout")
    page_alloc_dma: int = _counter("pgalloc_dma")
    page_alloc_dma32: int = _counter("pgalloc_dma32")
    page_alloc_normal: int = _counter("pgalloc_normal")
    page_alloc_movable: int = _counter("pgalloc_movable")
    page_free: int = _counter("pgfree")
    page_activate: int = _counter("pgactivate")
    page_deactivate: int = _counter("pgdeactivate")
    page_fault: int = _counter("pgfault")
    page_major_fault: int = _counter("pgmajfault")
    page_refill_dma: int = _counter("pgrefill_dma")
    page_refill_dma32: int = _counter("pgrefill_dma32")
    page_refill_normal: int = _counter("pgrefill_normal")
    page_refill_movable: int = _counter("pgrefill_movable")
    page_steal_kswapd_dma: int = _counter("pgsteal_kswapd_dma")
    page_steal_kswapd_dma32: int = _counter("pgsteal_kswapd_dma32")
    page_steal_kswapd_normal: int = _counter("pgsteal_kswapd_normal")
    page_steal_kswapd_movable: int = _counter("pgsteal_kswapd_movable")
    page_steal_direct_dma: int = _counter("pgsteal_direct_dma")
    page_steal_direct_dma32: int = _counter("pgsteal_direct_dma32")
    page_steal_direct_normal: int = _counter("pgsteal_direct_normal")
    page_steal_direct_movable: int = _counter("pgsteal_direct_movable")
    page_scan_kswapd_dma: int = _counter("pgscan_kswapd_dma")
    page_scan_kswapd_dma32: int = _counter("pgscan_kswapd_dma32")
    page_scan_kswapd_normal: int = _counter("pgscan_kswapd_normal")
    page_scan_kswapd_movable: int = _counter("pgscan_kswapd_movable")
    page_scan_direct_dma: int = _counter("pgscan_direct_dma")
    page_scan_direct_dma32: int = _counter("pgscan_direct_dma32")
    page_scan_direct_normal: int = _counter("pgscan_direct_normal")
    page_scan_direct_movable: int = _counter("pgscan_direct_movable")
    page_scan_direct_throttle: int = _counter("pgscan_direct_throttle")
    zone_reclaim_failed: int = _counter("zone_reclaim_failed")
    page_inode_steal: int = _counter("pginodesteal")
    slabs_scanned: int = _counter("slabs_scanned")
    kswapd_inodesteal: int = _counter("kswapd_inodesteal")
    kswapd_low_watermark_hit_quickly: int = _counter("kswapd_low_wmark_hit_quickly")
    kswapd_high_watermark_hit_quickly: int = _counter("kswapd_high_wmark_hit_quickly")
    pageout_run: int = _counter("pageoutrun")
    alloc_stall: int = _counter("allocstall")
    page_rotated: int = _counter("pgrotated")
    drop_pagecache: int = _counter("drop_pagecache")
    drop_slab: int = _counter("drop_slab")
    numa_pte_updates: int = _counter("numa_pte_updates")
    numa_huge_pte_updates: int = _counter("numa_huge_pte_updates")
    numa_hint_faults: int = _counter("numa_hint_faults")
    numa_hint_faults_local: int = _counter("numa_hint_faults_local")
    numa_pages_migrated: int = _counter("numa_pages_migrated")
    page_migrate_success: int = _counter("pgmigrate_success")
    page_migrate_fail: int = _counter("pgmigrate_fail")
    compact_migrate_scanned: int = _counter("compact_migrate_scanned")
    compact_free_scanned: int = _counter("compact_free_scanned")
    compact_isolated: int = _counter("compact_isolated")
    compact_stall: int = _counter("compact_stall")
    compact_fail: int = _counter("compact_fail")
    compact_success: int = _counter("compact_success")
    htlb_buddy_alloc_success: int = _counter("htlb_buddy_alloc_success")
    htlb_buddy_alloc_fail: int = _counter("htlb_buddy_alloc_fail")
    unevictable_pages_culled: int = _counter("unevictable_pgs_culled")
    unevictable_pages_scanned: int = _counter("unevictable_pgs_scanned")
    unevictable_pages_rescued: int = _counter("unevictable_pgs_rescued")
    unevictable_pages_mlocked: int = _counter("unevictable_pgs_mlocked")
    unevictable_pages_munlocked: int = _counter("unevictable_pgs_munlocked")
    unevictable_pages_cleared: int = _counter("unevictable_pgs_cleared")
    unevictable_pages_stranded: int = _counter("unevictable_pgs_stranded")
    thp_fault_alloc: int = _counter("thp_fault_alloc")
    thp_fault_fallback: int = _counter("thp_fault_fallback")
    thp_collapse_alloc: int = _counter("thp_collapse_alloc")
    thp_collapse_alloc_failed: int = _counter("thp_collapse_alloc_failed")
    thp_split: int = _counter("thp_split")
    thp_zero_page_alloc: int = _counter("thp_zero_page_alloc")
    thp_zero_page_alloc_failed: int = _counter("thp_zero_page_alloc_failed")


_ATTRIBUTES = {f.metadata["key"]: f.name for f in fields(VMStat)}


def _uint_or_zero(text: str) -> int:
    try:
        return _parse_uint(text)
    except ValueError:
        return 0


def read_vmstat(path: str | os.PathLike) -> VMStat:
    """Parse ``name value`` lines.

    Lines without exactly two fields and unknown names are ignored; values
    that are not unsigned integers read as 0.
    """
    text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    values: dict[str, int] = {}
    for line in text.split("\n"):
        parts = line.split()
        if len(parts) != 2:
            continue
        name, value = parts
        if name in _ATTRIBUTES:
            values[_ATTRIBUTES[name]] = _uint_or_zero(value)
    return VMStat(**values)