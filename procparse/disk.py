"""File system capacity of the volume holding a path."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class Disk:
    """Sizes in bytes and the count of free inodes."""

    total: int
    used: int
    free: int
    free_inodes: int


def read_disk(path: str | os.PathLike) -> Disk:
    """Query the file system that contains ``path``."""
    stats = os.statvfs(path)
    total = stats.f_blocks * stats.f_frsize
    free = stats.f_bfree * stats.f_frsize
    return Disk(total=total, used=total - free, free=free, free_inodes=stats.f_ffree)