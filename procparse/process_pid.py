"""Process id helpers: the kernel's pid limit and the pids present in a proc tree."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from procparse.net_ip import _parse_uint


def read_max_pid(path: str | os.PathLike) -> int:
    """Read the highest pid the kernel hands out (``/proc/sys/kernel/pid_max``)."""
    return _parse_uint(Path(path).read_text(encoding="utf-8", errors="surrogateescape").strip())


def list_pids(path: str | os.PathLike, max_pid: int) -> list[int]:
    """List pids from 1 to ``max_pid`` that exist as directories under ``path``."""
    root = Path(path)
    pids = []
    for pid in range(1, max_pid + 1):
        try:
            info = os.stat(root / str(pid))
        except FileNotFoundError:
            continue
        if stat.S_ISDIR(info.st_mode):
            pids.append(pid)
    return pids