"""Reader for a process's ``io`` file."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path

from procparse.net_ip import _parse_uint


@dataclass
class ProcessIO:
    """I/O statistics of a process."""

    rchar: int = 0
    wchar: int = 0
    syscr: int = 0
    syscw: int = 0
    read_bytes: int = 0
    write_bytes: int = 0
    cancelled_write_bytes: int = 0


_KEYS = frozenset(f.name for f in fields(ProcessIO))


def read_process_io(path: str | os.PathLike) -> ProcessIO:
    """Parse ``key: value`` lines; every value must be an unsigned integer."""
    text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    values = {}
    for line in text.split("\n"):
        if ": " not in line:
            continue
        parts = line.split(": ")
        values[parts[0]] = _parse_uint(parts[1])
    return ProcessIO(**{key: value for key, value in values.items() if key in _KEYS})