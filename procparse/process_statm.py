"""Reader for a process's ``statm`` file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from procparse.net_ip import _parse_uint


@dataclass
class ProcessStatm:
    """Memory usage of a process, measured in pages."""

    size: int = 0
    resident: int = 0
    share: int = 0
    text: int = 0
    lib: int = 0
    data: int = 0
    dirty: int = 0


_NAMES = ("size", "resident", "share", "text", "lib", "data", "dirty")


def read_process_statm(path: str | os.PathLike) -> ProcessStatm:
    """Parse the space-separated page counts; every field must be an unsigned integer."""
    content = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    values = [_parse_uint(field) for field in content.split()]
    return ProcessStatm(**dict(zip(_NAMES, values)))