"""Reader for ``/proc/mounts``."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class Mount:
    """One mounted file system."""

    device: str
    mount_point: str
    fs_type: str
    options: str


def read_mounts(path: str | os.PathLike) -> list[Mount]:
    """Parse the mount table; every line needs at least four fields."""
    mounts = []
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        for raw in handle:
            line = raw.removesuffix("\n").removesuffix("\r")
            fields = line.split()
            if len(fields) < 4:
                raise ValueError(f"Cannot parse mount line: {line!r}")
            mounts.append(Mount(*fields[:4]))
    return mounts