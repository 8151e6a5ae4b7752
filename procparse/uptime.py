"""Reader for ``/proc/uptime``."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path


@dataclass
class Uptime:
    """Seconds since boot and seconds spent idle, summed over all CPUs."""

    total: float
    idle: float

    def total_duration(self) -> timedelta:
        """Uptime truncated to whole seconds."""
        return timedelta(seconds=int(self.total))

    def idle_duration(self) -> timedelta:
        """Idle time truncated to whole seconds."""
        return timedelta(seconds=int(self.idle))


def read_uptime(path: str | os.PathLike) -> Uptime:
    """Parse an uptime file such as ``350735.47 234388.90``."""
    fields = Path(path).read_text(encoding="utf-8", errors="surrogateescape").split()
    if len(fields) < 2:
        raise ValueError("Cannot parse uptime: " + " ".join(fields))
    return Uptime(total=float(fields[0]), idle=float(fields[1]))