"""Reader for a process's ``schedstat`` file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from procparse.net_ip import _parse_uint


@dataclass
class ProcessSchedStat:
    """Scheduler statistics of a process."""

    run_time: int = 0
    runqueue_time: int = 0
    run_periods: int = 0


def read_process_sched_stat(path: str | os.PathLike) -> ProcessSchedStat:
    """Parse the space-separated counters; every field must be an unsigned integer."""
    text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    values = [_parse_uint(field) for field in text.split()]
    names = ("run_time", "runqueue_time", "run_periods")
    return ProcessSchedStat(**dict(zip(names, values)))