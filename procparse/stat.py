"""Reader for ``/proc/stat``."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from procparse.net_ip import _parse_int, _parse_uint


@dataclass
class CPUStat:
    """Time spent by one CPU (or all of them) in each state, in clock ticks."""

    id: str = ""
    user: int = 0
    nice: int = 0
    system: int = 0
    idle: int = 0
    iowait: int = 0
    irq: int = 0
    softirq: int = 0
    steal: int = 0
    guest: int = 0
    guest_nice: int = 0


@dataclass
class Stat:
    """Kernel and system statistics."""

    cpu_stat_all: CPUStat = field(default_factory=CPUStat)
    cpu_stats: list[CPUStat] = field(default_factory=list)
    interrupts: int = 0
    context_switches: int = 0
    boot_time: datetime | None = None
    processes: int = 0
    procs_running: int = 0
    procs_blocked: int = 0


_CPU_COLUMNS = (
    "user",
    "nice",
    "system",
    "idle",
    "iowait",
    "irq",
    "softirq",
    "steal",
    "guest",
    "guest_nice",
)

_COUNTERS = {
    "intr": "interrupts",
    "ctxt": "context_switches",
    "processes": "processes",
    "procs_running": "procs_running",
    "procs_blocked": "procs_blocked",
}


def _uint_or_zero(text: str) -> int:
    try:
        return _parse_uint(text)
    except ValueError:
        return 0


def _cpu_stat(fields: list[str]) -> CPUStat:
    values = {name: _uint_or_zero(value) for name, value in zip(_CPU_COLUMNS, fields[1:])}
    return CPUStat(id=fields[0], **values)


def _second_field(fields: list[str]) -> str:
    if len(fields) < 2:
        raise ValueError(f"Cannot parse stat line: {' '.join(fields)!r}")
    return fields[1]


def read_stat(path: str | os.PathLike) -> Stat:
    """Parse the file; a cpu line counts as the total only when it is the first line."""
    text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    stat = Stat()
    for number, line in enumerate(text.split("\n")):
        fields = line.split()
        if not fields:
            continue
        key = fields[0]
        if key.startswith("cpu"):
            cpu = _cpu_stat(fields)
            if number == 0:
                stat.cpu_stat_all = cpu
            else:
                stat.cpu_stats.append(cpu)
        elif key in _COUNTERS:
            setattr(stat, _COUNTERS[key], _uint_or_zero(_second_field(fields)))
        elif key == "btime":
            try:
                seconds = _parse_int(_second_field(fields))
            except ValueError as error:
                if len(fields) < 2:
                    raise error
                seconds = 0
            stat.boot_time = datetime.fromtimestamp(seconds, timezone.utc)
    return stat