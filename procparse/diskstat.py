"""Reader for ``/proc/diskstats``.

Counters may wrap on busy or long-lived systems, and the kernel updates them
without locks, so small inaccuracies are possible.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from procparse.net_ip import _parse_int, _parse_uint

_SECTOR_SIZE = 512


def _to_int64(value: int) -> int:
    return ((value + (1 << 63)) % (1 << 64)) - (1 << 63)


@dataclass
class DiskStat:
    """I/O statistics of one block device; tick counts are in milliseconds."""

    major: int = 0
    minor: int = 0
    name: str = ""
    read_ios: int = 0
    read_merges: int = 0
    read_sectors: int = 0
    read_ticks: int = 0
    write_ios: int = 0
    write_merges: int = 0
    write_sectors: int = 0
    write_ticks: int = 0
    in_flight: int = 0
    io_ticks: int = 0
    time_in_queue: int = 0

    def read_bytes(self) -> int:
        """Bytes read, counting 512-byte sectors."""
        return _to_int64(_to_int64(self.read_sectors) * _SECTOR_SIZE)

    def write_bytes(self) -> int:
        """Bytes written, counting 512-byte sectors."""
        return _to_int64(_to_int64(self.write_sectors) * _SECTOR_SIZE)

    def read_time(self) -> timedelta:
        """Time spent waiting for read requests."""
        return timedelta(milliseconds=self.read_ticks)

    def write_time(self) -> timedelta:
        """Time spent waiting for write requests."""
        return timedelta(milliseconds=self.write_ticks)

    def io_time(self) -> timedelta:
        """Time the device has been active."""
        return timedelta(milliseconds=self.io_ticks)

    def queue_time(self) -> timedelta:
        """Time spent waiting for all requests."""
        return timedelta(milliseconds=self.time_in_queue)


_COUNTERS = (
    "read_ios",
    "read_merges",
    "read_sectors",
    "read_ticks",
    "write_ios",
    "write_merges",
    "write_sectors",
    "write_ticks",
    "in_flight",
    "io_ticks",
    "time_in_queue",
)


def _int_or_zero(text: str) -> int:
    try:
        return _parse_int(text)
    except ValueError:
        return 0


def _uint_or_zero(text: str) -> int:
    try:
        return _parse_uint(text)
    except ValueError:
        return 0


def _parse_line(line: str) -> DiskStat:
    fields = line.split()
    if len(fields) < 3 + len(_COUNTERS):
        raise ValueError(f"Cannot parse diskstats line: {line!r}")
    return DiskStat(
        major=_int_or_zero(fields[0]),
        minor=_int_or_zero(fields[1]),
        name=fields[2],
        **{name: _uint_or_zero(value) for name, value in zip(_COUNTERS, fields[3:])},
    )


def read_disk_stats(path: str | os.PathLike) -> list[DiskStat]:
    """Parse every newline-terminated line; each needs at least fourteen fields."""
    lines = Path(path).read_text(encoding="utf-8", errors="surrogateescape").split("\n")
    return [_parse_line(line) for line in lines[:-1]]