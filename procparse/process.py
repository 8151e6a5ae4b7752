"""Everything the proc tree exposes about one process."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from procparse.process_cmdline import read_process_cmdline
from procparse.process_io import ProcessIO, read_process_io
from procparse.process_stat import ProcessStat, read_process_stat
from procparse.process_statm import ProcessStatm, read_process_statm
from procparse.process_status import ProcessStatus, read_process_status


@dataclass
class Process:
    """Combined status, memory, stat, I/O and command line of a process."""

    status: ProcessStatus
    statm: ProcessStatm
    stat: ProcessStat
    io: ProcessIO
    cmdline: str


def read_process(pid: int, path: str | os.PathLike) -> Process:
    """Read the process ``pid`` from the proc tree rooted at ``path``."""
    root = Path(path) / str(pid)
    os.stat(root)
    io = read_process_io(root / "io")
    stat = read_process_stat(root / "stat")
    statm = read_process_statm(root / "statm")
    status = read_process_status(root / "status")
    cmdline = read_process_cmdline(root / "cmdline")
    return Process(status=status, statm=statm, stat=stat, io=io, cmdline=cmdline)