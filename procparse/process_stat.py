"""Reader for a process's ``stat`` file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from procparse.net_ip import _parse_int, _parse_uint

_STAT_LINE = re.compile(r"(\d+)( \(.*?\) )(.*)")


@dataclass
class ProcessStat:
    """Status information about a process."""

    pid: int = 0
    comm: str = ""
    state: str = ""
    ppid: int = 0
    pgrp: int = 0
    session: int = 0
    tty_nr: int = 0
    tpgid: int = 0
    flags: int = 0
    minflt: int = 0
    cminflt: int = 0
    majflt: int = 0
    cmajflt: int = 0
    utime: int = 0
    stime: int = 0
    cutime: int = 0
    cstime: int = 0
    priority: int = 0
    nice: int = 0
    num_threads: int = 0
    itrealvalue: int = 0
    starttime: int = 0
    vsize: int = 0
    rss: int = 0
    rsslim: int = 0
    startcode: int = 0
    endcode: int = 0
    startstack: int = 0
    kstkesp: int = 0
    kstkeip: int = 0
    signal: int = 0
    blocked: int = 0
    sigignore: int = 0
    sigcatch: int = 0
    wchan: int = 0
    nswap: int = 0
    cnswap: int = 0
    exit_signal: int = 0
    processor: int = 0
    rt_priority: int = 0
    policy: int = 0
    delayacct_blkio_ticks: int = 0
    guest_time: int = 0
    cguest_time: int = 0
    start_data: int = 0
    end_data: int = 0
    start_brk: int = 0
    arg_start: int = 0
    arg_end: int = 0
    env_start: int = 0
    env_end: int = 0
    exit_code: int = 0


# Field order of the stat line, with the parser for each column.
_COLUMNS = (
    ("pid", _parse_uint),
    ("comm", str),
    ("state", str),
    ("ppid", _parse_int),
    ("pgrp", _parse_int),
    ("session", _parse_int),
    ("tty_nr", _parse_int),
    ("tpgid", _parse_int),
    ("flags", _parse_uint),
    ("minflt", _parse_uint),
    ("cminflt", _parse_uint),
    ("majflt", _parse_uint),
    ("cmajflt", _parse_uint),
    ("utime", _parse_uint),
    ("stime", _parse_uint),
    ("cutime", _parse_int),
    ("cstime", _parse_int),
    ("priority", _parse_int),
    ("nice", _parse_int),
    ("num_threads", _parse_int),
    ("itrealvalue", _parse_int),
    ("starttime", _parse_uint),
    ("vsize", _parse_uint),
    ("rss", _parse_int),
    ("rsslim", _parse_uint),
    ("startcode", _parse_uint),
    ("endcode", _parse_uint),
    ("startstack", _parse_uint),
    ("kstkesp", _parse_uint),
    ("kstkeip", _parse_uint),
    ("signal", _parse_uint),
    ("blocked", _parse_uint),
    ("sigignore", _parse_uint),
    ("sigcatch", _parse_uint),
    ("wchan", _parse_uint),
    ("nswap", _parse_uint),
    ("cnswap", _parse_uint),
    ("exit_signal", _parse_int),
    ("processor", _parse_int),
    ("rt_priority", _parse_uint),
    ("policy", _parse_uint),
    ("delayacct_blkio_ticks", _parse_uint),
    ("guest_time", _parse_uint),
    ("cguest_time", _parse_int),
    ("start_data", _parse_uint),
    ("end_data", _parse_uint),
    ("start_brk", _parse_uint),
    ("arg_start", _parse_uint),
    ("arg_end", _parse_uint),
    ("env_start", _parse_uint),
    ("env_end", _parse_uint),
    ("exit_code", _parse_int),
)


def read_process_stat(path: str | os.PathLike) -> ProcessStat:
    """Parse a stat line; the command name keeps its parentheses and may hold spaces."""
    content = Path(path).read_text(encoding="utf-8", errors="surrogateescape").strip()
    matched = _STAT_LINE.fullmatch(content)
    if matched is None:
        raise ValueError(f"Cannot parse process stat: {content!r}")
    pid, comm, rest = matched.groups()
    columns = [pid, comm.strip(), *rest.split()]
    values = {name: parse(column) for (name, parse), column in zip(_COLUMNS, columns)}
    return ProcessStat(**values)