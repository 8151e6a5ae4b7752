"""Reader for a process's ``status`` file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from procparse.net_ip import _parse_int, _parse_uint


@dataclass
class ProcessStatus:
    """Human-readable status of a process, much of it also found in ``stat`` and ``statm``."""

    name: str = ""
    state: str = ""
    tgid: int = 0
    pid: int = 0
    ppid: int = 0
    tracer_pid: int = 0
    real_uid: int = 0
    effective_uid: int = 0
    saved_set_uid: int = 0
    filesystem_uid: int = 0
    real_gid: int = 0
    effective_gid: int = 0
    saved_set_gid: int = 0
    filesystem_gid: int = 0
    fd_size: int = 0
    groups: list[int] = field(default_factory=list)
    vm_peak: int = 0
    vm_size: int = 0
    vm_lck: int = 0
    vm_hwm: int = 0
    vm_rss: int = 0
    vm_data: int = 0
    vm_stk: int = 0
    vm_exe: int = 0
    vm_lib: int = 0
    vm_pte: int = 0
    vm_swap: int = 0
    threads: int = 0
    sig_q_length: int = 0
    sig_q_limit: int = 0
    sig_pnd: int = 0
    shd_pnd: int = 0
    sig_blk: int = 0
    sig_ign: int = 0
    sig_cgt: int = 0
    cap_inh: int = 0
    cap_prm: int = 0
    cap_eff: int = 0
    cap_bnd: int = 0
    seccomp: int = 0
    cpus_allowed: list[int] = field(default_factory=list)
    mems_allowed: list[int] = field(default_factory=list)
    voluntary_ctxt_switches: int = 0
    nonvoluntary_ctxt_switches: int = 0


_TEXT = {"Name": "name", "State": "state"}

_DECIMAL = {
    "Tgid": "tgid",
    "Pid": "pid",
    "TracerPid": "tracer_pid",
    "FDSize": "fd_size",
    "Threads": "threads",
    "voluntary_ctxt_switches": "voluntary_ctxt_switches",
    "nonvoluntary_ctxt_switches": "nonvoluntary_ctxt_switches",
}

_HEX = {
    "SigPnd": "sig_pnd",
    "ShdPnd": "shd_pnd",
    "SigBlk": "sig_blk",
    "SigIgn": "sig_ign",
    "SigCgt": "sig_cgt",
    "CapInh": "cap_inh",
    "CapPrm": "cap_prm",
    "CapEff": "cap_eff",
    "CapBnd": "cap_bnd",
}

# Memory sizes are printed with a unit, e.g. "16216 kB"; only the number is kept.
_MEMORY = {
    "VmPeak": "vm_peak",
    "VmSize": "vm_size",
    "VmLck": "vm_lck",
    "VmHWM": "vm_hwm",
    "VmRSS": "vm_rss",
    "VmData": "vm_data",
    "VmStk": "vm_stk",
    "VmExe": "vm_exe",
    "VmLib": "vm_lib",
    "VmPTE": "vm_pte",
    "VmSwap": "vm_swap",
}

_IDS = {
    "Uid": ("real_uid", "effective_uid", "saved_set_uid", "filesystem_uid"),
    "Gid": ("real_gid", "effective_gid", "saved_set_gid", "filesystem_gid"),
}

_MASKS = {"Cpus_allowed": "cpus_allowed", "Mems_allowed": "mems_allowed"}


def _first_number(value: str) -> int:
    parts = value.split()
    if not parts:
        raise ValueError(f"missing value: {value!r}")
    return _parse_uint(parts[0])


def _parse_entry(key: str, value: str) -> dict[str, object]:
    if key in _TEXT:
        return {_TEXT[key]: value}
    if key in _DECIMAL:
        return {_DECIMAL[key]: _parse_uint(value)}
    if key in _HEX:
        return {_HEX[key]: _parse_uint(value, 16)}
    if key in _MEMORY:
        return {_MEMORY[key]: _first_number(value)}
    if key in _IDS:
        parts = value.split()
        if len(parts) != 4:
            return {}
        return {name: _parse_uint(part) for name, part in zip(_IDS[key], parts)}
    if key in _MASKS:
        return {_MASKS[key]: [_parse_uint(part, 16, 32) for part in value.split(",")]}
    match key:
        case "PPid":
            return {"ppid": _parse_int(value)}
        case "Groups":
            return {"groups": [_parse_int(part) for part in value.split()]}
        case "SigQ":
            parts = value.split("/")
            if len(parts) != 2:
                return {}
            return {"sig_q_length": _parse_uint(parts[0]), "sig_q_limit": _parse_uint(parts[1])}
        case "Seccomp":
            return {"seccomp": _parse_uint(value, 10, 8)}
    return {}


def read_process_status(path: str | os.PathLike) -> ProcessStatus:
    """Parse ``Key: value`` lines; unknown keys are ignored, bad numbers raise ``ValueError``."""
    text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    values: dict[str, object] = {}
    for line in text.split("\n"):
        if ":" not in line:
            continue
        parts = line.split(":")
        values.update(_parse_entry(parts[0].strip(), parts[1].strip()))
    return ProcessStatus(**values)