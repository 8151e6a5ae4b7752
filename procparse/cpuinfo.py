"""Reader for ``/proc/cpuinfo``."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

_LINE = re.compile(r"([^:]*?)\s*:\s*(.*)$")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_SEPARATOR = re.compile(r"[ \t\n]")


def _int_or_zero(text: str) -> int:
    return int(text) if _INTEGER.fullmatch(text) else 0


def _float_or_zero(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


@dataclass
class Processor:
    """One logical processor; cache size is in kilobytes."""

    id: int = 0
    vendor_id: str = ""
    model: int = 0
    model_name: str = ""
    flags: list[str] = field(default_factory=list)
    cores: int = 0
    mhz: float = 0.0
    cache_size: int = 0
    physical_id: int = 0
    core_id: int = 0


@dataclass
class CPUInfo:
    """All processors listed in the file."""

    processors: list[Processor] = field(default_factory=list)

    def num_cpu(self) -> int:
        """Number of logical processors."""
        return len(self.processors)

    def num_core(self) -> int:
        """Number of distinct (physical id, core id) pairs."""
        cores = set()
        for processor in self.processors:
            if processor.physical_id == -1:
                return self.num_cpu()
            cores.add((processor.physical_id, processor.core_id))
        return len(cores)

    def num_physical_cpu(self) -> int:
        """Number of distinct physical packages."""
        packages = set()
        for processor in self.processors:
            if processor.physical_id == -1:
                return self.num_cpu()
            packages.add(processor.physical_id)
        return len(packages)


def _apply(processor: Processor, key: str, value: str, line: str) -> None:
    match key:
        case "processor":
            processor.id = _int_or_zero(value)
        case "vendor_id":
            processor.vendor_id = value
        case "model":
            processor.model = _int_or_zero(value)
        case "model name":
            processor.model_name = value
        case "flags":
            processor.flags = value.split()
        case "cpu cores":
            processor.cores = _int_or_zero(value)
        case "cpu MHz":
            processor.mhz = _float_or_zero(value)
        case "cache size":
            separator = _SEPARATOR.search(value)
            if separator is None:
                raise ValueError(f"Cannot parse cache size: {value!r}")
            processor.cache_size = _int_or_zero(value[: separator.start()])
            if line.endswith("MB"):
                processor.cache_size *= 1024
        case "physical id":
            processor.physical_id = _int_or_zero(value)
        case "core id":
            processor.core_id = _int_or_zero(value)


def read_cpuinfo(path: str | os.PathLike) -> CPUInfo:
    """Parse a cpuinfo file; each processor block ends with a blank line."""
    lines = Path(path).read_text(encoding="utf-8", errors="surrogateescape").split("\n")
    info = CPUInfo()
    current = Processor(core_id=-1, physical_id=-1)
    # The final piece after the last newline is never part of a block.
    for line in lines[:-1]:
        if not line:
            info.processors.append(current)
            current = Processor()
            continue
        matched = _LINE.match(line)
        if matched is None:
            raise ValueError(f"Cannot parse cpuinfo line: {line!r}")
        key, value = matched.groups()
        _apply(current, key, value, line)
    return info