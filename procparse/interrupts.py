"""Reader for ``/proc/interrupts``."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from procparse.net_ip import _parse_int


@dataclass
class Interrupt:
    """One interrupt source with a count per CPU."""

    name: str
    counts: list[int] = field(default_factory=list)
    description: str = ""


def read_interrupts(path: str | os.PathLike) -> list[Interrupt]:
    """Parse the interrupt table; the header line gives the number of CPUs."""
    text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    header, *lines = text.split("\n")
    num_cpus = len(header.split())
    interrupts = []
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        counts = [_parse_int(value) % (1 << 64) for value in fields[1 : 1 + num_cpus]]
        interrupts.append(
            Interrupt(
                name=fields[0].removesuffix(":"),
                counts=counts,
                description=" ".join(fields[1 + len(counts) :]),
            )
        )
    return interrupts