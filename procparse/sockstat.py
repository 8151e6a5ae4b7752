"""Reader for ``/proc/net/sockstat``."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path

from procparse.net_ip import _parse_uint


def _counter(key: str):
    """A counter filled from ``<section>.<name>`` in the file."""
    return field(default=0, metadata={"key": key})


@dataclass
class SockStat:
    """Socket usage counters grouped by protocol."""

    sockets_used: int = _counter("sockets.used")
    tcp_in_use: int = _counter("TCP.inuse")
    tcp_orphan: int = _counter("TCP.orphan")
    tcp_time_wait: int = _counter("TCP.tw")
    tcp_allocated: int = _counter("TCP.alloc")
    tcp_memory: int = _counter("TCP.mem")
    tcp6_in_use: int = _counter("TCP6.inuse")
    udp_in_use: int = _counter("UDP.inuse")
    udp_memory: int = _counter("UDP.mem")
    udp6_in_use: int = _counter("UDP6.inuse")
    udplite_in_use: int = _counter("UDPLITE.inuse")
    udplite6_in_use: int = _counter("UDPLITE6.inuse")
    raw_in_use: int = _counter("RAW.inuse")
    raw6_in_use: int = _counter("RAW6.inuse")
    frag_in_use: int = _counter("FRAG.inuse")
    frag_memory: int = _counter("FRAG.memory")
    frag6_in_use: int = _counter("FRAG6.inuse")
    frag6_memory: int = _counter("FRAG6.memory")


_ATTRIBUTES = {f.metadata["key"]: f.name for f in fields(SockStat)}


def _uint_or_zero(text: str) -> int:
    try:
        return _parse_uint(text)
    except ValueError:
        return 0


def read_sockstat(path: str | os.PathLike) -> SockStat:
    """Parse lines such as ``TCP: inuse 27 orphan 1 tw 23``; bad numbers read as 0."""
    text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    values: dict[str, int] = {}
    for line in text.split("\n"):
        section, colon, rest = line.partition(":")
        if not colon:
            continue
        parts = rest.split()
        for name, value in zip(parts[0::2], parts[1::2]):
            values[f"{section}.{name}"] = _uint_or_zero(value)
    return SockStat(
        **{attribute: values[key] for key, attribute in _ATTRIBUTES.items() if key in values}
    )