"""Reader for ``/proc/net/dev``."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from procparse.net_ip import _parse_uint


@dataclass
class NetworkStat:
    """Receive and transmit counters of one network interface."""

    iface: str = ""
    rx_bytes: int = 0
    rx_packets: int = 0
    rx_errs: int = 0
    rx_drop: int = 0
    rx_fifo: int = 0
    rx_frame: int = 0
    rx_compressed: int = 0
    rx_multicast: int = 0
    tx_bytes: int = 0
    tx_packets: int = 0
    tx_errs: int = 0
    tx_drop: int = 0
    tx_fifo: int = 0
    tx_colls: int = 0
    tx_carrier: int = 0
    tx_compressed: int = 0


_COUNTERS = (
    "rx_bytes",
    "rx_packets",
    "rx_errs",
    "rx_drop",
    "rx_fifo",
    "rx_frame",
    "rx_compressed",
    "rx_multicast",
    "tx_bytes",
    "tx_packets",
    "tx_errs",
    "tx_drop",
    "tx_fifo",
    "tx_colls",
    "tx_carrier",
    "tx_compressed",
)


def _uint_or_zero(text: str) -> int:
    try:
        return _parse_uint(text)
    except ValueError:
        return 0


def _parse_line(line: str) -> NetworkStat:
    colon = line.find(":")
    if colon <= 0:
        # Lines without an interface name still take a slot in the result.
        return NetworkStat()
    metrics = line[colon + 1 :].split()
    if len(metrics) < len(_COUNTERS):
        raise ValueError(f"Cannot parse network device line: {line!r}")
    return NetworkStat(
        iface=line[:colon].replace(" ", ""),
        **{name: _uint_or_zero(value) for name, value in zip(_COUNTERS, metrics)},
    )


def read_network_stats(path: str | os.PathLike) -> list[NetworkStat]:
    """Parse the device table after its two header lines; the file must end with a newline."""
    lines = Path(path).read_text(encoding="utf-8", errors="surrogateescape").split("\n")
    if len(lines) < 3:
        raise ValueError("Cannot parse network device table: missing header")
    entries, tail = lines[2:-1], lines[-1]
    if tail.find(":") > 0:
        raise ValueError(f"Cannot parse network device table: unterminated line {tail!r}")
    return [_parse_line(line) for line in entries]