"""Reader for the kernel's UDP socket tables (``/proc/net/udp`` and ``udp6``)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from procparse.net_ip import AddressDecoder, NetSocket, _parse_uint, parse_net_socket


@dataclass
class NetUDPSocket(NetSocket):
    """One UDP socket with its drop counter."""

    drops: int = 0


def read_net_udp_sockets(path: str | os.PathLike, decoder: AddressDecoder) -> list[NetUDPSocket]:
    """Read a UDP socket table, decoding addresses with ``decoder``."""
    text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    sockets = []
    for line in text.split("\n")[1:]:
        fields = line.split()
        if len(fields) < 13:
            continue
        base = parse_net_socket(fields, decoder)
        sockets.append(NetUDPSocket(**vars(base), drops=_parse_uint(fields[12])))
    return sockets