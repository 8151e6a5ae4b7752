"""Reader for the kernel's TCP socket tables (``/proc/net/tcp`` and ``tcp6``)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from procparse.net_ip import AddressDecoder, NetSocket, _parse_int, _parse_uint, parse_net_socket


@dataclass
class NetTCPSocket(NetSocket):
    """One TCP socket; timer and congestion fields are zero when the kernel omits them."""

    retransmit_timeout: int = 0
    predicted_tick: int = 0
    ack_quick: int = 0
    ack_pingpong: bool = False
    sending_congestion_window: int = 0
    slow_start_size_threshold: int = 0


def read_net_tcp_sockets(path: str | os.PathLike, decoder: AddressDecoder) -> list[NetTCPSocket]:
    """Read a TCP socket table, decoding addresses with ``decoder``."""
    text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    lines = text.rstrip("\n ").split("\n")
    sockets = []
    for line in lines[1:]:
        fields = line.split()
        base = parse_net_socket(fields, decoder)
        extra = {}
        # Depending on socket state the kernel prints either 12 or 17 fields.
        if len(fields) >= 17:
            retransmit_timeout = _parse_uint(fields[12])
            predicted_tick = _parse_uint(fields[13])
            ack = _parse_int(fields[14], 10, 8)
            extra = {
                "retransmit_timeout": retransmit_timeout,
                "predicted_tick": predicted_tick,
                "ack_quick": (ack >> 1) & 0xFF,
                "ack_pingpong": (ack & 1) == 1,
                "sending_congestion_window": _parse_uint(fields[15]),
                "slow_start_size_threshold": _parse_int(fields[16], 10, 32),
            }
        sockets.append(NetTCPSocket(**vars(base), **extra))
    return sockets