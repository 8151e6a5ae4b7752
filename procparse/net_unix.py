"""Reader for the kernel's unix domain socket table (``/proc/net/unix``)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from procparse.net_ip import _parse_uint


@dataclass
class NetUnixDomainSocket:
    """One unix domain socket that has a path."""

    protocol: int
    ref_count: int
    flags: int
    type: int
    state: int
    inode: int
    path: str


# (attribute, label used in errors, column, base)
_COLUMNS = (
    ("ref_count", "RefCount", 1, 16),
    ("protocol", "Protocol", 2, 10),
    ("flags", "Flags", 3, 10),
    ("type", "Type", 4, 10),
    ("state", "State", 5, 10),
    ("inode", "Inode", 6, 10),
)


def read_net_unix_domain_sockets(path: str | os.PathLike) -> list[NetUnixDomainSocket]:
    """Read the unix socket table; entries without a path are left out."""
    text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    sockets = []
    for line in text.split("\n")[1:]:
        fields = line.split()
        if len(fields) < 8:
            continue
        values = {}
        for attribute, label, column, base in _COLUMNS:
            try:
                values[attribute] = _parse_uint(fields[column], base)
            except ValueError:
                raise ValueError(
                    f"Cannot parse unix domain socket [invalid {label}]: {fields[column]}"
                ) from None
        sockets.append(NetUnixDomainSocket(path=fields[7], **values))
    return sockets