"""Address decoding and common fields of the kernel's socket tables."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass
from typing import Callable, Sequence

AddressDecoder = Callable[[str], str]

_IPV4_PATTERN = re.compile(r"[0-9a-fA-F]{8}:[0-9a-fA-F]{4}")
_IPV6_PATTERN = re.compile(r"[0-9a-fA-F]{32}:[0-9a-fA-F]{4}")
_DIGITS = {10: re.compile(r"[0-9]+"), 16: re.compile(r"[0-9a-fA-F]+")}


def _parse_uint(text: str, base: int = 10, bits: int = 64) -> int:
    """Parse an unsigned integer of at most ``bits`` bits, without sign or prefix."""
    if not _DIGITS[base].fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text, base)
    if value >= 1 << bits:
        raise ValueError(f"value out of range: {text!r}")
    return value


def _parse_int(text: str, base: int = 10, bits: int = 64) -> int:
    """Parse a signed integer that fits in ``bits`` bits."""
    negative = text.startswith("-")
    digits = text[1:] if text.startswith(("+", "-")) else text
    magnitude = _parse_uint(digits, base, bits)
    value = -magnitude if negative else magnitude
    if not -(1 << (bits - 1)) <= value < 1 << (bits - 1):
        raise ValueError(f"value out of range: {text!r}")
    return value


@dataclass
class NetSocket:
    """Fields shared by every entry of a TCP or UDP socket table."""

    local_address: str
    remote_address: str
    status: int
    tx_queue: int
    rx_queue: int
    uid: int
    inode: int
    ref_count: int


def decode_ipv4(s: str) -> str:
    """Decode a little-endian hex IPv4 address with port, e.g. ``0100007F:1F90``."""
    if not _IPV4_PATTERN.fullmatch(s):
        raise ValueError(f"Cannot decode ipv4 address: {s}")
    hex_address, hex_port = s.split(":")
    packed = bytes.fromhex(hex_address)[::-1]
    return f"{ipaddress.IPv4Address(packed)}:{int(hex_port, 16)}"


def decode_ipv6(s: str) -> str:
    """Decode a hex IPv6 address with port, stored as four little-endian words."""
    if not _IPV6_PATTERN.fullmatch(s):
        raise ValueError(f"Cannot decode ipv6 address: {s}")
    hex_address, hex_port = s.split(":")
    raw = bytes.fromhex(hex_address)
    packed = b"".join(raw[start:start + 4][::-1] for start in range(0, 16, 4))
    address = ipaddress.IPv6Address(packed)
    mapped = address.ipv4_mapped
    text = str(mapped) if mapped is not None else address.compressed
    return f"{text}:{int(hex_port, 16)}"


def parse_net_socket(fields: Sequence[str], decoder: AddressDecoder) -> NetSocket:
    """Build a :class:`NetSocket` from the whitespace-separated fields of one table line."""
    if len(fields) < 11:
        raise ValueError("Cannot parse net socket line: " + " ".join(fields))
    if ":" not in fields[4]:
        raise ValueError("Cannot parse tx/rx queues: " + fields[4])
    tx_queue, rx_queue = fields[4].split(":")[:2]
    return NetSocket(
        local_address=decoder(fields[1]),
        remote_address=decoder(fields[2]),
        status=_parse_uint(fields[3], 16, 8),
        tx_queue=_parse_uint(tx_queue, 16),
        rx_queue=_parse_uint(rx_queue, 16),
        uid=_parse_uint(fields[7], 10, 32),
        inode=_parse_uint(fields[9]),
        ref_count=_parse_uint(fields[10]),
    )