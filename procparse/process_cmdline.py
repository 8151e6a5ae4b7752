"""Reader for a process's ``cmdline`` file."""

from __future__ import annotations

import os
import re
from pathlib import Path

_SEPARATOR = re.compile(rb"\x00(?=[^\x00])")


def read_process_cmdline(path: str | os.PathLike) -> str:
    """Return the command line with argument separators turned into spaces.

    Trailing NUL bytes are dropped, and a NUL directly followed by another
    byte of the command line becomes a space.
    """
    data = Path(path).read_bytes()
    end = len(data.rstrip(b"\x00"))
    # Only content that reaches past the first byte is kept.
    if end < 2:
        end = 0
    joined = _SEPARATOR.sub(b" ", data[:end])
    return joined.decode("utf-8", errors="surrogateescape").strip()