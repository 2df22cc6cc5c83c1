"""Session-unique record identifiers."""

from __future__ import annotations

import time
from uuid import uuid4


_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def generate_id(prefix: str) -> str:
    """Return ``<prefix>-<ms timestamp base36>-<random>``, e.g. ``fix-lz3k9q1c-4f1a2b``."""

    stamp = _to_base36(time.time_ns() // 1_000_000)
    return f"{prefix}-{stamp}-{uuid4().hex[:6]}"
