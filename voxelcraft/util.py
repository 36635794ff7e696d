"""Small helpers shared across the package."""

from __future__ import annotations

import os
from pathlib import Path


def positive_mod(num: int, divisor: int) -> int:
    """Remainder of truncating division, shifted up by the divisor when negative."""
    if divisor == 0:
        raise ZeroDivisionError("positive_mod by zero")
    remainder = abs(num) % abs(divisor)
    if num < 0:
        remainder = -remainder
    if remainder < 0:
        return remainder + divisor
    return remainder


def read_binary_file(path: str | os.PathLike[str]) -> bytes:
    """Return the whole content of a file as bytes."""
    return Path(path).read_bytes()