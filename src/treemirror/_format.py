"""Human-readable size formatting."""

from __future__ import annotations

BYTES_IN_MB = 1_000_000


def thousand_separator(digits: str, sep: str = " ") -> str:
    """Group *digits* in threes from the right: ``"1000000"`` -> ``"1 000 000"``."""
    if len(digits) < 4:
        return digits
    out: list[str] = []
    for count, ch in enumerate(reversed(digits)):
        if count and count % 3 == 0:
            out.append(sep)
        out.append(ch)
    return "".join(reversed(out))


def bytes_to_mb(size: int, sep: str = " ") -> str:
    """Convert *size* bytes to whole megabytes, digit-grouped."""
    return thousand_separator(str(size // BYTES_IN_MB), sep)
