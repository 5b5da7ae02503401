"""
Human-readable file sizes in decimal units.

Bytes are counted in powers of 1000 and labelled with the matching SI
prefixes (1 kB = 1000 B).  Binary scaling under decimal labels is the
classic mistake this avoids.  Halves round up (2500 B -> "3kB").
"""

from decimal import ROUND_HALF_UP, Decimal

from .errors import SizeOverflowError

UNITS = ["B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"]

def human_filesize(num_bytes: int, decimals: int = 2) -> str:
    """
    >>> human_filesize(0, 0)
    '0B'
    >>> human_filesize(2500, 0)
    '3kB'
    >>> human_filesize(1234567)
    '1.23MB'
    """
    num_bytes = int(num_bytes)
    if num_bytes < 0:
        raise ValueError(f"byte count must be non-negative, got {num_bytes}")
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    # one unit step per full group of three digits
    factor = (len(str(num_bytes)) - 1) // 3
    if factor >= len(UNITS):
        raise SizeOverflowError(f"{num_bytes} bytes is beyond {UNITS[-1]}")
    # exact decimal arithmetic: dividing by a power of ten loses nothing
    value = (Decimal(num_bytes) / (1000 ** factor)).quantize(
        Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP
    )
    return f"{value:f}{UNITS[factor]}"
