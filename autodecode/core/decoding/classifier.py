"""
UTF-16LE byte classifier.

Console tools on Windows (wmic in particular) emit UTF-16LE. Text in that
encoding is easy to recognize structurally: every ASCII code unit is followed
by a zero high byte, so zero bytes cluster at odd offsets.
"""

from __future__ import annotations

# Little-endian UTF-16 byte-order mark
UTF16_LE_BOM = b"\xff\xfe"

# Number of leading bytes inspected by the parity heuristic
SAMPLE_SIZE = 64


def looks_utf16_le(data: bytes) -> bool:
    """
    Check whether a buffer looks like UTF-16LE without decoding it.

    Args:
        data: Raw bytes

    Returns:
        True if the buffer starts with the UTF-16LE BOM, or if zero bytes in
        the first SAMPLE_SIZE bytes sit at odd offsets more than twice as
        often as at even offsets (and more than twice in total).
    """
    if data[:2] == UTF16_LE_BOM:
        return True

    even_zeros = 0
    odd_zeros = 0
    for offset, byte in enumerate(data[:SAMPLE_SIZE]):
        if byte != 0:
            continue
        if offset % 2 == 0:
            even_zeros += 1
        else:
            odd_zeros += 1

    return odd_zeros > even_zeros * 2 and odd_zeros > 2
