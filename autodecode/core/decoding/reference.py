"""
Reference encoding guess for diagnostics.

Reports what charset-normalizer would pick for the same buffer so that the
CLI can show it next to the candidate penalties. The selector never consults
this module.
"""

from __future__ import annotations

from charset_normalizer import from_bytes

# Size of data to use for the reference guess (8KB is usually sufficient)
DETECTION_SAMPLE_SIZE = 8192


def detect_reference_encoding(data: bytes) -> str | None:
    """
    Guess the encoding of a buffer with charset-normalizer.

    Args:
        data: Raw bytes (only the first DETECTION_SAMPLE_SIZE are inspected)

    Returns:
        Normalized encoding name, e.g. "utf-8", "gb18030", "cp1252",
        or None if the buffer is empty or nothing matched
    """
    if not data:
        return None

    results = from_bytes(bytes(data[:DETECTION_SAMPLE_SIZE]))
    best = results.best()
    if best is None:
        return None

    encoding = best.encoding.lower()

    # Normalize encoding names
    if encoding in ("ascii", "utf-8", "utf8", "utf_8"):
        return "utf-8"

    return encoding
