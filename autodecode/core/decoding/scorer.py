"""
Mojibake penalty scorer.

A cheap heuristic for "how garbled does this text look": one linear scan plus
one membership check per marker. Lower is better, 0 means nothing suspicious.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .candidates import get_candidate_table

if TYPE_CHECKING:
    from collections.abc import Iterable

REPLACEMENT_CHAR = "\ufffd"

REPLACEMENT_PENALTY = 3
CONTROL_PENALTY = 1
MARKER_PENALTY = 1

# C0 controls that legitimately appear in console output
ALLOWED_CONTROLS = frozenset("\t\n\r")


def count_bad_chars(text: str, markers: Iterable[str] | None = None) -> int:
    """
    Compute the mojibake penalty of decoded text.

    Scoring:
    - +3 per U+FFFD replacement character
    - +1 per C0 control character other than tab, LF and CR
    - +1 per marker present anywhere in the text (existence, not count)

    Args:
        text: Decoded text
        markers: Mojibake marker codepoints (defaults to the candidate table's)

    Returns:
        Non-negative penalty score
    """
    if markers is None:
        markers = get_candidate_table().mojibake_markers

    penalty = 0
    for ch in text:
        if ch == REPLACEMENT_CHAR:
            penalty += REPLACEMENT_PENALTY
        elif ch < "\x20" and ch not in ALLOWED_CONTROLS:
            penalty += CONTROL_PENALTY

    for marker in markers:
        if marker in text:
            penalty += MARKER_PENALTY

    return penalty
