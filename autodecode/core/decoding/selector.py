"""
Best-decoding selector.

Two entry points converge on one scoring routine:

- decode_bytes(): input known to be raw bytes (e.g. captured stdout)
- redecode_text(): input that was already decoded as Latin-1 and is
  suspected to be wrong; its low bytes are recovered and decoded again

auto_decode_text() dispatches on the input shape for callers that do not
know which one they hold.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .candidates import decode_with_encoding, get_candidate_table
from .classifier import looks_utf16_le
from .models import CandidateScore, DecodeResult, DecodeStrategy
from .scorer import count_bad_chars

if TYPE_CHECKING:
    from .models import CandidateTable

logger = logging.getLogger(__name__)

UTF16_LE = "utf-16-le"
BOM_CHAR = "\ufeff"

# Encoding label of the baseline interpretations
BASELINE_BYTES = "utf8"
BASELINE_TEXT = "original"


def choose_best_decoded(
    data: bytes,
    baseline_text: str,
    baseline_encoding: str,
    table: CandidateTable | None = None,
) -> DecodeResult:
    """
    Pick the lowest-penalty interpretation of a buffer.

    The baseline is scored first; each candidate replaces the current best
    only when its penalty is strictly lower, so ties keep the earlier one.

    Args:
        data: Raw bytes to decode under each candidate
        baseline_text: Interpretation to beat
        baseline_encoding: Label reported if the baseline wins
        table: Candidate table (defaults to get_candidate_table())

    Returns:
        DecodeResult with the winning text and all scores
    """
    table = table or get_candidate_table()
    markers = table.mojibake_markers

    best_text = baseline_text
    best_encoding = baseline_encoding
    best_penalty = count_bad_chars(baseline_text, markers)
    scores = [CandidateScore(encoding=baseline_encoding, penalty=best_penalty)]

    for encoding_id in table.ids:
        decoded = decode_with_encoding(data, encoding_id, table)
        penalty = count_bad_chars(decoded, markers)
        scores.append(CandidateScore(encoding=encoding_id, penalty=penalty))
        if penalty < best_penalty:
            best_text = decoded
            best_encoding = encoding_id
            best_penalty = penalty

    logger.debug(
        "Selected %s (penalty %d) out of %d interpretations",
        best_encoding,
        best_penalty,
        len(scores),
    )

    return DecodeResult(
        text=best_text,
        encoding=best_encoding,
        penalty=best_penalty,
        strategy=DecodeStrategy.SCORED,
        scores=scores,
    )


def _decode_utf16_le(data: bytes) -> str:
    """Decode UTF-16LE, dropping a trailing odd byte and one leading BOM."""
    even_length = len(data) - len(data) % 2
    text = data[:even_length].decode(UTF16_LE, errors="replace")
    if text.startswith(BOM_CHAR):
        text = text[1:]
    return text


def decode_bytes_detailed(data: bytes, table: CandidateTable | None = None) -> DecodeResult:
    """
    Decode raw bytes of unknown encoding.

    A structural UTF-16LE match is authoritative and skips scoring. Otherwise
    the UTF-8 decoding is the baseline and every candidate competes with it.
    """
    data = bytes(data)
    table = table or get_candidate_table()

    if looks_utf16_le(data):
        text = _decode_utf16_le(data)
        logger.debug("Buffer of %d bytes looks like UTF-16LE", len(data))
        return DecodeResult(
            text=text,
            encoding=UTF16_LE,
            penalty=count_bad_chars(text, table.mojibake_markers),
            strategy=DecodeStrategy.UTF16LE,
        )

    baseline = data.decode("utf-8", errors="replace")
    return choose_best_decoded(data, baseline, BASELINE_BYTES, table)


def decode_bytes(data: bytes) -> str:
    """Decode raw bytes of unknown encoding to the most plausible text."""
    return decode_bytes_detailed(data).text


def latin1_bytes(text: str) -> bytes:
    """
    Recover the bytes a Latin-1 decoding would have produced.

    Takes the low byte of every UTF-16 code unit, so characters above U+00FF
    are truncated rather than rejected.
    """
    return text.encode("utf-16-le", errors="surrogatepass")[::2]


def redecode_text_detailed(text: str, table: CandidateTable | None = None) -> DecodeResult:
    """
    Re-decode text that was previously decoded as Latin-1.

    The original string is the baseline; a candidate must score strictly
    better to replace it.
    """
    if not text:
        return DecodeResult(
            text=text,
            encoding=BASELINE_TEXT,
            penalty=0,
            strategy=DecodeStrategy.PASSTHROUGH,
        )

    return choose_best_decoded(latin1_bytes(text), text, BASELINE_TEXT, table)


def redecode_text(text: str) -> str:
    """Re-decode text that was previously decoded as Latin-1."""
    return redecode_text_detailed(text).text


def auto_decode_text(value: object) -> str | None:
    """
    Decode a value of any shape to the most plausible text.

    - None -> None
    - bytes, bytearray, memoryview -> decode_bytes()
    - str -> redecode_text()
    - anything else -> str(value), unchanged

    Never raises for any input value; only an invalid candidate table
    (CandidateTableError) can make it fail.
    """
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        return decode_bytes(bytes(value))
    if not isinstance(value, str):
        return str(value)
    return redecode_text(value)
