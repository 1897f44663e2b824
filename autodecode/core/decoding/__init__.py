"""
Decoding Core.

Public API for turning console output of unknown encoding into text.

Usage:
    from autodecode.core.decoding import auto_decode_text

    text = auto_decode_text(completed_process.stdout)

API Functions:
    auto_decode_text(value) -> str | None
    decode_bytes(data) -> str
    redecode_text(text) -> str
    decode_bytes_detailed(data) -> DecodeResult
    redecode_text_detailed(text) -> DecodeResult
    looks_utf16_le(data) -> bool
    decode_with_encoding(data, encoding_id) -> str
    count_bad_chars(text) -> int
    get_candidate_table() -> CandidateTable
    detect_reference_encoding(data) -> str | None
"""

from __future__ import annotations

from .candidates import (
    CandidateTableError,
    UnknownEncodingError,
    clear_candidate_table_cache,
    decode_with_encoding,
    get_candidate_table,
)
from .classifier import looks_utf16_le
from .models import (
    CandidateEncoding,
    CandidateScore,
    CandidateTable,
    DecodeResult,
    DecodeStrategy,
)
from .reference import detect_reference_encoding
from .scorer import count_bad_chars
from .selector import (
    auto_decode_text,
    choose_best_decoded,
    decode_bytes,
    decode_bytes_detailed,
    latin1_bytes,
    redecode_text,
    redecode_text_detailed,
)

# =============================================================================
# Public API Exports
# =============================================================================

__all__ = [
    # Models
    "CandidateEncoding",
    "CandidateScore",
    "CandidateTable",
    # Errors
    "CandidateTableError",
    "DecodeResult",
    # Enums
    "DecodeStrategy",
    "UnknownEncodingError",
    # Main functions
    "auto_decode_text",
    "choose_best_decoded",
    "clear_candidate_table_cache",
    "count_bad_chars",
    "decode_bytes",
    "decode_bytes_detailed",
    "decode_with_encoding",
    "detect_reference_encoding",
    "get_candidate_table",
    "latin1_bytes",
    "looks_utf16_le",
    "redecode_text",
    "redecode_text_detailed",
]
