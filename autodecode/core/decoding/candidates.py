"""
Candidate table and candidate decoder.

The candidate table is the single source of truth for which encodings the
selector tries, in which order, and which codepoints count as mojibake
markers. It lives in candidates.yaml beside this module so that extending the
set is a configuration change.
"""

from __future__ import annotations

import codecs
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import CandidateEncoding, CandidateTable

logger = logging.getLogger(__name__)

# Environment variable pointing at an alternative candidates.yaml
CANDIDATES_FILE_ENV = "AUTODECODE_CANDIDATES_FILE"

DEFAULT_TABLE_PATH = Path(__file__).parent / "candidates.yaml"

# cp932 maps the single bytes Shift_JIS leaves undefined (0xA0, 0xFD-0xFF) to
# private-use characters; report them as U+FFFD like any other invalid byte
_UNDEFINED_BYTE_CHARS: dict[str, dict[int, str]] = {
    "cp932": dict.fromkeys(range(0xF8F0, 0xF8F4), "\ufffd"),
}


class CandidateTableError(ValueError):
    """Raised when a candidate table cannot be loaded or is invalid."""


class UnknownEncodingError(ValueError):
    """Raised when an encoding identifier is not in the candidate table."""


def _load_candidate_table_from_yaml(path: Path) -> CandidateTable:
    """Load and validate a candidate table from a YAML file."""
    try:
        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise CandidateTableError(f"Cannot read candidate table {path}: {e}") from e

    if not isinstance(data, dict):
        raise CandidateTableError(f"Candidate table {path} must be a mapping")

    try:
        return CandidateTable(
            version=str(data.get("version", "1.0.0")),
            candidates=data.get("candidates") or [],
            mojibake_markers=data.get("mojibake_markers") or [],
        )
    except ValidationError as e:
        raise CandidateTableError(f"Invalid candidate table {path}: {e}") from e


@lru_cache(maxsize=1)
def get_candidate_table() -> CandidateTable:
    """
    Get the candidate table.

    The table is read from AUTODECODE_CANDIDATES_FILE if set, otherwise from
    the candidates.yaml shipped with the package. It is cached after first
    load.

    Returns:
        CandidateTable with encodings in evaluation order

    Raises:
        CandidateTableError: If the configured file is missing or invalid
    """
    override = os.environ.get(CANDIDATES_FILE_ENV)
    if override:
        path = Path(override)
        if not path.exists():
            raise CandidateTableError(f"{CANDIDATES_FILE_ENV} points to a missing file: {path}")
        logger.debug("Loading candidate table from %s", path)
        return _load_candidate_table_from_yaml(path)

    if not DEFAULT_TABLE_PATH.exists():
        # Keep the library usable when package data was not installed
        return _get_builtin_candidate_table()

    logger.debug("Loading candidate table from %s", DEFAULT_TABLE_PATH)
    return _load_candidate_table_from_yaml(DEFAULT_TABLE_PATH)


def _get_builtin_candidate_table() -> CandidateTable:
    """Get the built-in table for when candidates.yaml is not available."""
    return CandidateTable(
        version="1.0.0-builtin",
        candidates=[
            CandidateEncoding(id="utf8", codec="utf-8"),
            CandidateEncoding(id="gb18030", codec="gb18030"),
            CandidateEncoding(id="big5", codec="big5hkscs"),
            CandidateEncoding(id="shift_jis", codec="cp932"),
            CandidateEncoding(id="euc-kr", codec="cp949"),
            CandidateEncoding(id="windows-1252", codec="cp1252"),
        ],
        mojibake_markers=["\u8107", "\u8117", "\u8292"],
    )


def clear_candidate_table_cache() -> None:
    """Clear the candidate table cache (for testing)."""
    get_candidate_table.cache_clear()


def decode_with_encoding(
    data: bytes, encoding_id: str, table: CandidateTable | None = None
) -> str:
    """
    Decode bytes under one candidate encoding.

    Invalid byte sequences become U+FFFD; decoding continues past them.

    Args:
        data: Raw bytes
        encoding_id: Identifier from the candidate table, e.g. "gb18030"
        table: Candidate table (defaults to get_candidate_table())

    Returns:
        Decoded text

    Raises:
        UnknownEncodingError: If encoding_id is not in the table
    """
    table = table or get_candidate_table()
    candidate = table.get_by_id(encoding_id)
    if candidate is None:
        raise UnknownEncodingError(
            f"Unknown encoding id: {encoding_id!r} (known: {', '.join(table.ids)})"
        )
    decoded = bytes(data).decode(candidate.codec, errors="replace")

    undefined = _UNDEFINED_BYTE_CHARS.get(codecs.lookup(candidate.codec).name)
    if undefined:
        decoded = decoded.translate(undefined)
    return decoded
