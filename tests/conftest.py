"""
Pytest configuration and fixtures for autodecode tests.

Provides fixtures for:
- Sample console output in various encodings
- Candidate table files and cache isolation
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from autodecode.core.decoding import clear_candidate_table_cache

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

# =============================================================================
# Cache Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _fresh_candidate_table(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Make every test load the candidate table from scratch."""
    monkeypatch.delenv("AUTODECODE_CANDIDATES_FILE", raising=False)
    monkeypatch.delenv("AUTODECODE_MAX_BYTES", raising=False)
    clear_candidate_table_cache()
    yield
    clear_candidate_table_cache()


# =============================================================================
# Sample Output Fixtures
# =============================================================================


@pytest.fixture
def chinese_text() -> str:
    """Chinese phrase whose GB18030 bytes are invalid UTF-8."""
    return "中文测试"


@pytest.fixture
def gb18030_bytes(chinese_text: str) -> bytes:
    """GB18030-encoded Chinese phrase."""
    return chinese_text.encode("gb18030")


@pytest.fixture
def utf16_bom_bytes() -> bytes:
    """'hi' as UTF-16LE with BOM."""
    return b"\xff\xfe\x68\x00\x69\x00"


@pytest.fixture
def tasklist_csv() -> str:
    """tasklist /FO CSV /NH output with a non-ASCII image name."""
    return (
        '"System Idle Process","0","Services","0","8 K"\r\n'
        '"中文程序.exe","1234","Console","1","10,240 K"\r\n'
        '"notepad.exe","4321","Console","1","12,000 K"\r\n'
    )


@pytest.fixture
def wmic_values() -> str:
    """wmic process get Name,ExecutablePath /VALUE output."""
    return (
        "\r\r\n"
        "\r\r\n"
        "ExecutablePath=\r\r\n"
        "Name=System Idle Process\r\r\n"
        "\r\r\n"
        "\r\r\n"
        "ExecutablePath=C:\\Windows\\System32\\notepad.exe\r\r\n"
        "Name=notepad.exe\r\r\n"
        "\r\r\n"
        "\r\r\n"
        "ExecutablePath=C:\\Other\\notepad.exe\r\r\n"
        "Name=notepad.exe\r\r\n"
        "\r\r\n"
    )


# =============================================================================
# Candidate Table Fixtures
# =============================================================================


@pytest.fixture
def write_table(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes a candidate table YAML and returns its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "candidates.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
