"""Tests for CLI main module."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from autodecode.cli.main import app

runner = CliRunner()


class TestVersion:
    """Tests for version command."""

    def test_version_option(self) -> None:
        """Test --version shows version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.stdout

    def test_version_short_option(self) -> None:
        """Test -V shows version."""
        result = runner.invoke(app, ["-V"])
        assert result.exit_code == 0
        assert "0.1.0" in result.stdout


class TestHelp:
    """Tests for help command."""

    def test_help_option(self) -> None:
        """Test --help shows help."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Decode console output" in result.stdout

    def test_decode_help(self) -> None:
        """Test decode --help shows options."""
        result = runner.invoke(app, ["decode", "--help"])
        assert result.exit_code == 0
        assert "--format" in result.stdout
        assert "--explain" in result.stdout


class TestDecode:
    """Tests for decode command."""

    def test_decode_file(self, tmp_path: Path, gb18030_bytes: bytes, chinese_text: str) -> None:
        """Test decoding a GB18030 file."""
        path = tmp_path / "out.bin"
        path.write_bytes(gb18030_bytes)

        result = runner.invoke(app, ["decode", str(path)])
        assert result.exit_code == 0
        assert chinese_text in result.stdout

    def test_decode_stdin(self, utf16_bom_bytes: bytes) -> None:
        """Test decoding bytes piped through stdin."""
        result = runner.invoke(app, ["decode", "-"], input=utf16_bom_bytes)
        assert result.exit_code == 0
        assert result.stdout.strip() == "hi"

    def test_decode_json(self, tmp_path: Path, gb18030_bytes: bytes, chinese_text: str) -> None:
        """Test decode with JSON output."""
        path = tmp_path / "out.bin"
        path.write_bytes(gb18030_bytes)

        result = runner.invoke(app, ["decode", str(path), "--format", "json", "--explain"])
        assert result.exit_code == 0
        output = json.loads(result.stdout)
        assert output["text"] == chinese_text
        assert output["encoding"] == "gb18030"
        assert output["clean"] is True
        assert [s["encoding"] for s in output["scores"]][:2] == ["utf8", "utf8"]
        assert "reference_encoding" in output

    def test_decode_explain_terminal(self, tmp_path: Path, gb18030_bytes: bytes) -> None:
        """Test the terminal penalty report."""
        path = tmp_path / "out.bin"
        path.write_bytes(gb18030_bytes)

        result = runner.invoke(app, ["decode", str(path), "--explain", "--no-color"])
        assert result.exit_code == 0
        assert "Encoding: gb18030" in result.stdout
        assert "Candidates:" in result.stdout
        assert "windows-1252" in result.stdout

    def test_decode_to_file(self, tmp_path: Path, gb18030_bytes: bytes, chinese_text: str) -> None:
        """Test writing the decoded text to a file."""
        path = tmp_path / "out.bin"
        path.write_bytes(gb18030_bytes)
        target = tmp_path / "decoded.txt"

        result = runner.invoke(app, ["decode", str(path), "--out", str(target)])
        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8") == chinese_text

    def test_strict_garbled(self, tmp_path: Path) -> None:
        """Test that --strict fails when the best decoding is still garbled."""
        path = tmp_path / "out.bin"
        path.write_bytes(b"\x01\x02")

        assert runner.invoke(app, ["decode", str(path)]).exit_code == 0
        assert runner.invoke(app, ["decode", str(path), "--strict"]).exit_code == 1

    def test_max_bytes(self, tmp_path: Path) -> None:
        """Test that oversized input is a fatal error."""
        path = tmp_path / "out.bin"
        path.write_bytes(b"hello")

        result = runner.invoke(app, ["decode", str(path), "--max-bytes", "2"])
        assert result.exit_code == 2

    def test_max_bytes_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that AUTODECODE_MAX_BYTES limits input size."""
        path = tmp_path / "out.bin"
        path.write_bytes(b"hello")
        monkeypatch.setenv("AUTODECODE_MAX_BYTES", "2")

        assert runner.invoke(app, ["decode", str(path)]).exit_code == 2
        assert runner.invoke(app, ["decode", str(path), "--max-bytes", "0"]).exit_code == 0

    def test_max_bytes_env_invalid(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a malformed AUTODECODE_MAX_BYTES is rejected."""
        path = tmp_path / "out.bin"
        path.write_bytes(b"hello")
        monkeypatch.setenv("AUTODECODE_MAX_BYTES", "lots")

        assert runner.invoke(app, ["decode", str(path)]).exit_code != 0

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test decoding a non-existent file."""
        result = runner.invoke(app, ["decode", str(tmp_path / "nonexistent.bin")])
        assert result.exit_code == 2

    def test_invalid_format(self, tmp_path: Path) -> None:
        """Test decode with invalid format."""
        path = tmp_path / "out.bin"
        path.write_bytes(b"hello")

        result = runner.invoke(app, ["decode", str(path), "--format", "invalid"])
        assert result.exit_code == 64

    def test_bad_candidate_table(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that a broken candidate table is a configuration error."""
        path = tmp_path / "out.bin"
        path.write_bytes(b"hello")
        monkeypatch.setenv("AUTODECODE_CANDIDATES_FILE", str(tmp_path / "missing.yaml"))

        result = runner.invoke(app, ["decode", str(path)])
        assert result.exit_code == 78


class TestRedecode:
    """Tests for redecode command."""

    def test_clean_text(self) -> None:
        """Test that clean text is echoed unchanged."""
        result = runner.invoke(app, ["redecode", "hello"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "hello"

    def test_json(self) -> None:
        """Test redecode with JSON output."""
        result = runner.invoke(app, ["redecode", "hello", "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["encoding"] == "original"


class TestCandidates:
    """Tests for candidates command."""

    def test_list_candidates(self) -> None:
        """Test listing candidates."""
        result = runner.invoke(app, ["candidates", "--no-color"])
        assert result.exit_code == 0
        assert "gb18030" in result.stdout
        assert "U+8107" in result.stdout

    def test_list_candidates_json(self) -> None:
        """Test listing candidates as JSON."""
        result = runner.invoke(app, ["candidates", "--format", "json"])
        assert result.exit_code == 0
        output = json.loads(result.stdout)
        assert [c["id"] for c in output["candidates"]][0] == "utf8"


class TestProcesses:
    """Tests for processes command."""

    def test_list_names(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test listing process names."""
        import autodecode.processes

        monkeypatch.setattr(
            autodecode.processes, "list_running_process_names", lambda: ["bash", "sshd"]
        )
        result = runner.invoke(app, ["processes"])
        assert result.exit_code == 0
        assert result.stdout.split() == ["bash", "sshd"]

    def test_list_paths(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test listing process paths."""
        import autodecode.processes

        monkeypatch.setattr(
            autodecode.processes, "list_windows_process_paths", lambda: {"a.exe": "C:\\a.exe"}
        )
        result = runner.invoke(app, ["processes", "--paths"])
        assert result.exit_code == 0
        assert "a.exe\tC:\\a.exe" in result.stdout

    def test_nothing_found(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an empty listing exits with an error."""
        import autodecode.processes

        monkeypatch.setattr(autodecode.processes, "list_running_process_names", lambda: [])
        result = runner.invoke(app, ["processes"])
        assert result.exit_code == 1
