"""
Terminal output adapter.

Prints the decoded text as-is; with --explain, prefixes it with a penalty
report styled with ANSI colors when writing to a TTY.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from autodecode.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from autodecode.core.decoding.models import CandidateTable, DecodeResult


# Check if Unicode is supported
def _supports_unicode() -> bool:
    """Check if terminal supports Unicode."""
    try:
        "\u2713".encode(sys.stdout.encoding or "utf-8")
        return True
    except (UnicodeEncodeError, LookupError):
        return False


WINNER_SYMBOL_UNICODE = "\u2713"
WINNER_SYMBOL_ASCII = "*"


class TerminalOutput(OutputAdapter):
    """Terminal output with ANSI colors."""

    format = OutputFormat.TERMINAL

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        super().__init__(stream=stream, color=color)
        self._use_color = color and self._is_tty()
        self._use_unicode = _supports_unicode()
        self._winner_symbol = WINNER_SYMBOL_UNICODE if self._use_unicode else WINNER_SYMBOL_ASCII

    def _is_tty(self) -> bool:
        """Check if output is a TTY."""
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def render_result(
        self,
        result: DecodeResult,
        *,
        explain: bool = False,
        reference: str | None = None,
    ) -> str:
        """Render a decode result; the text alone unless explain is set."""
        if not explain:
            return result.text

        lines: list[str] = []
        lines.append(self._style(f"Encoding: {result.encoding}", "bold"))
        lines.append(f"Strategy: {result.strategy.value}")
        lines.append(f"Penalty:  {self._format_penalty(result.penalty)}")

        if result.scores:
            lines.append("")
            lines.append(self._style("Candidates:", "bold"))
            marked = False
            for score in result.scores:
                # The baseline and the utf8 candidate can share a label; mark the first
                is_winner = not marked and score.encoding == result.encoding
                marked = marked or is_winner
                symbol = self._winner_symbol if is_winner else " "
                lines.append(
                    f"  {symbol} {score.encoding:<14} {self._format_penalty(score.penalty)}"
                )

        lines.append("")
        lines.append(f"Reference guess: {reference or '<none>'}")
        lines.append(self._style("-" * 40, "dim"))
        lines.append(result.text)

        return "\n".join(lines)

    def render_candidates(self, table: CandidateTable) -> str:
        """Render the candidate table in evaluation order."""
        lines: list[str] = [self._style(f"Candidate table (version {table.version}):", "bold")]
        lines.append("")

        for position, candidate in enumerate(table.candidates, start=1):
            lines.append(f"  {position}. {self._style(candidate.id, 'bold')} ({candidate.codec})")
            if candidate.description:
                lines.append(f"     {candidate.description}")

        lines.append("")
        markers = ", ".join(f"U+{ord(m):04X} {m}" for m in table.mojibake_markers)
        lines.append(f"Mojibake markers: {markers or '<none>'}")

        return "\n".join(lines)

    def _format_penalty(self, penalty: int) -> str:
        """Color a penalty green when clean, yellow otherwise."""
        return self._style(str(penalty), "green" if penalty == 0 else "yellow")

    def _style(self, text: str, style: str) -> str:
        """Apply style to text if colors are enabled."""
        if not self._use_color:
            return text

        # ANSI color codes
        codes = {
            "bold": "\033[1m",
            "dim": "\033[2m",
            "green": "\033[32m",
            "yellow": "\033[33m",
        }
        reset = "\033[0m"

        code = codes.get(style, "")
        if code:
            return f"{code}{text}{reset}"
        return text
