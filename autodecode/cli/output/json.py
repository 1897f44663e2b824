"""
JSON output adapter.

Renders decode results as JSON for machine processing.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TextIO

from autodecode.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from autodecode.core.decoding.models import CandidateTable, DecodeResult


class JsonOutput(OutputAdapter):
    """JSON output adapter."""

    format = OutputFormat.JSON

    def __init__(self, stream: TextIO | None = None, indent: int = 2):
        super().__init__(stream=stream, color=False)  # Never colorize JSON
        self.indent = indent

    def render_result(
        self,
        result: DecodeResult,
        *,
        explain: bool = False,
        reference: str | None = None,
    ) -> str:
        """Render a decode result as JSON."""
        output: dict[str, Any] = {
            "text": result.text,
            "encoding": result.encoding,
            "penalty": result.penalty,
            "strategy": result.strategy.value,
            "clean": result.is_clean,
        }

        if explain:
            output["scores"] = [
                {"encoding": s.encoding, "penalty": s.penalty} for s in result.scores
            ]
            output["reference_encoding"] = reference

        return json.dumps(output, indent=self.indent, ensure_ascii=False)

    def render_candidates(self, table: CandidateTable) -> str:
        """Render the candidate table as JSON."""
        output = {
            "version": table.version,
            "candidates": [
                {"id": c.id, "codec": c.codec, "description": c.description}
                for c in table.candidates
            ],
            "mojibake_markers": [f"U+{ord(m):04X}" for m in table.mojibake_markers],
        }

        return json.dumps(output, indent=self.indent)
