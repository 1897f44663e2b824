"""
Main CLI application.

Entry point for autodecode command.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

import autodecode
from autodecode.cli.context import ExitCode, get_exit_code
from autodecode.cli.output import OutputFormat, get_output_adapter

# Default input size limit for CLI usage (can be overridden via flag/env).
_DEFAULT_MAX_BYTES = 100 * 1024 * 1024  # 100 MiB


def _resolve_max_bytes(max_bytes: int | None) -> int | None:
    if max_bytes is not None:
        return None if max_bytes <= 0 else max_bytes

    env_value = os.environ.get("AUTODECODE_MAX_BYTES")
    if env_value:
        try:
            parsed = int(env_value)
        except ValueError:
            raise typer.BadParameter("AUTODECODE_MAX_BYTES must be an integer") from None
        return None if parsed <= 0 else parsed

    return _DEFAULT_MAX_BYTES


def _read_input(file: Path | None, max_bytes: int | None) -> bytes:
    """Read FILE (or stdin for None / '-') as bytes, enforcing max_bytes."""
    if file is None or str(file) == "-":
        stream = typer.get_binary_stream("stdin")
        data = stream.read(max_bytes + 1) if max_bytes is not None else stream.read()
    else:
        with file.open("rb") as f:
            data = f.read(max_bytes + 1) if max_bytes is not None else f.read()

    if max_bytes is not None and len(data) > max_bytes:
        raise ValueError(f"Input exceeds maximum size of {max_bytes} bytes")
    return data


def _resolve_format(format: str) -> OutputFormat:
    try:
        return OutputFormat(format)
    except ValueError:
        typer.echo(f"Unknown format: {format}", err=True)
        typer.echo("Available formats: terminal, json", err=True)
        raise typer.Exit(ExitCode.USAGE) from None


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Create main app
app = typer.Typer(
    name="autodecode",
    help="Decode console output of unknown encoding",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"autodecode {autodecode.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Decode console output of unknown encoding."""
    pass


# =============================================================================
# Decode Commands
# =============================================================================


@app.command()
def decode(
    file: Annotated[
        Path | None,
        typer.Argument(help="File with raw output to decode ('-' or omitted: stdin)"),
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: terminal, json"),
    ] = "terminal",
    explain: Annotated[
        bool,
        typer.Option("--explain", help="Show per-candidate penalties and a reference guess"),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Write output to file"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with 1 if the best decoding still looks garbled"),
    ] = False,
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Enable/disable colored output"),
    ] = True,
    max_bytes: Annotated[
        int | None,
        typer.Option(
            "--max-bytes",
            help="Maximum input size in bytes (0 = unlimited). Defaults to AUTODECODE_MAX_BYTES or 100MiB.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Decode raw bytes from a file or stdin."""
    from autodecode.core.decoding import (
        CandidateTableError,
        decode_bytes_detailed,
        detect_reference_encoding,
    )

    _configure_logging(verbose)
    max_bytes_value = _resolve_max_bytes(max_bytes)
    output_format = _resolve_format(format)

    try:
        data = _read_input(file, max_bytes_value)
    except (OSError, ValueError) as e:
        typer.echo(f"Error reading input: {e}", err=True)
        raise typer.Exit(ExitCode.FATAL) from None

    try:
        result = decode_bytes_detailed(data)
    except CandidateTableError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(ExitCode.CONFIG) from None

    reference = detect_reference_encoding(data) if explain else None
    adapter = get_output_adapter(output_format, color=color)
    rendered = adapter.render_result(result, explain=explain, reference=reference)

    if output:
        output.write_text(rendered, encoding="utf-8")
        typer.echo(f"Output written to {output}", err=True)
    else:
        typer.echo(rendered)

    raise typer.Exit(get_exit_code(result.penalty, strict))


@app.command()
def redecode(
    text: Annotated[str, typer.Argument(help="Text that was mis-decoded as Latin-1")],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: terminal, json"),
    ] = "terminal",
    explain: Annotated[
        bool,
        typer.Option("--explain", help="Show per-candidate penalties"),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with 1 if the best decoding still looks garbled"),
    ] = False,
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Enable/disable colored output"),
    ] = True,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Re-decode text that was previously decoded as Latin-1."""
    from autodecode.core.decoding import (
        CandidateTableError,
        detect_reference_encoding,
        latin1_bytes,
        redecode_text_detailed,
    )

    _configure_logging(verbose)
    output_format = _resolve_format(format)

    try:
        result = redecode_text_detailed(text)
    except CandidateTableError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(ExitCode.CONFIG) from None

    reference = detect_reference_encoding(latin1_bytes(text)) if explain else None
    adapter = get_output_adapter(output_format, color=color)
    typer.echo(adapter.render_result(result, explain=explain, reference=reference))

    raise typer.Exit(get_exit_code(result.penalty, strict))


# =============================================================================
# Utility Commands
# =============================================================================


@app.command("candidates")
def list_candidates(
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: terminal, json"),
    ] = "terminal",
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Enable/disable colored output"),
    ] = True,
) -> None:
    """List candidate encodings in evaluation order."""
    from autodecode.core.decoding import CandidateTableError, get_candidate_table

    output_format = _resolve_format(format)

    try:
        table = get_candidate_table()
    except CandidateTableError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(ExitCode.CONFIG) from None

    adapter = get_output_adapter(output_format, color=color)
    typer.echo(adapter.render_candidates(table))


@app.command("processes")
def list_processes(
    paths: Annotated[
        bool,
        typer.Option("--paths", help="Show executable paths (Windows only)"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """List running processes, decoding console output as needed."""
    from autodecode.processes import list_running_process_names, list_windows_process_paths

    _configure_logging(verbose)

    if paths:
        process_paths = list_windows_process_paths()
        if not process_paths:
            typer.echo("No process paths found.", err=True)
            raise typer.Exit(ExitCode.ERROR)
        for name, path in process_paths.items():
            typer.echo(f"{name}\t{path}")
        return

    names = list_running_process_names()
    if not names:
        typer.echo("No processes found.", err=True)
        raise typer.Exit(ExitCode.ERROR)
    for name in names:
        typer.echo(name)


# =============================================================================
# CLI Entry Point
# =============================================================================


def run() -> None:
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    run()
