"""
autodecode: best-effort decoding of console output in unknown encodings.

A library and CLI tool that turns raw process output (or text that was already
mis-decoded as Latin-1) into the most plausible Unicode text.

Usage:
    from autodecode.core.decoding import auto_decode_text
    text = auto_decode_text(raw_stdout)
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
