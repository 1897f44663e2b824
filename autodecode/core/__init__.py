"""
autodecode core library.

This package contains the core functionality:
- decoding: UTF-16LE sniffing, candidate decoding, mojibake scoring, selection
"""

__all__: list[str] = []
