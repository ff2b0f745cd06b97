"""Text formatting and parsing for civiltime.

This module provides the canonical ``Y-M-DTh:m:s`` format:
    - format_canonical: Date to string
    - parse_canonical: string to Date
"""

from __future__ import annotations

from civiltime.format.canonical import format_canonical, parse_canonical

__all__ = [
    "format_canonical",
    "parse_canonical",
]
