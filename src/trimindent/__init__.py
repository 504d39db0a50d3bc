"""Remove common leading indentation from multi-line text."""

from __future__ import annotations

from trimindent.strings import normalize_indent

__version__ = "0.1.0"

__all__ = ["normalize_indent"]
