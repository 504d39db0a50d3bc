"""Common-indent removal for multi-line text blocks."""

from __future__ import annotations

import re
from collections.abc import Iterable

# CRLF must be tried before its parts so it counts as a single break.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def normalize_indent(text: str) -> str:
    """Remove the indentation shared by every non-blank line of *text*.

    Algorithm:
    1. Split into lines on CRLF, LF or CR.
    2. Find the smallest indent width among non-blank lines (0 if none).
    3. Drop that many leading characters from every line.
    4. If the first line is blank, discard it; then if the last line is
       blank, discard it.
    5. Rejoin with newline.

    Interior blank lines are kept. Never raises.
    """
    lines = split_lines(text)
    width = common_indent(lines)
    if width:
        lines = [line[width:] for line in lines]

    if lines and is_blank(lines[0]):
        lines = lines[1:]
    if lines and is_blank(lines[-1]):
        lines = lines[:-1]

    return "\n".join(lines)


def split_lines(text: str) -> list[str]:
    """Split on CRLF, LF and CR only. ``""`` gives ``[""]``."""
    return _LINE_BREAK.split(text)


def is_blank(line: str) -> bool:
    """Return True if line is empty or whitespace-only."""
    return not line or line.isspace()


def indent_width(line: str) -> int:
    """Number of leading whitespace characters."""
    return len(line) - len(line.lstrip())


def common_indent(lines: Iterable[str]) -> int:
    return min((indent_width(line) for line in lines if not is_blank(line)), default=0)
