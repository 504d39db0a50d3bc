"""--debug line analysis dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from trimindent.strings import common_indent, indent_width, is_blank, split_lines


def dump_analysis(text: str, *, file: TextIO | None = None) -> None:
    """Print how *text* would be reindented to *file* (default stderr)."""
    if file is None:
        file = sys.stderr
    lines = split_lines(text)
    gutter = len(str(len(lines)))

    file.write(f"{'#':>{gutter}}  indent  blank  line\n")
    for idx, line in enumerate(lines, start=1):
        blank = "yes" if is_blank(line) else "no"
        width = "-" if is_blank(line) else str(indent_width(line))
        file.write(f"{idx:>{gutter}}  {width:>6}  {blank:>5}  {line!r}\n")

    dropped = []
    if is_blank(lines[0]):
        dropped.append("first")
    if len(lines) > 1 and is_blank(lines[-1]):
        dropped.append("last")
    file.write(f"common indent: {common_indent(lines)}\n")
    file.write(f"dropped: {', '.join(dropped) or 'none'}\n")
