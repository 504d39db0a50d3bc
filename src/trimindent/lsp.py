"""Minimal LSP server for trimindent — document and range formatting."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_FORMATTING,
    TEXT_DOCUMENT_RANGE_FORMATTING,
    DocumentFormattingParams,
    DocumentRangeFormattingParams,
    Position,
    Range,
    TextDocumentSyncKind,
    TextEdit,
)
from pygls.lsp.server import LanguageServer

from trimindent import __version__
from trimindent.strings import normalize_indent, split_lines

server = LanguageServer(
    "trimindent-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _utf16_len(s: str) -> int:
    # LSP character offsets count UTF-16 code units
    return len(s.encode("utf-16-le")) // 2


def format_document(source: str) -> list[TextEdit]:
    """Return the edits that reindent a whole document."""
    text = normalize_indent(source)
    if text and source.endswith(("\n", "\r")):
        text += "\n"
    if text == source:
        return []

    lines = split_lines(source)
    end = Position(line=len(lines) - 1, character=_utf16_len(lines[-1]))
    return [TextEdit(range=Range(start=Position(line=0, character=0), end=end), new_text=text)]


def format_range(source: str, start_line: int, end_line: int) -> list[TextEdit]:
    """Return the edits that reindent full lines *start_line*..*end_line* (0-based, inclusive)."""
    lines = split_lines(source)
    last = len(lines) - 1
    start_line = max(0, min(start_line, last))
    end_line = max(start_line, min(end_line, last))

    block = "\n".join(lines[start_line : end_line + 1])
    text = normalize_indent(block)
    if text == block:
        return []

    return [
        TextEdit(
            range=Range(
                start=Position(line=start_line, character=0),
                end=Position(line=end_line, character=_utf16_len(lines[end_line])),
            ),
            new_text=text,
        )
    ]


@server.feature(TEXT_DOCUMENT_FORMATTING)
def formatting(ls: LanguageServer, params: DocumentFormattingParams) -> list[TextEdit]:
    doc = ls.workspace.get_text_document(params.text_document.uri)
    return format_document(doc.source)


@server.feature(TEXT_DOCUMENT_RANGE_FORMATTING)
def range_formatting(ls: LanguageServer, params: DocumentRangeFormattingParams) -> list[TextEdit]:
    doc = ls.workspace.get_text_document(params.text_document.uri)
    start, end = params.range.start, params.range.end
    end_line = end.line
    # A selection ending at column 0 does not include that line
    if end.character == 0 and end_line > start.line:
        end_line -= 1
    return format_range(doc.source, start.line, end_line)


def main() -> None:
    server.start_io()
