from __future__ import annotations

import ast
import codecs
import re
from pathlib import Path

from log_linter.models import Span

# Only the line breaks the tokenizer knows; str.splitlines also breaks on
# form feeds and other separators.
_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z")


class SourceText:
    """Source of one parsed module, used to turn ``ast`` positions into spans.

    ``ast`` reports columns as UTF-8 byte offsets; spans use character offsets
    into ``text`` so fixes can be applied with plain string slicing.
    """

    def __init__(self, text: str):
        self.text = text
        self._lines = _LINE_RE.findall(text)
        self._line_starts: list[int] = []
        offset = 0
        for line in self._lines:
            self._line_starts.append(offset)
            offset += len(line)

    def offset(self, line: int, byte_column: int) -> int:
        if line < 1 or line > len(self._lines):
            return len(self.text)
        raw = self._lines[line - 1].encode("utf-8")
        column = len(raw[:byte_column].decode("utf-8", errors="ignore"))
        return self._line_starts[line - 1] + column

    def span(self, node: ast.AST) -> Span:
        line = getattr(node, "lineno", 1)
        col = getattr(node, "col_offset", 0)
        end_line = getattr(node, "end_lineno", None) or line
        end_col = getattr(node, "end_col_offset", None)
        if end_col is None:
            end_col = col

        start = self.offset(line, col)
        end = self.offset(end_line, end_col)
        line_start = self._line_starts[line - 1] if 0 < line <= len(self._lines) else start
        return Span(start=start, end=max(start, end), line=line, column=start - line_start)

    def segment(self, node: ast.AST) -> str:
        span = self.span(node)
        return self.text[span.start : span.end]


_STRING_PREFIX_CHARS = set("rRuUbBfF")

_ESCAPES = {
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def quote_char_of(segment: str) -> str:
    """Quote character used by a literal's source text, defaulting to ``"``."""
    stripped = segment.lstrip()
    index = 0
    while index < len(stripped) and stripped[index] in _STRING_PREFIX_CHARS:
        index += 1
    if index < len(stripped) and stripped[index] in {"'", '"'}:
        return stripped[index]
    return '"'


def quote_literal(text: str, quote: str = '"') -> str:
    parts: list[str] = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch == quote:
            parts.append("\\" + ch)
        elif not ch.isprintable():
            parts.append(_escape_code_point(ord(ch)))
        else:
            parts.append(ch)
    return f"{quote}{''.join(parts)}{quote}"


def _escape_code_point(code: int) -> str:
    if code < 0x100:
        return f"\\x{code:02x}"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def read_source(path: str | Path) -> tuple[str, bool]:
    """Decode a file as UTF-8 without newline translation.

    Returns the text (byte order mark removed) and whether the mark was there.
    """
    raw = Path(path).read_bytes()
    has_bom = raw.startswith(codecs.BOM_UTF8)
    return raw.decode("utf-8-sig"), has_bom


def write_source(path: str | Path, text: str, *, bom: bool = False) -> None:
    data = text.encode("utf-8")
    Path(path).write_bytes(codecs.BOM_UTF8 + data if bom else data)
