from __future__ import annotations

import ast
from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from log_linter.source import SourceText


ENGLISH_ONLY = "english-only"
LOWERCASE_START = "lowercase-start"
SPECIAL_CHARS = "special-chars"
SENSITIVE_DATA = "sensitive-data"

RULE_CODES = (ENGLISH_ONLY, LOWERCASE_START, SPECIAL_CHARS, SENSITIVE_DATA)

DEFAULT_SENSITIVE_KEYWORDS = (
    "password",
    "passwd",
    "pwd",
    "token",
    "api_key",
    "apikey",
    "api-key",
    "secret",
    "private_key",
    "privatekey",
    "credential",
)

DEFAULT_ALLOWED_PUNCTUATION = ".,;:!?"


@dataclass(frozen=True)
class LinterConfig:
    check_lowercase: bool = True
    check_english_only: bool = True
    check_special_chars: bool = True
    check_sensitive_data: bool = True
    sensitive_keywords: tuple[str, ...] = DEFAULT_SENSITIVE_KEYWORDS
    # Parsed and kept, not consulted by any rule yet.
    allowed_punctuation: str = DEFAULT_ALLOWED_PUNCTUATION
    english_only_gate: bool = True
    extra_log_methods: tuple[str, ...] = ()

    @property
    def enabled_rules(self) -> frozenset[str]:
        flags = {
            ENGLISH_ONLY: self.check_english_only,
            LOWERCASE_START: self.check_lowercase,
            SPECIAL_CHARS: self.check_special_chars,
            SENSITIVE_DATA: self.check_sensitive_data,
        }
        return frozenset(code for code, enabled in flags.items() if enabled)

    @property
    def keywords(self) -> tuple[str, ...]:
        return self.sensitive_keywords or DEFAULT_SENSITIVE_KEYWORDS

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["sensitive_keywords"] = list(self.sensitive_keywords)
        payload["extra_log_methods"] = list(self.extra_log_methods)
        return payload


@dataclass(frozen=True)
class Span:
    start: int
    end: int
    line: int
    column: int


@dataclass(frozen=True)
class SuggestedFix:
    description: str
    span: Span
    new_text: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "start": self.span.start,
            "end": self.span.end,
            "new_text": self.new_text,
        }


@dataclass(frozen=True)
class Finding:
    file_path: str
    line: int
    column: int
    rule: str
    description: str
    fix: SuggestedFix | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_path": self.file_path,
            "line": self.line,
            "column": self.column,
            "rule": self.rule,
            "description": self.description,
            "fix": self.fix.to_dict() if self.fix else None,
        }


@dataclass(frozen=True)
class Violation:
    rule: str
    description: str
    replacement: str | None = None
    fix_description: str | None = None


@dataclass(frozen=True)
class Fragment:
    text: str
    node: ast.Constant


@dataclass(frozen=True)
class Message:
    """Plain text of a log message argument.

    ``fragments`` holds the literal pieces in the order they are checked. A
    direct literal has exactly one fragment; a concatenation may have any
    number, including none when no operand along the left spine is a literal.
    """

    text: str
    fragments: tuple[Fragment, ...] = field(default_factory=tuple)
    concatenated: bool = False

    @property
    def primary(self) -> Fragment | None:
        if self.concatenated or not self.fragments:
            return None
        return self.fragments[0]


@dataclass(frozen=True)
class Classification:
    is_log_call: bool
    message_index: int | None = None


@dataclass(frozen=True)
class CallSite:
    node: ast.Call
    source: SourceText
    file_path: str = "<string>"

    @property
    def callee(self) -> str | None:
        if isinstance(self.node.func, ast.Attribute):
            return self.node.func.attr
        return None

    @property
    def args(self) -> tuple[ast.expr, ...]:
        return tuple(self.node.args)

    @property
    def span(self) -> Span:
        return self.source.span(self.node)
